[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gnostic"
version = "0.1.0"
description = "YAML node helpers, Discovery-to-OpenAPI conversion and well-known schema builders for API descriptions"
requires-python = ">=3.10"
keywords = ["openapi", "swagger", "discovery", "yaml", "api", "code generation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]
dependencies = [
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
petstore-builder = "gnostic.petstore:main"

[tool.hatch.build.targets.wheel]
packages = ["gnostic"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
