"""YAML node helpers, Discovery-to-OpenAPI conversion and well-known schema builders."""

__version__ = "0.1.0"