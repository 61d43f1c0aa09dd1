"""Builders for the sample Petstore API description, in OpenAPI v2 and v3.

The documents are dicts in their serialized form. Fields with empty values
are left out, as an empty field is not written.
"""

from __future__ import annotations

import os
import sys

import yaml

from gnostic.openapi_generator.wellknown import (
    new_application_json_media_type,
    new_integer_schema,
    new_string_schema,
)

_JSON = "application/json"
_LIMIT_DESCRIPTION = "How many items to return at one time (max 100)"
_PET_ID_DESCRIPTION = "The id of the pet to retrieve"
_NEXT_DESCRIPTION = "A link to the next page of responses"
_PAGED_DESCRIPTION = "An paged array of pets"  # [sic] matches other examples


# OpenAPI v2


def _v2_ref_response(description: str, ref: str) -> dict:
    return {"description": description, "schema": {"$ref": "#/definitions/" + ref}}


def _v2_error_response() -> dict:
    return _v2_ref_response("unexpected error", "Error")


def build_document_v2() -> dict:
    """Return the Petstore API description as an OpenAPI v2 document."""
    list_pets_ok = _v2_ref_response(_PAGED_DESCRIPTION, "Pets")
    list_pets_ok["headers"] = {
        "x-next": {"type": "string", "description": _NEXT_DESCRIPTION},
    }
    return {
        "swagger": "2.0",
        "info": {
            "title": "Swagger Petstore",
            "version": "1.0.0",
            "license": {"name": "MIT"},
        },
        "host": "petstore.swagger.io",
        "basePath": "/v1",
        "schemes": ["http"],
        "consumes": [_JSON],
        "produces": [_JSON],
        "paths": {
            "/pets": {
                "get": {
                    "tags": ["pets"],
                    "summary": "List all pets",
                    "operationId": "listPets",
                    "parameters": [
                        {
                            "name": "limit",
                            "in": "query",
                            "description": _LIMIT_DESCRIPTION,
                            "type": "integer",
                            "format": "int32",
                        },
                    ],
                    "responses": {
                        "200": list_pets_ok,
                        "default": _v2_error_response(),
                    },
                },
                "post": {
                    "tags": ["pets"],
                    "summary": "Create a pet",
                    "operationId": "createPets",
                    "responses": {
                        "201": {"description": "Null response"},
                        "default": _v2_error_response(),
                    },
                },
            },
            "/pets/{petId}": {
                "get": {
                    "tags": ["pets"],
                    "summary": "Info for a specific pet",
                    "operationId": "showPetById",
                    "parameters": [
                        {
                            "name": "petId",
                            "in": "path",
                            "description": _PET_ID_DESCRIPTION,
                            "required": True,
                            "type": "string",
                        },
                    ],
                    "responses": {
                        "200": _v2_ref_response("Expected response to a valid request", "Pets"),
                        "default": _v2_error_response(),
                    },
                },
            },
        },
        "definitions": {
            "Pet": {
                "required": ["id", "name"],
                "properties": {
                    "id": {"type": "integer", "format": "int64"},
                    "name": {"type": "string"},
                    "tag": {"type": "string"},
                },
            },
            "Pets": {
                "type": "array",
                "items": {"$ref": "#/definitions/Pet"},
            },
            "Error": {
                "required": ["code", "message"],
                "properties": {
                    "code": {"type": "integer", "format": "int32"},
                    "message": {"type": "string"},
                },
            },
        },
    }


# OpenAPI v3


def _v3_ref(name: str) -> dict:
    return {"$ref": "#/components/schemas/" + name}


def _v3_ref_response(description: str, name: str) -> dict:
    return {
        "description": description,
        "content": new_application_json_media_type(_v3_ref(name)),
    }


def _v3_error_response() -> dict:
    return _v3_ref_response("unexpected error", "Error")


def build_document_v3() -> dict:
    """Return the Petstore API description as an OpenAPI v3 document."""
    list_pets_ok = _v3_ref_response(_PAGED_DESCRIPTION, "Pets")
    list_pets_ok["headers"] = {
        "x-next": {"description": _NEXT_DESCRIPTION, "schema": new_string_schema()},
    }
    return {
        "openapi": "3.0",
        "info": {
            "title": "OpenAPI Petstore",
            "version": "1.0.0",
            "license": {"name": "MIT"},
        },
        "servers": [
            {
                "url": "https://petstore.openapis.org/v1",
                "description": "Development server",
            },
        ],
        "paths": {
            "/pets": {
                "get": {
                    "tags": ["pets"],
                    "summary": "List all pets",
                    "operationId": "listPets",
                    "parameters": [
                        {
                            "name": "limit",
                            "in": "query",
                            "description": _LIMIT_DESCRIPTION,
                            "schema": new_integer_schema("int32"),
                        },
                    ],
                    "responses": {
                        "default": _v3_error_response(),
                        "200": list_pets_ok,
                    },
                },
                "post": {
                    "tags": ["pets"],
                    "summary": "Create a pet",
                    "operationId": "createPets",
                    "responses": {
                        "default": _v3_error_response(),
                        "201": {"description": "Null response"},
                    },
                },
            },
            "/pets/{petId}": {
                "get": {
                    "tags": ["pets"],
                    "summary": "Info for a specific pet",
                    "operationId": "showPetById",
                    "parameters": [
                        {
                            "name": "petId",
                            "in": "path",
                            "description": _PET_ID_DESCRIPTION,
                            "required": True,
                            "schema": new_string_schema(),
                        },
                    ],
                    "responses": {
                        "default": _v3_error_response(),
                        "200": _v3_ref_response("Expected response to a valid request", "Pets"),
                    },
                },
            },
        },
        "components": {
            "schemas": {
                "Pet": {
                    "required": ["id", "name"],
                    "properties": {
                        "id": new_integer_schema("int64"),
                        "name": new_string_schema(),
                        "tag": new_string_schema(),
                    },
                },
                "Pets": {
                    "type": "array",
                    "items": _v3_ref("Pet"),
                },
                "Error": {
                    "required": ["code", "message"],
                    "properties": {
                        "code": new_integer_schema("int32"),
                        "message": new_string_schema(),
                    },
                },
            },
        },
    }


def _usage() -> str:
    program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "petstore-builder"
    return (
        f"\nUsage: {program} [OPTIONS]\n"
        "Options:\n"
        "  --v2\n"
        "    Generate an OpenAPI v2 description.\n"
        "  --v3\n"
        "    Generate an OpenAPI v3 description.\n"
    )


def _write(document: dict, filename: str) -> None:
    with open(filename, "w", encoding="utf-8") as handle:
        yaml.safe_dump(document, handle, sort_keys=False, allow_unicode=True)


def main(argv=None) -> int:
    """Write the Petstore descriptions selected by --v2 and --v3 (v2 by default)."""
    args = sys.argv[1:] if argv is None else list(argv)
    openapi_v2 = False
    openapi_v3 = False
    for arg in args:
        if arg == "--v2":
            openapi_v2 = True
        elif arg == "--v3":
            openapi_v3 = True
        else:
            print(f"Unknown option: {arg}.\n{_usage()}")
            return 255
    if not openapi_v2 and not openapi_v3:
        openapi_v2 = True
    if openapi_v2:
        _write(build_document_v2(), "petstore-v2.yaml")
    if openapi_v3:
        _write(build_document_v3(), "petstore-v3.yaml")
    return 0


if __name__ == "__main__":
    sys.exit(main())