"""Schemas and media types for well-known protobuf types, as OpenAPI v3 dicts.

A schema is a dict in its OpenAPI form; a reference is {"$ref": ...}.
Named schemas are returned as (name, schema) pairs.
"""

from __future__ import annotations


def new_google_api_http_body_media_type() -> dict:
    return {"*/*": {}}


def new_application_json_media_type(schema) -> dict:
    return {"application/json": {"schema": schema} if schema is not None else {}}


def new_string_schema() -> dict:
    return {"type": "string"}


def new_boolean_schema() -> dict:
    return {"type": "boolean"}


def new_bytes_schema() -> dict:
    return {"type": "string", "format": "bytes"}


def new_integer_schema(format) -> dict:
    return {"type": "integer", "format": format}


def new_number_schema(format) -> dict:
    return {"type": "number", "format": format}


def new_enum_schema(enum_type, value_names) -> dict:
    """An enum as a string with its value names, or else as an integer."""
    if enum_type == "string":
        return {"type": "string", "format": "enum", "enum": list(value_names)}
    return {"type": "integer", "format": "enum"}


def new_list_schema(item_schema) -> dict:
    return {"type": "array", "items": item_schema if item_schema is not None else {}}


def new_google_api_http_body_schema() -> dict:
    """google.api.HttpBody carries raw body data."""
    return {"type": "string"}


def new_google_protobuf_timestamp_schema() -> dict:
    return {"type": "string", "format": "date-time"}


def new_google_type_date_schema() -> dict:
    return {"type": "string", "format": "date"}


def new_google_type_date_time_schema() -> dict:
    return {"type": "string", "format": "date-time"}


def new_google_protobuf_field_mask_schema() -> dict:
    return {"type": "string", "format": "field-mask"}


def new_google_protobuf_struct_schema() -> dict:
    return {"type": "object"}


def new_google_protobuf_value_schema(name) -> tuple[str, dict]:
    return name, {
        "description": (
            "Represents a dynamically typed value which can be either null, a number, "
            "a string, a boolean, a recursive struct value, or a list of values."
        ),
    }


def new_google_protobuf_any_schema(name) -> tuple[str, dict]:
    return name, {
        "type": "object",
        "description": (
            "Contains an arbitrary serialized message along with a @type that "
            "describes the type of the serialized message."
        ),
        "properties": {
            "@type": {
                "type": "string",
                "description": "The type of the serialized message.",
            },
        },
        "additionalProperties": True,
    }


def new_google_rpc_status_schema(name, any_name) -> tuple[str, dict]:
    return name, {
        "type": "object",
        "description": (
            "The `Status` type defines a logical error model that is suitable for "
            "different programming environments, including REST APIs and RPC APIs. "
            "It is used by gRPC. Each `Status` message contains three pieces of data: "
            "error code, error message, and error details. You can find out more about "
            "this error model and how to work with it in the API Design Guide."
        ),
        "properties": {
            "code": {
                "type": "integer",
                "format": "int32",
                "description": (
                    "The status code, which should be an enum value of "
                    "[google.rpc.Code][google.rpc.Code]."
                ),
            },
            "message": {
                "type": "string",
                "description": (
                    "A developer-facing error message, which should be in English. "
                    "Any user-facing error message should be localized and sent in the "
                    "[google.rpc.Status.details][google.rpc.Status.details] field, or "
                    "localized by the client."
                ),
            },
            "details": {
                "type": "array",
                "items": {"$ref": "#/components/schemas/" + any_name},
                "description": (
                    "A list of messages that carry the error details.  There is a "
                    "common set of message types for APIs to use."
                ),
            },
        },
    }


def new_google_protobuf_map_field_entry_schema(value_field_schema) -> dict:
    """A map field as an object whose values follow the given schema."""
    return {"type": "object", "additionalProperties": value_field_schema}