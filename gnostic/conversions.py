"""Conversion of Discovery documents into OpenAPI v2 and v3 documents.

A Discovery document is taken as the dict read from its JSON form. The
OpenAPI documents are built as dicts in their serialized form. Fields with
empty values are left out, as an empty field is not written.
"""

from __future__ import annotations

import logging
import urllib.parse

log = logging.getLogger(__name__)

_OPERATION_KEYS = {
    "GET": "get",
    "POST": "post",
    "PUT": "put",
    "DELETE": "delete",
    "PATCH": "patch",
}

_JSON = "application/json"
_SUCCESS = "Successful operation"


def _nonempty(**fields) -> dict:
    """Keep only the fields that have a value."""
    return {key: value for key, value in fields.items() if value}


def _named(container):
    """Iterate the (name, value) pairs of a named collection, in order."""
    return (container or {}).items()


def _host_and_scheme(root_url: str) -> tuple[str, str]:
    parts = urllib.parse.urlsplit(root_url or "")
    return parts.netloc.rpartition("@")[2], parts.scheme


def path_for_method(path: str) -> str:
    """Return the OpenAPI path of a method, without reserved expansions."""
    return "/" + path.replace("{+", "{")


def remove_trailing_slash(path: str) -> str:
    """Drop one trailing slash from a path longer than one character."""
    if len(path) > 1 and path.endswith("/"):
        return path[:-1]
    return path


def _add_operation(paths: dict, method: dict, operation) -> None:
    path_item = paths.setdefault(path_for_method(method.get("path", "")), {})
    http_method = method.get("httpMethod", "")
    key = _OPERATION_KEYS.get(http_method)
    if key is None:
        log.warning("Unknown HTTP method %s", http_method)
        return
    if operation is None:
        path_item.pop(key, None)
    else:
        path_item[key] = operation


# OpenAPI v2


def _v2_schema(schema: dict) -> dict:
    s: dict = {}
    if schema.get("description"):
        s["description"] = schema["description"]
    if schema.get("type"):
        s["type"] = schema["type"]
    if schema.get("$ref"):
        s["$ref"] = "#/definitions/" + schema["$ref"]
    if schema.get("enum"):
        s["enum"] = list(schema["enum"])
    if schema.get("items") is not None:
        s["items"] = _v2_schema(schema["items"])
    properties = schema.get("properties")
    if properties:
        s["properties"] = {name: _v2_schema(value) for name, value in _named(properties)}
    # all schemas are taken to be closed
    s["additionalProperties"] = False
    return s


def _v2_parameter(name: str, p: dict):
    location = p.get("location", "")
    if location not in ("query", "path"):
        return None
    return _nonempty(
        name=name,
        **{"in": location},
        description=p.get("description", ""),
        required=bool(p.get("required", False)),
        type=p.get("type", ""),
        format=p.get("format", ""),
    )


def _v2_request_parameter(request: dict) -> dict:
    return {
        "name": "resource",
        "in": "body",
        "schema": {"$ref": "#/definitions/" + request.get("$ref", "")},
    }


def _v2_response(response) -> dict:
    if response is None:
        return {"description": _SUCCESS}
    ref = response.get("$ref", "")
    if not ref:
        log.warning("Unhandled response %r", response)
    return {"description": _SUCCESS, "schema": {"$ref": "#/definitions/" + ref}}


def _v2_operation(method: dict) -> dict:
    parameters = [
        parameter
        for name, value in _named(method.get("parameters"))
        if (parameter := _v2_parameter(name, value)) is not None
    ]
    if method.get("request") is not None:
        parameters.append(_v2_request_parameter(method["request"]))
    operation = _nonempty(
        description=method.get("description", ""),
        operationId=method.get("id", ""),
        parameters=parameters,
    )
    operation["responses"] = {"default": _v2_response(method.get("response"))}
    return operation


def _v2_add_resource(paths: dict, resource: dict) -> None:
    for _, method in _named(resource.get("methods")):
        _add_operation(paths, method, _v2_operation(method))
    for _, child in _named(resource.get("resources")):
        _v2_add_resource(paths, child)


def openapi_v2(api: dict) -> dict:
    """Return an OpenAPI v2 representation of a Discovery document."""
    host, scheme = _host_and_scheme(api.get("rootUrl", ""))
    document: dict = {"swagger": "2.0"}
    document["info"] = _nonempty(
        title=api.get("title", ""),
        version=api.get("version", ""),
        description=api.get("description", ""),
    )
    document.update(_nonempty(host=host, basePath=remove_trailing_slash(api.get("basePath", ""))))
    document["schemes"] = [scheme]
    document["consumes"] = [_JSON]
    document["produces"] = [_JSON]
    paths: dict = {}
    definitions = {name: _v2_schema(schema) for name, schema in _named(api.get("schemas"))}
    for _, method in _named(api.get("methods")):
        _add_operation(paths, method, _v2_operation(method))
    for _, resource in _named(api.get("resources")):
        _v2_add_resource(paths, resource)
    document["paths"] = paths
    document["definitions"] = definitions
    return document


# OpenAPI v3


def _v3_reference(ref: str) -> dict:
    return {"$ref": "#/definitions/" + ref}


def _v3_schema_or_reference(schema: dict) -> dict:
    if schema.get("$ref"):
        return _v3_reference(schema["$ref"])
    s: dict = {}
    if schema.get("description"):
        s["description"] = schema["description"]
    if schema.get("type"):
        s["type"] = schema["type"]
    if schema.get("enum"):
        s["enum"] = list(schema["enum"])
    if schema.get("items") is not None:
        s["items"] = _v3_schema_or_reference(schema["items"])
    properties = schema.get("properties")
    if properties:
        s["properties"] = {
            name: _v3_schema_or_reference(value) for name, value in _named(properties)
        }
    return s


def _v3_parameter(name: str, p: dict):
    location = p.get("location", "")
    if location not in ("query", "path"):
        return None
    parameter = _nonempty(
        name=name,
        **{"in": location},
        description=p.get("description", ""),
        required=bool(p.get("required", False)),
    )
    parameter["schema"] = _nonempty(type=p.get("type", ""), format=p.get("format", ""))
    return parameter


def _json_content(ref: str) -> dict:
    return {_JSON: {"schema": _v3_reference(ref)}}


def _v3_request_body(request: dict) -> dict:
    ref = request.get("$ref", "")
    if not ref:
        log.warning("Unhandled request schema %r", request)
    return {"content": _json_content(ref)}


def _v3_response(response) -> dict:
    if response is None:
        return {"description": _SUCCESS}
    ref = response.get("$ref", "")
    if not ref:
        log.warning("Unhandled response %r", response)
    return {"description": _SUCCESS, "content": _json_content(ref)}


def _v3_operation(method):
    if method is None:
        return None
    parameters = [
        parameter
        for name, value in _named(method.get("parameters"))
        if (parameter := _v3_parameter(name, value)) is not None
    ]
    operation = _nonempty(
        description=method.get("description", ""),
        operationId=method.get("id", ""),
        parameters=parameters,
    )
    operation["responses"] = {"default": _v3_response(method.get("response"))}
    if method.get("request") is not None:
        operation["requestBody"] = _v3_request_body(method["request"])
    return operation


def _v3_add_resource(paths: dict, resource: dict) -> None:
    for _, method in _named(resource.get("methods")):
        _add_operation(paths, method, _v3_operation(method))
    for _, child in _named(resource.get("resources")):
        _v3_add_resource(paths, child)


def openapi_v3(api: dict) -> dict:
    """Return an OpenAPI v3 representation of a Discovery document."""
    host, _ = _host_and_scheme(api.get("rootUrl", ""))
    base_path = api.get("basePath", "") or "/"
    document: dict = {"openapi": "3.0"}
    document["info"] = _nonempty(
        title=api.get("title", ""),
        version=api.get("version", ""),
        description=api.get("description", ""),
    )
    document["servers"] = [{"url": "https://" + host + base_path}]
    schemas = {
        name: _v3_schema_or_reference(schema) for name, schema in _named(api.get("schemas"))
    }
    document["components"] = {"schemas": schemas}
    paths: dict = {}
    for _, method in _named(api.get("methods")):
        _add_operation(paths, method, _v3_operation(method))
    for _, resource in _named(api.get("resources")):
        _v3_add_resource(paths, resource)
    document["paths"] = paths
    return document