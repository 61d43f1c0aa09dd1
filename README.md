# gnostic

Building blocks for working with API descriptions: a YAML node model with
helpers for reading OpenAPI-style documents, a compiler context that records
where you are in a document, converters from Discovery documents to OpenAPI
v2 and v3, schema builders for well-known protocol buffer types, and a
builder for the classic Petstore sample description.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `gnostic.compiler.nodes` – the `Node` dataclass and the `NodeKind` enum;
  `parse_yaml` turns YAML text or bytes into a document node whose nodes carry
  their tag (`!!str`, `!!int`, ...), value, children and 1-based line and
  column. Scalar accessors `string_for_scalar_node`, `int_for_scalar_node`,
  `bool_for_scalar_node` and `float_for_scalar_node` return a value or `None`.
  Map helpers include `map_has_key`, `map_value_for_key`, `sorted_keys_for_map`,
  `missing_keys_in_map` and `invalid_keys_in_map`. Constructors such as
  `new_mapping_node`, `new_scalar_node_for_string`, `new_scalar_node_for_int`
  and `new_sequence_node_for_string_array` build nodes, and `marshal` writes a
  node tree back out as block-style YAML bytes.
- `gnostic.compiler.context` – `Context`, with `new_context` and
  `new_context_with_extensions`; `Context.description()` gives a dotted path
  such as `document.paths./pets`.
- `gnostic.conversions` – `openapi_v2(api)` and `openapi_v3(api)` take a
  Discovery document as the dict read from its JSON and return an OpenAPI
  document as a dict; `path_for_method` and `remove_trailing_slash` are the
  path helpers they use.
- `gnostic.openapi_generator.wellknown` – OpenAPI v3 schema and media type
  dicts for well-known types (`new_google_protobuf_timestamp_schema`,
  `new_google_protobuf_any_schema`, `new_google_rpc_status_schema`,
  `new_enum_schema`, `new_list_schema`, `new_application_json_media_type`,
  ...). Named schemas come back as `(name, schema)` pairs.
- `gnostic.openapi_generator.utils` – `contains`, `append_unique` and
  `singular` (for example `shelves` becomes `shelf`).
- `gnostic.petstore` – `build_document_v2()` and `build_document_v3()`
  return the Petstore description as dicts.

## Example

```python
from gnostic.compiler.nodes import parse_yaml, map_value_for_key, string_for_scalar_node

document = parse_yaml(b"openapi: 3.0.0\ninfo:\n  title: Petstore\n")
root = document.content[0]
info = map_value_for_key(root, "info")
print(string_for_scalar_node(map_value_for_key(info, "title")))  # Petstore
```

```python
from gnostic.conversions import openapi_v3

api = {
    "title": "Example",
    "version": "v1",
    "rootUrl": "https://example.com/",
    "basePath": "/v1/",
    "resources": {},
}
print(openapi_v3(api)["servers"])  # [{'url': 'https://example.com/v1/'}]
```

## The petstore builder

```
petstore-builder --v2
petstore-builder --v3
petstore-builder --v2 --v3
```

With no options the OpenAPI v2 description is built. Each chosen version is
written as YAML to `petstore-v2.yaml` or `petstore-v3.yaml` in the current
directory. Any other option prints the usage text and exits with status 255.

## What this package does not do

It does not read documents from files or URLs, cache them, or resolve `$ref`
targets; you parse the text you already have with `parse_yaml`. It has no
compiler error types of its own, and it does not write protocol buffer
binary output: documents are plain dicts, and the petstore builder writes
YAML.