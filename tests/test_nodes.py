import re

import pytest
import yaml

from gnostic.compiler import nodes as n


DOC = """\
b: 2
a: hello
flag: true
ratio: 1.5
list:
  - x
  - 3
  - ~
"""


@pytest.fixture
def root():
    return n.parse_yaml(DOC).content[0]


def test_parse_document_and_keys(root):
    doc = n.parse_yaml(DOC.encode())
    assert doc.kind is n.NodeKind.DOCUMENT
    assert n.sorted_keys_for_map(root) == ["a", "b", "flag", "list", "ratio"]


def test_positions_are_one_based(root):
    assert (root.content[0].line, root.content[0].column) == (1, 1)
    assert root.content[2].line == 2


def test_map_lookup(root):
    assert n.map_has_key(root, "a")
    assert not n.map_has_key(root, "zzz")
    assert not n.map_has_key(None, "a")
    assert n.map_value_for_key(root, "a").value == "hello"
    assert n.map_value_for_key(root, "zzz") is None
    assert n.map_value_for_key(None, "a") is None


def test_scalar_conversions(root):
    assert n.int_for_scalar_node(n.map_value_for_key(root, "b")) == 2
    assert n.bool_for_scalar_node(n.map_value_for_key(root, "flag")) is True
    assert n.float_for_scalar_node(n.map_value_for_key(root, "ratio")) == 1.5
    assert n.float_for_scalar_node(n.map_value_for_key(root, "b")) == 2.0
    assert n.string_for_scalar_node(n.map_value_for_key(root, "a")) == "hello"
    assert n.string_for_scalar_node(n.map_value_for_key(root, "b")) == "2"
    assert n.int_for_scalar_node(n.map_value_for_key(root, "a")) is None
    assert n.bool_for_scalar_node(None) is None
    assert n.string_for_scalar_node(n.map_value_for_key(root, "flag")) is None


def test_scalar_through_document():
    assert n.int_for_scalar_node(n.parse_yaml("42")) == 42


def test_sequence_helpers(root):
    seq = n.map_value_for_key(root, "list")
    assert n.sequence_node_for_node(seq) is seq
    assert n.sequence_node_for_node(root) is None
    assert n.string_array_for_sequence_node(seq) == ["x", "3", ""]


def test_missing_and_invalid_keys(root):
    assert n.missing_keys_in_map(root, ["a", "q"]) == ["q"]
    invalid = n.invalid_keys_in_map(root, ["a", "b"], [re.compile("^f")])
    assert invalid == ["ratio", "list"]
    assert n.invalid_keys_in_map(None, [], []) == []


def test_constructors():
    assert n.new_null_node().tag == "!!null"
    assert n.new_scalar_node_for_bool(False).value == "false"
    assert n.new_scalar_node_for_int(-7).value == "-7"
    seq = n.new_sequence_node_for_string_array(["p", "q"])
    assert n.string_array_for_sequence_node(seq) == ["p", "q"]
    assert n.new_mapping_node().content == []
    assert n.new_sequence_node().kind is n.NodeKind.SEQUENCE


@pytest.mark.parametrize("f", [0.5, 0.1234567, 123456.0, 1e-7, -2.25, 3e20])
def test_float_node_round_trips(f):
    node = n.new_scalar_node_for_float(f)
    assert float(node.value) == f
    assert n.float_for_scalar_node(node) == f


def test_float_uses_exponent_for_large():
    assert n.new_scalar_node_for_float(1e6).value == "1e+06"
    assert n.new_scalar_node_for_float(100.0).value == "100"


def test_small_helpers():
    assert n.plural_properties(1) == "property"
    assert n.plural_properties(2) == "properties"
    assert n.string_array_contains_values(["a", "b"], ["b", "a"])
    assert not n.string_array_contains_value(["a"], "b")
    assert n.string_value(5) == "5"
    assert n.string_value("s") == "s"
    assert n.string_value(1.5) is None
    assert n.string_items(["a", 1, "b"]) == ["a", "b"]
    assert n.display(n.new_scalar_node_for_string("v")) == "v (string)"


def test_marshal_round_trip(root):
    data = n.marshal(n.parse_yaml(DOC))
    assert yaml.safe_load(data) == yaml.safe_load(DOC)


def test_marshal_keeps_string_tag():
    m = n.new_mapping_node()
    m.content += [n.new_scalar_node_for_string("k"), n.new_scalar_node_for_string("true")]
    assert yaml.safe_load(n.marshal(m)) == {"k": "true"}