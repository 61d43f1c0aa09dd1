"""A YAML node tree and helpers used by compiler code."""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass, field
from decimal import Decimal

import yaml

_TAG_PREFIX = "tag:yaml.org,2002:"
_INT_RE = re.compile(r"[+-]?[0-9]+")
_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


class NodeKind(enum.Enum):
    DOCUMENT = "document"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SCALAR = "scalar"


@dataclass
class Node:
    """A YAML node with its tag, value, children and 1-based position."""

    kind: NodeKind
    tag: str = ""
    value: str = ""
    content: list[Node] = field(default_factory=list)
    line: int = 0
    column: int = 0
    style: str | None = None

    def pairs(self):
        """Yield (key node, value node) pairs of a mapping node."""
        if self.kind is NodeKind.MAPPING:
            yield from zip(self.content[0::2], self.content[1::2])


def _short_tag(tag: str | None) -> str:
    if tag and tag.startswith(_TAG_PREFIX):
        return "!!" + tag[len(_TAG_PREFIX):]
    return tag or ""


def _long_tag(tag: str, default: str) -> str:
    if not tag:
        return _TAG_PREFIX + default
    if tag.startswith("!!"):
        return _TAG_PREFIX + tag[2:]
    return tag


def _from_yaml(ynode) -> Node:
    line = ynode.start_mark.line + 1
    column = ynode.start_mark.column + 1
    tag = _short_tag(ynode.tag)
    if isinstance(ynode, yaml.MappingNode):
        content = []
        for k, v in ynode.value:
            content.extend((_from_yaml(k), _from_yaml(v)))
        return Node(NodeKind.MAPPING, tag, "", content, line, column)
    if isinstance(ynode, yaml.SequenceNode):
        return Node(NodeKind.SEQUENCE, tag, "", [_from_yaml(c) for c in ynode.value], line, column)
    return Node(NodeKind.SCALAR, tag, ynode.value, [], line, column, ynode.style)


def parse_yaml(data) -> Node:
    """Parse YAML text or bytes into a document node."""
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    root = yaml.compose(data, Loader=yaml.SafeLoader)
    if root is None:
        return Node(NodeKind.DOCUMENT)
    return Node(NodeKind.DOCUMENT, content=[_from_yaml(root)], line=1, column=1)


def unpack_map(node):
    """Return the node when there is one, or None; reject anything that is not a node."""
    if node is None:
        return None
    if not isinstance(node, Node):
        raise TypeError(f"expected a Node, got {type(node).__name__}")
    return node


def sorted_keys_for_map(m: Node) -> list[str]:
    return sorted(k.value for k, _ in m.pairs())


def map_has_key(m, key) -> bool:
    return m is not None and any(k.value == key for k, _ in m.pairs())


def map_value_for_key(m, key):
    if m is None:
        return None
    return next((v for k, v in m.pairs() if k.value == key), None)


def string_items(items) -> list[str]:
    """Keep only the string items of a sequence."""
    return [item for item in items if isinstance(item, str)]


def sequence_node_for_node(node: Node):
    return node if node.kind is NodeKind.SEQUENCE else None


def _scalar(node):
    if node is None:
        return None
    if node.kind is NodeKind.DOCUMENT:
        return _scalar(node.content[0]) if node.content else None
    return node if node.kind is NodeKind.SCALAR else None


def bool_for_scalar_node(node):
    """Return the bool of a !!bool scalar, or None."""
    node = _scalar(node)
    if node is None or node.tag != "!!bool":
        return None
    if node.value in _TRUE:
        return True
    if node.value in _FALSE:
        return False
    return None


def int_for_scalar_node(node):
    """Return the 64-bit integer of an !!int scalar, or None."""
    node = _scalar(node)
    if node is None or node.tag != "!!int" or not _INT_RE.fullmatch(node.value):
        return None
    v = int(node.value)
    return v if -(2**63) <= v < 2**63 else None


def float_for_scalar_node(node):
    """Return the float of an !!int or !!float scalar, or None."""
    node = _scalar(node)
    if node is None or node.tag not in ("!!int", "!!float") or "_" in node.value:
        return None
    try:
        return float(node.value)
    except ValueError:
        return None


def string_for_scalar_node(node):
    """Return the text of a string-like scalar ('' for null), or None."""
    node = _scalar(node)
    if node is None:
        return None
    if node.tag in ("!!int", "!!str", "!!timestamp"):
        return node.value
    if node.tag == "!!null":
        return ""
    return None


def string_array_for_sequence_node(node: Node) -> list[str]:
    return [v for v in map(string_for_scalar_node, node.content) if v is not None]


def missing_keys_in_map(m, required_keys) -> list[str]:
    return [k for k in required_keys if not map_has_key(m, k)]


def invalid_keys_in_map(m, allowed_keys, allowed_patterns) -> list[str]:
    """Return keys matching neither an allowed key nor an allowed pattern."""
    if m is None or m.kind is not NodeKind.MAPPING:
        return []
    allowed = set(allowed_keys)
    return [
        k.value
        for k, _ in m.pairs()
        if k.value not in allowed and not any(p.search(k.value) for p in allowed_patterns)
    ]


def new_null_node() -> Node:
    return Node(NodeKind.SCALAR, tag="!!null")


def new_mapping_node() -> Node:
    return Node(NodeKind.MAPPING)


def new_sequence_node() -> Node:
    return Node(NodeKind.SEQUENCE)


def new_scalar_node_for_string(s) -> Node:
    return Node(NodeKind.SCALAR, tag="!!str", value=s)


def new_sequence_node_for_string_array(strings) -> Node:
    return Node(NodeKind.SEQUENCE, content=[new_scalar_node_for_string(s) for s in strings])


def new_scalar_node_for_bool(b) -> Node:
    return Node(NodeKind.SCALAR, tag="!!bool", value="true" if b else "false")


def _format_g(f: float) -> str:
    """Format like a shortest-representation %g."""
    if math.isnan(f):
        return "NaN"
    if math.isinf(f):
        return "+Inf" if f > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, f) < 0 else ""
    if f == 0:
        return sign + "0"
    t = Decimal(repr(abs(f))).normalize().as_tuple()
    digits = "".join(map(str, t.digits))
    nd = len(digits)
    dp = nd + t.exponent
    exp = dp - 1
    if exp < -4 or exp >= 6:
        mant = digits[0] + ("." + digits[1:] if nd > 1 else "")
        return f"{sign}{mant}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if dp <= 0:
        text = "0." + "0" * (-dp) + digits
    elif dp >= nd:
        text = digits + "0" * (dp - nd)
    else:
        text = digits[:dp] + "." + digits[dp:]
    return sign + text


def new_scalar_node_for_float(f) -> Node:
    return Node(NodeKind.SCALAR, tag="!!float", value=_format_g(float(f)))


def new_scalar_node_for_int(i) -> Node:
    return Node(NodeKind.SCALAR, tag="!!int", value=str(int(i)))


def plural_properties(count: int) -> str:
    """Return "property" for a count of one and "properties" otherwise."""
    if count == 1:
        return "property"
    return "properties"


def string_array_contains_value(array, value) -> bool:
    return value in array


def string_array_contains_values(array, values) -> bool:
    return all(v in array for v in values)


def string_value(item):
    """Return the string form of a str or int item, or None."""
    if isinstance(item, str):
        return item
    if isinstance(item, int) and not isinstance(item, bool):
        return str(item)
    return None


def display(node: Node) -> str:
    """Describe a node for error messages."""
    if node.kind is NodeKind.SCALAR and node.tag == "!!str":
        return f"{node.value} (string)"
    return f"{node!r} ({type(node).__name__})"


def _to_yaml(node: Node):
    if node.kind is NodeKind.DOCUMENT:
        return _to_yaml(node.content[0]) if node.content else yaml.ScalarNode(_TAG_PREFIX + "null", "")
    if node.kind is NodeKind.MAPPING:
        pairs = [(_to_yaml(k), _to_yaml(v)) for k, v in node.pairs()]
        return yaml.MappingNode(_long_tag(node.tag, "map"), pairs, flow_style=False)
    if node.kind is NodeKind.SEQUENCE:
        items = [_to_yaml(c) for c in node.content]
        return yaml.SequenceNode(_long_tag(node.tag, "seq"), items, flow_style=False)
    return yaml.ScalarNode(_long_tag(node.tag, "str"), node.value, style=None)


def _clear_style(node: Node) -> None:
    node.style = None
    for child in node.content:
        _clear_style(child)


def marshal(node: Node) -> bytes:
    """Serialize a node tree as block-style YAML."""
    _clear_style(node)
    text = yaml.serialize(_to_yaml(node), Dumper=yaml.SafeDumper, allow_unicode=True)
    return text.encode("utf-8")