"""JSON serialization for ASTs and output trees.

Converts AST nodes, ReflowNode/FixedNode trees and their BoxMetrics to and
from JSON-compatible dicts. A serialized fixed-layout tree is the hand-off
format for the external page writer; serialized Documents can be cached
on disk.

All output is deterministic (sorted keys).

Example:
    from mdexport import parse
    from mdexport.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure.

"""

import json
from dataclasses import fields, is_dataclass
from typing import Any

from mdexport.location import SourceLocation
from mdexport.nodes import (
    BlockQuote,
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    Link,
    List,
    ListItem,
    Paragraph,
    Spacer,
    Strong,
    StrongEmphasis,
    Text,
    ThematicBreak,
)
from mdexport.renderers.tree import FixedNode, ReflowNode
from mdexport.styles import BoxMetrics, NodeKind

# Registry of type names to classes for deserialization
_TYPES: dict[str, type] = {
    cls.__name__: cls
    for cls in (
        Document,
        Heading,
        Paragraph,
        List,
        ListItem,
        BlockQuote,
        ThematicBreak,
        Spacer,
        Text,
        Strong,
        Emphasis,
        StrongEmphasis,
        CodeSpan,
        Link,
        SourceLocation,
        ReflowNode,
        FixedNode,
        BoxMetrics,
    )
}


def to_dict(node: Any) -> dict[str, Any]:
    """Convert a node (AST or output tree) to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Raises:
        ValueError: If ``node`` is not a serializable type.

    """
    type_name = type(node).__name__
    if not is_dataclass(node) or _TYPES.get(type_name) is not type(node):
        msg = f"Cannot serialize value of type {type_name!r}"
        raise ValueError(msg)

    result: dict[str, Any] = {"_type": type_name}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, NodeKind):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, float, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Any:
    """Reconstruct a node from a dict produced by ``to_dict``.

    Raises:
        ValueError: If ``_type`` is missing or unknown, or a node kind is
            not recognized.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    cls = _TYPES.get(type_name)
    if cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name == "kind" and isinstance(raw, str):
            kwargs[f.name] = NodeKind(raw)
        else:
            kwargs[f.name] = _deserialize_value(raw)
    return cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        if "_type" in value:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(node: Any, *, indent: int | None = None) -> str:
    """Serialize a Document or an output tree to a JSON string."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document AST from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
