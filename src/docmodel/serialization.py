#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/serialization.py
"""Plain-dict and JSON encoding of document trees.

Each node becomes a dict with a ``node_type`` key holding its variant tag,
one key per scalar field, one key per structural field (a nested dict or a
list of dicts), and a ``metadata`` key when the metadata is not empty.
Document timestamps are written in ISO 8601.

Examples
--------
    >>> from docmodel.serialization import document_to_json, json_to_document
    >>> json_str = document_to_json(doc, indent=2)
    >>> restored = json_to_document(json_str)

"""

from __future__ import annotations

import json
from dataclasses import fields
from datetime import datetime
from typing import Any

from docmodel.exceptions import SerializationError
from docmodel.nodes import NODE_TYPES_BY_TAG, Document, TreeNode, is_sequence_field


def node_to_dict(node: TreeNode) -> dict[str, Any]:
    """Convert a node or document into a JSON-compatible dict.

    Parameters
    ----------
    node : Node or Document
        Tree to convert

    Returns
    -------
    dict
        Dictionary representation

    """
    result: dict[str, Any] = {"node_type": node.tag}

    for f in fields(node):
        value = getattr(node, f.name)
        if f.name == "metadata":
            if value:
                result["metadata"] = dict(value)
        elif f.name in node.child_fields:
            if isinstance(value, list):
                result[f.name] = [node_to_dict(child) for child in value]
            else:
                result[f.name] = node_to_dict(value)
        elif isinstance(value, datetime):
            result[f.name] = value.isoformat()
        elif isinstance(value, list):
            result[f.name] = list(value)
        else:
            result[f.name] = value

    return result


def _lookup_type(tag: Any) -> type:
    if tag == Document.tag:
        return Document
    if not isinstance(tag, str) or tag not in NODE_TYPES_BY_TAG:
        raise SerializationError(f"Unknown node type: {tag!r}")
    return NODE_TYPES_BY_TAG[tag]


def _decode_field(node_class: type, name: str, declared: str, value: Any) -> Any:
    """Decode one field value, checking it against the field's declared kind."""
    where = f"{node_class.__name__}.{name}"

    if name in node_class.child_fields:
        if is_sequence_field(node_class, name):
            if not isinstance(value, list):
                raise SerializationError(f"{where} must be a list of nodes, got {type(value).__name__}")
            return [dict_to_node(child) for child in value]
        if not isinstance(value, dict):
            raise SerializationError(f"{where} must be a single node, got {type(value).__name__}")
        return dict_to_node(value)

    if name == "metadata":
        if not isinstance(value, dict):
            raise SerializationError(f"{where} must be an object, got {type(value).__name__}")
        return dict(value)

    if name == "created_on":
        if value is None:
            return None
        try:
            return datetime.fromisoformat(value)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Invalid timestamp: {value!r}", original_error=e) from e

    if declared == "str" and not isinstance(value, str):
        raise SerializationError(f"{where} must be a string, got {type(value).__name__}")
    if declared == "list[str]":
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise SerializationError(f"{where} must be a list of strings")
        return list(value)
    return value


def dict_to_node(data: dict[str, Any]) -> TreeNode:
    """Rebuild a node or document from its dict representation.

    Parameters
    ----------
    data : dict
        Dictionary produced by :func:`node_to_dict`

    Returns
    -------
    Node or Document
        Reconstructed tree

    Raises
    ------
    SerializationError
        If a node type is unknown, a key is not a field of the node type,
        a value does not match its field's kind (list of nodes, single
        node, string, object), or a required field is missing

    """
    if not isinstance(data, dict):
        raise SerializationError(f"Expected a dict, got {type(data).__name__}")

    node_class = _lookup_type(data.get("node_type"))
    declared = {f.name: str(f.type) for f in fields(node_class)}
    unknown = set(data) - set(declared) - {"node_type"}
    if unknown:
        raise SerializationError(f"Unknown fields for {node_class.__name__}: {', '.join(sorted(unknown))}")

    kwargs: dict[str, Any] = {}
    for name in declared.keys() & data.keys():
        kwargs[name] = _decode_field(node_class, name, declared[name], data[name])

    try:
        return node_class(**kwargs)
    except TypeError as e:
        raise SerializationError(f"Cannot build {node_class.__name__}: {e}", original_error=e) from e


def document_to_json(document: Document, indent: int | None = None) -> str:
    """Serialize a document to a JSON string."""
    return json.dumps(node_to_dict(document), indent=indent, ensure_ascii=False)


def json_to_document(json_str: str) -> Document:
    """Deserialize a document from a JSON string.

    Raises
    ------
    SerializationError
        If the JSON is invalid or its root is not a document

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}", original_error=e) from e

    document = dict_to_node(data)
    if not isinstance(document, Document):
        raise SerializationError(f"Root must be a document, got {document.tag}")
    return document


__all__ = [
    "node_to_dict",
    "dict_to_node",
    "document_to_json",
    "json_to_document",
]
