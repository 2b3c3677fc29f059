#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/validation.py
"""Type-level shape checks for document trees.

Only the shape of each variant is checked: that structural fields hold
nodes (or sequences of nodes) of the expected types. Tree-level
preconditions such as exclusive ownership or absence of cycles are the
producer's responsibility and are not examined.

Examples
--------
    >>> from docmodel.validation import validate_shape
    >>> validate_shape(doc)  # raises ValidationError on the first problem
    []
    >>> problems = validate_shape(doc, strict=False)

"""

from __future__ import annotations

import logging

from docmodel.exceptions import ValidationError
from docmodel.nodes import (
    Definition,
    DefinitionList,
    Figure,
    Image,
    ListItem,
    Node,
    OrderedList,
    Row,
    Table,
    TreeNode,
    UnorderedList,
    is_sequence_field,
)

logger = logging.getLogger(__name__)

# Element type required in specific fields; anything else must be a Node
_FIELD_ELEMENT_TYPES: dict[tuple[type, str], type] = {
    (UnorderedList, "items"): ListItem,
    (OrderedList, "items"): ListItem,
    (DefinitionList, "items"): Definition,
    (Table, "rows"): Row,
    (Figure, "image"): Image,
}


def _expected_type(node: TreeNode, field_name: str) -> type:
    return _FIELD_ELEMENT_TYPES.get((type(node), field_name), Node)


class _ShapeChecker:
    """Recursive checker that records or raises on shape violations."""

    def __init__(self, strict: bool):
        self.strict = strict
        self.errors: list[str] = []

    def _add_error(self, message: str, path: str) -> None:
        error = ValidationError(message, path=path)
        self.errors.append(error.message)
        if self.strict:
            raise error
        logger.debug("Shape violation: %s", error.message)

    def check(self, node: TreeNode, path: str) -> None:
        for name in node.child_fields:
            value = getattr(node, name)
            expected = _expected_type(node, name)
            if is_sequence_field(type(node), name):
                if not isinstance(value, list):
                    self._add_error(f"expected a list, got {type(value).__name__}", f"{path}.{name}")
                    continue
                for index, child in enumerate(value):
                    self._check_child(child, expected, f"{path}.{name}[{index}]")
            elif isinstance(value, list):
                self._add_error(f"expected a single {expected.__name__}, got list", f"{path}.{name}")
            else:
                self._check_child(value, expected, f"{path}.{name}")

    def _check_child(self, child: object, expected: type, path: str) -> None:
        if not isinstance(child, expected):
            self._add_error(f"expected {expected.__name__}, got {type(child).__name__}", path)
            if not isinstance(child, Node):
                return
        self.check(child, path)  # type: ignore[arg-type]


def validate_shape(root: TreeNode, strict: bool = True) -> list[str]:
    """Check that every structural field of the tree holds the right types.

    Parameters
    ----------
    root : Node or Document
        Tree to check
    strict : bool, default = True
        Raise on the first violation instead of collecting them all

    Returns
    -------
    list of str
        Violation messages, each prefixed with the offending path

    Raises
    ------
    ValidationError
        In strict mode, on the first violation

    """
    checker = _ShapeChecker(strict=strict)
    checker.check(root, root.tag)
    return checker.errors


__all__ = [
    "validate_shape",
]
