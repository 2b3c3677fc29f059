#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/utils.py
"""Structural comparison and text extraction for document trees.

Functions
---------
collect_all_text : Concatenate all text below a node
nodes_equal : Compare two subtrees structurally, ignoring metadata

Examples
--------
    >>> from docmodel.nodes import Bold, Paragraph, TextNode
    >>> from docmodel.utils import collect_all_text
    >>> para = Paragraph(children=[TextNode("Fig "), Bold(children=[TextNode("1")])])
    >>> collect_all_text(para)
    'Fig 1'

"""

from __future__ import annotations

from dataclasses import fields
from itertools import zip_longest

from docmodel.nodes import TextNode, TreeNode
from docmodel.traversal import traverse, walk


def collect_all_text(node: TreeNode) -> str:
    """Concatenate the text of every TextNode under ``node``.

    Fragments are joined in traversal order with no separator, so any
    spacing must already be part of the text nodes.

    Parameters
    ----------
    node : Node or Document
        Root of the subtree

    Returns
    -------
    str
        Concatenated text, empty if the subtree holds no text

    """
    parts: list[str] = []

    def visit(current: TreeNode, depth: int) -> None:
        if isinstance(current, TextNode):
            parts.append(current.text)

    traverse(node, visit)
    return "".join(parts)


def _same_node_shape(a: TreeNode, b: TreeNode) -> bool:
    """Compare the variant, scalar fields and child layout of two nodes."""
    if type(a) is not type(b):
        return False

    for f in fields(a):
        if f.name == "metadata":
            continue
        left = getattr(a, f.name)
        right = getattr(b, f.name)
        if f.name in a.child_fields:
            # children themselves are compared as the walk reaches them
            if isinstance(left, list) != isinstance(right, list):
                return False
            if isinstance(left, list) and len(left) != len(right):
                return False
        elif left != right:
            return False

    return True


def nodes_equal(a: TreeNode, b: TreeNode) -> bool:
    """Return True if two subtrees are structurally equal.

    Two nodes are equal when they are the same variant, carry equal scalar
    fields (text, language, URIs, references...), and their structural
    children are pairwise equal in the same order. Metadata is ignored.

    Parameters
    ----------
    a, b : Node or Document
        Roots of the subtrees to compare

    Returns
    -------
    bool
        True if the subtrees are equal

    """
    for left, right in zip_longest(walk(a), walk(b)):
        if left is None or right is None:
            return False
        if not _same_node_shape(left[0], right[0]):
            return False
    return True


__all__ = [
    "collect_all_text",
    "nodes_equal",
]
