#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/collectors.py
"""Collect every node of a given variant from a tree.

Results are in traversal order (outer before inner, left to right), which
is the order the nodes appear reading the document top to bottom. Nodes
are returned by reference, not copied.

Examples
--------
    >>> from docmodel.collectors import collect_figures
    >>> [figure.image.source for figure in collect_figures(doc)]
    ['fig1.jpg', 'fig2.jpg']

"""

from __future__ import annotations

from typing import Any, Callable, Union

from docmodel.nodes import Figure, Node, Table, TreeNode, WebLink
from docmodel.traversal import NodeVisitor

NodeType = Union[type[Node], tuple[type[Node], ...]]


class NodeCollector(NodeVisitor):
    """Visitor that collects nodes matching a condition.

    Parameters
    ----------
    predicate : callable or None, default = None
        Function that takes a node and returns True to collect it;
        collects everything when omitted

    """

    def __init__(self, predicate: Callable[[TreeNode], bool] | None = None):
        """Initialize the collector with an optional predicate function."""
        self.predicate = predicate or (lambda n: True)
        self.collected: list[Any] = []

    def generic_visit(self, node: TreeNode, depth: int) -> None:
        """Collect node if it matches the predicate."""
        if self.predicate(node):
            self.collected.append(node)


def collect(root: TreeNode, node_type: NodeType) -> list[Any]:
    """Collect all nodes that are instances of ``node_type``.

    Parameters
    ----------
    root : Node or Document
        Tree to search; the root itself is included if it matches
    node_type : type or tuple of types
        Variant class(es) to collect. Family bases such as ``Link`` or
        ``ListNode`` collect every member of the family.

    Returns
    -------
    list
        Matching nodes in traversal order

    """
    collector = NodeCollector(predicate=lambda n: isinstance(n, node_type))
    collector.run(root)
    return collector.collected


def collect_figures(root: TreeNode) -> list[Figure]:
    """Collect all figures in traversal order."""
    return collect(root, Figure)


def collect_tables(root: TreeNode) -> list[Table]:
    """Collect all tables in traversal order."""
    return collect(root, Table)


def collect_web_links(root: TreeNode) -> list[WebLink]:
    """Collect all web links in traversal order."""
    return collect(root, WebLink)


__all__ = [
    "NodeCollector",
    "collect",
    "collect_figures",
    "collect_tables",
    "collect_web_links",
]
