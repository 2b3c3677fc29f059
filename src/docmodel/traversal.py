#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/traversal.py
"""Depth-first traversal of document trees.

Every tree operation in this package is built on the primitives defined
here. Traversal is pre-order: a node is visited before its children, and
children are visited left to right in the order given by the node's
``child_fields``. Depth starts at the value passed in (0 by default) and
grows by exactly one per structural level.

Preconditions
-------------
The tree must be a proper tree (no shared children, no cycles). A visit
callback may mutate the node it receives, including its children (they are
read only after the callback returns), but must not mutate ancestors that
were already visited nor detach the current node from its parent. None of
this is checked at runtime.

Examples
--------
Print an indented outline of node tags:

    >>> from docmodel.traversal import traverse
    >>> traverse(doc, lambda node, depth: print("  " * depth + node.tag))

Stop early with the generator form:

    >>> from docmodel.traversal import walk
    >>> first_table = next((n for n, _ in walk(doc) if isinstance(n, Table)), None)

"""

from __future__ import annotations

from typing import Any, Callable, Iterator

from docmodel.nodes import TreeNode, get_node_children

VisitCallback = Callable[[TreeNode, int], Any]


def traverse(node: TreeNode, visit: VisitCallback, depth: int = 0) -> None:
    """Visit ``node`` and every node below it in pre-order.

    Parameters
    ----------
    node : Node or Document
        Root of the subtree to walk
    visit : callable
        Called as ``visit(node, depth)`` once per node; its return value is
        ignored
    depth : int, default = 0
        Depth reported for ``node`` itself

    """
    visit(node, depth)
    for child in get_node_children(node):
        traverse(child, visit, depth + 1)


def walk(node: TreeNode, depth: int = 0) -> Iterator[tuple[TreeNode, int]]:
    """Yield ``(node, depth)`` pairs in the same order as :func:`traverse`.

    The consumer may stop iterating at any point, which makes this the
    cancellable form of :func:`traverse`. Children of a yielded node are
    read when the generator resumes, so changes made to that node in the
    meantime are observed.

    Parameters
    ----------
    node : Node or Document
        Root of the subtree to walk
    depth : int, default = 0
        Depth reported for ``node`` itself

    Yields
    ------
    tuple of (Node or Document, int)
        Each node with its depth

    """
    stack: list[tuple[TreeNode, int]] = [(node, depth)]
    while stack:
        current, level = stack.pop()
        yield current, level
        children = get_node_children(current)
        stack.extend((child, level + 1) for child in reversed(children))


class NodeVisitor:
    """Base class for visitors dispatching on the variant tag.

    Subclasses implement ``visit_<tag>(node, depth)`` for the variants they
    care about (``visit_section``, ``visit_web_link``, ``visit_document``...).
    Variants without a dedicated method go to :meth:`generic_visit`, which
    does nothing by default. Recursion is always handled by :func:`traverse`,
    so visit methods never descend themselves.

    Examples
    --------
    Count sections:

        >>> class SectionCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_section(self, node, depth):
        ...         self.count += 1
        ...
        >>> counter = SectionCounter()
        >>> counter.run(document)
        >>> counter.count

    """

    def run(self, root: TreeNode) -> None:
        """Traverse ``root`` completely, dispatching every node.

        Parameters
        ----------
        root : Node or Document
            Root of the subtree to visit

        """
        traverse(root, self.visit)

    def visit(self, node: TreeNode, depth: int) -> Any:
        """Dispatch ``node`` to its ``visit_<tag>`` method."""
        method = getattr(self, f"visit_{node.tag}", None)
        if method is None:
            return self.generic_visit(node, depth)
        return method(node, depth)

    def generic_visit(self, node: TreeNode, depth: int) -> Any:
        """Handle a node that has no dedicated visit method."""
        return None


__all__ = [
    "VisitCallback",
    "traverse",
    "walk",
    "NodeVisitor",
]
