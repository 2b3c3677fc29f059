#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/toc.py
"""Table of contents synthesis.

The table of contents mirrors section nesting as nested ordered lists.
Each section becomes a ListItem holding an InternalLink to the section's
reference, labelled with a copy of the section title. A section with
nested sections gets a further OrderedList appended to its item.

Generic containers between sections are transparent: a section wrapped in
any number of ContentNode layers inside another section is still listed
directly under it.

References must be assigned beforehand (see
:func:`docmodel.references.assign_unique_references`). By default sections
without a reference produce links with an empty ``section_reference``;
``TocOptions(require_references=True)`` turns that into an error.

Examples
--------
    >>> from docmodel.references import assign_unique_references
    >>> from docmodel.toc import build_toc
    >>> assign_unique_references(doc)
    >>> toc = build_toc(doc)
    >>> len(toc.items)
    2

"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Optional

from docmodel.exceptions import DuplicateReferenceError, MissingReferenceError
from docmodel.nodes import Document, InternalLink, ListItem, OrderedList, Section, TreeNode
from docmodel.options import TocOptions
from docmodel.traversal import traverse
from docmodel.utils import collect_all_text

logger = logging.getLogger(__name__)


@dataclass
class _OpenSection:
    """A section whose subtree is still being traversed."""

    depth: int
    item: Optional[ListItem]
    nested: Optional[OrderedList]


class _TocBuilder:
    """Traversal callback assembling the nested lists."""

    def __init__(self, options: TocOptions):
        self.options = options
        self.root = OrderedList()
        # ancestors of the node being visited, outermost first
        self.stack: list[_OpenSection] = [_OpenSection(depth=-1, item=None, nested=self.root)]
        self.seen: set[str] = set()

    def __call__(self, node: TreeNode, depth: int) -> None:
        while self.stack[-1].depth >= depth:
            self.stack.pop()

        if not isinstance(node, Section):
            return

        level = len(self.stack) - 1
        if self.options.max_depth is not None and level >= self.options.max_depth:
            return

        self._check_reference(node)

        item = ListItem(
            children=[
                InternalLink(
                    section_reference=node.reference,
                    children=[copy.deepcopy(node.title)],
                )
            ]
        )
        self._nested_list_of(self.stack[-1]).items.append(item)
        self.stack.append(_OpenSection(depth=depth, item=item, nested=None))

    def _nested_list_of(self, parent: _OpenSection) -> OrderedList:
        # the root entry has no item but always has its list
        if parent.nested is None and parent.item is not None:
            parent.nested = OrderedList()
            parent.item.children.append(parent.nested)
        return parent.nested  # type: ignore[return-value]

    def _check_reference(self, section: Section) -> None:
        reference = section.reference
        if not reference:
            if self.options.require_references:
                raise MissingReferenceError(collect_all_text(section.title))
            logger.warning("Section '%s' has no reference", collect_all_text(section.title))
            return

        if reference in self.seen:
            if self.options.require_references:
                raise DuplicateReferenceError(reference)
            logger.warning("Duplicate section reference '%s'", reference)
        self.seen.add(reference)


def build_toc(document: Document, options: TocOptions | None = None) -> OrderedList:
    """Build a table of contents for ``document``.

    Parameters
    ----------
    document : Document
        Document whose sections have references assigned
    options : TocOptions or None, default = None
        Strictness and depth settings

    Returns
    -------
    OrderedList
        Fresh tree of nested lists; shares no nodes with ``document``

    Raises
    ------
    MissingReferenceError
        If ``options.require_references`` is set and a section has no reference
    DuplicateReferenceError
        If ``options.require_references`` is set and two sections share a reference

    """
    builder = _TocBuilder(options or TocOptions())
    traverse(document, builder)
    logger.debug("Built table of contents with %d top-level entries", len(builder.root.items))
    return builder.root


__all__ = [
    "build_toc",
]
