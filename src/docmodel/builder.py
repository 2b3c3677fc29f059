#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/builder.py
"""Helpers for constructing document trees.

The factory functions are thin wrappers with defaulted fields that accept
plain strings wherever a text node is expected. ``DocumentBuilder`` handles
the bookkeeping of nested sections so readers can emit content linearly.

Examples
--------
    >>> from docmodel.builder import DocumentBuilder, paragraph, web_link
    >>> doc = (DocumentBuilder(title="Report")
    ...     .open_section("Introduction")
    ...     .add(paragraph("See ", web_link("http://example.com/", "the site"), "."))
    ...     .open_section("Background", level=2)
    ...     .add(paragraph("Details."))
    ...     .open_section("Results")
    ...     .get_document())

"""

from __future__ import annotations

from typing import Any, Union

from docmodel.nodes import (
    Bold,
    Cell,
    CodeBlock,
    ContentNode,
    Definition,
    DefinitionList,
    Document,
    Figure,
    Image,
    Italic,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Row,
    Section,
    Table,
    TextNode,
    UnorderedList,
    WebLink,
)

Inline = Union[Node, str]


def _as_nodes(content: tuple[Inline, ...] | list[Inline]) -> list[Node]:
    return [TextNode(text=item) if isinstance(item, str) else item for item in content]


def _as_node(item: Inline) -> Node:
    return TextNode(text=item) if isinstance(item, str) else item


def text(value: str, **metadata: Any) -> TextNode:
    """Create a text node."""
    return TextNode(text=value, metadata=dict(metadata))


def paragraph(*content: Inline) -> Paragraph:
    """Create a paragraph from inline nodes or strings."""
    return Paragraph(children=_as_nodes(content))


def bold(*content: Inline) -> Bold:
    """Create a bold span."""
    return Bold(children=_as_nodes(content))


def italic(*content: Inline) -> Italic:
    """Create an italic span."""
    return Italic(children=_as_nodes(content))


def code_block(source: str, language: str = "") -> CodeBlock:
    """Create a code block holding ``source`` as a single text node."""
    return CodeBlock(children=[TextNode(text=source)], language=language)


def group(*content: Inline) -> ContentNode:
    """Create a generic container."""
    return ContentNode(children=_as_nodes(content))


def section(title: Inline, *content: Node, reference: str = "") -> Section:
    """Create a section.

    Parameters
    ----------
    title : Node or str
        Section title
    *content : Node
        Section body
    reference : str, default = ""
        Pinned reference; leave empty to have one assigned later

    """
    return Section(title=_as_node(title), children=list(content), reference=reference)


def web_link(uri: str, *label: Inline) -> WebLink:
    """Create a web link; the URI doubles as label when none is given."""
    return WebLink(uri=uri, children=_as_nodes(label or (uri,)))


def figure(source: str, *caption: Inline, alt: str = "") -> Figure:
    """Create a figure with an image and a caption."""
    return Figure(image=Image(source=source, description=alt), description=_as_nodes(caption))


def list_item(*content: Inline) -> ListItem:
    """Create a list item."""
    return ListItem(children=_as_nodes(content))


def _as_items(items: tuple[Inline, ...]) -> list[ListItem]:
    return [item if isinstance(item, ListItem) else ListItem(children=[_as_node(item)]) for item in items]


def ordered_list(*items: Inline) -> OrderedList:
    """Create an ordered list; non-ListItem entries are wrapped in one."""
    return OrderedList(items=_as_items(items))


def unordered_list(*items: Inline) -> UnorderedList:
    """Create an unordered list; non-ListItem entries are wrapped in one."""
    return UnorderedList(items=_as_items(items))


def definition_list(*pairs: tuple[Inline, Inline]) -> DefinitionList:
    """Create a definition list from ``(term, definition)`` pairs."""
    return DefinitionList(items=[Definition(term=_as_node(term), definition=_as_node(body)) for term, body in pairs])


def row(*cells: Inline, header: list[Inline] | None = None, footer: list[Inline] | None = None) -> Row:
    """Create a table row; strings and non-cell nodes are wrapped in cells."""

    def as_cells(values: list[Inline] | tuple[Inline, ...]) -> list[Node]:
        return [value if isinstance(value, Cell) else Cell(children=[_as_node(value)]) for value in values]

    return Row(header=as_cells(header or []), cells=as_cells(cells), footer=as_cells(footer or []))


def table(*rows: Row) -> Table:
    """Create a table."""
    return Table(rows=list(rows))


class DocumentBuilder:
    """Helper for building documents with nested sections.

    Content is appended to the innermost open section, or to the document
    when no section is open. ``open_section`` closes every open section at
    the same or a deeper level before opening the new one, so readers that
    only know heading levels can emit sections linearly.

    Parameters
    ----------
    **fields : Any
        Descriptive Document fields (title, creator, language...)

    """

    def __init__(self, **fields: Any) -> None:
        """Initialize the builder with an empty document."""
        self.document = Document(**fields)
        self._section_stack: list[tuple[Section, int]] = []

    def _container(self) -> list[Node]:
        if self._section_stack:
            return self._section_stack[-1][0].children
        return self.document.children

    def add(self, node: Node) -> DocumentBuilder:
        """Append a node to the innermost open section (or the document).

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        self._container().append(node)
        return self

    def open_section(self, title: Inline, level: int = 1, reference: str = "") -> DocumentBuilder:
        """Open a new section at ``level``.

        Parameters
        ----------
        title : Node or str
            Section title
        level : int, default = 1
            Nesting level, 1 being top-level
        reference : str, default = ""
            Pinned reference

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        Raises
        ------
        ValueError
            If level is less than 1

        """
        if level < 1:
            raise ValueError(f"Level must be >= 1, got {level}")

        while self._section_stack and self._section_stack[-1][1] >= level:
            self._section_stack.pop()

        new_section = section(title, reference=reference)
        self._container().append(new_section)
        self._section_stack.append((new_section, level))
        return self

    def close_section(self) -> DocumentBuilder:
        """Close the innermost open section.

        Raises
        ------
        ValueError
            If no section is open

        """
        if not self._section_stack:
            raise ValueError("No open section to close")
        self._section_stack.pop()
        return self

    def get_document(self) -> Document:
        """Return the built document."""
        return self.document


__all__ = [
    "DocumentBuilder",
    "text",
    "paragraph",
    "bold",
    "italic",
    "code_block",
    "group",
    "section",
    "web_link",
    "figure",
    "list_item",
    "ordered_list",
    "unordered_list",
    "definition_list",
    "row",
    "table",
]
