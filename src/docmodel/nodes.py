#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/nodes.py
"""Node classes for the generic document object model.

This module defines the closed set of node variants used to represent
structured documents (paragraphs, markup spans, lists, tables, figures,
links, sections) independently of any source or target format.

Every variant declares its traversal shape up front. The ``child_fields``
class attribute names the attributes that hold structural children, in the
order the traversal engine visits them, and ``shape`` classifies how those
attributes are laid out:

- ``LEAF``: no structural children (TextNode, Image)
- ``SEQUENCE``: exactly one ordered sequence of children (content nodes,
  lists, tables, the Document itself)
- ``FIELDS``: several named fields, each holding a single node or a
  sequence of nodes (Section, Definition, Figure, Row)

Node Hierarchy
--------------
Leaves:
    - TextNode, Image

Content nodes (a single ``children`` sequence):
    - ContentNode, Paragraph, CodeBlock, ListItem, Cell
    - Markup: Bold, Italic, Underline, Strikethrough, Code, Superscript, Subscript
    - Quote: InlineQuote, BlockQuote
    - Link: InternalLink, ExternalLink, WebLink
    - Section (additionally carries ``title`` and ``reference``)

Lists:
    - UnorderedList, OrderedList (items are ListItem)
    - DefinitionList (items are Definition)

Other structures:
    - Definition, Figure, Table, Row

The Document root is not a Node variant, but it shares the traversal
contract through the same ``tag``/``shape``/``child_fields`` attributes.

"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Optional, Union


class TraversalShape(Enum):
    """How a variant lays out its structural children."""

    LEAF = "leaf"
    SEQUENCE = "sequence"
    FIELDS = "fields"


class Node(ABC):
    """Base class for all document nodes.

    Attributes
    ----------
    tag : str
        Variant tag, unique per concrete class
    shape : TraversalShape
        Traversal shape of the variant
    child_fields : tuple of str
        Attributes holding structural children, in traversal order
    metadata : dict
        Opaque key/value data for external consumers; never interpreted
        by the tree operations

    """

    tag: ClassVar[str] = "node"
    shape: ClassVar[TraversalShape] = TraversalShape.LEAF
    child_fields: ClassVar[tuple[str, ...]] = ()

    metadata: dict[str, Any]


# ============================================================================
# Leaves
# ============================================================================


@dataclass
class TextNode(Node):
    """Plain text leaf.

    Parameters
    ----------
    text : str, default = ""
        Text content
    metadata : dict, default = empty dict
        Node metadata

    """

    tag: ClassVar[str] = "text"

    text: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Image(Node):
    """Image reference leaf.

    Parameters
    ----------
    source : str, default = ""
        Image location (path or URI)
    description : str, default = ""
        Alternative text
    metadata : dict, default = empty dict
        Node metadata

    """

    tag: ClassVar[str] = "image"

    source: str = ""
    description: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Content nodes
# ============================================================================


@dataclass
class ContentNode(Node):
    """Generic container holding an ordered sequence of child nodes.

    Used directly as a transparent wrapper, and as the base shape of every
    variant whose structure is a single ``children`` sequence.

    Parameters
    ----------
    children : list of Node, default = empty list
        Child nodes
    metadata : dict, default = empty dict
        Node metadata

    """

    tag: ClassVar[str] = "content"
    shape: ClassVar[TraversalShape] = TraversalShape.SEQUENCE
    child_fields: ClassVar[tuple[str, ...]] = ("children",)

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Paragraph(ContentNode):
    """Paragraph of inline content."""

    tag: ClassVar[str] = "paragraph"


@dataclass
class Markup(ContentNode):
    """Base class for inline formatting spans."""

    tag: ClassVar[str] = "markup"


@dataclass
class Bold(Markup):
    """Bold span."""

    tag: ClassVar[str] = "bold"


@dataclass
class Italic(Markup):
    """Italic span."""

    tag: ClassVar[str] = "italic"


@dataclass
class Underline(Markup):
    """Underlined span."""

    tag: ClassVar[str] = "underline"


@dataclass
class Strikethrough(Markup):
    """Struck-through span."""

    tag: ClassVar[str] = "strikethrough"


@dataclass
class Code(Markup):
    """Inline code span."""

    tag: ClassVar[str] = "code"


@dataclass
class Superscript(Markup):
    """Superscript span."""

    tag: ClassVar[str] = "superscript"


@dataclass
class Subscript(Markup):
    """Subscript span."""

    tag: ClassVar[str] = "subscript"


@dataclass
class CodeBlock(ContentNode):
    """Block of source code.

    Parameters
    ----------
    children : list of Node, default = empty list
        Code content, usually a single TextNode
    metadata : dict, default = empty dict
        Node metadata
    language : str, default = ""
        Programming language of the code, empty when unknown

    """

    tag: ClassVar[str] = "code_block"

    language: str = ""


@dataclass
class Quote(ContentNode):
    """Base class for quotations."""

    tag: ClassVar[str] = "quote"


@dataclass
class InlineQuote(Quote):
    """Quotation within running text."""

    tag: ClassVar[str] = "inline_quote"


@dataclass
class BlockQuote(Quote):
    """Quotation set off as its own block."""

    tag: ClassVar[str] = "block_quote"


@dataclass
class ListItem(ContentNode):
    """Item of an ordered or unordered list."""

    tag: ClassVar[str] = "list_item"


@dataclass
class Cell(ContentNode):
    """Table cell."""

    tag: ClassVar[str] = "cell"


@dataclass
class Section(ContentNode):
    """Titled, referenceable division of a document.

    Sections nest: a section's children may contain further sections,
    either directly or through generic ContentNode wrappers.

    Parameters
    ----------
    children : list of Node, default = empty list
        Section body
    metadata : dict, default = empty dict
        Node metadata
    title : Node, default = empty TextNode
        Section title; visited before the body
    reference : str, default = ""
        Unique reference key; empty means not yet assigned

    """

    tag: ClassVar[str] = "section"
    shape: ClassVar[TraversalShape] = TraversalShape.FIELDS
    child_fields: ClassVar[tuple[str, ...]] = ("title", "children")

    title: Node = field(default_factory=TextNode)
    reference: str = ""


# ============================================================================
# Links
# ============================================================================


@dataclass
class Link(ContentNode):
    """Base class for links; the children are the link label."""

    tag: ClassVar[str] = "link"


@dataclass
class InternalLink(Link):
    """Link to a section of the same document.

    Parameters
    ----------
    section_reference : str, default = ""
        Reference of the target section

    """

    tag: ClassVar[str] = "internal_link"

    section_reference: str = ""


@dataclass
class ExternalLink(Link):
    """Link to a section of another document.

    Parameters
    ----------
    document_reference : str, default = ""
        Reference of the target document
    section_reference : str, default = ""
        Reference of the target section within that document

    """

    tag: ClassVar[str] = "external_link"

    document_reference: str = ""
    section_reference: str = ""


@dataclass
class WebLink(Link):
    """Link to a web resource.

    Parameters
    ----------
    uri : str, default = ""
        Target URI

    """

    tag: ClassVar[str] = "web_link"

    uri: str = ""


# ============================================================================
# Lists
# ============================================================================


@dataclass
class ListNode(Node):
    """Base class for lists; ``items`` is the only structural field."""

    tag: ClassVar[str] = "list"
    shape: ClassVar[TraversalShape] = TraversalShape.SEQUENCE
    child_fields: ClassVar[tuple[str, ...]] = ("items",)

    items: list[Any] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class UnorderedList(ListNode):
    """Bulleted list of ListItem nodes."""

    tag: ClassVar[str] = "unordered_list"

    items: list[ListItem] = field(default_factory=list)


@dataclass
class OrderedList(ListNode):
    """Numbered list of ListItem nodes."""

    tag: ClassVar[str] = "ordered_list"

    items: list[ListItem] = field(default_factory=list)


@dataclass
class Definition(Node):
    """Term and its definition, each exactly one node.

    Parameters
    ----------
    term : Node
        Defined term; visited first
    definition : Node
        Definition body
    metadata : dict, default = empty dict
        Node metadata

    """

    tag: ClassVar[str] = "definition"
    shape: ClassVar[TraversalShape] = TraversalShape.FIELDS
    child_fields: ClassVar[tuple[str, ...]] = ("term", "definition")

    term: Node
    definition: Node
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class DefinitionList(ListNode):
    """List of Definition nodes."""

    tag: ClassVar[str] = "definition_list"

    items: list[Definition] = field(default_factory=list)


# ============================================================================
# Figures and tables
# ============================================================================


@dataclass
class Figure(Node):
    """Image with a caption.

    Parameters
    ----------
    image : Image, default = empty Image
        The figure's image; visited first
    description : list of Node, default = empty list
        Caption content
    metadata : dict, default = empty dict
        Node metadata

    """

    tag: ClassVar[str] = "figure"
    shape: ClassVar[TraversalShape] = TraversalShape.FIELDS
    child_fields: ClassVar[tuple[str, ...]] = ("image", "description")

    image: Image = field(default_factory=Image)
    description: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Row(Node):
    """Table row split into header, body and footer cells.

    Parameters
    ----------
    header : list of Node, default = empty list
        Header cells, visited first
    cells : list of Node, default = empty list
        Body cells
    footer : list of Node, default = empty list
        Footer cells, visited last
    metadata : dict, default = empty dict
        Node metadata

    """

    tag: ClassVar[str] = "row"
    shape: ClassVar[TraversalShape] = TraversalShape.FIELDS
    child_fields: ClassVar[tuple[str, ...]] = ("header", "cells", "footer")

    header: list[Node] = field(default_factory=list)
    cells: list[Node] = field(default_factory=list)
    footer: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Table(Node):
    """Table made of rows."""

    tag: ClassVar[str] = "table"
    shape: ClassVar[TraversalShape] = TraversalShape.SEQUENCE
    child_fields: ClassVar[tuple[str, ...]] = ("rows",)

    rows: list[Row] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Document root
# ============================================================================


@dataclass
class Document:
    """Root of a document tree.

    The Document never appears as a child of another node. It carries the
    block-level content plus descriptive fields.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes
    title, creator, publisher, subject, description : str, default = ""
        Descriptive fields
    keywords : list of str, default = empty list
        Subject keywords
    reference, language, rights, version : str, default = ""
        Identification fields
    created_on : datetime or None, default = None
        Creation timestamp

    """

    tag: ClassVar[str] = "document"
    shape: ClassVar[TraversalShape] = TraversalShape.SEQUENCE
    child_fields: ClassVar[tuple[str, ...]] = ("children",)

    children: list[Node] = field(default_factory=list)
    title: str = ""
    creator: str = ""
    publisher: str = ""
    subject: str = ""
    description: str = ""
    keywords: list[str] = field(default_factory=list)
    reference: str = ""
    language: str = ""
    rights: str = ""
    version: str = ""
    created_on: Optional[datetime] = None


TreeNode = Union[Node, Document]

# Closed set of concrete variants. Abstract family bases (Markup, Quote,
# Link, ListNode) are deliberately absent.
NODE_TYPES: tuple[type[Node], ...] = (
    TextNode,
    Image,
    ContentNode,
    Paragraph,
    Bold,
    Italic,
    Underline,
    Strikethrough,
    Code,
    Superscript,
    Subscript,
    CodeBlock,
    InlineQuote,
    BlockQuote,
    ListItem,
    Cell,
    Section,
    InternalLink,
    ExternalLink,
    WebLink,
    UnorderedList,
    OrderedList,
    DefinitionList,
    Definition,
    Figure,
    Row,
    Table,
)

NODE_TYPES_BY_TAG: dict[str, type[Node]] = {node_type.tag: node_type for node_type in NODE_TYPES}


def get_node_children(node: TreeNode) -> list[Node]:
    """Get the direct structural children of a node, in traversal order.

    Parameters
    ----------
    node : Node or Document
        The node to get children from

    Returns
    -------
    list of Node
        Child nodes (empty list for leaves)

    Examples
    --------
    >>> section = Section(title=TextNode("Intro"), children=[Paragraph()])
    >>> [child.tag for child in get_node_children(section)]
    ['text', 'paragraph']

    """
    if node.shape is TraversalShape.LEAF:
        return []

    if node.shape is TraversalShape.SEQUENCE:
        return list(getattr(node, node.child_fields[0]))

    children: list[Node] = []
    for name in node.child_fields:
        value = getattr(node, name)
        if isinstance(value, list):
            children.extend(value)
        else:
            children.append(value)
    return children


def is_sequence_field(node_type: type, name: str) -> bool:
    """Return True if field ``name`` of ``node_type`` is declared as a list.

    Parameters
    ----------
    node_type : type
        A node class or Document
    name : str
        Field name

    Raises
    ------
    KeyError
        If ``node_type`` has no field called ``name``

    Examples
    --------
    >>> is_sequence_field(Section, "children"), is_sequence_field(Section, "title")
    (True, False)

    """
    declared = {f.name: str(f.type) for f in fields(node_type)}[name]
    return declared.startswith("list[")


__all__ = [
    "TraversalShape",
    "Node",
    "TreeNode",
    "TextNode",
    "Image",
    "ContentNode",
    "Paragraph",
    "Markup",
    "Bold",
    "Italic",
    "Underline",
    "Strikethrough",
    "Code",
    "Superscript",
    "Subscript",
    "CodeBlock",
    "Quote",
    "InlineQuote",
    "BlockQuote",
    "ListItem",
    "Cell",
    "Section",
    "Link",
    "InternalLink",
    "ExternalLink",
    "WebLink",
    "ListNode",
    "UnorderedList",
    "OrderedList",
    "DefinitionList",
    "Definition",
    "Figure",
    "Row",
    "Table",
    "Document",
    "NODE_TYPES",
    "NODE_TYPES_BY_TAG",
    "get_node_children",
    "is_sequence_field",
]
