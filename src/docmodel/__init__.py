#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/__init__.py
"""docmodel - a generic document object model.

docmodel represents structured documents (paragraphs, markup spans, lists,
tables, figures, links, sections) as a typed tree, intended as the
intermediate form between format-specific readers and writers. Consumers
build a tree once, then run format-independent queries and transforms
over it.

The package consists of:

- nodes: the closed set of node variants and the Document root
- traversal: depth-first, pre-order traversal with depth tracking
- collectors: gather every node of a variant (figures, tables, web links)
- references: assign unique, stable reference keys to sections
- toc: synthesize a table of contents as nested ordered lists
- utils: structural equality and full-text extraction
- builder, validation, serialization, config: helpers around the core

Examples
--------
    >>> from docmodel import (
    ...     Document, Section, TextNode, assign_unique_references, build_toc, collect_all_text,
    ... )
    >>> doc = Document(children=[
    ...     Section(title=TextNode("Section 1")),
    ...     Section(title=TextNode("Section 2")),
    ... ])
    >>> assign_unique_references(doc)
    >>> toc = build_toc(doc)
    >>> collect_all_text(toc.items[1])
    'Section 2'

"""

from __future__ import annotations

__version__ = "1.0.0"

from docmodel.builder import DocumentBuilder
from docmodel.collectors import NodeCollector, collect, collect_figures, collect_tables, collect_web_links
from docmodel.exceptions import (
    ConfigError,
    DocModelError,
    DuplicateReferenceError,
    MissingReferenceError,
    SerializationError,
    TransformError,
    ValidationError,
)
from docmodel.nodes import (
    NODE_TYPES,
    BlockQuote,
    Bold,
    Cell,
    Code,
    CodeBlock,
    ContentNode,
    Definition,
    DefinitionList,
    Document,
    ExternalLink,
    Figure,
    Image,
    InlineQuote,
    InternalLink,
    Italic,
    Link,
    ListItem,
    ListNode,
    Markup,
    Node,
    OrderedList,
    Paragraph,
    Quote,
    Row,
    Section,
    Strikethrough,
    Subscript,
    Superscript,
    Table,
    TextNode,
    TraversalShape,
    TreeNode,
    Underline,
    UnorderedList,
    WebLink,
    get_node_children,
    is_sequence_field,
)
from docmodel.options import ReferenceOptions, TocOptions
from docmodel.references import assign_unique_references, slugify
from docmodel.serialization import dict_to_node, document_to_json, json_to_document, node_to_dict
from docmodel.toc import build_toc
from docmodel.traversal import NodeVisitor, traverse, walk
from docmodel.utils import collect_all_text, nodes_equal
from docmodel.validation import validate_shape

__all__ = [
    "__version__",
    # Nodes
    "Node",
    "TreeNode",
    "TraversalShape",
    "NODE_TYPES",
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
    "get_node_children",
    "is_sequence_field",
    # Traversal
    "traverse",
    "walk",
    "NodeVisitor",
    # Operations
    "NodeCollector",
    "collect",
    "collect_figures",
    "collect_tables",
    "collect_web_links",
    "slugify",
    "assign_unique_references",
    "build_toc",
    "nodes_equal",
    "collect_all_text",
    # Helpers
    "DocumentBuilder",
    "validate_shape",
    "node_to_dict",
    "dict_to_node",
    "document_to_json",
    "json_to_document",
    # Options
    "ReferenceOptions",
    "TocOptions",
    # Exceptions
    "DocModelError",
    "ValidationError",
    "TransformError",
    "MissingReferenceError",
    "DuplicateReferenceError",
    "SerializationError",
    "ConfigError",
]
