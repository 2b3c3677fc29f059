#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_nodes.py
"""Tests for node classes and shape classification."""

import pytest

from docmodel.nodes import (
    NODE_TYPES,
    NODE_TYPES_BY_TAG,
    Bold,
    Cell,
    CodeBlock,
    ContentNode,
    Definition,
    DefinitionList,
    Document,
    Figure,
    Image,
    InternalLink,
    Link,
    ListItem,
    Markup,
    OrderedList,
    Paragraph,
    Row,
    Section,
    Table,
    TextNode,
    TraversalShape,
    WebLink,
    get_node_children,
    is_sequence_field,
)


@pytest.mark.unit
class TestNodeDefaults:
    """Tests for node construction defaults."""

    def test_text_node(self):
        """Test creating a text node."""
        node = TextNode("Hello")
        assert node.text == "Hello"
        assert node.metadata == {}

    def test_metadata_not_shared(self):
        """Test that default metadata dicts are independent."""
        first = Paragraph()
        second = Paragraph()
        first.metadata["key"] = "value"
        assert second.metadata == {}

    def test_section_defaults(self):
        """Test that a section starts unreferenced with an empty title."""
        section = Section()
        assert section.reference == ""
        assert isinstance(section.title, TextNode)
        assert section.children == []

    def test_code_block_language(self):
        """Test code block language field."""
        block = CodeBlock(children=[TextNode("x = 1")], language="python")
        assert block.language == "python"

    def test_links_are_content_nodes(self):
        """Test that all link variants carry inline children."""
        link = WebLink(uri="http://example.com/", children=[TextNode("label")])
        assert isinstance(link, Link)
        assert isinstance(link, ContentNode)
        assert link.children[0].text == "label"

    def test_markup_family(self):
        """Test that markup spans share a family base."""
        assert isinstance(Bold(), Markup)

    def test_document_fields(self):
        """Test document descriptive fields."""
        doc = Document(title="T", keywords=["a", "b"], language="en")
        assert doc.title == "T"
        assert doc.keywords == ["a", "b"]
        assert doc.created_on is None


@pytest.mark.unit
class TestShapeClassification:
    """Tests for the traversal shape declared by each variant."""

    @pytest.mark.parametrize("node_type", [TextNode, Image])
    def test_leaves(self, node_type):
        """Test leaf variants."""
        assert node_type.shape is TraversalShape.LEAF
        assert node_type.child_fields == ()

    @pytest.mark.parametrize("node_type", [Paragraph, Bold, ListItem, Cell, WebLink, OrderedList, Table, Document])
    def test_sequences(self, node_type):
        """Test single-sequence variants."""
        assert node_type.shape is TraversalShape.SEQUENCE
        assert len(node_type.child_fields) == 1

    def test_named_field_variants(self):
        """Test variants with several named structural fields."""
        assert Section.child_fields == ("title", "children")
        assert Definition.child_fields == ("term", "definition")
        assert Figure.child_fields == ("image", "description")
        assert Row.child_fields == ("header", "cells", "footer")
        for node_type in (Section, Definition, Figure, Row):
            assert node_type.shape is TraversalShape.FIELDS

    def test_tags_are_unique(self):
        """Test that every concrete variant has its own tag."""
        assert len(NODE_TYPES_BY_TAG) == len(NODE_TYPES)
        assert NODE_TYPES_BY_TAG["web_link"] is WebLink
        assert "document" not in NODE_TYPES_BY_TAG


@pytest.mark.unit
class TestGetNodeChildren:
    """Tests for get_node_children."""

    def test_leaf_has_no_children(self):
        """Test that leaves report no children."""
        assert get_node_children(TextNode("x")) == []
        assert get_node_children(Image(source="a.png")) == []

    def test_section_title_first(self):
        """Test that a section's title precedes its body."""
        title = TextNode("Intro")
        body = Paragraph()
        assert get_node_children(Section(title=title, children=[body])) == [title, body]

    def test_definition_term_then_definition(self):
        """Test definition child order."""
        term = TextNode("term")
        body = TextNode("meaning")
        assert get_node_children(Definition(term=term, definition=body)) == [term, body]

    def test_figure_image_then_description(self):
        """Test figure child order."""
        image = Image(source="a.png")
        caption = TextNode("Caption")
        children = get_node_children(Figure(image=image, description=[caption]))
        assert children[0] is image
        assert children[1] is caption

    def test_row_header_cells_footer(self):
        """Test row child order."""
        header, cell, footer = Cell(), Cell(), Cell()
        children = get_node_children(Row(header=[header], cells=[cell], footer=[footer]))
        assert [id(c) for c in children] == [id(header), id(cell), id(footer)]

    def test_lists(self):
        """Test list variants expose their items."""
        item = ListItem()
        assert get_node_children(OrderedList(items=[item])) == [item]
        definition = Definition(term=TextNode("a"), definition=TextNode("b"))
        assert get_node_children(DefinitionList(items=[definition])) == [definition]

    def test_returns_copy(self):
        """Test that the returned list is not the node's own sequence."""
        para = Paragraph(children=[TextNode("x")])
        children = get_node_children(para)
        children.append(TextNode("y"))
        assert len(para.children) == 1

    def test_internal_link_children(self):
        """Test link label children."""
        label = TextNode("label")
        assert get_node_children(InternalLink(section_reference="s", children=[label])) == [label]


@pytest.mark.unit
class TestIsSequenceField:
    """Tests for is_sequence_field."""

    @pytest.mark.parametrize(
        "node_type,name",
        [
            (Document, "children"),
            (Section, "children"),
            (OrderedList, "items"),
            (Table, "rows"),
            (Figure, "description"),
            (Row, "footer"),
        ],
    )
    def test_list_fields(self, node_type, name):
        """Test fields declared as lists."""
        assert is_sequence_field(node_type, name)

    @pytest.mark.parametrize(
        "node_type,name",
        [(Section, "title"), (Definition, "term"), (Figure, "image"), (TextNode, "text"), (Document, "created_on")],
    )
    def test_single_fields(self, node_type, name):
        """Test fields holding one value."""
        assert not is_sequence_field(node_type, name)

    def test_every_child_field_known(self):
        """Test that every structural field of every variant is classified."""
        for node_type in NODE_TYPES:
            for name in node_type.child_fields:
                is_sequence_field(node_type, name)

    def test_unknown_field(self):
        """Test a name that is not a field."""
        with pytest.raises(KeyError):
            is_sequence_field(TextNode, "children")
