#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_references.py
"""Tests for slug generation and section reference assignment."""

import logging

import pytest

from docmodel.nodes import Bold, ContentNode, Document, Paragraph, Section, TextNode
from docmodel.options import ReferenceOptions
from docmodel.references import assign_unique_references, slugify

try:
    from hypothesis import given
    from hypothesis import strategies as st

    HAS_HYPOTHESIS = True
except ImportError:
    HAS_HYPOTHESIS = False


def _section(title, reference="", children=None):
    return Section(title=TextNode(title), reference=reference, children=children or [])


@pytest.mark.unit
class TestSlugify:
    """Tests for slugify."""

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("Section 1", "section-1"),
            ("Hello World!", "hello-world"),
            ("  leading and trailing  ", "leading-and-trailing"),
            ("API Reference (v2.0)", "api-reference-v2-0"),
            ("snake_case_title", "snake-case-title"),
            ("Déjà vu", "deja-vu"),
            ("a -- b", "a-b"),
        ],
    )
    def test_examples(self, title, expected):
        """Test representative titles."""
        assert slugify(title) == expected

    def test_empty_uses_fallback(self):
        """Test that titles without usable characters fall back."""
        assert slugify("") == "section"
        assert slugify("!!!") == "section"
        assert slugify("???", fallback="part") == "part"

    if HAS_HYPOTHESIS:

        @given(st.text())
        def test_slug_shape(self, title):
            """Test that every slug is non-empty lowercase alphanumerics and single inner hyphens."""
            slug = slugify(title)
            assert slug
            assert not slug.startswith("-")
            assert not slug.endswith("-")
            assert "--" not in slug
            assert all(c.isascii() and (c.isdigit() or c.islower() or c == "-") for c in slug)


@pytest.mark.unit
class TestAssignUniqueReferences:
    """Tests for assign_unique_references."""

    def test_pinned_reference_kept(self):
        """Test that explicit references are never overwritten."""
        pinned = _section("Section 1.1", reference="sec11")
        first = _section("Section 1", children=[pinned])
        second = _section("Section 2")
        doc = Document(children=[first, second])

        assign_unique_references(doc)

        assert pinned.reference == "sec11"
        assert first.reference == "section-1"
        assert second.reference == "section-2"

    def test_returns_none(self):
        """Test that assignment works in place."""
        assert assign_unique_references(Document()) is None

    def test_idempotent(self):
        """Test that a second run changes nothing."""
        doc = Document(children=[_section("Intro"), _section("Intro"), _section("Other")])

        assign_unique_references(doc)
        first_run = [s.reference for s in doc.children]
        assign_unique_references(doc)

        assert [s.reference for s in doc.children] == first_run

    def test_collisions_get_smallest_suffix(self):
        """Test deterministic suffixes in document order."""
        doc = Document(children=[_section("Intro"), _section("Intro"), _section("Intro")])

        assign_unique_references(doc)

        assert [s.reference for s in doc.children] == ["intro", "intro-2", "intro-3"]

    def test_later_pinned_reference_reserved(self):
        """Test that a generated slug never equals a pinned reference further down."""
        generated = _section("Intro")
        pinned = _section("Something else", reference="intro")
        doc = Document(children=[generated, pinned])

        assign_unique_references(doc)

        assert pinned.reference == "intro"
        assert generated.reference == "intro-2"

    def test_suffix_skips_taken_values(self):
        """Test that an already taken suffixed value is skipped."""
        doc = Document(children=[_section("A", reference="a-2"), _section("A"), _section("A")])

        assign_unique_references(doc)

        assert [s.reference for s in doc.children] == ["a-2", "a", "a-3"]

    def test_title_text_from_nested_markup(self):
        """Test that the slug uses all text of a structured title."""
        section = Section(title=Paragraph(children=[TextNode("Big "), Bold(children=[TextNode("Results")])]))
        assign_unique_references(Document(children=[section]))
        assert section.reference == "big-results"

    def test_sections_inside_wrappers(self):
        """Test that sections nested in generic containers are reached."""
        nested = _section("Deep")
        doc = Document(children=[ContentNode(children=[ContentNode(children=[nested])])])

        assign_unique_references(doc)

        assert nested.reference == "deep"

    def test_pre_order_priority(self):
        """Test that an outer section gets the unsuffixed slug before its nested namesake."""
        inner = _section("Topic")
        outer = _section("Topic", children=[inner])

        assign_unique_references(Document(children=[outer]))

        assert outer.reference == "topic"
        assert inner.reference == "topic-2"

    def test_empty_title_uses_fallback(self):
        """Test fallback slugs for untitled sections."""
        doc = Document(children=[Section(), Section()])
        assign_unique_references(doc)
        assert [s.reference for s in doc.children] == ["section", "section-2"]

    def test_non_latin_titles_use_fallback(self):
        """Test that titles without ASCII letters share the fallback slug."""
        doc = Document(children=[_section("日本語"), _section("中文"), _section("Mixed 日本 title")])
        assign_unique_references(doc)
        assert [s.reference for s in doc.children] == ["section", "section-2", "mixed-title"]

    def test_options(self):
        """Test custom fallback and suffix start."""
        doc = Document(children=[Section(), Section()])
        assign_unique_references(doc, ReferenceOptions(fallback_slug="part", suffix_start=10))
        assert [s.reference for s in doc.children] == ["part", "part-10"]

    def test_non_sections_untouched(self):
        """Test that other nodes are left alone."""
        para = Paragraph(children=[TextNode("Body")], metadata={"k": "v"})
        assign_unique_references(Document(children=[para]))
        assert para == Paragraph(children=[TextNode("Body")], metadata={"k": "v"})

    def test_debug_logging(self, caplog):
        """Test that each assignment is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="docmodel.references"):
            assign_unique_references(Document(children=[_section("Logged")]))
        assert "'logged'" in caplog.text
