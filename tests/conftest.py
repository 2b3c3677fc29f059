"""Pytest configuration and shared fixtures for the docmodel test suite.

This module provides shared fixtures and test configuration used across
the unit and integration tests.
"""

import json
from pathlib import Path

import pytest

from docmodel import (
    Bold,
    Cell,
    ContentNode,
    Document,
    Figure,
    Image,
    Paragraph,
    Row,
    Section,
    Table,
    TextNode,
    WebLink,
    document_to_json,
)

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)

    import os

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, property tests will be skipped
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def report_document() -> Document:
    """Provide a document exercising sections, figures, tables and links.

    Returns
    -------
    Document
        Two top-level sections; the first holds a figure, a nested
        sub-section wrapped in two generic containers, and a web link;
        the second holds a figure and a table.

    """
    return Document(
        title="Report",
        children=[
            Section(
                title=TextNode("Section 1"),
                reference="sec1",
                children=[
                    Paragraph(
                        children=[
                            TextNode("See "),
                            WebLink(uri="http://example.com/", children=[TextNode("example")]),
                        ]
                    ),
                    Figure(image=Image(source="fig1.jpg"), description=[TextNode("Fig "), TextNode("1")]),
                    ContentNode(
                        children=[
                            ContentNode(
                                children=[
                                    Section(
                                        title=TextNode("Section 1.1"),
                                        reference="sec11",
                                        children=[Paragraph(children=[Bold(children=[TextNode("Nested")])])],
                                    )
                                ]
                            )
                        ]
                    ),
                ],
            ),
            Section(
                title=TextNode("Section 2"),
                reference="sec2",
                children=[
                    Figure(image=Image(source="fig2.jpg"), description=[TextNode("Fig 2")]),
                    Table(rows=[Row(cells=[Cell(children=[TextNode("A")]), Cell(children=[TextNode("B")])])]),
                ],
            ),
        ],
    )


@pytest.fixture
def report_json_file(tmp_path: Path, report_document: Document) -> Path:
    """Write the report document to a JSON file and return its path."""
    path = tmp_path / "report.json"
    path.write_text(document_to_json(report_document, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def config_file_factory(tmp_path: Path):
    """Return a helper that writes a JSON config file and returns its path."""

    def _write(data: dict, name: str = "config.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
