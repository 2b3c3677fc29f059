#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Tests for option classes."""

from dataclasses import FrozenInstanceError, fields

import pytest

from docmodel.options import ReferenceOptions, TocOptions


@pytest.mark.unit
class TestReferenceOptions:
    """Tests for ReferenceOptions."""

    def test_defaults(self):
        """Test default values."""
        options = ReferenceOptions()
        assert options.fallback_slug == "section"
        assert options.suffix_start == 2

    def test_empty_fallback(self):
        """Test that an empty fallback slug is rejected."""
        with pytest.raises(ValueError, match="fallback_slug"):
            ReferenceOptions(fallback_slug="")

    def test_suffix_start(self):
        """Test that suffixes below 2 are rejected."""
        with pytest.raises(ValueError, match="suffix_start must be >= 2"):
            ReferenceOptions(suffix_start=1)

    def test_frozen(self):
        """Test immutability."""
        options = ReferenceOptions()
        with pytest.raises(FrozenInstanceError):
            options.fallback_slug = "other"  # type: ignore[misc]

    def test_create_updated(self):
        """Test derived copies."""
        original = ReferenceOptions()
        updated = original.create_updated(suffix_start=10)
        assert updated.suffix_start == 10
        assert original.suffix_start == 2
        assert isinstance(updated, ReferenceOptions)

    def test_create_updated_validates(self):
        """Test that derived copies are validated too."""
        with pytest.raises(ValueError):
            ReferenceOptions().create_updated(fallback_slug="")


@pytest.mark.unit
class TestTocOptions:
    """Tests for TocOptions."""

    def test_defaults(self):
        """Test default values."""
        options = TocOptions()
        assert options.require_references is False
        assert options.max_depth is None

    def test_max_depth(self):
        """Test max_depth validation."""
        assert TocOptions(max_depth=1).max_depth == 1
        with pytest.raises(ValueError, match="max_depth must be >= 1"):
            TocOptions(max_depth=0)

    def test_help_metadata(self):
        """Test that every field documents itself."""
        for options_class in (ReferenceOptions, TocOptions):
            assert all(f.metadata.get("help") for f in fields(options_class))
