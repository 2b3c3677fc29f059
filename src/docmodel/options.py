#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/options.py
"""Option classes for the tree operations.

Options are frozen dataclasses; use ``create_updated`` to derive a
modified copy. Every field carries a ``help`` entry in its metadata, which
the configuration loader uses to report the accepted keys.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from docmodel.constants import DEFAULT_FALLBACK_SLUG, DEFAULT_SUFFIX_START


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ReferenceOptions(CloneFrozenMixin):
    """Options for automatic section reference assignment.

    Parameters
    ----------
    fallback_slug : str, default = "section"
        Slug used when a section title yields no usable characters
    suffix_start : int, default = 2
        First numeric suffix tried when a slug is already taken

    """

    fallback_slug: str = field(
        default=DEFAULT_FALLBACK_SLUG,
        metadata={"help": "Slug used for sections whose title produces an empty slug"},
    )
    suffix_start: int = field(
        default=DEFAULT_SUFFIX_START,
        metadata={"help": "First numeric suffix appended to colliding slugs"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the fallback slug is empty or the suffix start is below 2

        """
        if not self.fallback_slug:
            raise ValueError("fallback_slug must not be empty")
        if self.suffix_start < 2:
            raise ValueError(f"suffix_start must be >= 2, got {self.suffix_start}")


@dataclass(frozen=True)
class TocOptions(CloneFrozenMixin):
    """Options for table of contents synthesis.

    Parameters
    ----------
    require_references : bool, default = False
        Raise instead of emitting links with empty or duplicated references
    max_depth : int or None, default = None
        Maximum number of nesting levels to include; None includes all

    """

    require_references: bool = field(
        default=False,
        metadata={"help": "Fail on sections with missing or duplicated references"},
    )
    max_depth: Optional[int] = field(
        default=None,
        metadata={"help": "Maximum section nesting depth included in the table of contents"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If max_depth is given and smaller than 1

        """
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")


__all__ = [
    "CloneFrozenMixin",
    "ReferenceOptions",
    "TocOptions",
]
