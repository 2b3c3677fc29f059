#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/references.py
"""Automatic assignment of unique section references.

Sections that already carry a reference are pinned: their reference is
never changed, and no generated reference will ever equal it. Every other
section receives a slug derived from its title text, made unique with a
numeric suffix when needed. Assignment follows traversal order, so earlier
sections get the unsuffixed slug.

Running the assigner again on an already processed tree changes nothing,
since every section is pinned after the first run.

Examples
--------
    >>> from docmodel.nodes import Document, Section, TextNode
    >>> from docmodel.references import assign_unique_references
    >>> doc = Document(children=[
    ...     Section(title=TextNode("Intro")),
    ...     Section(title=TextNode("Intro")),
    ... ])
    >>> assign_unique_references(doc)
    >>> [s.reference for s in doc.children]
    ['intro', 'intro-2']

"""

from __future__ import annotations

import logging
import re
import unicodedata

from docmodel.collectors import collect
from docmodel.constants import DEFAULT_FALLBACK_SLUG
from docmodel.nodes import Document, Section
from docmodel.options import ReferenceOptions
from docmodel.traversal import NodeVisitor
from docmodel.utils import collect_all_text

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str, fallback: str = DEFAULT_FALLBACK_SLUG) -> str:
    """Create a reference slug from title text.

    The text is Unicode-normalized with accents dropped, lowercased, every
    run of characters outside ``[a-z0-9]`` becomes a single hyphen, and
    leading/trailing hyphens are trimmed.

    Letters with no ASCII decomposition (CJK, Cyrillic, Greek...) are
    dropped like punctuation, so a title written only in such scripts
    yields ``fallback``, and sibling titles of that kind are told apart
    by numeric suffixes alone.

    Parameters
    ----------
    text : str
        Title text
    fallback : str, default = "section"
        Returned when nothing usable remains

    Returns
    -------
    str
        The slug

    Examples
    --------
    >>> slugify("Section 1")
    'section-1'
    >>> slugify("  Déjà vu -- again!  ")
    'deja-vu-again'
    >>> slugify("???")
    'section'

    """
    normalized = unicodedata.normalize("NFKD", text)
    normalized = "".join(char for char in normalized if not unicodedata.combining(char))
    slug = _NON_ALNUM.sub("-", normalized.lower()).strip("-")
    return slug or fallback


class _ReferenceAssigner(NodeVisitor):
    """Visitor giving every unreferenced section a unique slug."""

    def __init__(self, taken: set[str], options: ReferenceOptions):
        self.taken = taken
        self.options = options
        self.assigned = 0

    def _unique(self, slug: str) -> str:
        if slug not in self.taken:
            return slug
        counter = self.options.suffix_start
        while f"{slug}-{counter}" in self.taken:
            counter += 1
        return f"{slug}-{counter}"

    def visit_section(self, node: Section, depth: int) -> None:
        if node.reference:
            return

        slug = slugify(collect_all_text(node.title), fallback=self.options.fallback_slug)
        reference = self._unique(slug)
        node.reference = reference
        self.taken.add(reference)
        self.assigned += 1
        logger.debug("Assigned reference %r to section at depth %d", reference, depth)


def assign_unique_references(document: Document, options: ReferenceOptions | None = None) -> None:
    """Give every section of ``document`` a unique reference, in place.

    Parameters
    ----------
    document : Document
        Document to update
    options : ReferenceOptions or None, default = None
        Slug and suffix settings; defaults are used when omitted

    Notes
    -----
    Pinned references that are duplicated by the author are left as they
    are; only generated references are guaranteed not to collide.

    """
    options = options or ReferenceOptions()

    pinned = {section.reference for section in collect(document, Section) if section.reference}
    assigner = _ReferenceAssigner(taken=set(pinned), options=options)
    assigner.run(document)

    logger.debug("Reference assignment done: %d pinned, %d assigned", len(pinned), assigner.assigned)


__all__ = [
    "slugify",
    "assign_unique_references",
]
