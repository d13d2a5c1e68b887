"""
Style Directive Parser
=======================
Pulls the author's custom stylesheet path out of a document-based block.

A configuration row reads ``style: <path>`` or ``css: <path>``; the key is
matched case-insensitively. The matching row is removed from the block so
it is never rendered as a data row. ``find_style_directive`` locates the row
without removing it, for callers that consume it only once the rest of the
block is known to be valid.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from bs4 import Tag

from ..dom.block import element_children, row_text

logger = logging.getLogger(__name__)

STYLE_DIRECTIVE_KEYS = ("style", "css")


def match_style_directive(text: str) -> str | None:
    """
    Return the directive value if ``text`` is a style row, else None.

    An empty value is returned as ``""``, not None.
    """
    stripped = text.strip()
    lowered = stripped.lower()
    for key in STYLE_DIRECTIVE_KEYS:
        prefix = f"{key}:"
        if lowered.startswith(prefix):
            return stripped[len(prefix):].strip()
    return None


class StyleDirective(NamedTuple):
    """A matched style row: the row element and its value."""
    row: Tag
    value: str

    def consume(self) -> str:
        """Remove the row from its block and return the value."""
        self.row.decompose()
        logger.debug("Consumed style directive row: %r", self.value)
        return self.value


def find_style_directive(block: Tag | None) -> StyleDirective | None:
    """
    Locate the first style row of ``block`` without modifying it.

    Returns None when there is no block, no rows, or no matching row.
    """
    for row in element_children(block):
        value = match_style_directive(row_text(row))
        if value is not None:
            return StyleDirective(row, value)
    return None


def parse_style_from_block(block: Tag | None) -> str | None:
    """
    Extract the style directive from ``block`` and remove its row.

    Only the first matching row is consumed. Returns None, leaving the block
    untouched, when there is no block, no rows, or no matching row.
    """
    directive = find_style_directive(block)
    if directive is None:
        return None
    return directive.consume()
