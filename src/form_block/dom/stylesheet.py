"""
Stylesheet Resolver
====================
Turns a form's style directive into a stylesheet ``<link>`` in the document
head.

- Joins the runtime base path and the style path with exactly one ``/``
- Attaches at most one link per href (check-then-insert at call time)
- Never fetches or validates the referenced resource

Example::

    from form_block.dom.stylesheet import resolve_and_attach

    resolve_and_attach(document, "/blocks/form/form-2.css", "/base")
    # <link rel="stylesheet" href="/base/blocks/form/form-2.css"/>
"""

from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup, Tag

from ..errors import StyleResolutionError
from .block import ensure_head

logger = logging.getLogger(__name__)


def resolve_href(style_path: str, base_path: Any) -> str:
    """
    Join ``base_path`` and ``style_path``.

    One leading ``/`` is stripped from the style path and one trailing ``/``
    from the base path, so the result never doubles the separator between
    them.
    """
    if not isinstance(base_path, str):
        raise StyleResolutionError(
            "base path is not configured",
            f"expected str, got {type(base_path).__name__}",
        )
    path = style_path[1:] if style_path.startswith("/") else style_path
    base = base_path[:-1] if base_path.endswith("/") else base_path
    return f"{base}/{path}"


def find_stylesheet(document: BeautifulSoup, href: str) -> Tag | None:
    """Return the head's stylesheet link for ``href``, if there is one."""
    head = document.head
    if head is None:
        return None
    for link in head.find_all("link"):
        if "stylesheet" in _rel_values(link) and link.get("href") == href:
            return link
    return None


def _rel_values(link: Tag) -> list[str]:
    # rel is multi-valued: a list from the tree builder, a str if set by hand
    rel = link.get("rel")
    if isinstance(rel, str):
        return rel.split()
    return list(rel or [])


def attach_stylesheet(document: BeautifulSoup, href: str) -> Tag:
    """
    Ensure the head holds a stylesheet link for ``href``.

    Returns the link, new or existing.
    """
    existing = find_stylesheet(document, href)
    if existing is not None:
        logger.debug("Stylesheet %s already attached", href)
        return existing

    link = document.new_tag("link", attrs={"rel": "stylesheet", "href": href})
    ensure_head(document).append(link)
    logger.debug("Attached stylesheet %s", href)
    return link


def resolve_and_attach(
    document: BeautifulSoup,
    style_path: str | None,
    base_path: Any,
) -> Tag | None:
    """
    Resolve ``style_path`` against ``base_path`` and attach it.

    An absent or blank style path is a no-op and returns None.
    """
    if style_path is None or not style_path.strip():
        return None
    href = resolve_href(style_path.strip(), base_path)
    return attach_stylesheet(document, href)
