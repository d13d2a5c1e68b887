"""
Block Reader
=============
Helpers for reading form blocks out of an HTML document tree.

A block is a ``bs4.Tag`` whose element children are rows. Configuration rows
are plain ``key: value`` text; the form payload sits in a ``<pre><code>``
node.

Example::

    from form_block.dom.block import load_block, new_document

    document = new_document()
    block = load_block('<div class="form"><div>style: a.css</div>'
                       '<pre><code>{"adaptiveform": "0.10.0", "items": []}</code></pre></div>')
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

PARSER = "lxml"

EMPTY_DOCUMENT = "<!DOCTYPE html><html><head></head><body></body></html>"


def new_document(markup: str | None = None) -> BeautifulSoup:
    """Parse ``markup`` (or an empty page) into a document with a ``<head>``."""
    document = BeautifulSoup(markup or EMPTY_DOCUMENT, PARSER)
    ensure_head(document)
    return document


def ensure_head(document: BeautifulSoup) -> Tag:
    """Return the document's ``<head>``, creating it if the markup had none."""
    head = document.head
    if head is not None:
        return head
    head = document.new_tag("head")
    html = document.html
    if html is None:
        html = document.new_tag("html")
        document.append(html)
    html.insert(0, head)
    return head


def element_children(tag: Tag | None) -> list[Tag]:
    """Element children only; whitespace and comments are not rows."""
    if tag is None:
        return []
    return [child for child in tag.children if isinstance(child, Tag)]


def row_text(row: Tag) -> str:
    """Flattened text content of a row."""
    return row.get_text()


def find_payload_node(block: Tag) -> Tag | None:
    """
    Locate the node carrying the form payload.

    Looks for ``pre > code`` first, then for any ``code`` element.
    """
    pre = block.find("pre")
    if pre is not None:
        code = pre.find("code")
        if code is not None:
            return code
    return block.find("code")


def payload_container(block: Tag, code: Tag) -> Tag:
    """The element to replace with the rendered form: the ``<pre>`` if any."""
    parent = code.parent
    if isinstance(parent, Tag) and parent.name == "pre" and parent is not block:
        return parent
    return code


def find_form_block(document: BeautifulSoup) -> Tag | None:
    """
    Find the first form block in a page.

    A ``div.form`` wins; otherwise the first ``div`` that directly holds a
    payload ``<code>`` node.
    """
    block = document.find("div", class_="form")
    if block is not None:
        return block
    for code in document.find_all("code"):
        parent = code.parent
        if isinstance(parent, Tag) and parent.name == "pre":
            parent = parent.parent
        if isinstance(parent, Tag) and parent.name == "div":
            return parent
    return None


def load_block(markup: str) -> Tag:
    """Parse a fragment of markup and return its first form block."""
    document = BeautifulSoup(markup, PARSER)
    block = find_form_block(document)
    if block is None:
        block = document.find("div")
    if block is None:
        raise ValueError("markup does not contain a block element")
    return block.extract()
