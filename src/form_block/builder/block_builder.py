"""
Form Block Builder
===================
Fluent builder for form blocks as they appear in authored pages.

Example::

    from form_block.builder.block_builder import FormBlockBuilder

    block = (
        FormBlockBuilder.sheet({
            "total": 1, "offset": 0, "limit": 1, ":type": "sheet",
            "data": [{"Name": "f1", "Type": "text", "Label": "Field 1"}],
        })
        .with_style("blocks/form/form-1.css")
        .build(document)
    )
"""

from __future__ import annotations

import json
from typing import Any

from bs4 import BeautifulSoup, Tag


class FormBlockBuilder:
    """
    Fluent builder for form block elements.

    Typically instantiated via ``FormBlockBuilder.adaptive_form()`` or
    ``FormBlockBuilder.sheet()``.
    """

    def __init__(self, payload: Any, *, encode_twice: bool = False) -> None:
        self._payload = payload
        self._encode_twice = encode_twice
        self._rows: list[str] = []
        self._css_class: str | None = "form"

    # ------------------------------------------------------------------
    # Factory methods
    # ------------------------------------------------------------------

    @classmethod
    def adaptive_form(cls, form_def: dict[str, Any]) -> "FormBlockBuilder":
        """Block holding an Adaptive Form definition, JSON-encoded once."""
        return cls(form_def)

    @classmethod
    def sheet(cls, payload: dict[str, Any]) -> "FormBlockBuilder":
        """Document-based block; the sheet payload is JSON-encoded twice."""
        return cls(payload, encode_twice=True)

    @classmethod
    def raw(cls, text: str) -> "FormBlockBuilder":
        """Block whose ``<code>`` holds ``text`` verbatim."""
        return cls(text)

    # ------------------------------------------------------------------
    # Builder chain methods
    # ------------------------------------------------------------------

    def with_row(self, text: str) -> "FormBlockBuilder":
        """Add a configuration row before the payload, in call order."""
        self._rows.append(text)
        return self

    def with_style(self, path: str, key: str = "style") -> "FormBlockBuilder":
        """Add a ``style: <path>`` configuration row."""
        return self.with_row(f"{key}: {path}")

    def with_class(self, css_class: str | None) -> "FormBlockBuilder":
        self._css_class = css_class
        return self

    # --- Build ---

    def payload_text(self) -> str:
        if isinstance(self._payload, str):
            return self._payload
        text = json.dumps(self._payload)
        if self._encode_twice:
            text = json.dumps(text)
        return text

    def build(self, document: BeautifulSoup) -> Tag:
        """Create the block element; it is not attached to the document."""
        attrs = {"class": self._css_class} if self._css_class else {}
        block = document.new_tag("div", attrs=attrs)
        for text in self._rows:
            row = document.new_tag("div")
            row.string = text
            block.append(row)

        pre = document.new_tag("pre")
        code = document.new_tag("code")
        code.string = self.payload_text()
        pre.append(code)
        block.append(pre)
        return block
