"""
Form Decorator
===============
Turns a form block into a rendered ``<form>``.

Pipeline (one pass per block)::

    UNPARSED --normalize()--> NORMALIZED --await render()--> RENDERED

1. locate and decode the ``<code>`` payload, sniff its shape
2. document-based only: find the ``style:``/``css:`` row
3. build the ``FormModel``, then remove the style row
4. render each field into ``<form data-source="aem|sheet">``
5. attach the custom stylesheet, if any

Parse and transform errors propagate and leave no form behind. Style
resolution errors only cost the custom stylesheet.

Example::

    from form_block import decorate, new_document

    document = new_document(html)
    form = await decorate(document.find("div", class_="form"), document=document)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

import yaml
from bs4 import BeautifulSoup, Tag

from .config import RuntimeConfig, get_config
from .dom.block import find_payload_node, payload_container
from .dom.stylesheet import resolve_and_attach
from .errors import FormBlockError, ShapeDetectionError, StyleResolutionError
from .models.form import FormModel, SourceKind
from .render.fields import DefaultFieldRenderer, FieldRenderer
from .transform.form_model import decode_payload, detect_source_kind, to_form_model
from .transform.style_directive import find_style_directive

logger = logging.getLogger(__name__)

ConfigProvider = Callable[[], RuntimeConfig]


class DecorationState(str, Enum):
    UNPARSED = "unparsed"
    NORMALIZED = "normalized"
    RENDERED = "rendered"


class FormDecorator:
    """
    Decorates a single form block.

    Parameters
    ----------
    block:
        The block element, or an Adaptive Form definition given directly.
    document:
        The document whose ``<head>`` receives the stylesheet link.
    renderer:
        Field rendering capability. Defaults to ``DefaultFieldRenderer``.
    config_provider:
        Returns the runtime configuration; called only when the stylesheet
        is resolved.
    """

    def __init__(
        self,
        block: Tag | Mapping[str, Any],
        *,
        document: BeautifulSoup,
        renderer: FieldRenderer | None = None,
        config_provider: ConfigProvider | None = None,
    ) -> None:
        self._document = document
        self._renderer = renderer or DefaultFieldRenderer()
        self._config_provider = config_provider or get_config
        self._state = DecorationState.UNPARSED
        self._model: FormModel | None = None
        self._payload_node: Tag | None = None

        if isinstance(block, Tag):
            self._block = block
            self._raw: Mapping[str, Any] | None = None
        else:
            self._block = document.new_tag("div", attrs={"class": "form"})
            self._raw = block

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> DecorationState:
        return self._state

    @property
    def block(self) -> Tag:
        return self._block

    @property
    def model(self) -> FormModel | None:
        return self._model

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def normalize(self) -> FormModel:
        """UNPARSED -> NORMALIZED. Synchronous; never suspends."""
        if self._state is not DecorationState.UNPARSED:
            raise RuntimeError(f"cannot normalize a form in state {self._state.value}")

        payload = self._read_payload()
        directive = None
        if detect_source_kind(payload) is SourceKind.SHEET:
            directive = find_style_directive(self._block)

        self._model = to_form_model(
            payload, style_path=directive.value if directive else None
        )
        # the row goes only once the payload is known to be valid
        if directive is not None:
            directive.consume()
        self._state = DecorationState.NORMALIZED
        return self._model

    async def render(self) -> Tag:
        """NORMALIZED -> RENDERED. Returns the ``<form>`` element."""
        if self._state is not DecorationState.NORMALIZED or self._model is None:
            raise RuntimeError(f"cannot render a form in state {self._state.value}")
        model = self._model

        form = self._document.new_tag("form", attrs={"data-source": model.source_kind.value})
        if model.form_id:
            form["id"] = model.form_id

        panels: dict[str, Tag] = {}
        for field in model.fields:
            element = await self._renderer.render(field, self._document)
            parent = panels.get(field.group, form) if field.group else form
            parent.append(element)
            if field.is_panel:
                panels[field.id] = _panel_container(element)

        self._mount(form)
        self._attach_style(model.style_path)
        self._state = DecorationState.RENDERED
        logger.info(
            "Rendered %s form with %d field(s)", model.source_kind.value, len(model.fields)
        )
        return form

    async def decorate(self) -> Tag:
        self.normalize()
        return await self.render()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read_payload(self) -> Any:
        if self._raw is not None:
            return self._raw
        code = find_payload_node(self._block)
        if code is None:
            raise ShapeDetectionError("form block has no <code> payload")
        self._payload_node = code
        return decode_payload(code.get_text())

    def _mount(self, form: Tag) -> None:
        code = self._payload_node
        if code is not None and code.parent is not None:
            payload_container(self._block, code).replace_with(form)
        else:
            self._block.append(form)

    def _attach_style(self, style_path: str | None) -> None:
        if style_path is None:
            return
        try:
            base_path = getattr(self._config_provider(), "code_base_path", None)
            resolve_and_attach(self._document, style_path, base_path)
        except StyleResolutionError as e:
            logger.warning("Custom form style %r skipped: %s", style_path, e)
        except (OSError, ValueError, yaml.YAMLError) as e:
            # unreadable or malformed configuration
            logger.warning("Custom form style %r skipped, invalid configuration: %s", style_path, e)


def _panel_container(element: Tag) -> Tag:
    if element.name == "fieldset":
        return element
    return element.find("fieldset") or element


async def decorate(
    block: Tag | Mapping[str, Any],
    *,
    document: BeautifulSoup,
    renderer: FieldRenderer | None = None,
    config_provider: ConfigProvider | None = None,
) -> Tag:
    """Decorate ``block`` in place and return its ``<form>``."""
    decorator = FormDecorator(
        block,
        document=document,
        renderer=renderer,
        config_provider=config_provider,
    )
    try:
        return await decorator.decorate()
    except FormBlockError:
        logger.error("Form block could not be decorated", exc_info=True)
        raise
