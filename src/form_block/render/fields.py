"""
Field Rendering
================
The capability that turns one ``FieldDefinition`` into DOM.

Decoration only depends on the ``FieldRenderer`` protocol; callers with
their own widget library pass their own renderer. ``DefaultFieldRenderer``
emits plain HTML controls so a form can be rendered without one.
"""

from __future__ import annotations

from typing import Protocol

from bs4 import BeautifulSoup, Tag

from ..models.form import FieldDefinition

INPUT_TYPES = {
    "text-input": "text",
    "number-input": "number",
    "date-input": "date",
    "file-input": "file",
    "email": "email",
    "checkbox": "checkbox",
}

BUTTON_TYPES = {"button": "button", "submit": "submit", "reset": "reset"}


class FieldRenderer(Protocol):
    """Renders a single field; may suspend (e.g. to fetch nested content)."""

    async def render(self, field: FieldDefinition, document: BeautifulSoup) -> Tag:
        ...


class DefaultFieldRenderer:
    """Plain HTML controls wrapped in ``<div class="field-wrapper">``."""

    async def render(self, field: FieldDefinition, document: BeautifulSoup) -> Tag:
        if field.is_panel:
            return self._render_panel(field, document)
        if field.kind in BUTTON_TYPES:
            return self._render_button(field, document)

        wrapper = document.new_tag(
            "div",
            attrs={"class": f"field-wrapper field-{field.kind}", "data-id": field.id},
        )
        if field.label and field.kind != "plain-text":
            label = document.new_tag("label", attrs={"for": field.id})
            label.string = field.label
            wrapper.append(label)

        wrapper.append(self._render_control(field, document))

        if field.description:
            desc = document.new_tag("div", attrs={"class": "field-description"})
            desc.string = field.description
            wrapper.append(desc)
        return wrapper

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _render_control(self, field: FieldDefinition, document: BeautifulSoup) -> Tag:
        if field.kind == "plain-text":
            p = document.new_tag("p")
            p.string = field.default or field.label or ""
            return p

        if field.kind == "multiline-input":
            control = document.new_tag("textarea", attrs={"id": field.id, "name": field.id})
            control.string = field.default or ""
        elif field.kind in ("drop-down", "radio-group"):
            control = self._render_choice(field, document)
        else:
            control = document.new_tag("input", attrs={
                "type": INPUT_TYPES.get(field.kind, "text"),
                "id": field.id,
                "name": field.id,
            })
            if field.default is not None:
                control["value"] = field.default

        if field.placeholder and control.name in ("input", "textarea"):
            control["placeholder"] = field.placeholder
        if field.required:
            control["required"] = ""
        return control

    def _render_choice(self, field: FieldDefinition, document: BeautifulSoup) -> Tag:
        if field.kind == "drop-down":
            select = document.new_tag("select", attrs={"id": field.id, "name": field.id})
            for value in field.options:
                option = document.new_tag("option", attrs={"value": value})
                option.string = value
                if value == field.default:
                    option["selected"] = ""
                select.append(option)
            return select

        group = document.new_tag("div", attrs={"id": field.id, "class": "radio-group"})
        for index, value in enumerate(field.options):
            option_id = f"{field.id}-{index}"
            radio = document.new_tag("input", attrs={
                "type": "radio", "id": option_id, "name": field.id, "value": value,
            })
            if value == field.default:
                radio["checked"] = ""
            label = document.new_tag("label", attrs={"for": option_id})
            label.string = value
            group.append(radio)
            group.append(label)
        return group

    def _render_button(self, field: FieldDefinition, document: BeautifulSoup) -> Tag:
        wrapper = document.new_tag("div", attrs={"class": "field-wrapper field-button"})
        button = document.new_tag("button", attrs={
            "type": BUTTON_TYPES[field.kind], "id": field.id, "name": field.id,
        })
        button.string = field.label or field.id
        wrapper.append(button)
        return wrapper

    def _render_panel(self, field: FieldDefinition, document: BeautifulSoup) -> Tag:
        fieldset = document.new_tag(
            "fieldset",
            attrs={"class": "panel-wrapper", "id": field.id, "name": field.id},
        )
        if field.label:
            legend = document.new_tag("legend")
            legend.string = field.label
            fieldset.append(legend)
        return fieldset
