"""
Form Definitions – Core Models
===============================
Pydantic models for the two authored form representations and for the
normalized form model both of them are reduced to.

- ``AdaptiveFormDef``  structured Adaptive Form JSON (``adaptiveform`` key)
- ``SheetPayload``     document-based content table (``:type`` = ``sheet``)
- ``FieldDefinition``  one normalized field, identical for both sources
- ``FormModel``        the normalized form handed to rendering
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class SourceKind(str, Enum):
    """Which authored representation a form was built from."""
    AEM = "aem"
    SHEET = "sheet"


# Aliases accepted in the Type column / fieldType property, mapped to the
# kind names used by the renderer.
FIELD_KIND_ALIASES: dict[str, str] = {
    "text": "text-input",
    "text-input": "text-input",
    "textarea": "multiline-input",
    "multiline-input": "multiline-input",
    "select": "drop-down",
    "drop-down": "drop-down",
    "fieldset": "panel",
    "panel": "panel",
    "number": "number-input",
    "number-input": "number-input",
    "date": "date-input",
    "date-input": "date-input",
    "file": "file-input",
    "file-input": "file-input",
    "plaintext": "plain-text",
    "plain-text": "plain-text",
    "radio": "radio-group",
    "radio-group": "radio-group",
    "checkbox": "checkbox",
    "email": "email",
    "button": "button",
    "submit": "submit",
    "reset": "reset",
}

DEFAULT_FIELD_KIND = "text-input"
PANEL_KIND = "panel"


def normalize_kind(raw: Any) -> str:
    """Map an authored field type onto the shared kind vocabulary."""
    if raw is None:
        return DEFAULT_FIELD_KIND
    key = str(raw).strip().lower()
    if not key:
        return DEFAULT_FIELD_KIND
    return FIELD_KIND_ALIASES.get(key, key)


# ---------------------------------------------------------------------------
# Authored inputs
# ---------------------------------------------------------------------------

class AdaptiveFormDef(BaseModel):
    """
    Adaptive Form definition.

    Only ``items`` is strictly required; ``metadata`` and ``properties``
    default to empty mappings.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    adaptiveform: str = Field(..., description="Adaptive Form version")
    metadata: dict[str, Any] = Field(default_factory=dict)
    properties: dict[str, Any] = Field(default_factory=dict)
    items: list[dict[str, Any]] = Field(..., description="Field items, in render order")
    id: str | None = Field(None, description="Form identifier")

    @property
    def style(self) -> str | None:
        """The ``properties.style`` directive, if it is a string."""
        value = self.properties.get("style")
        return value if isinstance(value, str) else None


class SheetPayload(BaseModel):
    """Content table recovered from a document-based block."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total: int | None = None
    offset: int | None = None
    limit: int | None = None
    data: list[dict[str, str]] = Field(..., description="One record per field row")
    type: str = Field("sheet", alias=":type")

    @field_validator("data", mode="before")
    @classmethod
    def coerce_cells(cls, v: Any) -> Any:
        """Cell values arrive as strings, numbers or null; keep them as text."""
        if not isinstance(v, list):
            return v
        rows = []
        for row in v:
            if not isinstance(row, dict):
                return v
            rows.append({
                str(k): "" if cell is None else str(cell)
                for k, cell in row.items()
            })
        return rows


# ---------------------------------------------------------------------------
# Normalized model
# ---------------------------------------------------------------------------

class FieldDefinition(BaseModel):
    """A single form field, independent of the representation it came from."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Field name, used for the control name/id")
    kind: str = Field(DEFAULT_FIELD_KIND, description="Normalized field kind")
    label: str | None = None
    required: bool = False
    default: str | None = None
    group: str | None = Field(None, description="Name of the owning panel/fieldset")
    placeholder: str | None = None
    description: str | None = None
    options: tuple[str, ...] = ()

    @property
    def is_panel(self) -> bool:
        return self.kind == PANEL_KIND


class FormModel(BaseModel):
    """
    Normalized form.

    Frozen: ``source_kind`` is fixed at construction, and ``fields`` keeps
    the order of the authored input.
    """
    model_config = ConfigDict(frozen=True)

    source_kind: SourceKind
    fields: tuple[FieldDefinition, ...] = ()
    style_path: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    form_id: str | None = None

    def field_names(self) -> list[str]:
        return [f.id for f in self.fields]

    def __repr__(self) -> str:
        return (
            f"FormModel(source={self.source_kind.value!r}, fields={len(self.fields)}, "
            f"style={self.style_path!r})"
        )
