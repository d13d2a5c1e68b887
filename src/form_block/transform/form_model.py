"""
Form Model Transform
=====================
Reduces either authored representation to one ``FormModel``.

Dispatch is by discriminating key only:

- ``adaptiveform`` present          -> Adaptive Form (``aem``)
- ``:type`` is ``sheet``/``multi-sheet`` -> document-based sheet (``sheet``)

Example::

    from form_block.transform.form_model import to_form_model

    model = to_form_model(code.get_text(), style_path="blocks/form/form-1.css")
    print(model.source_kind, model.field_names())
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..errors import PayloadDecodeError, ShapeDetectionError
from ..models.form import (
    AdaptiveFormDef,
    FieldDefinition,
    FormModel,
    SheetPayload,
    SourceKind,
    normalize_kind,
)

logger = logging.getLogger(__name__)

SHEET_TYPE = "sheet"
MULTI_SHEET_TYPE = "multi-sheet"


# ---------------------------------------------------------------------------
# Decoding and dispatch
# ---------------------------------------------------------------------------

def decode_payload(text: str) -> Any:
    """
    Two-stage JSON decode of a ``<code>`` payload.

    Sheet payloads are JSON-encoded twice, so a first decode yielding a
    string is decoded again.
    """
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise PayloadDecodeError("payload is not valid JSON", str(e)) from e
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            raise PayloadDecodeError("inner payload is not valid JSON", str(e)) from e
    return value


def detect_source_kind(payload: Any) -> SourceKind:
    """Classify a decoded payload by its discriminating key."""
    if isinstance(payload, Mapping):
        if "adaptiveform" in payload:
            return SourceKind.AEM
        if payload.get(":type") in (SHEET_TYPE, MULTI_SHEET_TYPE):
            return SourceKind.SHEET
    raise ShapeDetectionError(
        "payload is neither an Adaptive Form nor a sheet",
        f"got {type(payload).__name__}",
    )


def to_form_model(
    payload: Mapping[str, Any] | str,
    *,
    style_path: str | None = None,
) -> FormModel:
    """
    Build the normalized form model.

    Parameters
    ----------
    payload:
        A decoded payload, or the raw (possibly double-encoded) JSON text.
    style_path:
        Style directive parsed from the block. Only used for sheets;
        Adaptive Forms carry their own ``properties.style``.
    """
    if isinstance(payload, str):
        payload = decode_payload(payload)

    kind = detect_source_kind(payload)
    if kind is SourceKind.AEM:
        return _from_adaptive_form(payload)
    return _from_sheet(payload, style_path)


# ---------------------------------------------------------------------------
# Adaptive Form variant
# ---------------------------------------------------------------------------

def _from_adaptive_form(payload: Mapping[str, Any]) -> FormModel:
    try:
        form_def = AdaptiveFormDef.model_validate(dict(payload))
    except ValidationError as e:
        raise PayloadDecodeError("invalid Adaptive Form definition", str(e)) from e

    fields = tuple(_flatten_items(form_def.items, group=None))
    logger.debug("Adaptive Form %r normalized to %d field(s)", form_def.id, len(fields))
    return FormModel(
        source_kind=SourceKind.AEM,
        fields=fields,
        style_path=form_def.style,
        metadata=dict(form_def.metadata),
        form_id=form_def.id,
    )


def _flatten_items(items: list[Any], group: str | None) -> list[FieldDefinition]:
    """Panels are emitted before their children; children carry the panel name."""
    fields: list[FieldDefinition] = []
    for item in items:
        if not isinstance(item, Mapping):
            raise PayloadDecodeError("Adaptive Form item is not an object", repr(item))
        field = _field_from_item(item, group)
        fields.append(field)
        children = item.get("items")
        if field.is_panel and isinstance(children, list):
            fields.extend(_flatten_items(children, group=field.id))
    return fields


def _field_from_item(item: Mapping[str, Any], group: str | None) -> FieldDefinition:
    name = item.get("name") or item.get("id")
    if not name:
        raise PayloadDecodeError("Adaptive Form item has no name or id", repr(dict(item)))

    label = item.get("label")
    if isinstance(label, Mapping):
        label = label.get("value")

    default = item.get("default", item.get("value"))
    options = item.get("enumNames") or item.get("enum") or ()

    return FieldDefinition(
        id=str(name),
        kind=normalize_kind(item.get("fieldType")),
        label=_text_or_none(label),
        required=bool(item.get("required", False)),
        default=_text_or_none(default),
        group=group,
        placeholder=_text_or_none(item.get("placeholder")),
        description=_text_or_none(item.get("description")),
        options=tuple(str(o) for o in options),
    )


# ---------------------------------------------------------------------------
# Sheet variant
# ---------------------------------------------------------------------------

def _from_sheet(payload: Mapping[str, Any], style_path: str | None) -> FormModel:
    sheet = _select_sheet(payload)
    try:
        table = SheetPayload.model_validate(dict(sheet))
    except ValidationError as e:
        raise PayloadDecodeError("invalid sheet payload", str(e)) from e

    fields = tuple(_field_from_row(row) for row in table.data)
    logger.debug("Sheet normalized to %d field(s)", len(fields))
    return FormModel(
        source_kind=SourceKind.SHEET,
        fields=fields,
        style_path=style_path,
        metadata={"total": table.total, "offset": table.offset, "limit": table.limit},
    )


def _select_sheet(payload: Mapping[str, Any]) -> Mapping[str, Any]:
    """Unwrap a multi-sheet envelope to its first named sheet."""
    if payload.get(":type") != MULTI_SHEET_TYPE:
        return payload
    names = payload.get(":names")
    if not isinstance(names, list) or not names:
        raise PayloadDecodeError("multi-sheet payload has no :names")
    sheet = payload.get(names[0])
    if not isinstance(sheet, Mapping):
        raise PayloadDecodeError("multi-sheet payload is missing sheet", repr(names[0]))
    return sheet


def _field_from_row(row: Mapping[str, str]) -> FieldDefinition:
    name = row.get("Name", "").strip()
    if not name:
        raise PayloadDecodeError("sheet row has no Name", repr(dict(row)))

    kind = normalize_kind(row.get("Type"))
    options = row.get("Options", "")
    return FieldDefinition(
        id=name,
        kind=kind,
        label=row.get("Label", "").strip() or None,
        required=bool(row.get("Mandatory", "").strip()),
        default=row.get("Value") or None,
        group=row.get("Fieldset", "").strip() or None,
        placeholder=row.get("Placeholder") or None,
        description=row.get("Description") or None,
        options=tuple(o.strip() for o in options.split(",") if o.strip()),
    )


def _text_or_none(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
