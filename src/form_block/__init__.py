"""
form-block – Form Block Rendering
==================================
Renders an HTML ``<form>`` from either of two authored representations:

- an Adaptive Form definition (JSON with ``adaptiveform``, ``properties``,
  ``items``), or
- a document-based block: a sheet payload in ``<pre><code>`` plus
  configuration rows such as ``style: blocks/form/form-1.css``.

Both are normalized to one ``FormModel``. A custom style directive is
resolved against the runtime code base path and attached to the document
head as a single stylesheet link.

Quick Start::

    import asyncio
    from form_block import FormBlockBuilder, RuntimeConfig, decorate, new_document

    document = new_document()
    block = (
        FormBlockBuilder.adaptive_form({
            "adaptiveform": "0.10.0",
            "metadata": {},
            "properties": {"style": "blocks/form/form-2.css"},
            "items": [{"fieldType": "text-input", "name": "f1", "label": {"value": "Field 1"}}],
            "id": "contact",
        })
        .build(document)
    )
    document.body.append(block)

    config = RuntimeConfig(code_base_path="/base")
    form = asyncio.run(decorate(block, document=document, config_provider=lambda: config))
    print(form["data-source"])   # aem
    print(document.head)         # <link href="/base/blocks/form/form-2.css" .../>
"""

__version__ = "0.1.0"

# Core models
from .models.form import (
    AdaptiveFormDef,
    FieldDefinition,
    FormModel,
    SheetPayload,
    SourceKind,
)

# Errors
from .errors import (
    FormBlockError,
    PayloadDecodeError,
    ShapeDetectionError,
    StyleResolutionError,
)

# Configuration
from .config import RuntimeConfig, get_config, reload_config

# Transform
from .transform.style_directive import find_style_directive, parse_style_from_block
from .transform.form_model import decode_payload, detect_source_kind, to_form_model

# DOM
from .dom.block import load_block, new_document
from .dom.stylesheet import attach_stylesheet, resolve_and_attach, resolve_href

# Rendering
from .render.fields import DefaultFieldRenderer, FieldRenderer
from .decorator import DecorationState, FormDecorator, decorate

# Builders
from .builder.block_builder import FormBlockBuilder

__all__ = [
    # Models
    "AdaptiveFormDef",
    "FieldDefinition",
    "FormModel",
    "SheetPayload",
    "SourceKind",
    # Errors
    "FormBlockError",
    "PayloadDecodeError",
    "ShapeDetectionError",
    "StyleResolutionError",
    # Configuration
    "RuntimeConfig",
    "get_config",
    "reload_config",
    # Transform
    "find_style_directive",
    "parse_style_from_block",
    "decode_payload",
    "detect_source_kind",
    "to_form_model",
    # DOM
    "load_block",
    "new_document",
    "attach_stylesheet",
    "resolve_and_attach",
    "resolve_href",
    # Rendering
    "DefaultFieldRenderer",
    "FieldRenderer",
    "DecorationState",
    "FormDecorator",
    "decorate",
    # Builders
    "FormBlockBuilder",
]
