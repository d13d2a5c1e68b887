"""
Examples for form-block
=======================
Three complete examples showing both authored form representations and the
custom style directive.

Run:
    python examples/examples.py
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from form_block import (
    FormBlockBuilder,
    FormDecorator,
    RuntimeConfig,
    decorate,
    new_document,
    to_form_model,
)


CONFIG = RuntimeConfig(code_base_path="/base")


def config_provider() -> RuntimeConfig:
    return CONFIG


# ---------------------------------------------------------------------------
# Example 1: Adaptive Form with properties.style
# ---------------------------------------------------------------------------


async def example_adaptive_form() -> None:
    """
    Example 1: An Adaptive Form definition carrying its own style.

    The form JSON is authored in a forms editor; ``properties.style`` points
    at a stylesheet shipped with the site code.
    """
    print("\n" + "="*60)
    print("EXAMPLE 1: Adaptive Form")
    print("="*60)

    document = new_document()
    block = FormBlockBuilder.adaptive_form({
        "adaptiveform": "0.10.0",
        "metadata": {"grammar": "json-formula-1.0.0"},
        "properties": {"style": "/blocks/form/contact.css"},
        "items": [
            {"fieldType": "text-input", "name": "name", "label": {"value": "Name"}, "required": True},
            {"fieldType": "email", "name": "email", "label": {"value": "E-mail"}},
            {"fieldType": "multiline-input", "name": "message", "label": {"value": "Message"}},
            {"fieldType": "submit", "name": "send", "label": {"value": "Send"}},
        ],
        "id": "contact",
    }).build(document)
    document.body.append(block)

    form = await decorate(block, document=document, config_provider=config_provider)

    print(f"  Source:     {form['data-source']}")
    print(f"  Controls:   {[c['name'] for c in form.find_all(['input', 'textarea', 'button'])]}")
    print(f"  Stylesheet: {document.head.find('link')['href']}")
    print("  ✓ Example 1 complete")


# ---------------------------------------------------------------------------
# Example 2: Document-based form with a style row
# ---------------------------------------------------------------------------


async def example_document_based_form() -> None:
    """
    Example 2: A sheet authored in a document.

    The block's first row is ``style: blocks/form/form-1.css``; it is removed
    from the block and becomes a stylesheet link.
    """
    print("\n" + "="*60)
    print("EXAMPLE 2: Document-based Form")
    print("="*60)

    document = new_document()
    block = (
        FormBlockBuilder.sheet({
            "total": 3,
            "offset": 0,
            "limit": 3,
            ":type": "sheet",
            "data": [
                {"Name": "street", "Type": "text", "Label": "Street", "Mandatory": "x",
                 "Value": "", "Fieldset": "address"},
                {"Name": "country", "Type": "select", "Label": "Country", "Mandatory": "",
                 "Value": "CH", "Fieldset": "address", "Options": "CH, DE, FR"},
                {"Name": "send", "Type": "submit", "Label": "Send", "Mandatory": "",
                 "Value": "", "Fieldset": ""},
            ],
        })
        .with_style("blocks/form/form-1.css")
        .build(document)
    )
    document.body.append(block)

    decorator = FormDecorator(block, document=document, config_provider=config_provider)
    model = decorator.normalize()
    print(f"  Model:      {model!r}")
    print(f"  Fields:     {model.field_names()}")

    form = await decorator.render()
    print(f"  State:      {decorator.state.value}")
    print(f"  Source:     {form['data-source']}")
    print(f"  Stylesheet: {document.head.find('link')['href']}")
    print("  ✓ Example 2 complete")


# ---------------------------------------------------------------------------
# Example 3: Two forms, one stylesheet
# ---------------------------------------------------------------------------


async def example_shared_stylesheet() -> None:
    """
    Example 3: Forms decorated concurrently on one page.

    Both resolve to the same href, so the head ends up with a single link.
    """
    print("\n" + "="*60)
    print("EXAMPLE 3: Shared Stylesheet")
    print("="*60)

    sheet = {
        ":type": "sheet",
        "data": [{"Name": "q", "Type": "text", "Label": "Search"}],
    }
    model = to_form_model(sheet, style_path="blocks/form/search.css")
    print(f"  Normalized: {model!r}")

    document = new_document()
    blocks = [
        FormBlockBuilder.sheet(sheet).with_style("blocks/form/search.css").build(document),
        FormBlockBuilder.sheet(sheet).with_style("/blocks/form/search.css").build(document),
    ]
    for block in blocks:
        document.body.append(block)

    await asyncio.gather(*(
        decorate(block, document=document, config_provider=config_provider)
        for block in blocks
    ))

    links = document.head.find_all("link")
    print(f"  Forms:      {len(document.find_all('form'))}")
    print(f"  Links:      {[link['href'] for link in links]}")
    print("  ✓ Example 3 complete")


# ---------------------------------------------------------------------------
# Run all examples
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    asyncio.run(example_adaptive_form())
    asyncio.run(example_document_based_form())
    asyncio.run(example_shared_stylesheet())

    print("\n" + "="*60)
    print("All examples completed successfully.")
    print("="*60 + "\n")
