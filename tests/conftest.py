"""Shared fixtures for the form-block test suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from form_block import RuntimeConfig, new_document  # noqa: E402
from form_block import config as config_module  # noqa: E402


@pytest.fixture
def document():
    """Fresh document with an empty head, one per test."""
    return new_document()


@pytest.fixture
def base_config() -> RuntimeConfig:
    return RuntimeConfig(code_base_path="/base")


@pytest.fixture
def config_provider(base_config: RuntimeConfig):
    return lambda: base_config


@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module, "_config", None)


@pytest.fixture
def one_field_sheet() -> dict:
    return {
        "total": 1,
        "offset": 0,
        "limit": 1,
        "data": [
            {"Name": "f1", "Type": "text", "Label": "Field 1", "Mandatory": "", "Value": "", "Fieldset": ""},
        ],
        ":type": "sheet",
    }


@pytest.fixture
def adaptive_form() -> dict:
    return {
        "adaptiveform": "0.10.0",
        "metadata": {},
        "properties": {},
        "items": [],
        "id": "test-form",
    }
