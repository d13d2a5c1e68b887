"""Exceptions raised while decorating a form block."""

from __future__ import annotations


class FormBlockError(Exception):
    """Base exception for form block decoration errors."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ShapeDetectionError(FormBlockError):
    """Input is neither an Adaptive Form definition nor a sheet payload."""


class PayloadDecodeError(FormBlockError):
    """Payload JSON cannot be decoded or is missing required keys."""


class StyleResolutionError(FormBlockError):
    """Base path configuration is missing or malformed."""
