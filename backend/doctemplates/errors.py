"""
DocTemplates: Structured error catalog.

Every error has a code, human message, and suggested fix.
Out-of-range variant edits are not errors and never reach this catalog.
"""

from __future__ import annotations

from typing import Any


class DocTemplateError(Exception):
    """Base error with structured code + suggestion."""

    def __init__(self, code: str, message: str, suggestion: str = "", detail: Any = None):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "error_code": self.code,
            "message": self.message,
        }
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if self.detail:
            d["detail"] = self.detail
        return d


class InvalidTemplateStateError(DocTemplateError):
    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            code="INVALID_TEMPLATE_STATE",
            message=f"Cannot clone template, missing: {', '.join(missing)}",
            suggestion="Fully construct the template (style, workflow and all collections) before cloning.",
            detail=missing,
        )


class TemplateNotFoundError(DocTemplateError):
    def __init__(self, template_id: str):
        super().__init__(
            code="TEMPLATE_NOT_FOUND",
            message=f"Template not registered: {template_id}",
            suggestion="Register the template first or pick one of the registry ids.",
        )


class ConfigurationError(DocTemplateError):
    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(
            code="INVALID_CONFIGURATION",
            message=f"Invalid configuration: {'; '.join(errors)}",
            suggestion="Check the DOCTEMPLATES_* environment variables or your .env file.",
            detail=errors,
        )
