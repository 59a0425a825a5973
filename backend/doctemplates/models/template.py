"""
DocTemplates: Typed document template model.

A DocumentTemplate owns every nested entity (sections, style, margins,
workflow). Cloning copies the whole graph field by field so that no
instance is ever reachable from two templates at once.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from doctemplates.errors import InvalidTemplateStateError
from doctemplates.utils.logging import logger


def _require(value: Any, part: str) -> Any:
    if value is None:
        raise InvalidTemplateStateError([part])
    return value


class Margins(BaseModel):
    top: int = Field(default=0, ge=0)
    bottom: int = Field(default=0, ge=0)
    left: int = Field(default=0, ge=0)
    right: int = Field(default=0, ge=0)

    def clone(self) -> Margins:
        return Margins(top=self.top, bottom=self.bottom, left=self.left, right=self.right)


class DocumentStyle(BaseModel):
    font_family: str = "Arial"
    font_size: int = Field(default=12, gt=0)
    header_color: str = "#000000"
    logo_url: str = ""
    page_margins: Margins = Field(default_factory=Margins)

    def clone(self) -> DocumentStyle:
        margins = _require(self.page_margins, "style.page_margins")
        return DocumentStyle(
            font_family=self.font_family,
            font_size=self.font_size,
            header_color=self.header_color,
            logo_url=self.logo_url,
            page_margins=margins.clone(),
        )


class Section(BaseModel):
    name: str
    content: str = ""
    is_editable: bool = True
    placeholders: list[str] = Field(default_factory=list)

    def clone(self) -> Section:
        placeholders = _require(self.placeholders, f"section '{self.name}' placeholders")
        return Section(
            name=self.name,
            content=self.content,
            is_editable=self.is_editable,
            placeholders=list(placeholders),
        )


class ApprovalWorkflow(BaseModel):
    approvers: list[str] = Field(default_factory=list)
    required_approvals: int = Field(default=0, ge=0)
    timeout_days: int = Field(default=0, ge=0)

    @property
    def is_satisfiable(self) -> bool:
        """True when there are at least as many approvers as required approvals."""
        return self.required_approvals <= len(self.approvers or [])

    def clone(self) -> ApprovalWorkflow:
        approvers = _require(self.approvers, "workflow.approvers")
        return ApprovalWorkflow(
            approvers=list(approvers),
            required_approvals=self.required_approvals,
            timeout_days=self.timeout_days,
        )


class DocumentTemplate(BaseModel):
    """
    Root aggregate of the template catalog.

    style and workflow may be left unset while a template is being
    assembled, but clone() refuses to run until both are present and
    every collection is a real (possibly empty) container.
    """

    title: str = ""
    category: str = ""
    sections: list[Section] = Field(default_factory=list)
    style: DocumentStyle | None = None
    required_fields: list[str] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)
    workflow: ApprovalWorkflow | None = None
    tags: list[str] = Field(default_factory=list)

    def missing_parts(self) -> list[str]:
        """List the parts that must be filled in before this template can be cloned."""
        missing: list[str] = []
        if self.style is None:
            missing.append("style")
        elif self.style.page_margins is None:
            missing.append("style.page_margins")
        if self.workflow is None:
            missing.append("workflow")
        elif self.workflow.approvers is None:
            missing.append("workflow.approvers")
        for name in ("sections", "required_fields", "metadata", "tags"):
            if getattr(self, name) is None:
                missing.append(name)
        for section in self.sections or []:
            if section.placeholders is None:
                missing.append(f"section '{section.name}' placeholders")
        return missing

    def clone(self) -> DocumentTemplate:
        """
        Return a deep copy built field by field.

        Never use model_copy() here: a member-wise copy would leave the
        sections, style, workflow and collections shared with the source.
        """
        missing = self.missing_parts()
        if missing:
            raise InvalidTemplateStateError(missing)

        copy = DocumentTemplate(
            title=self.title,
            category=self.category,
            sections=[section.clone() for section in self.sections],
            style=self.style.clone(),
            required_fields=list(self.required_fields),
            metadata=dict(self.metadata),
            workflow=self.workflow.clone(),
            tags=list(self.tags),
        )
        logger.debug("  Cloned template '%s' (%d sections)", self.title, len(self.sections))
        return copy
