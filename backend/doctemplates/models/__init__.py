"""DocTemplates data models: the template graph and its clone capability."""

from doctemplates.models.prototype import Prototype
from doctemplates.models.template import (
    ApprovalWorkflow,
    DocumentStyle,
    DocumentTemplate,
    Margins,
    Section,
)

__all__ = [
    "Prototype",
    "ApprovalWorkflow",
    "DocumentStyle",
    "DocumentTemplate",
    "Margins",
    "Section",
]
