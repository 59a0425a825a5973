"""
DocTemplates: Template registry.

Holds one prototype per template id. Callers never receive the stored
prototype itself, only clones of it, so edits cannot leak back into the
catalog.
"""

from __future__ import annotations

from doctemplates.errors import TemplateNotFoundError
from doctemplates.models.template import DocumentTemplate
from doctemplates.templates.factory import build_base_template
from doctemplates.templates.variants import create_consulting_contract


class TemplateRegistry:
    def __init__(self) -> None:
        self._prototypes: dict[str, DocumentTemplate] = {}

    def register(self, template_id: str, template: DocumentTemplate) -> None:
        self._prototypes[template_id] = template.clone()

    def get(self, template_id: str) -> DocumentTemplate:
        prototype = self._prototypes.get(template_id)
        if prototype is None:
            raise TemplateNotFoundError(template_id)
        return prototype.clone()

    def ids(self) -> list[str]:
        return list(self._prototypes)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._prototypes

    def __len__(self) -> int:
        return len(self._prototypes)


def build_default_registry() -> TemplateRegistry:
    """Ship the service contract and its consulting variant out of the box."""
    registry = TemplateRegistry()
    base = build_base_template()
    registry.register("service-contract", base)
    registry.register("consulting-contract", create_consulting_contract(base))
    return registry
