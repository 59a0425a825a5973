"""
DocTemplates: Base template factory.

Builds the canonical service contract from scratch. Everything else in
the catalog is derived from it by cloning.
"""

from __future__ import annotations

from datetime import datetime

from doctemplates.core.config import settings
from doctemplates.models.template import (
    ApprovalWorkflow,
    DocumentStyle,
    DocumentTemplate,
    Margins,
    Section,
)
from doctemplates.utils.logging import logger

SERVICE_CONTRACT_SECTIONS = [
    ("Cláusula 1 - Objeto", "O presente contrato tem por objeto..."),
    ("Cláusula 2 - Prazo", "O prazo de vigência será de..."),
    ("Cláusula 3 - Valor", "O valor total do contrato é de..."),
]


def build_base_template(revised_at: datetime | None = None) -> DocumentTemplate:
    """
    Build the service contract template with its full configuration.

    revised_at is stamped into the UltimaRevisao metadata entry and
    defaults to the current time.
    """
    revised_at = revised_at or datetime.now()
    logger.info("  Building service contract template from scratch")

    template = DocumentTemplate(
        title="Contrato de Prestação de Serviços",
        category="Contratos",
        style=DocumentStyle(
            font_family="Arial",
            font_size=12,
            header_color="#003366",
            logo_url=settings.logo_url,
            page_margins=Margins(top=2, bottom=2, left=3, right=3),
        ),
        workflow=ApprovalWorkflow(
            approvers=["gerente@empresa.com", "juridico@empresa.com"],
            required_approvals=2,
            timeout_days=5,
        ),
    )

    for name, content in SERVICE_CONTRACT_SECTIONS:
        template.sections.append(Section(name=name, content=content, is_editable=True))

    template.required_fields.extend(["NomeCliente", "CPF", "Endereco"])
    template.tags.extend(["contrato", "servicos"])

    template.metadata["Versao"] = "1.0"
    template.metadata["Departamento"] = "Comercial"
    template.metadata["UltimaRevisao"] = revised_at.strftime(settings.timestamp_format)

    return template
