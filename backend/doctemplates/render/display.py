"""
DocTemplates: Plain-text template display.

Read-only: renders a template for humans and never mutates it.
"""

from __future__ import annotations

from doctemplates.models.template import DocumentTemplate


def _join(items: list[str] | None) -> str:
    return ", ".join(items) if items else "-"


def render_template(template: DocumentTemplate) -> str:
    """Render the template as a short multi-line summary."""
    sections = template.sections or []
    lines = [
        f"=== {template.title} ===",
        f"Categoria: {template.category}",
        f"Seções: {len(sections)}",
    ]
    for index, section in enumerate(sections, start=1):
        marker = "" if section.is_editable else " (bloqueada)"
        lines.append(f"  {index}. {section.name}{marker}")

    lines.append(f"Campos obrigatórios: {_join(template.required_fields)}")

    workflow = template.workflow
    if workflow is None:
        lines.append("Aprovadores: -")
    else:
        lines.append(f"Aprovadores: {_join(workflow.approvers)}")
        lines.append(
            f"Aprovações necessárias: {workflow.required_approvals} "
            f"(prazo {workflow.timeout_days} dias)"
        )

    lines.append(f"Tags: {_join(template.tags)}")

    style = template.style
    if style is None:
        lines.append("Estilo: -")
    else:
        lines.append(f"Estilo: {style.font_family} {style.font_size}pt, cabeçalho {style.header_color}")

    for key, value in (template.metadata or {}).items():
        lines.append(f"  {key}: {value}")

    return "\n".join(lines)
