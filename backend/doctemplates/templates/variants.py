"""
DocTemplates: Variant derivation.

A variant is a clone of a base template plus a few targeted edits.
Edits touch the clone only. Index-based edits that point outside the
collection are skipped instead of raising.
"""

from __future__ import annotations

from pydantic import BaseModel

from doctemplates.models.template import DocumentTemplate
from doctemplates.utils.logging import logger


class VariantEdits(BaseModel):
    title: str | None = None
    remove_section_at: int | None = None
    replace_tag_at: int | None = None
    replacement_tag: str | None = None


def _in_range(index: int, size: int) -> bool:
    return 0 <= index < size


def derive_variant(base: DocumentTemplate, edits: VariantEdits) -> DocumentTemplate:
    """Clone base and apply edits to the clone."""
    variant = base.clone()

    if edits.title is not None:
        variant.title = edits.title

    if edits.remove_section_at is not None:
        if _in_range(edits.remove_section_at, len(variant.sections)):
            removed = variant.sections.pop(edits.remove_section_at)
            logger.debug("  Removed section '%s'", removed.name)
        else:
            logger.debug(
                "  Section index %d out of range (%d sections), skipped",
                edits.remove_section_at, len(variant.sections),
            )

    if edits.replace_tag_at is not None and edits.replacement_tag is not None:
        if _in_range(edits.replace_tag_at, len(variant.tags)):
            variant.tags[edits.replace_tag_at] = edits.replacement_tag
        else:
            logger.debug(
                "  Tag index %d out of range (%d tags), skipped",
                edits.replace_tag_at, len(variant.tags),
            )

    logger.info("  Derived variant '%s' from '%s'", variant.title, base.title)
    return variant


def create_consulting_contract(base: DocumentTemplate) -> DocumentTemplate:
    """Consulting contract: no payment clause, tagged as consultoria."""
    return derive_variant(
        base,
        VariantEdits(
            title="Contrato de Consultoria",
            remove_section_at=2,
            replace_tag_at=1,
            replacement_tag="consultoria",
        ),
    )


def clone_many(
    base: DocumentTemplate,
    count: int,
    title_format: str = "Contrato #{n} - Cliente {n}",
) -> list[DocumentTemplate]:
    """
    Produce count independent clones of base, each retitled with
    title_format (n starts at 1).
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    clones: list[DocumentTemplate] = []
    for n in range(1, count + 1):
        clone = base.clone()
        clone.title = title_format.format(n=n)
        clones.append(clone)
    return clones
