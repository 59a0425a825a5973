"""Shared test configuration and fixtures for DocTemplates test suite."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add backend to Python path so imports work without an install
backend_dir = str(Path(__file__).parent.parent / "backend")
if backend_dir not in sys.path:
    sys.path.insert(0, backend_dir)

from doctemplates.models.template import ApprovalWorkflow, DocumentStyle, DocumentTemplate  # noqa: E402
from doctemplates.templates.factory import build_base_template  # noqa: E402


@pytest.fixture
def revised_at():
    return datetime(2024, 3, 15, 9, 30, 0)


@pytest.fixture
def base_template(revised_at):
    return build_base_template(revised_at=revised_at)


@pytest.fixture
def empty_template():
    return DocumentTemplate(
        title="Vazio",
        category="Rascunhos",
        style=DocumentStyle(),
        workflow=ApprovalWorkflow(),
    )
