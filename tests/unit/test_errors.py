"""Unit tests for the structured error catalog."""

from doctemplates.errors import (
    ConfigurationError,
    DocTemplateError,
    InvalidTemplateStateError,
    TemplateNotFoundError,
)


class TestErrorCatalog:
    def test_base_error(self):
        e = DocTemplateError(code="TEST", message="test msg", suggestion="try this")
        d = e.to_dict()
        assert d["error_code"] == "TEST"
        assert d["message"] == "test msg"
        assert d["suggestion"] == "try this"
        assert "detail" not in d

    def test_invalid_template_state(self):
        e = InvalidTemplateStateError(["style", "workflow"])
        assert e.code == "INVALID_TEMPLATE_STATE"
        assert "style" in e.message
        assert "workflow" in e.message
        assert e.to_dict()["detail"] == ["style", "workflow"]

    def test_template_not_found(self):
        e = TemplateNotFoundError("proposal")
        assert e.code == "TEMPLATE_NOT_FOUND"
        assert "proposal" in e.message

    def test_configuration_error(self):
        e = ConfigurationError(["DOCTEMPLATES_CLONE_COUNT must be at least 1"])
        assert e.code == "INVALID_CONFIGURATION"
        assert "CLONE_COUNT" in e.message

    def test_all_errors_are_exceptions(self):
        for cls in (InvalidTemplateStateError, TemplateNotFoundError, ConfigurationError):
            assert issubclass(cls, DocTemplateError)
            assert issubclass(cls, Exception)
