"""Tests for runspine.core.errors module."""

import pytest

from runspine.core.errors import (
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    InvalidParameterError,
    MalformedArgumentListError,
    RunSpineError,
    UnknownEnumValueError,
    UnsupportedApiVersionError,
    categorize_error,
)


class TestErrorContext:
    """Test ErrorContext dataclass."""

    def test_empty_context(self):
        ctx = ErrorContext()
        assert ctx.field is None
        assert ctx.metadata == {}
        assert ctx.to_dict() == {}

    def test_default_metadata_is_per_instance(self):
        first, second = ErrorContext(), ErrorContext()
        first.metadata["source"] = "pom.xml"
        assert second.metadata == {}

    def test_package_imports(self):
        import runspine

        assert runspine.__version__
        assert runspine.RunSpecBuilder().build().ports == ()

    def test_to_dict_includes_set_fields(self):
        ctx = ErrorContext(field="cmd", value="", metadata={"source": "pom.xml"})
        assert ctx.to_dict() == {"field": "cmd", "value": "", "source": "pom.xml"}


class TestRunSpineError:
    """Test the base error."""

    def test_defaults(self):
        error = RunSpineError("boom")
        assert error.message == "boom"
        assert str(error) == "boom"
        assert error.category is ErrorCategory.INTERNAL
        assert error.retryable is False

    def test_with_context_is_fluent(self):
        error = RunSpineError("boom")
        assert error.with_context(field="net", source="run.toml") is error
        assert error.context.field == "net"
        assert error.context.metadata == {"source": "run.toml"}

    def test_cause_is_chained(self):
        cause = ValueError("inner")
        error = RunSpineError("outer", cause=cause)
        assert error.__cause__ is cause
        assert error.to_dict()["cause"] == "inner"

    def test_to_dict(self):
        error = ConfigurationError("bad", field="cmd")
        assert error.to_dict() == {
            "error_type": "ConfigurationError",
            "message": "bad",
            "category": "CONFIG",
            "retryable": False,
            "context": {"field": "cmd"},
        }

    def test_repr(self):
        assert repr(ConfigurationError("bad")) == "ConfigurationError('bad', category=CONFIG)"


class TestConfigurationErrors:
    """Test the configuration error family."""

    @pytest.mark.parametrize(
        "error_type",
        [MalformedArgumentListError, InvalidParameterError],
    )
    def test_subclasses_are_configuration_errors(self, error_type):
        error = error_type("bad")
        assert isinstance(error, ConfigurationError)
        assert error.retryable is False

    def test_invalid_parameter_is_validation_category(self):
        assert InvalidParameterError("bad").category is ErrorCategory.VALIDATION

    def test_unknown_enum_value(self):
        error = UnknownEnumValueError("naming_strategy", "bogus", ["none", "alias"])
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, ValueError)
        assert error.context.field == "naming_strategy"
        assert error.context.value == "bogus"
        assert "none, alias" in error.message

    def test_unsupported_api_version(self):
        error = UnsupportedApiVersionError("1.21", "1.20")
        assert "1.21" in error.message
        assert "1.20" in error.message
        assert error.category is ErrorCategory.CONFIG


class TestCategorizeError:
    def test_run_spine_error(self):
        assert categorize_error(MalformedArgumentListError("x")) is ErrorCategory.CONFIG

    def test_value_error(self):
        assert categorize_error(ValueError("x")) is ErrorCategory.VALIDATION

    def test_other(self):
        assert categorize_error(RuntimeError("x")) is ErrorCategory.UNKNOWN
