# tests/test_errors.py
"""Tests for error types and CLI formatting."""

from smartinit.errors import (
    AttributeContractError,
    DeclarationError,
    MissingAttributeError,
    SmartInitError,
    UnknownAttributeError,
    UnsupportedOperationError,
    format_error_for_cli,
)


class Owner:
    pass


class TestMessages:
    def test_single_missing(self):
        err = MissingAttributeError(["a"], owner=Owner)
        assert str(err) == "Owner: missing required attribute 'a'"

    def test_several_unknown(self):
        err = UnknownAttributeError(["x", "y"], owner=Owner)
        assert str(err) == "Owner: unknown attributes 'x', 'y'"
        assert err.missing == ()

    def test_unknown_with_missing(self):
        err = UnknownAttributeError(["x"], owner=Owner, missing=["a"])
        assert str(err) == "Owner: unknown attribute 'x' (also missing 'a')"

    def test_without_owner(self):
        assert "<contract>" in str(MissingAttributeError(["a"]))


class TestHierarchy:
    def test_contract_errors(self):
        assert issubclass(UnknownAttributeError, AttributeContractError)
        assert issubclass(MissingAttributeError, AttributeContractError)
        assert issubclass(AttributeContractError, SmartInitError)

    def test_type_error_category(self):
        for cls in (DeclarationError, UnsupportedOperationError, AttributeContractError):
            assert issubclass(cls, TypeError)


class TestFormatForCli:
    def test_own_errors_unchanged(self):
        err = MissingAttributeError(["a"], owner=Owner)
        assert format_error_for_cli(err) == str(err)

    def test_foreign_error_prefixed(self):
        assert format_error_for_cli(ValueError("bad\nsecond line")) == "ValueError: bad"

    def test_empty_message(self):
        assert format_error_for_cli(RuntimeError()) == "RuntimeError"
