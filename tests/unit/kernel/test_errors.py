"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from wallclock.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidArgumentError,
    ValidationError,
    require,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        assert BaseError("m", detail={"k": 1}).to_dict() == {
            "type": "BaseError",
            "code": "base_error",
            "message": "m",
            "detail": {"k": 1},
        }

    def test_cause_is_chained(self) -> None:
        cause = KeyError("x")
        err = BaseError("m", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("m")))
        assert payload["code"] == "base_error"

    def test_repr(self) -> None:
        assert repr(DomainError("m")) == "DomainError(code='domain_error', message='m')"


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent"),
        [
            (DomainError, BaseError),
            (ValidationError, DomainError),
            (InvalidArgumentError, ValidationError),
            (ApplicationError, BaseError),
        ],
    )
    def test_subclasses(self, cls, parent) -> None:
        assert issubclass(cls, parent)

    def test_validation_errors_in_dict(self) -> None:
        err = ValidationError("bad", errors=[{"field": "x"}])
        assert err.to_dict()["errors"] == [{"field": "x"}]


class TestInvalidArgumentError:
    def test_default_message(self) -> None:
        err = InvalidArgumentError("listener")
        assert err.message == "'listener' cannot be None"
        assert err.code == "invalid_argument"
        assert err.argument == "listener"
        assert err.errors == [{"argument": "listener"}]

    def test_value_is_recorded(self) -> None:
        err = InvalidArgumentError("duration", "'duration' must be a timedelta", value=5)
        assert err.value == 5
        assert err.to_dict()["errors"] == [{"argument": "duration", "value": "5"}]


class TestRequire:
    def test_returns_value(self) -> None:
        assert require(0, "x") == 0

    def test_rejects_none(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            require(None, "new_date")
        assert exc_info.value.argument == "new_date"
