"""Tests for domain exceptions (error_code, message, details) and their HTTP mapping."""

from condo.core.exception_handlers import status_for
from condo.domain.exceptions import (
    AlreadyExistsException,
    CondoException,
    ForbiddenException,
    NotFoundException,
    UnauthorizedException,
    ValidationException,
)


def test_condo_exception_default_error_code() -> None:
    """Base CondoException uses class name as error_code when not provided."""
    exc = CondoException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "CondoException"
    assert exc.details == {}


def test_condo_exception_to_dict() -> None:
    exc = CondoException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="email")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "email"}
    assert ValidationException("Invalid").details == {}


def test_unauthorized_exception_keeps_reason() -> None:
    exc = UnauthorizedException("User is inactive")
    assert exc.message == "User is inactive"
    assert exc.error_code == "UNAUTHORIZED"


def test_forbidden_exception_default_message() -> None:
    exc = ForbiddenException()
    assert exc.message == "Forbidden"
    assert exc.error_code == "FORBIDDEN"


def test_already_exists_exception() -> None:
    exc = AlreadyExistsException("Email")
    assert exc.message == "Email already exists"
    assert exc.error_code == "ALREADY_EXISTS"
    assert exc.details == {"resource": "Email"}


def test_not_found_exception_with_and_without_id() -> None:
    exc = NotFoundException("Account", "abc")
    assert exc.message == "Account not found: abc"
    assert exc.details == {"resource_type": "Account", "resource_id": "abc"}
    bare = NotFoundException("Account")
    assert bare.message == "Account not found"
    assert "resource_id" not in bare.details


def test_status_mapping() -> None:
    assert status_for(AlreadyExistsException("Email")) == 409
    assert status_for(UnauthorizedException()) == 401
    assert status_for(ForbiddenException()) == 403
    assert status_for(NotFoundException("Account")) == 404
    assert status_for(ValidationException("bad")) == 400
    assert status_for(CondoException("other")) == 400
