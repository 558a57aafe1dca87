"""Unit tests for API errors and integrity error classification."""

import pytest
from sqlalchemy.exc import IntegrityError

from tourism_api.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InternalServerError,
    NotFoundError,
    ValidationError,
    integrity_error_kind,
)


class FakeDriverError(Exception):
    def __init__(self, message: str, sqlstate: str | None = None):
        super().__init__(message)
        self.sqlstate = sqlstate


def integrity_error(message: str, sqlstate: str | None = None) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, FakeDriverError(message, sqlstate))


@pytest.mark.parametrize("error, expected", [
    (integrity_error("duplicate", sqlstate="23505"), "unique"),
    (integrity_error("fk", sqlstate="23503"), "foreign_key"),
    (integrity_error("UNIQUE constraint failed: users.email"), "unique"),
    (integrity_error("FOREIGN KEY constraint failed"), "foreign_key"),
    (integrity_error("CHECK constraint failed: ck_tour_price_non_negative"), None),
])
def test_integrity_error_kind(error, expected):
    """Test classification by SQLSTATE with a message fallback."""
    assert integrity_error_kind(error) == expected


@pytest.mark.parametrize("error, status_code", [
    (ValidationError(), 400),
    (AuthenticationError(), 401),
    (AuthorizationError(), 403),
    (NotFoundError(), 404),
    (ConflictError(), 409),
    (InternalServerError(), 500),
])
def test_status_codes(error, status_code):
    """Test the HTTP status of each error class."""
    assert error.status_code == status_code


def test_authentication_error_asks_for_bearer():
    """Test that 401 responses carry a WWW-Authenticate challenge."""
    assert AuthenticationError().headers == {"WWW-Authenticate": "Bearer"}


def test_error_content_is_localized():
    """Test the rendered envelope of an error."""
    content = NotFoundError(resource_type="tour", message_key="tour.not_found").to_content("en")

    assert content == {"success": False, "message": "Tour not found"}


def test_validation_error_lists_fields():
    """Test that per-field errors are included when present."""
    errors = [{"field": "name", "message": "Field required"}]

    content = ValidationError(errors=errors).to_content("en")

    assert content["errors"] == errors


def test_internal_error_has_error_id():
    """Test that internal errors expose only an opaque error id."""
    error = InternalServerError(message_key="tour.create_error")
    content = error.to_content("en")

    assert content["errorId"] == error.error_id
    assert content["message"] == "Failed to create the tour"
