"""Tests for error envelopes and kind-to-status mapping."""

import json

import pytest

from starter_api.api.responses import (STATUS_BY_KIND, error_response, format_validation_errors,
                                       unexpected_error, )
from starter_api.core.exceptions import ConflictError, ErrorKind, NotFoundError, ValidationError


class TestStatusMapping:
    @pytest.mark.parametrize("error,status_code", [
        (ValidationError("bad"), 400),
        (NotFoundError("User not found"), 404),
        (ConflictError("taken"), 409),
    ])
    def test_each_kind_has_a_status(self, error, status_code):
        assert STATUS_BY_KIND[error.kind] == status_code

    def test_every_kind_mapped(self):
        assert set(STATUS_BY_KIND) == set(ErrorKind)


class TestEnvelopes:
    def test_error_response(self):
        response = error_response(409, "Conflict", "taken")
        assert response.status_code == 409
        assert json.loads(response.body) == {"error": "Conflict", "message": "taken"}

    def test_unexpected_error_exposes_message(self):
        response = unexpected_error("Failed to fetch users", RuntimeError("Database error"))
        assert json.loads(response.body)["message"] == "Database error"

    def test_unexpected_error_without_message(self):
        response = unexpected_error("Failed to fetch users", RuntimeError())
        assert json.loads(response.body)["message"] == "Unknown error"

    def test_unexpected_error_hidden(self):
        response = unexpected_error("Failed to create user", RuntimeError("secret host"), expose=False)
        assert json.loads(response.body)["message"] == "An unexpected error occurred"


class TestFormatValidationErrors:
    def test_strips_location_prefix(self):
        errors = [{"loc": ("query", "page"), "msg": "Input should be a valid integer"}]
        assert format_validation_errors(errors) == "page: Input should be a valid integer"

    def test_joins_multiple(self):
        errors = [
            {"loc": ("body", "role"), "msg": "bad role"},
            {"loc": ("body",), "msg": "Field required"},
        ]
        assert format_validation_errors(errors) == "role: bad role; Field required"
