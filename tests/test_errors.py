"""Unit tests for the application error helpers."""

import pytest

from recommendations_backend.utils.errors import (
    AppError,
    conflict_error,
    error_type_to_status_code,
    is_app_error,
    not_found_error,
    unauthorized_error,
    wrong_schema_error,
)


class TestErrorConstructors:
    """Each helper builds an error of its own type."""

    def test_not_found_error(self):
        assert not_found_error() == AppError("not_found", "")

    def test_conflict_error_keeps_message(self):
        error = conflict_error("Error message")
        assert error.type == "conflict"
        assert error.message == "Error message"

    def test_unauthorized_error(self):
        assert unauthorized_error() == AppError("unauthorized", "")

    def test_wrong_schema_error(self):
        assert wrong_schema_error() == AppError("wrong_schema", "")

    def test_errors_are_raisable(self):
        with pytest.raises(AppError) as excinfo:
            raise not_found_error("missing")
        assert excinfo.value.status_code == 404
        assert str(excinfo.value) == "not_found: missing"


class TestIsAppError:
    def test_accepts_app_error_instances(self):
        assert is_app_error(conflict_error("taken"))

    def test_accepts_type_message_mappings(self):
        assert is_app_error({"type": "not_found", "message": "Not found"})

    def test_rejects_other_values(self):
        assert not is_app_error({"message": "Not found", "other": "Other property"})
        assert not is_app_error({"type": "teapot", "message": ""})
        assert not is_app_error(ValueError("boom"))


class TestStatusCodes:
    @pytest.mark.parametrize(
        ("error_type", "status"),
        [("conflict", 409), ("not_found", 404), ("unauthorized", 401), ("wrong_schema", 422)],
    )
    def test_known_types(self, error_type, status):
        assert error_type_to_status_code(error_type) == status

    def test_unknown_type_defaults_to_bad_request(self):
        assert error_type_to_status_code("something_else") == 400
