"""
Employee API - Exception Hierarchy Tests
=========================================

What:  Status codes, error codes and logged context of app.exceptions.
"""

import pytest

from app.exceptions import (
    ConflictError,
    DatabaseError,
    EmployeeApiError,
    NotFoundError,
    OperationFailedError,
)


class TestExceptionHierarchy:

    @pytest.mark.parametrize(
        "exc, status, code",
        [
            (OperationFailedError(), 400, "operation_failed"),
            (NotFoundError(), 404, "not_found"),
            (ConflictError(), 409, "conflict"),
            (DatabaseError("boom"), 500, "server_error"),
        ],
    )
    def test_status_and_error_code(self, exc, status, code):
        assert isinstance(exc, EmployeeApiError)
        assert exc.status_code == status
        assert exc.error_code == code

    @pytest.mark.parametrize("cls", [NotFoundError, ConflictError])
    def test_employee_id_goes_into_context(self, cls):
        exc = cls(employee_id="E1", context={"operation": "lookup"})

        assert exc.context == {"operation": "lookup", "employee_id": "E1"}
        assert not hasattr(exc, "employee_id")

    def test_default_messages(self):
        assert NotFoundError().message == "Employee not found"
        assert ConflictError().message == "Employee ID already exists"
        assert OperationFailedError().message == "Employee insertion failed"
        assert DatabaseError("x").message == "Internal Server Error"
