"""
Employee API - Custom Exception Hierarchy
==========================================

What:  Application exceptions for the non-success outcomes of an employee operation.
How:   Routes raise these after inspecting the Outcome returned by
       EmployeeService. Global handlers registered in main.py turn each one
       into the shared JSON error envelope with the matching status code.
Who:   Raised by route handlers; caught by the global handlers.

Exception Hierarchy:
    EmployeeApiError (base)
    ├── OperationFailedError  → 400 Bad Request (statement affected no rows)
    ├── NotFoundError         → 404 Not Found
    ├── ConflictError         → 409 Conflict (duplicate employeeId)
    └── DatabaseError         → 500 Internal Server Error

Request body validation is not part of this hierarchy; FastAPI raises
RequestValidationError and main.py renders it as a 400.
"""

from typing import Any, Dict, Optional


class EmployeeApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (returned in the response)
        context:  Additional debug info (logged, not returned)
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class OperationFailedError(EmployeeApiError):
    """
    Raised when a write statement ran without error but affected no rows.

    HTTP:    400 Bad Request
    When:    INSERT reports zero affected rows.
    """

    status_code = 400
    error_code = "operation_failed"

    def __init__(
        self,
        message: str = "Employee insertion failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(EmployeeApiError):
    """
    Raised when no row matches the requested employeeId.

    HTTP:    404 Not Found
    When:    GetEmployeeById finds nothing; UpdateEmployee/DeleteEmployee
             affect zero rows.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        message: str = "Employee not found",
        employee_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if employee_id is not None:
            ctx["employee_id"] = employee_id
        super().__init__(message=message, context=ctx)


class ConflictError(EmployeeApiError):
    """
    Raised when an insert collides with an existing employeeId.

    HTTP:    409 Conflict
    """

    status_code = 409
    error_code = "conflict"

    def __init__(
        self,
        message: str = "Employee ID already exists",
        employee_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if employee_id is not None:
            ctx["employee_id"] = employee_id
        super().__init__(message=message, context=ctx)


class DatabaseError(EmployeeApiError):
    """
    Raised when the database or driver failed while running a statement.

    HTTP:    500 Internal Server Error
    The response carries `detail`, the exception message string, and
    nothing else about the underlying exception.
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        detail: str = "",
        message: str = "Internal Server Error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.detail = detail
