"""
Employee API - Employee Route Handlers
=======================================

What:  The HTTP surface of the Employee resource (mounted under API_PREFIX).
How:   Each handler calls one EmployeeService method and turns a non-success
       Outcome into the matching application exception; the global handlers
       in main.py render those as JSON error envelopes.
Who:   Called by API clients.

Route Inventory (relative to API_PREFIX, default /api/Employee):
    GET    /GetConnectionString
    POST   /InsertEmployee
    GET    /GetAllEmployees
    GET    /GetEmployeeById/{employeeId}
    PUT    /UpdateEmployee/{employeeId}
    DELETE /DeleteEmployee/{employeeId}
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from app.config import settings
from app.exceptions import (
    ConflictError,
    DatabaseError,
    NotFoundError,
    OperationFailedError,
)
from app.schemas.employee import (
    ConnectionStringResponse,
    EmployeeInput,
    EmployeeResponse,
    ErrorResponse,
    MessageResponse,
)
from app.services.employee_service import (
    EmployeeService,
    Outcome,
    OutcomeKind,
    get_employee_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.api_prefix, tags=["Employee"])

_VALIDATION = {400: {"description": "Validation failed", "model": ErrorResponse}}
_NOT_FOUND = {404: {"description": "Employee not found", "model": ErrorResponse}}
_SERVER_ERROR = {500: {"description": "Database error", "model": ErrorResponse}}


def _raise_for(
    outcome: Outcome,
    employee_id: Optional[str] = None,
    not_found_message: str = "Employee not found",
) -> None:
    """Raise the application exception matching a non-success outcome."""
    if outcome.kind is OutcomeKind.SUCCESS:
        return
    if outcome.kind is OutcomeKind.NOT_FOUND:
        raise NotFoundError(message=not_found_message, employee_id=employee_id)
    if outcome.kind is OutcomeKind.CONFLICT:
        raise ConflictError(employee_id=employee_id)
    if outcome.kind is OutcomeKind.NOT_APPLIED:
        raise OperationFailedError(context={"employee_id": employee_id})
    raise DatabaseError(detail=outcome.detail or "", context={"employee_id": employee_id})


@router.get(
    "/GetConnectionString",
    response_model=ConnectionStringResponse,
    summary="Show the configured database connection string",
)
async def get_connection_string() -> ConnectionStringResponse:
    logger.info("Fetching connection string...")
    return ConnectionStringResponse(connection_string=settings.database_url)


@router.post(
    "/InsertEmployee",
    response_model=MessageResponse,
    responses={
        **_VALIDATION,
        409: {"description": "Employee ID already exists", "model": ErrorResponse},
        **_SERVER_ERROR,
    },
    summary="Insert a new employee",
)
async def insert_employee(
    employee: EmployeeInput,
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    """
    Insert one employee row.

    A duplicate employeeId yields 409; a statement that writes nothing
    yields 400 "Employee insertion failed".
    """
    outcome = await service.insert(employee)
    _raise_for(outcome, employee_id=employee.employee_id)
    return MessageResponse(message="Employee inserted successfully")


@router.get(
    "/GetAllEmployees",
    response_model=List[EmployeeResponse],
    responses={**_SERVER_ERROR},
    summary="List all employees",
    description="Returns every employee ordered by employeeId. An empty table returns [].",
)
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeResponse]:
    outcome = await service.list_all()
    _raise_for(outcome)
    return outcome.value


@router.get(
    "/GetEmployeeById/{employee_id}",
    response_model=EmployeeResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get a single employee by ID",
)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    outcome = await service.get_by_id(employee_id)
    _raise_for(outcome, employee_id=employee_id)
    return outcome.value


@router.put(
    "/UpdateEmployee/{employee_id}",
    response_model=MessageResponse,
    responses={**_VALIDATION, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Update an employee's name, department and age",
)
async def update_employee(
    employee_id: str,
    employee: EmployeeInput,
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    """
    Replace name, department and age of the employee at the path ID.

    The body is validated like InsertEmployee, but its employeeId is never
    used to locate the row.
    """
    outcome = await service.update(employee_id, employee)
    _raise_for(outcome, employee_id=employee_id)
    return MessageResponse(message="Employee updated successfully")


@router.delete(
    "/DeleteEmployee/{employee_id}",
    response_model=MessageResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete an employee",
)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    outcome = await service.delete(employee_id)
    _raise_for(outcome, employee_id=employee_id, not_found_message="Employee ID not found")
    return MessageResponse(message="Employee deleted successfully")
