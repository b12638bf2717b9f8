"""
Employee API - Employee Service (Data Access)
==============================================

What:  The five employee operations, each one parameterized SQL statement.
How:   Every call acquires a connection from the injected engine with
       `async with`, runs exactly one statement, and releases the connection
       on every exit path. The result is reported as an `Outcome` instead of
       an exception, so callers never see driver errors.
Who:   Constructed once in create_app() and injected into route handlers
       via `get_employee_service`.

Outcome mapping:
    ┌──────────────┬──────────────────────────────┬──────────────────────┐
    │ Operation    │ Statement                    │ Possible outcomes    │
    ├──────────────┼──────────────────────────────┼──────────────────────┤
    │ insert       │ INSERT                       │ SUCCESS, CONFLICT,   │
    │              │                              │ NOT_APPLIED, FAILURE │
    │ list_all     │ SELECT ... ORDER BY id       │ SUCCESS, FAILURE     │
    │ get_by_id    │ SELECT ... WHERE id = :id    │ SUCCESS, NOT_FOUND,  │
    │              │                              │ FAILURE              │
    │ update       │ UPDATE ... WHERE id = :id    │ SUCCESS, NOT_FOUND,  │
    │              │                              │ FAILURE              │
    │ delete       │ DELETE ... WHERE id = :id    │ SUCCESS, NOT_FOUND,  │
    │              │                              │ FAILURE              │
    └──────────────┴──────────────────────────────┴──────────────────────┘

Conflict detection:
    Request validation guarantees every NOT NULL and length constraint
    before the INSERT runs, so the only IntegrityError an insert can raise
    is the EmployeeId key. SQLAlchemy normalizes that to IntegrityError for
    every driver (asyncpg, aiosqlite, ...).
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from fastapi import Request
from sqlalchemy import delete, insert, select, text, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.models.employee import EmployeeDetails
from app.schemas.employee import EmployeeInput, EmployeeResponse

logger = logging.getLogger(__name__)

# Driver connection failures can surface as plain OSError (e.g. refused socket)
DATABASE_ERRORS = (SQLAlchemyError, OSError)


class OutcomeKind(str, enum.Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    NOT_APPLIED = "not_applied"
    FAILURE = "failure"


@dataclass(frozen=True)
class Outcome:
    """
    Tagged result of one employee operation.

    `value` carries the payload of a successful read; `detail` carries the
    error message of a FAILURE.
    """

    kind: OutcomeKind
    value: Any = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @classmethod
    def success(cls, value: Any = None) -> "Outcome":
        return cls(OutcomeKind.SUCCESS, value=value)

    @classmethod
    def not_found(cls) -> "Outcome":
        return cls(OutcomeKind.NOT_FOUND)

    @classmethod
    def conflict(cls) -> "Outcome":
        return cls(OutcomeKind.CONFLICT)

    @classmethod
    def not_applied(cls) -> "Outcome":
        return cls(OutcomeKind.NOT_APPLIED)

    @classmethod
    def failure(cls, detail: str) -> "Outcome":
        return cls(OutcomeKind.FAILURE, detail=detail)


def describe_error(exc: BaseException) -> str:
    """
    Message string for a database failure.

    For DBAPI errors this is the driver's own message, without the SQL text
    and bound parameters SQLAlchemy appends to str(exc).
    """
    original = getattr(exc, "orig", None)
    return str(original if original is not None else exc) or type(exc).__name__


# DML targets the Core table; reads select the mapped attributes
_TABLE = EmployeeDetails.__table__

# Projection shared by both reads, in EmployeeResponse field order
_COLUMNS = (
    EmployeeDetails.employee_id,
    EmployeeDetails.employee_name,
    EmployeeDetails.department,
    EmployeeDetails.age,
)


def _to_response(row) -> EmployeeResponse:
    employee_id, employee_name, department, age = row
    return EmployeeResponse(
        employee_id=employee_id,
        employee_name=employee_name,
        department=department,
        age=int(age),
    )


class EmployeeService:
    """
    Data access for the EmployeeDetails table.

    Stateless apart from the engine it is constructed with; safe to share
    across concurrent requests.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def insert(self, employee: EmployeeInput) -> Outcome:
        """
        INSERT one row.

        Returns:
            SUCCESS when a row was written, CONFLICT on a duplicate
            employeeId, NOT_APPLIED when the statement affected no rows,
            FAILURE(detail) on any other database error.
        """
        statement = insert(_TABLE).values({
            EmployeeDetails.employee_id: employee.employee_id,
            EmployeeDetails.employee_name: employee.employee_name,
            EmployeeDetails.department: employee.department,
            EmployeeDetails.age: employee.age,
        })
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(statement)
                affected = result.rowcount
        except IntegrityError as e:
            logger.warning(
                "Duplicate employee id %s: %s", employee.employee_id, describe_error(e)
            )
            return Outcome.conflict()
        except DATABASE_ERRORS as e:
            logger.error("Error inserting employee %s", employee.employee_id, exc_info=True)
            return Outcome.failure(describe_error(e))

        if affected < 1:
            logger.warning("Insert of employee %s affected no rows", employee.employee_id)
            return Outcome.not_applied()

        logger.info("Inserted Employee: %s - %s", employee.employee_id, employee.employee_name)
        return Outcome.success()

    async def list_all(self) -> Outcome:
        """SELECT every row ordered by EmployeeId; SUCCESS carries a (possibly empty) list."""
        statement = select(*_COLUMNS).order_by(EmployeeDetails.employee_id)
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(statement)
                employees: List[EmployeeResponse] = [_to_response(row) for row in result.all()]
        except DATABASE_ERRORS as e:
            logger.error("Error fetching employees", exc_info=True)
            return Outcome.failure(describe_error(e))

        logger.info("Fetched %d employees", len(employees))
        return Outcome.success(employees)

    async def get_by_id(self, employee_id: str) -> Outcome:
        """SELECT the row for employee_id. Only the first returned row is used."""
        statement = select(*_COLUMNS).where(EmployeeDetails.employee_id == employee_id)
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(statement)
                row = result.first()
        except DATABASE_ERRORS as e:
            logger.error("Error fetching employee by ID %s", employee_id, exc_info=True)
            return Outcome.failure(describe_error(e))

        if row is None:
            logger.info("Employee %s not found", employee_id)
            return Outcome.not_found()
        return Outcome.success(_to_response(row))

    async def update(self, employee_id: str, employee: EmployeeInput) -> Outcome:
        """
        UPDATE name, department and age of the row keyed by `employee_id`.

        The body's own employee_id is ignored; the key never changes.
        """
        statement = (
            update(_TABLE)
            .where(EmployeeDetails.employee_id == employee_id)
            .values({
                EmployeeDetails.employee_name: employee.employee_name,
                EmployeeDetails.department: employee.department,
                EmployeeDetails.age: employee.age,
            })
        )
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(statement)
                affected = result.rowcount
        except DATABASE_ERRORS as e:
            logger.error("Error updating employee %s", employee_id, exc_info=True)
            return Outcome.failure(describe_error(e))

        if affected < 1:
            logger.info("Update skipped: employee %s not found", employee_id)
            return Outcome.not_found()

        logger.info("Updated Employee: %s", employee_id)
        return Outcome.success()

    async def delete(self, employee_id: str) -> Outcome:
        """DELETE the row keyed by `employee_id`."""
        statement = delete(_TABLE).where(EmployeeDetails.employee_id == employee_id)
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(statement)
                affected = result.rowcount
        except DATABASE_ERRORS as e:
            logger.error("Error deleting employee %s", employee_id, exc_info=True)
            return Outcome.failure(describe_error(e))

        if affected < 1:
            logger.info("Delete skipped: employee %s not found", employee_id)
            return Outcome.not_found()

        logger.info("Deleted Employee: %s", employee_id)
        return Outcome.success()

    async def ping(self) -> bool:
        """Runs SELECT 1 on a fresh connection; used by the health check."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except DATABASE_ERRORS as e:
            logger.warning("Health check: database unreachable: %s", describe_error(e))
            return False
        return True


# ── Dependency ────────────────────────────────────────────────────────────
def get_employee_service(request: Request) -> EmployeeService:
    """
    FastAPI dependency returning the service built by create_app().

    Tests replace it through `app.dependency_overrides`.
    """
    return request.app.state.employee_service
