"""
Employee API - Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the API contract for the Employee resource.
How:   FastAPI validates request bodies against EmployeeInput, serializes
       responses through the response models, and generates OpenAPI docs.
       JSON field names are camelCase; snake_case names are accepted on input.
Who:   Used by route handlers, EmployeeService, and the validation error handler.

Validation messages:
    Pydantic reports errors by type (missing, string_too_long, ...).
    `collect_field_errors()` turns those into the per-field messages clients
    see, e.g. {"age": ["Age must be between 18 and 65"]}.
"""

from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


AGE_MIN = 18
AGE_MAX = 65
AGE_RANGE_MESSAGE = f"Age must be between {AGE_MIN} and {AGE_MAX}"

_CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeInput(BaseModel):
    """
    What:  Body of InsertEmployee and UpdateEmployee.
    Note:  On update the path employeeId is authoritative; the body's
           employeeId is still validated but never used as the lookup key.
    """
    employee_id: str = Field(
        min_length=1, max_length=50, description="Unique employee identifier"
    )
    employee_name: str = Field(
        min_length=1, max_length=100, description="Employee full name"
    )
    department: Optional[str] = Field(
        default=None, max_length=50, description="Department name (optional)"
    )
    age: int = Field(ge=AGE_MIN, le=AGE_MAX, description="Age in years (18-65)")

    model_config = {
        **_CAMEL_CONFIG,
        "json_schema_extra": {
            "example": {
                "employeeId": "E1001",
                "employeeName": "Ada Lovelace",
                "department": "Engineering",
                "age": 36,
            }
        },
    }

    @field_validator("employee_id", "employee_name")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        """Whitespace-only identifiers and names count as missing."""
        if not v.strip():
            raise PydanticCustomError("blank_string", "Value must not be blank")
        return v


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeResponse(BaseModel):
    """One EmployeeDetails row as returned by GetAllEmployees and GetEmployeeById."""
    employee_id: str = Field(description="Unique employee identifier")
    employee_name: str = Field(description="Employee full name")
    department: Optional[str] = Field(default=None, description="Department, null when unset")
    age: int = Field(description="Age in years")

    model_config = _CAMEL_CONFIG


class MessageResponse(BaseModel):
    """Confirmation returned by insert, update and delete."""
    message: str = Field(description="Human-readable result message")


class ConnectionStringResponse(BaseModel):
    """Returned by GetConnectionString."""
    connection_string: str = Field(description="Configured database connection URL")

    model_config = _CAMEL_CONFIG


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error envelope shared by every non-2xx response.

    Example (validation):
        {
            "error": "validation_error",
            "message": "One or more validation errors occurred.",
            "details": {"age": ["Age must be between 18 and 65"]},
            "request_id": "3f2a9c1e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


# ══════════════════════════════════════════════════════════════════════════
# Validation Message Translation
# ══════════════════════════════════════════════════════════════════════════

FIELD_MESSAGES: Dict[str, Dict[str, str]] = {
    "employeeId": {
        "required": "Employee ID is required",
        "too_long": "Employee ID cannot exceed 50 characters",
    },
    "employeeName": {
        "required": "Employee Name is required",
        "too_long": "Employee Name cannot exceed 100 characters",
    },
    "department": {
        "too_long": "Department cannot exceed 50 characters",
    },
    # A missing age fails the same range check as an out-of-range one
    "age": {
        "required": AGE_RANGE_MESSAGE,
        "range": AGE_RANGE_MESSAGE,
    },
}

_ERROR_KINDS = {
    "missing": "required",
    "string_too_short": "required",
    "blank_string": "required",
    "string_too_long": "too_long",
    "greater_than_equal": "range",
    "less_than_equal": "range",
}

_SNAKE_TO_ALIAS = {name: to_camel(name) for name in EmployeeInput.model_fields}


def _field_name(loc: Sequence[Any]) -> str:
    """Maps a pydantic error location to the camelCase field it refers to."""
    parts = list(loc)
    if parts and parts[0] == "body":
        parts = parts[1:]
    if not parts or not isinstance(parts[0], str):
        # Malformed JSON or a non-object body
        return "body"
    return _SNAKE_TO_ALIAS.get(parts[0], parts[0])


def collect_field_errors(errors: Sequence[Dict[str, Any]]) -> Dict[str, List[str]]:
    """
    Convert pydantic error dicts into {field: [messages]}.

    Known field/kind pairs get the messages from FIELD_MESSAGES; anything
    else keeps pydantic's own message. An explicit null for a typed field is
    reported like a missing one.
    """
    result: Dict[str, List[str]] = {}
    for err in errors:
        field = _field_name(err.get("loc", ()))
        err_type = err.get("type", "")
        kind = _ERROR_KINDS.get(err_type)
        if kind is None and err_type.endswith("_type") and err.get("input", "") is None:
            kind = "required"
        message = FIELD_MESSAGES.get(field, {}).get(kind or "", err.get("msg", "Invalid value"))
        messages = result.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return result
