"""
Employee API - EmployeeDetails SQLAlchemy Model
================================================

What:  ORM mapping for the `EmployeeDetails` table.
How:   Inherits from the shared DeclarativeBase. EmployeeService builds its
       INSERT/SELECT/UPDATE/DELETE statements from this mapping, so column
       values are always bound as parameters.
Who:   Used by EmployeeService and by `create_tables()`.

Table Design:
    - EmployeeId: caller-supplied key, VARCHAR(50), primary key (unique)
    - EmployeeName: VARCHAR(100), NOT NULL
    - Department: VARCHAR(50), nullable
    - Age: INT, NOT NULL (the 18-65 range is enforced by the request schema)

    Column names keep the PascalCase of the existing table; the Python
    attribute names are snake_case.
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class EmployeeDetails(Base):
    """
    One employee row.

    Lifecycle:
        1. Created by InsertEmployee
        2. Name/department/age replaced in place by UpdateEmployee
           (EmployeeId never changes)
        3. Removed by DeleteEmployee
    """

    __tablename__ = "EmployeeDetails"

    employee_id: Mapped[str] = mapped_column(
        "EmployeeId",
        String(50),
        primary_key=True,
        comment="Caller-supplied unique employee identifier",
    )

    employee_name: Mapped[str] = mapped_column(
        "EmployeeName",
        String(100),
        nullable=False,
    )

    department: Mapped[Optional[str]] = mapped_column(
        "Department",
        String(50),
        nullable=True,
        default=None,
    )

    age: Mapped[int] = mapped_column(
        "Age",
        Integer,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<EmployeeDetails(employee_id='{self.employee_id}', age={self.age})>"
