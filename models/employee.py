"""
models/employee.py
------------------
Domain model for employee records.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from models.money import format_money


@dataclass
class Employee:
    """
    Represents a single employee record.

    Attributes:
        employee_id: Database primary key.
        first_name: Given name.
        last_name: Family name.
        salary: Annual salary, two fractional digits (None if never set).
        department_id: Foreign key into departments.
        email: Optional unique e-mail address.
        phone_number: Optional phone number.
        hire_date: Date the employee joined.
        job_id: Job title / code.
        department_name: Joined from departments when the query includes it.
    """
    employee_id: int
    first_name: str
    last_name: str
    salary: Optional[Decimal] = None
    department_id: Optional[int] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    hire_date: Optional[date] = None
    job_id: Optional[str] = None
    department_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        salary = format_money(self.salary) if self.salary is not None else "n/a"
        dept = self.department_name or (str(self.department_id) if self.department_id else "-")
        return f"#{self.employee_id} {self.full_name} | {self.job_id or '-'} | {dept} | {salary}"
