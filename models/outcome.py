"""
models/outcome.py
-----------------
Result type for salary adjustments.

Expected business conditions (unknown employee, negative result, a write that
did not land) are returned as outcome values rather than raised, so callers
can branch on ``outcome.kind``.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from models.money import format_money


class OutcomeKind(str, Enum):
    NOT_FOUND = "not_found"
    WOULD_BE_NEGATIVE = "would_be_negative"
    SUCCESS = "success"
    UNKNOWN_FAILURE = "unknown_failure"


@dataclass(frozen=True)
class OperationOutcome:
    """
    Attributes:
        kind: Which case this is.
        message: Human-readable text, shown to users verbatim.
        new_salary: The persisted salary; only set on SUCCESS.
    """
    kind: OutcomeKind
    message: str
    new_salary: Optional[Decimal] = None

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @classmethod
    def not_found(cls, employee_id: int) -> "OperationOutcome":
        return cls(OutcomeKind.NOT_FOUND, f"Error: Employee with ID {employee_id} not found.")

    @classmethod
    def would_be_negative(cls) -> "OperationOutcome":
        return cls(
            OutcomeKind.WOULD_BE_NEGATIVE,
            "Error: Calculated new salary would be negative. Update aborted.",
        )

    @classmethod
    def success(cls, employee_id: int, new_salary: Decimal) -> "OperationOutcome":
        return cls(
            OutcomeKind.SUCCESS,
            f"Success: Salary for Employee ID {employee_id} updated to {format_money(new_salary)}.",
            new_salary,
        )

    @classmethod
    def unknown_failure(cls) -> "OperationOutcome":
        return cls(OutcomeKind.UNKNOWN_FAILURE, "Error: Salary update failed for an unknown reason.")

    def __str__(self) -> str:
        return self.message
