"""
services/salary_service.py
--------------------------
Business logic for percentage-based salary adjustments.

Workflow:
    1. Lock and read the employee's current salary.
    2. Apply the percentage change at two-decimal precision.
    3. Refuse negative results.
    4. Write the new salary and confirm exactly one row changed.
"""

from decimal import Decimal
from typing import Optional

from db.store import PostgresStore, get_store
from models.money import ZERO, to_decimal, to_money
from models.outcome import OperationOutcome
from repositories.employee_repo import EmployeeRepository
from utils.logger import get_logger

logger = get_logger(__name__)

_HUNDRED = Decimal("100")


class _UpdateNotApplied(Exception):
    """Raised inside the transaction to roll back a write that did not hit exactly one row."""

    def __init__(self, affected: int):
        super().__init__(f"{affected} rows affected")
        self.affected = affected


def adjusted_salary(current_salary: Decimal, percentage_increase: Decimal) -> Decimal:
    """``current * (1 + pct/100)`` rounded to cents."""
    return to_money(current_salary * (1 + percentage_increase / _HUNDRED))


class SalaryAdjuster:
    """
    Applies a percentage raise (or cut) to one employee's salary.

    Every call returns an OperationOutcome. Only store failures raise.
    """

    def __init__(self, store: Optional[PostgresStore] = None):
        self.store = store if store is not None else get_store()

    def apply(self, employee_id: int, percentage_increase) -> OperationOutcome:
        """
        Adjust a salary by ``percentage_increase`` percent.

        Args:
            employee_id: Target employee; an unknown ID is a normal outcome.
            percentage_increase: e.g. ``10`` for +10%, ``-150`` for a 150% cut.

        Returns:
            OperationOutcome with kind NOT_FOUND, WOULD_BE_NEGATIVE,
            SUCCESS (carrying the new salary) or UNKNOWN_FAILURE.

        Raises:
            ValueError: If the percentage is not a number.
        """
        pct = to_decimal(percentage_increase)

        # Read and write share one transaction so the row cannot change in between.
        try:
            with self.store.transaction() as tx:
                repo = EmployeeRepository(tx)

                current = repo.get_salary(employee_id, for_update=True)
                if current is None:
                    logger.warning(f"Salary adjustment for unknown employee {employee_id}")
                    return OperationOutcome.not_found(employee_id)

                new_salary = adjusted_salary(current, pct)
                if new_salary < ZERO:
                    logger.warning(
                        f"Rejected {pct}% adjustment for employee {employee_id}: "
                        f"{current} -> {new_salary} would be negative"
                    )
                    return OperationOutcome.would_be_negative()

                affected = repo.update_salary(employee_id, new_salary)
                if affected != 1:
                    raise _UpdateNotApplied(affected)
        except _UpdateNotApplied as e:
            logger.warning(
                f"Salary update for employee {employee_id} affected {e.affected} rows; rolled back"
            )
            return OperationOutcome.unknown_failure()

        logger.info(f"Employee {employee_id} salary {current} -> {new_salary} ({pct:+}%)")
        return OperationOutcome.success(employee_id, new_salary)
