"""
services/bonus_service.py
-------------------------
Read-only annual bonus calculation from a performance rating.
"""

from decimal import Decimal
from typing import Optional

from db.store import PostgresStore, get_store
from models.bonus import bonus_rate_for
from models.money import ZERO, to_money
from repositories.employee_repo import EmployeeRepository


class BonusCalculator:
    """Computes bonuses as salary x tier rate. Never writes, never fails on bad input."""

    def __init__(self, store: Optional[PostgresStore] = None):
        self.repo = EmployeeRepository(store if store is not None else get_store())

    def compute(self, employee_id: int, performance_rating: int) -> Decimal:
        """
        Bonus for one employee.

        Returns:
            ``salary * rate`` rounded to cents; 0.00 for an unknown employee
            or a rating outside the tier table.
        """
        salary = self.repo.get_salary(employee_id)
        if salary is None:
            return ZERO
        return self.compute_for_salary(salary, performance_rating)

    @staticmethod
    def compute_for_salary(salary: Decimal, performance_rating: int) -> Decimal:
        """Bonus for an already-loaded salary (used for bulk reports)."""
        return to_money(salary * bonus_rate_for(performance_rating))
