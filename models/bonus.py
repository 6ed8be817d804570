"""
models/bonus.py
---------------
Performance-rating bonus tiers and the bonus report line model.
"""

from dataclasses import dataclass
from decimal import Decimal

from models.money import ZERO

# Rating -> bonus rate. Exact match only; anything else earns nothing.
BONUS_TIERS: dict[int, Decimal] = {
    4: Decimal("0.15"),  # excellent
    3: Decimal("0.10"),  # good
    2: Decimal("0.05"),  # average
}


def bonus_rate_for(rating: int) -> Decimal:
    """Return the bonus rate for a performance rating (0.00 for unknown ratings)."""
    return BONUS_TIERS.get(rating, ZERO)


@dataclass
class BonusLine:
    """One row of the bulk bonus report."""
    employee_id: int
    first_name: str
    last_name: str
    salary: Decimal
    rating: int
    bonus: Decimal
    department_name: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
