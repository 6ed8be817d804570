"""
handlers/common.py
-------------------
Argument parsing shared by the command handlers.
"""

from decimal import Decimal

from models.money import to_decimal


def parse_employee_id(token: str) -> int:
    """Parse an employee ID argument (``#3`` and ``3`` are both accepted)."""
    return int(token.strip().lstrip("#"))


def parse_percentage(token: str) -> Decimal:
    """Parse a percentage such as ``10``, ``+7.5`` or ``-150%``."""
    return to_decimal(token.strip().rstrip("%"))


def parse_ratings(args: list[str]) -> dict[int, int]:
    """
    Parse ``id:rating`` pairs, e.g. ``["1:4", "2:2"]`` -> ``{1: 4, 2: 2}``.

    Raises:
        ValueError: On any token that is not ``<int>:<int>``.
    """
    ratings: dict[int, int] = {}
    for token in args:
        emp, sep, rating = token.partition(":")
        if not sep:
            raise ValueError(f"Expected id:rating, got {token!r}")
        ratings[parse_employee_id(emp)] = int(rating.strip())
    return ratings
