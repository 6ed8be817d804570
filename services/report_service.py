"""
services/report_service.py
---------------------------
Bulk bonus report and employee listing.
Reads all employees once and computes each bonus per row.
"""

from typing import Optional

from db.store import PostgresStore, get_store
from models.bonus import BonusLine
from models.money import ZERO, format_money
from repositories.employee_repo import EmployeeRepository
from services.bonus_service import BonusCalculator
from utils.logger import get_logger

logger = get_logger(__name__)


class BonusReportService:
    """Builds bonus reports across all employees."""

    def __init__(self, store: Optional[PostgresStore] = None):
        self.repo = EmployeeRepository(store if store is not None else get_store())

    def build_report(self, ratings: dict[int, int], default_rating: int = 0) -> list[BonusLine]:
        """
        Compute one bonus line per employee.

        Args:
            ratings: employee_id -> performance rating.
            default_rating: Rating used for employees missing from ``ratings``.

        Returns:
            BonusLine list ordered by employee ID. Employees without a salary
            are reported with 0.00.
        """
        lines = []
        for emp in self.repo.list_all():
            rating = ratings.get(emp.employee_id, default_rating)
            salary = emp.salary if emp.salary is not None else ZERO
            lines.append(BonusLine(
                employee_id=emp.employee_id,
                first_name=emp.first_name,
                last_name=emp.last_name,
                salary=salary,
                rating=rating,
                bonus=BonusCalculator.compute_for_salary(salary, rating),
                department_name=emp.department_name or "",
            ))
        logger.info(f"Built bonus report for {len(lines)} employees")
        return lines

    @staticmethod
    def format_report(lines: list[BonusLine]) -> str:
        """Render report lines as a fixed-width text table with a total."""
        if not lines:
            return "No employees found."

        rows = [f"{'ID':>3}  {'Name':<18} {'Salary':>10} {'R':>2} {'Bonus':>10}"]
        for line in lines:
            rows.append(
                f"{line.employee_id:>3}  {line.full_name[:18]:<18} "
                f"{format_money(line.salary):>10} {line.rating:>2} {format_money(line.bonus):>10}"
            )
        total = sum((line.bonus for line in lines), ZERO)
        rows.append(f"{'':>3}  {'Total':<18} {'':>10} {'':>2} {format_money(total):>10}")
        return "\n".join(rows)

    def list_employees(self) -> str:
        """One line per employee, for chat replies."""
        employees = self.repo.list_all()
        if not employees:
            return "No employees found."
        return "\n".join(str(emp) for emp in employees)
