"""
repositories/employee_repo.py
-----------------------------
Data access layer for employee records.
All SQL queries related to the `employees` table live here.
"""

from decimal import Decimal
from typing import Optional

from db.store import PostgresStore, get_store
from models.employee import Employee
from models.money import to_money
from utils.logger import get_logger

logger = get_logger(__name__)


class EmployeeRepository:
    """Repository for reads and salary writes on the employees table."""

    SELECT_SALARY_SQL = "SELECT salary FROM employees WHERE employee_id = %s;"
    SELECT_SALARY_FOR_UPDATE_SQL = "SELECT salary FROM employees WHERE employee_id = %s FOR UPDATE;"
    UPDATE_SALARY_SQL = "UPDATE employees SET salary = %s WHERE employee_id = %s;"

    _EMPLOYEE_COLUMNS = """
        e.employee_id, e.first_name, e.last_name, e.salary, e.department_id,
        e.email, e.phone_number, e.hire_date, e.job_id, d.department_name
    """
    SELECT_ALL_SQL = f"""
        SELECT {_EMPLOYEE_COLUMNS}
        FROM employees e
        LEFT JOIN departments d ON d.department_id = e.department_id
        ORDER BY e.employee_id;
    """

    def __init__(self, store: Optional[PostgresStore] = None):
        self.store = store if store is not None else get_store()

    # ── READ ──────────────────────────────────────────────

    def get_salary(self, employee_id: int, for_update: bool = False) -> Optional[Decimal]:
        """
        Fetch the current salary of one employee.

        Args:
            employee_id: Primary key.
            for_update: Lock the row until the surrounding transaction ends.

        Returns:
            The salary, or None if there is no such employee (or no salary set).
        """
        sql = self.SELECT_SALARY_FOR_UPDATE_SQL if for_update else self.SELECT_SALARY_SQL
        rows = self.store.query(sql, (employee_id,))
        if not rows or rows[0][0] is None:
            return None
        return to_money(rows[0][0])

    def list_all(self) -> list[Employee]:
        """Fetch every employee with its department name, ordered by ID."""
        return [self._row_to_employee(r) for r in self.store.query(self.SELECT_ALL_SQL)]

    # ── UPDATE ────────────────────────────────────────────

    def update_salary(self, employee_id: int, new_salary: Decimal) -> int:
        """
        Write a new salary for one employee.

        Returns:
            Number of rows the store reports as changed.
        """
        affected = self.store.execute(self.UPDATE_SALARY_SQL, (new_salary, employee_id))
        logger.debug(f"UPDATE salary for employee {employee_id}: {affected} row(s)")
        return affected

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_employee(row: tuple) -> Employee:
        """Convert a database row tuple to an Employee domain object."""
        return Employee(
            employee_id=row[0],
            first_name=row[1],
            last_name=row[2],
            salary=to_money(row[3]) if row[3] is not None else None,
            department_id=row[4],
            email=row[5],
            phone_number=row[6],
            hire_date=row[7],
            job_id=row[8],
            department_name=row[9],
        )
