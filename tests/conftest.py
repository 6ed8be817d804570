from contextlib import contextmanager
from copy import deepcopy
from decimal import Decimal

import pytest

from db.init_db import SAMPLE_DEPARTMENTS, SAMPLE_EMPLOYEES
from repositories.employee_repo import EmployeeRepository as Repo


class FakeStore:
    """In-memory stand-in for PostgresStore that understands the repository's statements."""

    def __init__(self, employees=None, departments=None):
        # employee_id -> [first, last, salary, dept_id, email, phone, hire_date, job_id]
        self.employees = deepcopy(employees or {})
        self.departments = dict(departments or {})
        self.executed = []
        self.commits = 0
        self.rollbacks = 0
        self.forced_rowcount = None
        self.fail_on_execute = None

    # ── store contract ────────────────────────────────────

    def query(self, statement, params=()):
        if statement in (Repo.SELECT_SALARY_SQL, Repo.SELECT_SALARY_FOR_UPDATE_SQL):
            emp = self.employees.get(params[0])
            return [(emp[2],)] if emp else []
        if statement == Repo.SELECT_ALL_SQL:
            return [self._row(eid, emp) for eid, emp in sorted(self.employees.items())]
        raise AssertionError(f"unexpected query: {statement}")

    def execute(self, statement, params=()):
        assert statement == Repo.UPDATE_SALARY_SQL, f"unexpected statement: {statement}"
        self.executed.append(params)
        if self.fail_on_execute is not None:
            raise self.fail_on_execute
        new_salary, employee_id = params
        emp = self.employees.get(employee_id)
        if emp is not None:
            emp[2] = new_salary
        if self.forced_rowcount is not None:
            return self.forced_rowcount
        return 1 if emp is not None else 0

    @contextmanager
    def transaction(self):
        snapshot = deepcopy(self.employees)
        try:
            yield self
        except Exception:
            self.employees = snapshot
            self.rollbacks += 1
            raise
        self.commits += 1

    # ── helpers ───────────────────────────────────────────

    def salary_of(self, employee_id):
        return self.employees[employee_id][2]

    def _row(self, employee_id, emp):
        first, last, salary, dept_id, email, phone, hire_date, job_id = emp
        return (
            employee_id, first, last, salary, dept_id,
            email, phone, hire_date, job_id, self.departments.get(dept_id),
        )


def sample_employees():
    return {
        row[0]: [row[1], row[2], Decimal(row[7]), row[8], row[3], row[4], row[5], row[6]]
        for row in SAMPLE_EMPLOYEES
    }


@pytest.fixture
def store():
    return FakeStore(sample_employees(), dict(SAMPLE_DEPARTMENTS))


@pytest.fixture
def empty_store():
    return FakeStore()
