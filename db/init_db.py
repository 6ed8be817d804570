"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist,
and optionally loads the sample departments and employees.
Run this module directly to initialize a fresh database:
    python -m db.init_db [--seed]
"""

import sys

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Departments table: read-only reference data
CREATE TABLE IF NOT EXISTS departments (
    department_id   INT PRIMARY KEY,
    department_name VARCHAR(100) NOT NULL
);

-- Employees table: salary is only ever changed by the salary adjuster
CREATE TABLE IF NOT EXISTS employees (
    employee_id     INT PRIMARY KEY,
    first_name      VARCHAR(50) NOT NULL,
    last_name       VARCHAR(50) NOT NULL,
    email           VARCHAR(100) UNIQUE,
    phone_number    VARCHAR(20),
    hire_date       DATE,
    job_id          VARCHAR(50),
    salary          NUMERIC(10,2) CHECK (salary >= 0),
    department_id   INT REFERENCES departments(department_id)
);

CREATE INDEX IF NOT EXISTS idx_employees_department ON employees(department_id);
"""

SAMPLE_DEPARTMENTS = [
    (101, "Human Resources"),
    (102, "Engineering"),
    (103, "Sales"),
    (104, "Marketing"),
]

SAMPLE_EMPLOYEES = [
    (1, "Alice", "Smith", "alice.smith@example.com", "111-222-3333", "2020-01-15", "Software Engineer", "75000.00", 102),
    (2, "Bob", "Johnson", "bob.johnson@example.com", "444-555-6666", "2019-03-20", "HR Specialist", "60000.00", 101),
    (3, "Charlie", "Brown", "charlie.brown@example.com", "777-888-9999", "2021-06-01", "Sales Manager", "85000.00", 103),
    (4, "Diana", "Prince", "diana.prince@example.com", "123-456-7890", "2022-02-10", "Marketing Coordinator", "55000.00", 104),
    (5, "Eve", "Davis", "eve.davis@example.com", "987-654-3210", "2018-09-01", "Lead Engineer", "95000.00", 102),
    (6, "Frank", "White", "frank.white@example.com", "111-333-5555", "2023-01-05", "HR Assistant", "45000.00", 101),
]

_INSERT_DEPARTMENT_SQL = """
    INSERT INTO departments (department_id, department_name)
    VALUES (%s, %s)
    ON CONFLICT (department_id) DO NOTHING;
"""

_INSERT_EMPLOYEE_SQL = """
    INSERT INTO employees (employee_id, first_name, last_name, email, phone_number,
                           hire_date, job_id, salary, department_id)
    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
    ON CONFLICT (employee_id) DO NOTHING;
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


def seed_sample_data() -> None:
    """
    Insert the sample departments and employees.
    Existing rows are left untouched, so re-running never resets salaries.
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.executemany(_INSERT_DEPARTMENT_SQL, SAMPLE_DEPARTMENTS)
            cur.executemany(_INSERT_EMPLOYEE_SQL, SAMPLE_EMPLOYEES)
        conn.commit()
        logger.info(
            f"Seeded {len(SAMPLE_DEPARTMENTS)} departments and {len(SAMPLE_EMPLOYEES)} employees."
        )
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to seed sample data: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    create_tables()
    if "--seed" in sys.argv[1:]:
        seed_sample_data()
    close_pool()
    print("Database schema created successfully.")
