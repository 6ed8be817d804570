from decimal import Decimal

from services.report_service import BonusReportService
from services.salary_service import SalaryAdjuster

# Ratings used in the yearly review example
REVIEW_RATINGS = {1: 4, 2: 2, 3: 3, 4: 1, 5: 4, 6: 3}


def _apply_review_raises(store):
    adjuster = SalaryAdjuster(store)
    adjuster.apply(1, "10.00")
    adjuster.apply(2, "5.00")
    adjuster.apply(999, "7.50")
    adjuster.apply(3, "-150.00")


def test_bulk_report_after_raises(store):
    _apply_review_raises(store)

    lines = BonusReportService(store).build_report(REVIEW_RATINGS)

    assert [line.employee_id for line in lines] == [1, 2, 3, 4, 5, 6]
    assert [line.bonus for line in lines] == [
        Decimal("12375.00"),
        Decimal("3150.00"),
        Decimal("8500.00"),
        Decimal("0.00"),
        Decimal("14250.00"),
        Decimal("4500.00"),
    ]
    assert [line.salary for line in lines][:3] == [
        Decimal("82500.00"), Decimal("63000.00"), Decimal("85000.00"),
    ]
    assert lines[0].department_name == "Engineering"


def test_unlisted_employees_use_default_rating(store):
    lines = BonusReportService(store).build_report({1: 4}, default_rating=2)
    by_id = {line.employee_id: line for line in lines}
    assert by_id[1].bonus == Decimal("11250.00")
    assert by_id[6].rating == 2
    assert by_id[6].bonus == Decimal("2250.00")


def test_report_does_not_write(store):
    BonusReportService(store).build_report(REVIEW_RATINGS)
    assert store.executed == []


def test_format_report_has_total(store):
    service = BonusReportService(store)
    text = service.format_report(service.build_report({5: 4, 6: 3}))
    assert "Eve Davis" in text
    assert "14250.00" in text
    assert text.splitlines()[-1].split()[-1] == "18750.00"


def test_empty_report(empty_store):
    service = BonusReportService(empty_store)
    assert service.build_report({}) == []
    assert service.format_report([]) == "No employees found."
    assert service.list_employees() == "No employees found."


def test_list_employees(store):
    text = BonusReportService(store).list_employees()
    lines = text.splitlines()
    assert len(lines) == 6
    assert lines[0] == "#1 Alice Smith | Software Engineer | Engineering | 75000.00"
