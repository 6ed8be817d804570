import pandas as pd

from services.export_service import ExportService


def test_csv_export(store):
    buffer = ExportService(store).export_bonus_csv({1: 4, 3: 3})
    df = pd.read_csv(buffer, encoding="utf-8-sig", dtype={"Salary": str, "Bonus": str})

    assert list(df.columns) == [
        "Employee ID", "First Name", "Last Name", "Department", "Salary", "Rating", "Bonus",
    ]
    assert len(df) == 6
    alice = df[df["Employee ID"] == 1].iloc[0]
    assert alice["Bonus"] == "11250.00"
    assert alice["Salary"] == "75000.00"
    assert df[df["Employee ID"] == 2].iloc[0]["Bonus"] == "0.00"


def test_excel_export_has_department_summary(store):
    buffer = ExportService(store).export_bonus_excel({1: 4, 5: 4, 2: 2})
    sheets = pd.read_excel(buffer, sheet_name=None, engine="openpyxl")

    assert set(sheets) == {"Bonuses", "By Department"}
    assert len(sheets["Bonuses"]) == 6

    summary = sheets["By Department"].set_index("Department")
    assert summary.loc["Engineering", "Total Salary"] == 170000.0
    assert summary.loc["Engineering", "Total Bonus"] == 25500.0
    assert summary.loc["Human Resources", "Total Bonus"] == 3000.0


def test_excel_export_without_employees(empty_store):
    buffer = ExportService(empty_store).export_bonus_excel({})
    sheets = pd.read_excel(buffer, sheet_name=None, engine="openpyxl")
    assert list(sheets) == ["Bonuses"]
    assert sheets["Bonuses"].empty
