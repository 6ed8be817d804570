"""
services/export_service.py
---------------------------
Generates CSV and Excel exports of the bonus report.
"""

import io
from typing import Optional

import pandas as pd

from db.store import PostgresStore
from services.report_service import BonusReportService
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = ["Employee ID", "First Name", "Last Name", "Department", "Salary", "Rating", "Bonus"]


class ExportService:
    """Generates downloadable bonus reports in CSV and Excel formats."""

    def __init__(self, store: Optional[PostgresStore] = None):
        self.reports = BonusReportService(store)

    def _report_frame(self, ratings: dict[int, int], default_rating: int) -> pd.DataFrame:
        lines = self.reports.build_report(ratings, default_rating)
        data = [
            {
                "Employee ID": line.employee_id,
                "First Name": line.first_name,
                "Last Name": line.last_name,
                "Department": line.department_name,
                # Strings keep the exact two-decimal value in the file
                "Salary": f"{line.salary:.2f}",
                "Rating": line.rating,
                "Bonus": f"{line.bonus:.2f}",
            }
            for line in lines
        ]
        return pd.DataFrame(data, columns=_COLUMNS)

    def export_bonus_csv(self, ratings: dict[int, int], default_rating: int = 0) -> io.BytesIO:
        """
        Export the bonus report as a CSV file.

        Returns:
            A BytesIO buffer containing the CSV data.
        """
        df = self._report_frame(ratings, default_rating)
        buffer = io.BytesIO()
        df.to_csv(buffer, index=False, encoding="utf-8-sig")
        buffer.seek(0)
        logger.info(f"Exported {len(df)} bonus rows as CSV")
        return buffer

    def export_bonus_excel(self, ratings: dict[int, int], default_rating: int = 0) -> io.BytesIO:
        """
        Export the bonus report as an Excel (.xlsx) file with a per-department summary.

        Returns:
            A BytesIO buffer containing the Excel data.
        """
        df = self._report_frame(ratings, default_rating)

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            sheet = df.copy()
            sheet["Salary"] = sheet["Salary"].astype(float)
            sheet["Bonus"] = sheet["Bonus"].astype(float)
            sheet.to_excel(writer, sheet_name="Bonuses", index=False)

            if not sheet.empty:
                summary = (
                    sheet.groupby("Department")[["Salary", "Bonus"]]
                    .sum()
                    .round(2)
                    .reset_index()
                )
                summary.columns = ["Department", "Total Salary", "Total Bonus"]
                summary.to_excel(writer, sheet_name="By Department", index=False)

        buffer.seek(0)
        logger.info(f"Exported {len(df)} bonus rows as Excel")
        return buffer
