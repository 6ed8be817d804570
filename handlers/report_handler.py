"""
handlers/report_handler.py
---------------------------
Handles employee listing, the bulk bonus report and its exports.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import parse_ratings
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.export_service import ExportService
from services.report_service import BonusReportService
from utils.logger import get_logger

logger = get_logger(__name__)
report_service = BonusReportService()
export_service = ExportService()

RATINGS_USAGE = "Ratings must look like id:rating, e.g. /bonus_report 1:4 2:2 3:3"


@authorized_only
@rate_limited
async def employees_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /employees - list all employees."""
    await update.message.reply_text(report_service.list_employees())


@authorized_only
@rate_limited
async def bonus_report_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /bonus_report [id:rating ...].
    Employees without an explicit rating get rating 0 (no bonus).
    """
    try:
        ratings = parse_ratings(context.args or [])
    except ValueError:
        await update.message.reply_text(RATINGS_USAGE)
        return

    lines = report_service.build_report(ratings)
    await update.message.reply_text(
        f"```\n{report_service.format_report(lines)}\n```",
        parse_mode="Markdown",
    )


@authorized_only
@rate_limited
async def export_bonus_csv_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /export_bonus_csv [id:rating ...] - send the bonus report as CSV."""
    try:
        ratings = parse_ratings(context.args or [])
    except ValueError:
        await update.message.reply_text(RATINGS_USAGE)
        return

    await update.message.reply_text("Preparing CSV file...")

    try:
        buffer = export_service.export_bonus_csv(ratings)
        await update.message.reply_document(
            document=buffer,
            filename="bonus_report.csv",
            caption="Bonus report - CSV",
        )
    except Exception as e:
        logger.error(f"CSV export failed: {e}")
        await update.message.reply_text("Export failed. Please try again.")


@authorized_only
@rate_limited
async def export_bonus_excel_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /export_bonus_excel [id:rating ...] - send the bonus report as Excel."""
    try:
        ratings = parse_ratings(context.args or [])
    except ValueError:
        await update.message.reply_text(RATINGS_USAGE)
        return

    await update.message.reply_text("Preparing Excel file...")

    try:
        buffer = export_service.export_bonus_excel(ratings)
        await update.message.reply_document(
            document=buffer,
            filename="bonus_report.xlsx",
            caption="Bonus report - Excel",
        )
    except Exception as e:
        logger.error(f"Excel export failed: {e}")
        await update.message.reply_text("Export failed. Please try again.")
