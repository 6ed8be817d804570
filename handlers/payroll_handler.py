"""
handlers/payroll_handler.py
----------------------------
Handles /raise and /bonus.
Replies with the service result verbatim; no business logic lives here.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import parse_employee_id, parse_percentage
from models.money import format_money
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.bonus_service import BonusCalculator
from services.salary_service import SalaryAdjuster
from utils.logger import get_logger

logger = get_logger(__name__)
salary_adjuster = SalaryAdjuster()
bonus_calculator = BonusCalculator()

RAISE_USAGE = "Usage: /raise <employee_id> <percent>\nExample: /raise 1 10"
BONUS_USAGE = "Usage: /bonus <employee_id> <rating>\nExample: /bonus 1 4"


@authorized_only
@rate_limited
async def raise_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /raise <id> <percent>.

    Examples:
        /raise 1 10     -> +10%
        /raise 3 -150   -> rejected, would be negative
    """
    if not context.args or len(context.args) < 2:
        await update.message.reply_text(RAISE_USAGE)
        return

    try:
        employee_id = parse_employee_id(context.args[0])
        percentage = parse_percentage(context.args[1])
    except ValueError:
        await update.message.reply_text(RAISE_USAGE)
        return

    outcome = salary_adjuster.apply(employee_id, percentage)
    logger.info(f"User {update.effective_user.id} /raise {employee_id} {percentage}: {outcome.kind.value}")
    await update.message.reply_text(outcome.message)


@authorized_only
@rate_limited
async def bonus_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /bonus <id> <rating>."""
    if not context.args or len(context.args) < 2:
        await update.message.reply_text(BONUS_USAGE)
        return

    try:
        employee_id = parse_employee_id(context.args[0])
        rating = int(context.args[1])
    except ValueError:
        await update.message.reply_text(BONUS_USAGE)
        return

    bonus = bonus_calculator.compute(employee_id, rating)
    await update.message.reply_text(
        f"Annual bonus for Employee ID {employee_id} (rating {rating}): {format_money(bonus)}"
    )
