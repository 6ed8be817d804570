"""
handlers/start_handler.py
--------------------------
Handles /start, /help and /myid commands.
"""

from telegram import Update
from telegram.ext import ContextTypes

from security.auth import authorized_only
from security.rate_limiter import rate_limited
from utils.logger import get_logger

logger = get_logger(__name__)

HELP_TEXT = """
*SalaryDesk* - payroll adjustments and bonuses

*Commands:*
/employees - list employees and salaries
/raise <id> <percent> - adjust a salary (e.g. /raise 1 10 or /raise 3 -5)
/bonus <id> <rating> - annual bonus for a rating (4=15%, 3=10%, 2=5%)
/bonus\\_report [id:rating ...] - bonus for every employee (unlisted = rating 0)
/export\\_bonus\\_csv [id:rating ...] - bonus report as CSV
/export\\_bonus\\_excel [id:rating ...] - bonus report as Excel
/myid - show your Telegram ID
/help - show this message
"""


@authorized_only
@rate_limited
async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - show welcome message."""
    user = update.effective_user
    logger.info(f"User {user.id} ({user.first_name}) started the bot.")

    await update.message.reply_text(
        f"Hello {user.first_name}!\n"
        f"I can adjust salaries and calculate annual bonuses.\n\n"
        f"Type /help to see all commands.",
    )


@authorized_only
@rate_limited
async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show all available commands."""
    await update.message.reply_text(HELP_TEXT, parse_mode="Markdown")


@authorized_only
async def myid_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /myid command - show user's Telegram ID for whitelisting."""
    user = update.effective_user
    await update.message.reply_text(
        f"Your Telegram ID: `{user.id}`\n"
        f"Add it to `ALLOWED_USER_IDS` in `.env` to restrict the bot.",
        parse_mode="Markdown",
    )
