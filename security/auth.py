"""
security/auth.py
-----------------
Whitelist guard for the SalaryDesk commands.
Salaries are confidential and /raise writes to the payroll table, so only the
Telegram IDs listed in ALLOWED_USER_IDS may run commands once the list is set.
"""

from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

import config
from utils.logger import get_logger

logger = get_logger(__name__)


def authorized_only(func: Callable):
    """
    Let the wrapped command run only for whitelisted payroll operators.

    An empty ALLOWED_USER_IDS leaves the bot open, which is meant for local
    testing against seeded data. Rejected callers get a short reply and a
    WARNING log line with their Telegram ID.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if not config.ALLOWED_USER_IDS:
            return await func(update, context, *args, **kwargs)

        if user.id not in config.ALLOWED_USER_IDS:
            logger.warning(
                f"Unauthorized access attempt: user_id={user.id}, "
                f"username={user.username}, name={user.first_name}"
            )
            await update.message.reply_text("Sorry, this bot is private.")
            return

        return await func(update, context, *args, **kwargs)

    return wrapper
