"""
security/rate_limiter.py
-------------------------
Per-operator command throttle.
Keeps one user from hammering /raise or the report exports, each of which
opens a database transaction or builds a full bonus report.
"""

import time
from collections import defaultdict
from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

import config
from utils.logger import get_logger

logger = get_logger(__name__)

# In-memory storage for rate tracking: {user_id: [timestamp1, timestamp2, ...]}
_user_timestamps: dict[int, list[float]] = defaultdict(list)


def _cleanup(user_id: int) -> None:
    """Remove expired timestamps for a user."""
    cutoff = time.time() - config.RATE_LIMIT_WINDOW_SECONDS
    _user_timestamps[user_id] = [
        t for t in _user_timestamps[user_id] if t > cutoff
    ]


def reset() -> None:
    """Forget all tracked timestamps (used between test cases)."""
    _user_timestamps.clear()


def rate_limited(func: Callable):
    """
    Allow at most RATE_LIMIT_MESSAGES commands per operator in a sliding window.

    Configuration (via .env):
        RATE_LIMIT_MESSAGES: Max commands per window (default: 30).
        RATE_LIMIT_WINDOW_SECONDS: Window duration in seconds (default: 60).
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        _cleanup(user.id)

        if len(_user_timestamps[user.id]) >= config.RATE_LIMIT_MESSAGES:
            logger.warning(f"Rate limit hit for user {user.id}")
            await update.message.reply_text(
                "You are sending commands too quickly. Please wait a moment and try again."
            )
            return

        _user_timestamps[user.id].append(time.time())
        return await func(update, context, *args, **kwargs)

    return wrapper
