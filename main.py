"""
main.py
-------
Entry point for the SalaryDesk Telegram bot.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Optionally seed the sample departments and employees.
    - Configure and start the Telegram bot with all handlers.
"""

from telegram import BotCommand
from telegram.ext import Application, CommandHandler

from config import SEED_SAMPLE_DATA, TELEGRAM_BOT_TOKEN
from db.connection import init_pool, close_pool
from db.init_db import create_tables, seed_sample_data
from handlers.start_handler import start_command, help_command, myid_command
from handlers.payroll_handler import raise_command, bonus_command
from handlers.report_handler import (
    employees_command,
    bonus_report_command,
    export_bonus_csv_command,
    export_bonus_excel_command,
)
from utils.logger import get_logger

logger = get_logger(__name__)

COMMANDS = {
    "start": start_command,
    "help": help_command,
    "myid": myid_command,
    "employees": employees_command,
    "raise": raise_command,
    "bonus": bonus_command,
    "bonus_report": bonus_report_command,
    "export_bonus_csv": export_bonus_csv_command,
    "export_bonus_excel": export_bonus_excel_command,
}


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("employees", "List employees"),
        BotCommand("raise", "Adjust a salary by a percentage"),
        BotCommand("bonus", "Annual bonus for a rating"),
        BotCommand("bonus_report", "Bonus for every employee"),
        BotCommand("export_bonus_csv", "Bonus report as CSV"),
        BotCommand("export_bonus_excel", "Bonus report as Excel"),
        BotCommand("myid", "Show your Telegram ID"),
        BotCommand("help", "Show help"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


def build_application() -> Application:
    """Build the Telegram application with every command handler registered."""
    app = Application.builder().token(TELEGRAM_BOT_TOKEN).post_init(set_bot_commands).build()
    for name, handler in COMMANDS.items():
        app.add_handler(CommandHandler(name, handler))
    return app


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()
    if SEED_SAMPLE_DATA:
        seed_sample_data()

    # ── 2. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    app = build_application()

    # ── 3. Start polling ──────────────────────────────────
    logger.info("SalaryDesk is running! Press Ctrl+C to stop.")
    try:
        app.run_polling(drop_pending_updates=True, allowed_updates=["message"])
    finally:
        # ── 4. Cleanup on shutdown ────────────────────────
        close_pool()
        logger.info("SalaryDesk stopped.")


if __name__ == "__main__":
    main()
