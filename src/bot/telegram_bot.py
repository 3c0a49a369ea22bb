#!/usr/bin/env python3
"""
Responder Telegram Bot

Every text message is split into a set of lower-cased words and answered
by the ResponseSelector:
  Keyword in the message → its canned response
  No keyword             → a random default response

Commands:
  /start - Welcome message

Usage:
  TELEGRAM_BOT_TOKEN=your_token python -m bot.telegram_bot
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Set

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    filters,
    ContextTypes,
)

from responder.config import load_config
from responder.selector import ResponseSelector

logger = logging.getLogger(__name__)

# Telegram rejects messages over 4096 chars
MAX_CHUNK = 4000

_selector: Optional[ResponseSelector] = None


def get_selector() -> ResponseSelector:
    """Build the shared selector on first use."""
    global _selector
    if _selector is None:
        config_path = os.environ.get("RESPONDER_CONFIG", "config/responder.defaults.yml")
        _selector = ResponseSelector.from_config(load_config(config_path))
    return _selector


def set_selector(selector: Optional[ResponseSelector]) -> None:
    global _selector
    _selector = selector


def words_from_text(text: str) -> Set[str]:
    return set(text.strip().lower().split())


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start command."""
    await update.message.reply_text(
        "Welcome to the support desk.\n\n"
        "Please tell us about your problem and we will try to help."
    )


async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle any text message — answer from the selector."""
    user_id = str(update.effective_user.id)
    message = update.message.text

    if not message:
        return

    logger.info("Message from %s: %s", user_id, message[:100])

    response = get_selector().generate_response(words_from_text(message))

    if len(response) > MAX_CHUNK:
        for i in range(0, len(response), MAX_CHUNK):
            await update.message.reply_text(response[i:i + MAX_CHUNK])
    else:
        await update.message.reply_text(response)


def main():
    """Start the bot."""
    token = os.environ.get("TELEGRAM_BOT_TOKEN")
    if not token:
        logger.error("TELEGRAM_BOT_TOKEN not set")
        sys.exit(1)

    selector = get_selector()
    logger.info(
        "Responder ready: %d keywords, %d default responses",
        len(selector.table), len(selector.pool),
    )

    app = Application.builder().token(token).build()

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))

    logger.info("Bot is running. Polling for messages...")
    app.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    config = load_config(os.environ.get("RESPONDER_CONFIG", "config/responder.defaults.yml"))
    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        level=getattr(logging, config.log_level, logging.INFO),
    )
    main()
