"""
Lambda-style entry point: raw platform event in, raw directive dict out.

Errors are not swallowed here; the hosting runtime reports them to the
platform.
"""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from .config import Settings, configure_logging, get_settings
from .core.adapter import handle_turn
from .middleware.turn import turn_id_var
from .schemas import DialogRequest

logger = logging.getLogger("dialog_hook.invocation")


class BotIdentityMismatch(PermissionError):
    def __init__(self, bot_name: str, expected: str) -> None:
        self.bot_name = bot_name
        self.expected = expected
        super().__init__("Invalid Bot Name")


def ensure_bot(request: DialogRequest, settings: Settings) -> None:
    if request.bot.name != settings.bot.name:
        raise BotIdentityMismatch(request.bot.name, settings.bot.name)


def process_event(event: Dict[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    settings = settings or get_settings()
    request = DialogRequest.model_validate(event)
    ensure_bot(request, settings)
    logger.info(f"dispatch userId={request.user_id}, intent={request.current_intent.name}")
    return handle_turn(request).to_response()


@lru_cache(maxsize=1)
def setup_logging() -> None:
    """Configure logging the first time a warm runtime serves a turn."""
    configure_logging(get_settings())


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    setup_logging()
    token = turn_id_var.set(getattr(context, "aws_request_id", None) or "-")
    try:
        logger.info(json.dumps(event))
        return process_event(event)
    finally:
        turn_id_var.reset(token)
