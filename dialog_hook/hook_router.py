from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from .config import Settings, get_settings
from .core.adapter import handle_turn
from .core.intents import UnsupportedIntent
from .invocation import BotIdentityMismatch, ensure_bot
from .schemas import DialogRequest
from .utils.response import error_response

logger = logging.getLogger("dialog_hook.router")
router = APIRouter(prefix="/v1", tags=["dialog-hook"])


@router.post("/dialog-hook")
def dialog_hook(payload: DialogRequest, settings: Settings = Depends(get_settings)):
    try:
        ensure_bot(payload, settings)
        logger.info(f"dispatch userId={payload.user_id}, intent={payload.current_intent.name}")
        return handle_turn(payload).to_response()

    except BotIdentityMismatch as e:
        logger.warning(f"Rejected turn for bot {e.bot_name!r} (expected {e.expected!r})")
        return error_response(str(e), 403, bot=e.bot_name)
    except UnsupportedIntent as e:
        logger.error(f"Dialog hook dispatch error: {e}")
        return error_response(str(e), 400, intent=e.intent_name)
    except Exception:
        logger.exception("Dialog hook error")
        return error_response("Internal Server Error", 500)
