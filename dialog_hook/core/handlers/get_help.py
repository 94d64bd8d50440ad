from __future__ import annotations

from ..intents import Intent
from .base import IntentSpec

SPEC = IntentSpec(
    intent=Intent.HELP,
    rules=(),
    completion_message="Welcome to Jack Sparrow loan assistant.  How can I help you?",
    close_on_dialog=True,
)
