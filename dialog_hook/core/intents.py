from __future__ import annotations

from enum import Enum


class Intent(str, Enum):
    """Closed set of intents this hook knows how to serve (values are wire names)."""

    HELP = "fiuHelpIntent"
    APPLY_LOAN = "fiuApplyLoanIntent"
    ORDER_BEVERAGE = "cafeOrderBeverageIntent"


class UnsupportedIntent(ValueError):
    def __init__(self, intent_name: str) -> None:
        self.intent_name = intent_name
        super().__init__(f"Intent with name {intent_name} not supported")


def resolve_intent(name: str) -> Intent:
    try:
        return Intent(name)
    except ValueError:
        raise UnsupportedIntent(name) from None
