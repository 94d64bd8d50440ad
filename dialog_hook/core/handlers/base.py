from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Literal, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict

from ..intents import Intent

SlotCheck = Callable[[str], bool]


class NeedsSlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["needs_slot"] = "needs_slot"
    slot_name: str
    prompt_message: Optional[str] = None


class Acceptable(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["acceptable"] = "acceptable"


ValidationOutcome = Union[NeedsSlot, Acceptable]


@dataclass(frozen=True)
class SlotRule:
    """One ordered check over a named slot.

    missing_message is used when the slot has no value yet, invalid_message when
    the value is present but rejected by ``check``. Either may be None, in which
    case the platform falls back to the slot's own prompt.
    """

    slot: str
    check: SlotCheck
    invalid_message: Optional[str] = None
    missing_message: Optional[str] = None


@dataclass(frozen=True)
class IntentSpec:
    intent: Intent
    rules: Tuple[SlotRule, ...]
    completion_message: str
    # intents that answer immediately instead of collecting slots
    close_on_dialog: bool = False


_PLAIN_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def positive_number(value: str) -> bool:
    if not isinstance(value, str) or not _PLAIN_NUMBER.fullmatch(value):
        return False
    number = float(value)
    return math.isfinite(number) and number > 0


def matches(pattern: str) -> SlotCheck:
    compiled = re.compile(pattern)

    def check(value: str) -> bool:
        return compiled.search(value) is not None

    return check


def equals(literal: str) -> SlotCheck:
    def check(value: str) -> bool:
        return value == literal

    return check


def evaluate_rules(slots: Mapping[str, Optional[str]], rules: Sequence[SlotRule]) -> ValidationOutcome:
    """Return the outcome of the first failing rule, or Acceptable.

    Rules after the first failure are not evaluated, so a turn asks for one
    slot at a time.
    """
    slots = slots or {}
    for rule in rules:
        value = slots.get(rule.slot)
        if not value:
            return NeedsSlot(slot_name=rule.slot, prompt_message=rule.missing_message)
        if not rule.check(value):
            return NeedsSlot(slot_name=rule.slot, prompt_message=rule.invalid_message)
    return Acceptable()
