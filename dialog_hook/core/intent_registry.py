"""
Intent registry and dispatcher.

The registry is closed: it must be built with exactly one spec per ``Intent``
member, and any name outside that enum fails with ``UnsupportedIntent``.
"""
from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Tuple

from .handlers import beverage, get_help, loan
from .handlers.base import IntentSpec, ValidationOutcome, evaluate_rules
from .intents import Intent, UnsupportedIntent, resolve_intent


class IntentRegistry:
    def __init__(self, specs: Iterable[IntentSpec]) -> None:
        self._specs: Dict[Intent, IntentSpec] = {}
        for spec in specs:
            if spec.intent in self._specs:
                raise RuntimeError(f"Duplicate spec for intent '{spec.intent.value}'")
            self._specs[spec.intent] = spec
        missing = [intent.value for intent in Intent if intent not in self._specs]
        if missing:
            raise RuntimeError("No spec registered for intent(s): " + ", ".join(missing))

    def has(self, name: str) -> bool:
        try:
            resolve_intent(name)
        except UnsupportedIntent:
            return False
        return True

    def resolve(self, name: str) -> IntentSpec:
        return self._specs[resolve_intent(name)]

    def validate(self, name: str, slots: Mapping[str, Optional[str]]) -> ValidationOutcome:
        return evaluate_rules(slots, self.resolve(name).rules)

    def intents(self) -> Tuple[str, ...]:
        return tuple(intent.value for intent in self._specs)


registry = IntentRegistry([get_help.SPEC, loan.SPEC, beverage.SPEC])
