from __future__ import annotations

import logging

from ..schemas import DialogRequest, InvocationPhase
from .directives import Directive, FulfillmentState, build_message, close, delegate, elicit_slot
from .handlers.base import NeedsSlot, evaluate_rules
from .intent_registry import IntentRegistry, registry

logger = logging.getLogger("dialog_hook.adapter")


def handle_turn(request: DialogRequest, intents: IntentRegistry = registry) -> Directive:
    """Produce the single directive for one dialog turn.

    Raises UnsupportedIntent before anything else when the intent is unknown.
    """
    spec = intents.resolve(request.current_intent.name)
    session_attributes = request.session_attributes
    slots = request.current_intent.slots

    if request.invocation_source is InvocationPhase.FULFILLING or spec.close_on_dialog:
        logger.debug(f"closing intent={spec.intent.value} phase={request.invocation_source.value}")
        return close(session_attributes, FulfillmentState.FULFILLED, build_message(spec.completion_message))

    outcome = evaluate_rules(slots, spec.rules)
    if isinstance(outcome, NeedsSlot):
        logger.debug(f"eliciting slot={outcome.slot_name} intent={spec.intent.value}")
        message = build_message(outcome.prompt_message) if outcome.prompt_message else None
        return elicit_slot(session_attributes, request.current_intent.name, slots, outcome.slot_name, message)

    # everything collected so far looks fine; let the platform drive collection
    return delegate(session_attributes, slots)
