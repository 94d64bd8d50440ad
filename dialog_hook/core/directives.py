"""
Builders for the dialog actions a code hook can hand back to the platform.

Each builder returns a fully-formed ``Directive``; ``Directive.to_response()``
produces the JSON body the platform expects::

    {"sessionAttributes": {...}, "dialogAction": {"type": "ElicitSlot", ...}}
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SessionAttributes = Optional[Dict[str, str]]
Slots = Dict[str, Optional[str]]

# keys the platform treats as "not supplied" when absent
_OPTIONAL_ACTION_KEYS = ("message", "responseCard")


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class FulfillmentState(str, Enum):
    FULFILLED = "Fulfilled"
    FAILED = "Failed"


class Message(_WireModel):
    content_type: Literal["PlainText", "SSML", "CustomPayload"] = "PlainText"
    content: str


class ResponseCard(_WireModel):
    version: int = 1
    content_type: str = "application/vnd.amazonaws.card.generic"
    generic_attachments: List[Dict[str, Any]] = Field(default_factory=list)


class ElicitSlotAction(_WireModel):
    type: Literal["ElicitSlot"] = "ElicitSlot"
    intent_name: str
    slots: Slots
    slot_to_elicit: str
    message: Optional[Message] = None
    response_card: Optional[ResponseCard] = None


class ConfirmIntentAction(_WireModel):
    type: Literal["ConfirmIntent"] = "ConfirmIntent"
    intent_name: str
    slots: Slots
    message: Optional[Message] = None
    response_card: Optional[ResponseCard] = None


class CloseAction(_WireModel):
    type: Literal["Close"] = "Close"
    fulfillment_state: FulfillmentState
    message: Message
    response_card: Optional[ResponseCard] = None


class DelegateAction(_WireModel):
    type: Literal["Delegate"] = "Delegate"
    slots: Slots


DialogAction = Union[ElicitSlotAction, ConfirmIntentAction, CloseAction, DelegateAction]


class Directive(_WireModel):
    session_attributes: SessionAttributes = None
    dialog_action: DialogAction = Field(discriminator="type")

    @property
    def type(self) -> str:
        return self.dialog_action.type

    def to_response(self) -> Dict[str, Any]:
        out = self.model_dump(mode="json", by_alias=True)
        action = out["dialogAction"]
        for key in _OPTIONAL_ACTION_KEYS:
            if key in action and action[key] is None:
                del action[key]
        return out


def build_message(content: str, content_type: str = "PlainText") -> Message:
    return Message(content_type=content_type, content=content)


def elicit_slot(
    session_attributes: SessionAttributes,
    intent_name: str,
    slots: Slots,
    slot_to_elicit: str,
    message: Optional[Message] = None,
    response_card: Optional[ResponseCard] = None,
) -> Directive:
    return Directive(
        session_attributes=session_attributes,
        dialog_action=ElicitSlotAction(
            intent_name=intent_name,
            slots=slots,
            slot_to_elicit=slot_to_elicit,
            message=message,
            response_card=response_card,
        ),
    )


def confirm_intent(
    session_attributes: SessionAttributes,
    intent_name: str,
    slots: Slots,
    message: Optional[Message] = None,
    response_card: Optional[ResponseCard] = None,
) -> Directive:
    return Directive(
        session_attributes=session_attributes,
        dialog_action=ConfirmIntentAction(
            intent_name=intent_name,
            slots=slots,
            message=message,
            response_card=response_card,
        ),
    )


def close(
    session_attributes: SessionAttributes,
    fulfillment_state: FulfillmentState,
    message: Message,
    response_card: Optional[ResponseCard] = None,
) -> Directive:
    return Directive(
        session_attributes=session_attributes,
        dialog_action=CloseAction(
            fulfillment_state=fulfillment_state,
            message=message,
            response_card=response_card,
        ),
    )


def delegate(session_attributes: SessionAttributes, slots: Slots) -> Directive:
    return Directive(session_attributes=session_attributes, dialog_action=DelegateAction(slots=slots))
