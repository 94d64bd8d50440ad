from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InvocationPhase(str, Enum):
    COLLECTING = "DialogCodeHook"
    FULFILLING = "FulfillmentCodeHook"


class _Event(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore")


class Bot(_Event):
    name: str
    alias: Optional[str] = None
    version: Optional[str] = None


class CurrentIntent(_Event):
    name: str
    slots: Dict[str, Optional[str]] = Field(default_factory=dict)
    confirmation_status: Optional[str] = None


class DialogRequest(_Event):
    """One dialog turn as sent by the conversational platform."""

    bot: Bot
    user_id: str
    invocation_source: InvocationPhase
    session_attributes: Optional[Dict[str, str]] = None
    current_intent: CurrentIntent
    input_transcript: Optional[str] = None
    output_dialog_mode: Optional[str] = None
    message_version: Optional[str] = None
