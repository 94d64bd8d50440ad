from __future__ import annotations

from ..intents import Intent
from .base import IntentSpec, SlotRule, positive_number

# FullName, MyKadNumber, MobileNumber, Address and EmailAddress are collected by
# the platform and forwarded as-is.
SPEC = IntentSpec(
    intent=Intent.APPLY_LOAN,
    rules=(
        SlotRule(
            "LoanAmount",
            positive_number,
            invalid_message="Sorry, but loan amount must be more than zero.  How much of loan amount would you like?",
        ),
        SlotRule(
            "Tenure",
            positive_number,
            invalid_message="Sorry, but tenure must be more than zero.  How long of tenure would you like?",
        ),
        SlotRule(
            "GrossIncome",
            positive_number,
            invalid_message="Sorry, but gross income must be more than zero.  How much is your monthly gross income?",
        ),
    ),
    completion_message=(
        "Great!  Your loan application will be processed and you will be informed very soon.  "
        "Thanks for using Jack Sparrow!"
    ),
)
