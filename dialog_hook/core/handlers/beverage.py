from __future__ import annotations

from ..intents import Intent
from .base import IntentSpec, SlotRule, equals, matches

# we only make a mocha for now
SPEC = IntentSpec(
    intent=Intent.ORDER_BEVERAGE,
    rules=(
        SlotRule(
            "BeverageType",
            equals("mocha"),
            invalid_message="Sorry, but we can only make a mocha today.  What kind of beverage would you like?",
            missing_message="What kind of beverage would you like?  We can make a mocha today.",
        ),
        SlotRule("BeverageSize", matches(r"short|tall|grande|venti|small|medium|large")),
        SlotRule("BeverageTemp", matches(r"kids|hot|iced")),
    ),
    completion_message="Great!  Your mocha will be available for pickup soon.  Thanks for using CoffeeBot!",
)
