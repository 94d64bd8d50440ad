"""Unit tests for the directive builders."""

from dialog_hook.core.directives import (
    FulfillmentState,
    ResponseCard,
    build_message,
    close,
    confirm_intent,
    delegate,
    elicit_slot,
)

SESSION = {"channel": "web"}
SLOTS = {"LoanAmount": "100", "Tenure": None}


class TestElicitSlot:
    def test_shape(self):
        directive = elicit_slot(SESSION, "fiuApplyLoanIntent", SLOTS, "Tenure", build_message("How long?"))

        assert directive.to_response() == {
            "sessionAttributes": {"channel": "web"},
            "dialogAction": {
                "type": "ElicitSlot",
                "intentName": "fiuApplyLoanIntent",
                "slots": {"LoanAmount": "100", "Tenure": None},
                "slotToElicit": "Tenure",
                "message": {"contentType": "PlainText", "content": "How long?"},
            },
        }

    def test_optional_fields_omitted(self):
        action = elicit_slot(SESSION, "fiuApplyLoanIntent", SLOTS, "Tenure").to_response()["dialogAction"]

        assert "message" not in action
        assert "responseCard" not in action
        # null slot values are still forwarded
        assert action["slots"]["Tenure"] is None

    def test_response_card(self):
        card = ResponseCard(generic_attachments=[{"title": "Size", "buttons": [{"text": "tall", "value": "tall"}]}])
        action = elicit_slot(SESSION, "cafeOrderBeverageIntent", {}, "BeverageSize", response_card=card).to_response()[
            "dialogAction"
        ]

        assert action["responseCard"] == {
            "version": 1,
            "contentType": "application/vnd.amazonaws.card.generic",
            "genericAttachments": [{"title": "Size", "buttons": [{"text": "tall", "value": "tall"}]}],
        }


class TestOtherDirectives:
    def test_confirm_intent(self):
        directive = confirm_intent(SESSION, "fiuApplyLoanIntent", SLOTS, build_message("Submit?"))

        assert directive.type == "ConfirmIntent"
        assert directive.to_response()["dialogAction"] == {
            "type": "ConfirmIntent",
            "intentName": "fiuApplyLoanIntent",
            "slots": SLOTS,
            "message": {"contentType": "PlainText", "content": "Submit?"},
        }

    def test_close(self):
        directive = close(SESSION, FulfillmentState.FULFILLED, build_message("Done"))

        assert directive.to_response() == {
            "sessionAttributes": SESSION,
            "dialogAction": {
                "type": "Close",
                "fulfillmentState": "Fulfilled",
                "message": {"contentType": "PlainText", "content": "Done"},
            },
        }

    def test_close_failed(self):
        directive = close(SESSION, FulfillmentState.FAILED, build_message("<speak>No</speak>", "SSML"))

        action = directive.to_response()["dialogAction"]
        assert action["fulfillmentState"] == "Failed"
        assert action["message"]["contentType"] == "SSML"

    def test_delegate(self):
        directive = delegate(SESSION, SLOTS)

        assert directive.to_response() == {
            "sessionAttributes": SESSION,
            "dialogAction": {"type": "Delegate", "slots": SLOTS},
        }

    def test_null_session_attributes_forwarded(self):
        assert delegate(None, {}).to_response()["sessionAttributes"] is None
