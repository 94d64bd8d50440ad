"""Shared pytest fixtures for testing."""

import pytest
from fastapi.testclient import TestClient

from dialog_hook.config import BotConfig, Settings, get_settings
from dialog_hook.main import create_app


@pytest.fixture
def make_event():
    """Build a platform event the way the conversational platform sends it."""

    def _make(intent="fiuApplyLoanIntent", slots=None, source="DialogCodeHook", bot="JackSparrow", session=None):
        return {
            "messageVersion": "1.0",
            "invocationSource": source,
            "userId": "user-1",
            "sessionAttributes": {"channel": "web", "locale": "en-MY"} if session is None else session,
            "bot": {"name": bot, "alias": "$LATEST", "version": "$LATEST"},
            "outputDialogMode": "Text",
            "currentIntent": {
                "name": intent,
                "slots": {} if slots is None else slots,
                "confirmationStatus": "None",
            },
            "inputTranscript": "I would like a loan",
        }

    return _make


@pytest.fixture
def loan_slots():
    return {
        "LoanAmount": "50000",
        "Tenure": "12",
        "GrossIncome": "3000",
        "FullName": "Jack Sparrow",
        "MyKadNumber": None,
        "MobileNumber": None,
        "Address": None,
        "EmailAddress": None,
    }


@pytest.fixture
def settings():
    return Settings(bot=BotConfig(name="JackSparrow"))


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def clean_settings(monkeypatch):
    """Make get_settings() load defaults, independent of the host environment."""
    for var in ("BOT_NAME", "APP_ENV", "LOG_LEVEL", "HOOK_HOST", "HOOK_PORT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("DIALOG_HOOK_CONFIG", "does-not-exist.yaml")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
