"""Shared fakes and fixtures for quote generation tests."""

import pytest
from fastapi.testclient import TestClient

from configuquote.schemas.quote import QuoteRequestInput
from configuquote.services.notify.email import QuoteNotifier
from configuquote.services.quote.flow import QuoteRequestFlow
from configuquote.services.quote.generator import QuoteGenerationService

RFQ_TEXT = "Request for Quotation: centralized logging platform, 50 GB/day, 30 day retention."


class FakeLLM:
    """Returns a canned reply (or raises it) and records prompts."""

    def __init__(self, reply=None):
        self.reply = {"quoteRequest": RFQ_TEXT} if reply is None else reply
        self.prompts = []
        self.schemas = []

    def generate_json(self, prompt, schema):
        self.prompts.append(prompt)
        self.schemas.append(schema)
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


class RecordingTransport:
    def __init__(self):
        self.sent = []

    async def send(self, message):
        self.sent.append(message)


class FailingTransport:
    def __init__(self):
        self.calls = 0

    async def send(self, message):
        self.calls += 1
        raise ConnectionError("smtp relay unreachable")


@pytest.fixture
def quote_input():
    return QuoteRequestInput(
        logsPerDayGb=50,
        retentionDays="30",
        dataAtRestEncryptionRequired=True,
        operatingModel="managed",
    )


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def flow(fake_llm, transport):
    notifier = QuoteNotifier(recipient="ops@example.test", transport=transport)
    return QuoteRequestFlow(QuoteGenerationService(fake_llm), notifier)


@pytest.fixture
def client(flow):
    from configuquote.api.deps import get_quote_flow
    from configuquote.main import app

    app.dependency_overrides[get_quote_flow] = lambda: flow
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
