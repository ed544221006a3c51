"""
Quote notification e-mails.

Delivery is currently simulated: LogEmailTransport writes the message to the
log instead of sending it. Any object with an async `send(message)` can be
passed to QuoteNotifier to use a real transport.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from loguru import logger

from configuquote.core.errors import NotificationError
from configuquote.schemas.quote import QuoteRequestInput
from configuquote.services.quote.prompt import format_gb, yes_no

DEFAULT_SUBJECT = "New ConfiguQuote Request Generated"


@dataclass(frozen=True)
class QuoteNotification:
    recipient: str
    subject: str
    body: str


class EmailTransport(Protocol):
    async def send(self, message: QuoteNotification) -> None: ...


class LogEmailTransport:
    async def send(self, message: QuoteNotification) -> None:
        logger.info(
            "SIMULATING SENDING EMAIL (actual email not sent)\n"
            f"To: {message.recipient}\n"
            f"Subject: {message.subject}\n"
            f"Body:\n{message.body}"
        )


def format_quote_email_body(data: QuoteRequestInput, quote_request: str) -> str:
    return f"""A new quote request has been generated with the following details:

Configuration Input:
--------------------
Daily Log Volume (GB): {format_gb(data.logsPerDayGb)}
Data Retention Period: {data.retentionDays} days
Data-at-Rest Encryption Required: {yes_no(data.dataAtRestEncryptionRequired)}
Operating Model: {data.operatingModel}

Generated RFQ:
--------------
{quote_request}

--------------------
This is an automated notification from ConfiguQuote.
"""


class QuoteNotifier:
    def __init__(self, recipient: str, transport: EmailTransport, subject: str = DEFAULT_SUBJECT):
        if not recipient:
            raise ValueError("recipient is required")
        self.recipient = recipient
        self.transport = transport
        self.subject = subject

    def build(self, data: QuoteRequestInput, quote_request: str) -> QuoteNotification:
        return QuoteNotification(
            recipient=self.recipient,
            subject=self.subject,
            body=format_quote_email_body(data, quote_request),
        )

    async def notify(self, data: QuoteRequestInput, quote_request: str) -> None:
        message = self.build(data, quote_request)
        try:
            await self.transport.send(message)
        except Exception as e:
            raise NotificationError(f"Failed to send quote request email to {self.recipient}: {e}") from e
