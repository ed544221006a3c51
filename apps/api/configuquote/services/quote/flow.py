from __future__ import annotations

from typing import Optional

from loguru import logger

from configuquote.schemas.quote import QuoteRequestInput, QuoteRequestOutput
from configuquote.services.notify.email import QuoteNotifier
from configuquote.services.quote.generator import QuoteGenerationService


class QuoteRequestFlow:
    def __init__(self, generator: QuoteGenerationService, notifier: Optional[QuoteNotifier] = None):
        self.generator = generator
        self.notifier = notifier

    async def run(self, data: QuoteRequestInput) -> QuoteRequestOutput:
        """
        Generate the RFQ, then send the notification e-mail.

        Generation errors propagate and skip the notification. The e-mail is
        at-most-once with no delivery guarantee: it is awaited, but its error
        is logged and dropped so the caller always gets the generated quote.
        """
        output = await self.generator.generate(data)

        if self.notifier is not None:
            try:
                await self.notifier.notify(data, output.quoteRequest)
            except Exception as e:
                logger.error(f"Failed to send quote request email (non-critical side-effect): {e}")

        return output
