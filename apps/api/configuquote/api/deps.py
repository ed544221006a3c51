from __future__ import annotations

from functools import lru_cache

from configuquote.core.config import settings
from configuquote.services.llm.factory import LazyLLM, build_llm
from configuquote.services.notify.email import LogEmailTransport, QuoteNotifier
from configuquote.services.quote.flow import QuoteRequestFlow
from configuquote.services.quote.generator import QuoteGenerationService


@lru_cache(maxsize=1)
def get_quote_flow() -> QuoteRequestFlow:
    generator = QuoteGenerationService(LazyLLM(lambda: build_llm(settings)))

    notifier = None
    if settings.QUOTE_NOTIFY_ENABLED:
        notifier = QuoteNotifier(
            recipient=settings.QUOTE_NOTIFY_RECIPIENT,
            transport=LogEmailTransport(),
            subject=settings.QUOTE_NOTIFY_SUBJECT,
        )

    return QuoteRequestFlow(generator, notifier)
