class QuoteError(Exception):
    """Base class for quote request failures."""


class InputValidationError(QuoteError):
    """Submitted configuration is outside the allowed domain."""


class GenerationError(QuoteError):
    """The model call failed or returned an unusable response."""


class NotificationError(QuoteError):
    """Dispatching the quote notification failed. Never surfaced to callers."""
