"""
Fault classifications for quote source collaborators.

Quote sources raise these exceptions when a request cannot be served. The
query engine catches them (and any other fault) and reports them as
``ErrorKind.PROVIDER_UNAVAILABLE``.
"""

from typing import Any, Optional


class QuoteSourceError(Exception):
    """Base class for quote source faults."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class QuoteSourceTransportError(QuoteSourceError):
    """Network, timeout or server-side failure talking to the quote service."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 url: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.url = url


class QuoteSourceFormatError(QuoteSourceError):
    """The quote service answered with data that could not be converted."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class ConfigurationError(Exception):
    """Provider configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []
