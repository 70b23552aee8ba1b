"""
Error classification for market data queries.

Caller-visible failures are reported through ``ErrorKind`` tags inside a
``QueryResult``. The exception hierarchy covers faults raised by external
collaborators (quote sources) and configuration problems.
"""

from .kinds import ErrorKind
from .source_errors import (
    ConfigurationError,
    QuoteSourceError,
    QuoteSourceFormatError,
    QuoteSourceTransportError,
)

__all__ = [
    # Result error tags
    "ErrorKind",
    # Collaborator faults
    "QuoteSourceError",
    "QuoteSourceTransportError",
    "QuoteSourceFormatError",
    # Configuration
    "ConfigurationError",
]
