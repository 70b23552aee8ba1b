"""Base class for quote sources."""

import logging
from abc import ABC, abstractmethod
from datetime import date

from ..data.models import RawQuote


class BaseQuoteSource(ABC):
    """
    Base class for quote sources.

    Implementations are blocking and may raise any exception (typically a
    ``QuoteSourceError`` subclass) when the service cannot answer.
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(f"quote.source.{name}")

    @abstractmethod
    def fetch_historical_quotes(self, ticker: str, start: date, end: date) -> list[RawQuote]:
        """
        Fetch the quotes of a ticker for every session in [start, end].

        Args:
            ticker: Pre-parsed ticker symbol
            start: First session date (inclusive)
            end: Last session date (inclusive)

        Returns:
            Raw quotes, normally ascending by session date
        """
        pass

    @abstractmethod
    def fetch_option_quotes(self, ticker: str, as_of: date) -> list[RawQuote]:
        """
        Fetch the option chain of an underlying on a session date.

        Args:
            ticker: Underlying ticker symbol
            as_of: Session date of the snapshot

        Returns:
            Raw quotes for every listed option leg
        """
        pass

    @abstractmethod
    def get_ticker_list(self) -> list[str]:
        """Return every ticker the service can quote."""
        pass
