"""In-memory quote source, optionally loaded from a YAML fixture."""

from collections.abc import Iterable, Mapping
from datetime import date
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..data.models import RawQuote
from ..errors import QuoteSourceFormatError
from ..utils.time import as_calendar_date
from .base import BaseQuoteSource


class InMemoryQuoteSource(BaseQuoteSource):
    """
    Quote source backed by dictionaries.

    Historical quotes are kept in the order they were supplied and range
    requests return the matching quotes in that same order.
    """

    def __init__(self,
                 historical: Optional[Mapping[str, Iterable[RawQuote]]] = None,
                 options: Optional[Mapping[tuple[str, date], Iterable[RawQuote]]] = None,
                 tickers: Optional[Iterable[str]] = None,
                 name: str = "memory"):
        super().__init__(name)
        self.historical: dict[str, list[RawQuote]] = {
            ticker: list(quotes) for ticker, quotes in (historical or {}).items()
        }
        self.options: dict[tuple[str, date], list[RawQuote]] = {
            (ticker, as_calendar_date(as_of)): list(quotes)
            for (ticker, as_of), quotes in (options or {}).items()
        }
        self._tickers = list(tickers) if tickers is not None else None

    def fetch_historical_quotes(self, ticker: str, start: date, end: date) -> list[RawQuote]:
        first = as_calendar_date(start)
        last = as_calendar_date(end)
        quotes = [
            quote for quote in self.historical.get(ticker, [])
            if first <= as_calendar_date(quote.session_date) <= last
        ]
        self.logger.debug("Served %d historical quotes for %s", len(quotes), ticker)
        return quotes

    def fetch_option_quotes(self, ticker: str, as_of: date) -> list[RawQuote]:
        quotes = list(self.options.get((ticker, as_calendar_date(as_of)), []))
        self.logger.debug("Served %d option quotes for %s", len(quotes), ticker)
        return quotes

    def get_ticker_list(self) -> list[str]:
        if self._tickers is not None:
            return list(self._tickers)
        return sorted(set(self.historical) | {ticker for ticker, _ in self.options})

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "InMemoryQuoteSource":
        """
        Load a quote source from a YAML fixture.

        Expected layout::

            tickers: [GRF, SAN]             # optional
            historical:
              GRF:
                - {date: 2011-01-31, value: 123.4}
            options:
              GRF:
                2011-01-31:
                  - {date: 2011-01-31, value: 1.2, contract: C GRF 10,
                     strike: 10.0, maturity: 2011-03-18}

        Raises:
            QuoteSourceFormatError: If the fixture cannot be converted
        """
        with open(path) as f:
            document = yaml.safe_load(f) or {}

        if not isinstance(document, dict):
            raise QuoteSourceFormatError(
                "Quote fixture must be a mapping",
                raw_data=str(document)[:100],
                expected_format="mapping"
            )

        historical = {
            str(ticker): [_quote_from_entry(entry) for entry in entries or []]
            for ticker, entries in (document.get("historical") or {}).items()
        }

        options: dict[tuple[str, date], list[RawQuote]] = {}
        for ticker, by_date in (document.get("options") or {}).items():
            for as_of, entries in (by_date or {}).items():
                key = (str(ticker), _fixture_date(as_of))
                options[key] = [_quote_from_entry(entry) for entry in entries or []]

        tickers = document.get("tickers")
        return cls(
            historical=historical,
            options=options,
            tickers=[str(t) for t in tickers] if tickers is not None else None,
            name=Path(path).stem,
        )


def _fixture_date(value: Any) -> date:
    try:
        return as_calendar_date(value)
    except (TypeError, ValueError) as e:
        raise QuoteSourceFormatError(
            f"Invalid date in quote fixture: {e}",
            raw_data=str(value)[:100],
            expected_format="YYYY-MM-DD"
        ) from e


def _quote_from_entry(entry: Any) -> RawQuote:
    if not isinstance(entry, dict):
        raise QuoteSourceFormatError(
            "Quote entry must be a mapping",
            raw_data=str(entry)[:100],
            expected_format="mapping"
        )

    try:
        strike = entry.get("strike")
        maturity = entry.get("maturity")
        return RawQuote(
            session_date=_fixture_date(entry["date"]),
            settlement_value=float(entry["value"]),
            contract_code=entry.get("contract"),
            strike_price=float(strike) if strike is not None else None,
            maturity_date=_fixture_date(maturity) if maturity is not None else None,
        )
    except (KeyError, TypeError, ValueError) as e:
        raise QuoteSourceFormatError(
            f"Malformed quote entry: {e}",
            raw_data=str(entry)[:100],
            expected_format="{date, value[, contract, strike, maturity]}"
        ) from e
