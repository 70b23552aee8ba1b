"""Pytest configuration and shared fixtures."""

from datetime import date
from unittest.mock import Mock

import pytest

from meff_app.data.models import DataType, Query, RawQuote
from meff_app.provider import MarketDataProvider
from meff_app.sources.base import BaseQuoteSource
from meff_app.sources.memory import InMemoryQuoteSource

SESSION = date(2011, 1, 31)


@pytest.fixture
def session_date() -> date:
    """The well known MEFF session used across tests."""
    return SESSION


@pytest.fixture
def grf_quotes() -> list[RawQuote]:
    """Four consecutive GRF sessions, ascending."""
    return [
        RawQuote(date(2011, 1, 27), 121.9),
        RawQuote(date(2011, 1, 28), 122.5),
        RawQuote(date(2011, 1, 31), 123.4),
        RawQuote(date(2011, 2, 1), 124.1),
    ]


@pytest.fixture
def grf_option_legs() -> list[RawQuote]:
    """Three GRF option legs quoted on 2011-01-31."""
    return [
        RawQuote(SESSION, 1.85, "C GRF 120 MAR11", 120.0, date(2011, 3, 18)),
        RawQuote(SESSION, 0.92, "C GRF 125 MAR11", 125.0, date(2011, 3, 18)),
        RawQuote(SESSION, 1.31, "P GRF 120 MAR11", 120.0, date(2011, 3, 18)),
    ]


@pytest.fixture
def memory_source(grf_quotes, grf_option_legs) -> InMemoryQuoteSource:
    """In-memory source holding GRF history and its option chain."""
    return InMemoryQuoteSource(
        historical={"GRF": grf_quotes},
        options={("GRF", SESSION): grf_option_legs},
    )


@pytest.fixture
def mock_source() -> Mock:
    """Quote source mock returning nothing by default."""
    source = Mock(spec=BaseQuoteSource)
    source.fetch_historical_quotes.return_value = []
    source.fetch_option_quotes.return_value = []
    source.get_ticker_list.return_value = []
    return source


@pytest.fixture
def make_provider(tmp_path):
    """Build a provider isolated from any provider.yaml in the repository."""
    def _make(source, **kwargs) -> MarketDataProvider:
        kwargs.setdefault("config_dir", tmp_path)
        return MarketDataProvider(source, **kwargs)
    return _make


@pytest.fixture
def scalar_query() -> Query:
    """Single quote request for GRF on 2011-01-31."""
    return Query(ticker="GRF", field="close", data_type=DataType.SCALAR, date=SESSION)
