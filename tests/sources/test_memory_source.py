"""Tests for the in-memory quote source."""

from datetime import date
from pathlib import Path

import pytest

from meff_app.data.models import RawQuote
from meff_app.errors import QuoteSourceFormatError
from meff_app.sources.memory import InMemoryQuoteSource

FIXTURE = Path(__file__).parent.parent.parent / "examples" / "fixtures" / "meff_quotes.yaml"


class TestInMemoryQuoteSource:
    """Test suite for InMemoryQuoteSource."""

    def test_inclusive_range(self, memory_source) -> None:
        quotes = memory_source.fetch_historical_quotes("GRF", date(2011, 1, 28), date(2011, 1, 31))

        assert [q.session_date for q in quotes] == [date(2011, 1, 28), date(2011, 1, 31)]

    def test_stored_order_is_kept(self) -> None:
        source = InMemoryQuoteSource(historical={"GRF": [
            RawQuote(date(2011, 2, 1), 2.0),
            RawQuote(date(2011, 1, 31), 1.0),
        ]})

        quotes = source.fetch_historical_quotes("GRF", date(2011, 1, 1), date(2011, 12, 31))

        assert [q.settlement_value for q in quotes] == [2.0, 1.0]

    def test_unknown_ticker(self, memory_source) -> None:
        assert memory_source.fetch_historical_quotes("XYZ", date(2011, 1, 1), date(2011, 2, 1)) == []
        assert memory_source.fetch_option_quotes("XYZ", date(2011, 1, 31)) == []

    def test_option_quotes(self, memory_source, grf_option_legs) -> None:
        assert memory_source.fetch_option_quotes("GRF", date(2011, 1, 31)) == grf_option_legs

    def test_ticker_list(self, memory_source) -> None:
        assert memory_source.get_ticker_list() == ["GRF"]
        assert InMemoryQuoteSource(tickers=["SAN", "GRF"]).get_ticker_list() == ["SAN", "GRF"]


class TestFromYaml:
    """Test suite for YAML fixtures."""

    def test_bundled_fixture(self) -> None:
        source = InMemoryQuoteSource.from_yaml(FIXTURE)

        assert source.name == "meff_quotes"
        assert source.get_ticker_list() == ["GRF", "SAN", "TEF"]
        quotes = source.fetch_historical_quotes("GRF", date(2011, 1, 31), date(2011, 1, 31))
        assert quotes == [RawQuote(date(2011, 1, 31), 123.4)]

        legs = source.fetch_option_quotes("GRF", date(2011, 1, 31))
        assert len(legs) == 4
        assert legs[0].contract_code == "C GRF 120 MAR11"
        assert legs[0].strike_price == 120.0
        assert legs[0].maturity_date == date(2011, 3, 18)

    def test_string_dates(self, tmp_path) -> None:
        path = tmp_path / "quotes.yaml"
        path.write_text(
            "historical:\n"
            "  GRF:\n"
            "    - {date: '2011-01-31', value: '123.4'}\n"
        )

        source = InMemoryQuoteSource.from_yaml(path)

        assert source.fetch_historical_quotes("GRF", date(2011, 1, 31), date(2011, 1, 31)) == [
            RawQuote(date(2011, 1, 31), 123.4)
        ]

    def test_missing_value(self, tmp_path) -> None:
        path = tmp_path / "quotes.yaml"
        path.write_text("historical:\n  GRF:\n    - {date: 2011-01-31}\n")

        with pytest.raises(QuoteSourceFormatError):
            InMemoryQuoteSource.from_yaml(path)

    def test_bad_date(self, tmp_path) -> None:
        path = tmp_path / "quotes.yaml"
        path.write_text("historical:\n  GRF:\n    - {date: yesterday, value: 1.0}\n")

        with pytest.raises(QuoteSourceFormatError) as exc_info:
            InMemoryQuoteSource.from_yaml(path)

        assert exc_info.value.expected_format == "YYYY-MM-DD"

    def test_not_a_mapping(self, tmp_path) -> None:
        path = tmp_path / "quotes.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(QuoteSourceFormatError):
            InMemoryQuoteSource.from_yaml(path)
