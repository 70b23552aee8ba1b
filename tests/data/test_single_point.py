"""Unit tests for the single-point reducer."""

from datetime import date
from unittest.mock import Mock

from meff_app.data.models import DatedScalar, QueryResult, RawQuote
from meff_app.data.single_point import SinglePointReducer
from meff_app.data.timeseries import TimeSeriesNormalizer
from meff_app.errors import ErrorKind, QuoteSourceTransportError


class TestSinglePointReducer:
    """Test suite for the SinglePointReducer class."""

    def test_single_quote_on_date(self, mock_source, session_date) -> None:
        mock_source.fetch_historical_quotes.return_value = [RawQuote(session_date, 123.4)]
        reducer = SinglePointReducer(TimeSeriesNormalizer(mock_source))

        result = reducer.reduce("GRF", session_date, "close")

        assert result.ok is True
        assert result.payload == DatedScalar(session_date, 123.4)
        mock_source.fetch_historical_quotes.assert_called_once_with(
            "GRF", session_date, session_date
        )

    def test_empty_dataset_passes_through(self, mock_source, session_date) -> None:
        reducer = SinglePointReducer(TimeSeriesNormalizer(mock_source))

        result = reducer.reduce("GRF", session_date, "close")

        assert result.error_kind == ErrorKind.EMPTY_DATASET
        assert result.payload is None

    def test_provider_fault_passes_through(self, mock_source, session_date) -> None:
        mock_source.fetch_historical_quotes.side_effect = QuoteSourceTransportError("timed out")
        reducer = SinglePointReducer(TimeSeriesNormalizer(mock_source))

        result = reducer.reduce("GRF", session_date, "close")

        assert result.error_kind == ErrorKind.PROVIDER_UNAVAILABLE
        assert "timed out" in result.error_message

    def test_normalizer_error_is_returned_unchanged(self, session_date) -> None:
        failure = QueryResult.error(ErrorKind.UNSUPPORTED_FIELD, "nope")
        normalizer = Mock(spec=TimeSeriesNormalizer)
        normalizer.normalize.return_value = failure
        reducer = SinglePointReducer(normalizer)

        result = reducer.reduce("GRF", session_date, "open")

        assert result is failure

    def test_more_than_one_row_is_inconsistent(self, mock_source, session_date) -> None:
        """The one-row rule holds even when the normalizer succeeds."""
        mock_source.fetch_historical_quotes.return_value = [
            RawQuote(session_date, 123.4),
            RawQuote(session_date, 123.5),
        ]
        reducer = SinglePointReducer(TimeSeriesNormalizer(mock_source))

        result = reducer.reduce("GRF", session_date, "close")

        assert result.error_kind == ErrorKind.INCONSISTENT_SINGLE_POINT
        assert result.payload is None
        assert "Requested date or Market Data not available" in result.error_message

    def test_row_on_other_date_is_inconsistent(self, mock_source, session_date) -> None:
        mock_source.fetch_historical_quotes.return_value = [RawQuote(date(2011, 1, 28), 122.5)]
        reducer = SinglePointReducer(TimeSeriesNormalizer(mock_source))

        result = reducer.reduce("GRF", session_date, "close")

        assert result.error_kind == ErrorKind.INCONSISTENT_SINGLE_POINT

    def test_reducer_checks_independently_of_normalizer(self, session_date) -> None:
        normalizer = Mock(spec=TimeSeriesNormalizer)
        normalizer.normalize.return_value = QueryResult.success([
            DatedScalar(session_date, 1.0),
            DatedScalar(date(2011, 2, 1), 2.0),
        ])
        reducer = SinglePointReducer(normalizer)

        result = reducer.reduce("GRF", session_date, "close")

        assert result.error_kind == ErrorKind.INCONSISTENT_SINGLE_POINT
