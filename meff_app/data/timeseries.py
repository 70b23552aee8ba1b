"""
Time-series normalization for historical quote requests.

This module provides the TimeSeriesNormalizer class that turns the raw quotes
returned by a quote source for a date range into an ordered sequence of dated
scalars, classifying every failure into a QueryResult.
"""

from collections.abc import Callable
from datetime import date
from typing import Optional

from ..errors import ErrorKind
from ..logging.config import get_query_logger, log_query_outcome
from ..sources.base import BaseQuoteSource
from ..utils.time import as_calendar_date
from .models import DatedScalar, QueryResult
from .symbols import preparse_symbol

DEFAULT_FIELD = "close"


def check_field(field: str, supported_field: str = DEFAULT_FIELD) -> Optional[QueryResult]:
    """
    Reject fields other than the supported one.

    Returns:
        An UNSUPPORTED_FIELD result, or None if the field is served
    """
    if field == supported_field:
        return None
    return QueryResult.error(
        ErrorKind.UNSUPPORTED_FIELD,
        f"GetTimeSeries: Market data not available (only {supported_field} values "
        f"are available, {field} was requested)."
    )


class TimeSeriesNormalizer:
    """
    Converts a date range request into a dated scalar sequence.

    The quote source is called once per request. Its quotes are mapped
    one-to-one onto DatedScalar records in the order they were returned;
    nothing is re-sorted or de-duplicated.
    """

    def __init__(self,
                 source: BaseQuoteSource,
                 supported_field: str = DEFAULT_FIELD,
                 preparser: Optional[Callable[[str], str]] = None,
                 service_name: str = "MEFF"):
        """
        Initialize the normalizer.

        Args:
            source: Quote source serving historical quotes
            supported_field: The only field that can be requested
            preparser: Ticker normalization applied before fetching
            service_name: Service name used in error messages
        """
        self.source = source
        self.supported_field = supported_field
        self.preparser = preparser or preparse_symbol
        self.service_name = service_name
        self.logger = get_query_logger(__name__)

    def normalize(self, ticker: str, start: date, end: date, field: str) -> QueryResult:
        """
        Fetch and normalize the quotes of a ticker over [start, end].

        Args:
            ticker: Ticker as written by the caller
            start: First session date (inclusive)
            end: Last session date (inclusive)
            field: Requested field

        Returns:
            QueryResult carrying a non-empty list of DatedScalar, or one of
            UNSUPPORTED_FIELD, PROVIDER_UNAVAILABLE, EMPTY_DATASET
        """
        rejected = check_field(field, self.supported_field)
        if rejected is not None:
            log_query_outcome(self.logger, "time_series", ticker, rejected, {"field": field})
            return rejected

        start = as_calendar_date(start)
        end = as_calendar_date(end)

        try:
            symbol = self.preparser(ticker)
            quotes = self.source.fetch_historical_quotes(symbol, start, end)
            series = [DatedScalar.from_raw(quote) for quote in quotes]
        except Exception as e:
            # Conversion, availability, malformed rows and any other service problem
            self.logger.warning(
                "Quote source request failed",
                ticker=ticker,
                start=start.isoformat(),
                end=end.isoformat(),
                error=str(e),
                error_type=type(e).__name__
            )
            result = QueryResult.error(
                ErrorKind.PROVIDER_UNAVAILABLE,
                f"GetTimeSeries: Market data not available due to problems with "
                f"{self.service_name} service: {e}"
            )
            log_query_outcome(self.logger, "time_series", ticker, result)
            return result

        if not series:
            result = QueryResult.error(
                ErrorKind.EMPTY_DATASET,
                "GetTimeSeries: Market data not available: empty data set for the request."
            )
            log_query_outcome(self.logger, "time_series", ticker, result,
                              {"start": start.isoformat(), "end": end.isoformat()})
            return result

        result = QueryResult.success(series)
        log_query_outcome(self.logger, "time_series", ticker, result, {"rows": len(series)})
        return result
