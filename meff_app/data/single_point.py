"""Single-date quotes served through the time-series path."""

from datetime import date

from ..errors import ErrorKind
from ..logging.config import get_query_logger, log_query_outcome
from ..utils.time import as_calendar_date, same_session
from .models import QueryResult
from .timeseries import TimeSeriesNormalizer


class SinglePointReducer:
    """
    Reduces a zero-width time series to exactly one dated scalar.

    The one-result check is applied here even when the normalizer succeeds.
    """

    def __init__(self, normalizer: TimeSeriesNormalizer):
        self.normalizer = normalizer
        self.logger = get_query_logger(__name__)

    def reduce(self, ticker: str, target: date, field: str) -> QueryResult:
        """
        Get the quote of a ticker on a single session.

        Args:
            ticker: Ticker as written by the caller
            target: Session date
            field: Requested field

        Returns:
            QueryResult carrying one DatedScalar dated ``target``, the
            normalizer's error, or INCONSISTENT_SINGLE_POINT
        """
        target = as_calendar_date(target)
        series_result = self.normalizer.normalize(ticker, target, target, field)

        if series_result.has_errors:
            return series_result

        series = series_result.payload
        if len(series) != 1 or not same_session(series[0].timestamp, target):
            result = QueryResult.error(
                ErrorKind.INCONSISTENT_SINGLE_POINT,
                "GetMarketData: Requested date or Market Data not available."
            )
            log_query_outcome(self.logger, "single_point", ticker, result, {
                "date": target.isoformat(),
                "rows": len(series),
            })
            return result

        result = QueryResult.success(series[0])
        log_query_outcome(self.logger, "single_point", ticker, result, {"date": target.isoformat()})
        return result
