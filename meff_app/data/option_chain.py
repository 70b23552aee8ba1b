"""Option chain snapshots assembled into option price surfaces."""

from datetime import date

from ..errors import ErrorKind
from ..logging.config import get_query_logger, log_query_outcome
from ..sources.base import BaseQuoteSource
from ..surfaces.base import BaseSurfaceBuilder
from ..utils.time import as_calendar_date
from .models import OptionQuoteView, QueryResult


class OptionChainAssembler:
    """
    Fetches an option chain and hands it to a surface builder.

    The chain is a snapshot on one session; no quote-count validation is done
    here, the builder's outcome governs success.
    """

    def __init__(self, source: BaseQuoteSource, builder: BaseSurfaceBuilder,
                 service_name: str = "MEFF"):
        self.source = source
        self.builder = builder
        self.service_name = service_name
        self.logger = get_query_logger(__name__)

    def assemble(self, ticker: str, as_of: date) -> QueryResult:
        """
        Build the option price surface of an underlying on a session.

        Args:
            ticker: Underlying ticker
            as_of: Session date of the chain

        Returns:
            QueryResult carrying an OptionPriceSurface, PROVIDER_UNAVAILABLE,
            or the builder's error unchanged
        """
        as_of = as_calendar_date(as_of)

        try:
            options = self.source.fetch_option_quotes(ticker, as_of)
        except Exception as e:
            self.logger.warning(
                "Option chain request failed",
                ticker=ticker,
                date=as_of.isoformat(),
                error=str(e),
                error_type=type(e).__name__
            )
            result = QueryResult.error(
                ErrorKind.PROVIDER_UNAVAILABLE,
                f"GetMarketData: Option chain not available due to problems with "
                f"{self.service_name} service: {e}"
            )
            log_query_outcome(self.logger, "option_chain", ticker, result)
            return result

        views = [OptionQuoteView.from_raw(quote) for quote in options]

        for view in views:
            self.logger.debug(
                "Option leg",
                contract=view.contract_code,
                strike=view.strike_price,
                maturity=view.maturity_date,
                settlement=view.settlement_value
            )

        try:
            built = self.builder.build(ticker, as_of, views)
        except Exception as e:
            self.logger.error(
                "Surface builder raised",
                ticker=ticker,
                error=str(e),
                error_type=type(e).__name__
            )
            result = QueryResult.error(
                ErrorKind.SURFACE_BUILD_FAILURE,
                f"GetMarketData: Option price surface could not be built: {e}"
            )
            log_query_outcome(self.logger, "option_chain", ticker, result)
            return result

        if built.has_errors:
            log_query_outcome(self.logger, "option_chain", ticker, built, {"legs": len(views)})
            return built

        result = QueryResult.success(built.payload)
        log_query_outcome(self.logger, "option_chain", ticker, result, {"legs": len(views)})
        return result
