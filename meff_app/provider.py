"""
Main market data provider.

Entry point of the query engine: routes each query to the single-point,
time-series or option-chain path and exposes the provider surface
(description, ticker discovery, data availability, connectivity test).
"""

from datetime import date
from functools import partial
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.defaults import SymbolParams
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import (
    DataType,
    MarketDataAccessType,
    MarketDataCategory,
    Query,
    QueryResult,
    ResultStatus,
    SymbolDefinition,
)
from .data.option_chain import OptionChainAssembler
from .data.single_point import SinglePointReducer
from .data.symbols import preparse_symbol
from .data.timeseries import TimeSeriesNormalizer, check_field
from .errors import ConfigurationError, ErrorKind
from .logging.config import get_query_logger, log_query_outcome
from .sources.base import BaseQuoteSource
from .surfaces.base import BaseSurfaceBuilder
from .surfaces.grid import GridSurfaceBuilder
from .utils.time import as_calendar_date

logger = structlog.get_logger(__name__)

_LOCAL_CATEGORIES = (
    MarketDataCategory.EQUITY_PRICE,
    MarketDataCategory.EQUITY_VOLATILITY_SURFACE,
)


class MarketDataProvider:
    """
    Market data provider backed by the MEFF quote service.

    Manages the query pipeline:
    Query → Dispatch → (Single Point → Time Series | Option Chain) → QueryResult
    """

    def __init__(self,
                 source: BaseQuoteSource,
                 surface_builder: Optional[BaseSurfaceBuilder] = None,
                 config: Optional[dict[str, Any]] = None,
                 config_dir: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize the provider.

        Args:
            source: Quote source used for every request
            surface_builder: Option surface builder, GridSurfaceBuilder by default
            config: Configuration overrides (highest precedence)
            config_dir: Directory holding provider.yaml

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        self.logger = logger
        self.query_logger = get_query_logger(__name__)

        loader = ConfigLoader.create(Path(config_dir) if config_dir is not None else None)
        self.config = loader.merge_config(config)

        validation_errors = ConfigValidator.validate_config(self.config)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            self.logger.error("Provider configuration validation failed", errors=error_msgs)
            raise ConfigurationError("Invalid provider configuration", errors=validation_errors)

        provider_cfg = self.config["provider"]
        symbol_cfg = self.config["symbols"]
        self.supported_field: str = self.config["query"]["supported_field"]
        self.symbol_description: str = provider_cfg["symbol_description"]
        self._description: str = provider_cfg["description"]

        symbol_params = SymbolParams(
            strip_prefixes=tuple(symbol_cfg["strip_prefixes"]),
            uppercase=symbol_cfg["uppercase"],
        )

        self.source = source
        self.normalizer = TimeSeriesNormalizer(
            source,
            supported_field=self.supported_field,
            preparser=partial(preparse_symbol, params=symbol_params),
            service_name=self._description,
        )
        self.reducer = SinglePointReducer(self.normalizer)
        self.assembler = OptionChainAssembler(
            source,
            surface_builder or GridSurfaceBuilder(),
            service_name=self._description,
        )

        self.logger.info(
            "Market data provider initialized",
            provider=self._description,
            source=getattr(source, "name", type(source).__name__)
        )

    @property
    def description(self) -> str:
        """User friendly name of the provider."""
        return self._description

    @property
    def credentials(self) -> None:
        return None

    @credentials.setter
    def credentials(self, value: Any) -> None:
        # The service is anonymous
        pass

    def dispatch(self, query: Query) -> QueryResult:
        """
        Answer a query with a single dated scalar or an option price surface.

        Args:
            query: The dataset request

        Returns:
            QueryResult carrying a DatedScalar (scalar queries) or an
            OptionPriceSurface (option chain queries)
        """
        rejected = check_field(query.field, self.supported_field)
        if rejected is not None:
            log_query_outcome(self.query_logger, "dispatch", query.ticker, rejected,
                              {"field": query.field})
            return rejected

        data_type = DataType.parse(query.data_type)

        if data_type is DataType.OPTION_CHAIN:
            return self.assembler.assemble(query.ticker, query.date)
        if data_type is DataType.SCALAR:
            # Equal start/end date gives the quote of the day
            return self.reducer.reduce(query.ticker, query.date, query.field)

        result = self._unsupported_data_type(query)
        log_query_outcome(self.query_logger, "dispatch", query.ticker, result)
        return result

    def get_market_data(self, query: Query) -> QueryResult:
        """Alias of dispatch."""
        return self.dispatch(query)

    def get_time_series(self, query: Query, end: Optional[date] = None) -> QueryResult:
        """
        Get the historical series of a scalar query from ``query.date`` to ``end``.

        Args:
            query: The dataset request, ``query.date`` is the first session
            end: Last session, ``query.end_date`` when omitted

        Returns:
            QueryResult carrying a list of DatedScalar
        """
        rejected = check_field(query.field, self.supported_field)
        if rejected is not None:
            log_query_outcome(self.query_logger, "time_series", query.ticker, rejected,
                              {"field": query.field})
            return rejected

        if DataType.parse(query.data_type) is not DataType.SCALAR:
            result = self._unsupported_data_type(query)
            log_query_outcome(self.query_logger, "time_series", query.ticker, result)
            return result

        if end is None:
            end = query.end_date if query.end_date is not None else query.date

        return self.normalizer.normalize(query.ticker, query.date, end, query.field)

    def supported_tickers(self, filter: Optional[str] = None) -> list[SymbolDefinition]:
        """
        List the tickers supported by the provider.

        Args:
            filter: Keep only tickers starting with this prefix

        Returns:
            Symbol definitions for the matching tickers
        """
        tickers = self.source.get_ticker_list()

        if filter is not None:
            tickers = [ticker for ticker in tickers if ticker.startswith(filter)]

        return [SymbolDefinition(ticker, self.symbol_description) for ticker in tickers]

    def data_availability(self, category: MarketDataCategory) -> MarketDataAccessType:
        """Report how a category of market data can be reached."""
        if category in _LOCAL_CATEGORIES:
            return MarketDataAccessType.LOCAL
        return MarketDataAccessType.NOT_AVAILABLE

    def test_connectivity(self) -> ResultStatus:
        """
        Check that the quote service is reachable and answers as expected.

        A well known series is requested and its row count compared with the
        expected one; the values themselves are not checked.

        Returns:
            ResultStatus, clean when the service works
        """
        probe = self.config["connectivity"]
        probe_date = as_calendar_date(probe["probe_date"])

        try:
            quotes = self.source.fetch_historical_quotes(probe["probe_ticker"], probe_date, probe_date)
        except Exception as e:
            self.logger.warning("Connectivity test failed", error=str(e))
            return ResultStatus.failure(
                ErrorKind.PROVIDER_UNAVAILABLE,
                f"Unable to connect to {self._description} service: {e}"
            )

        if len(quotes) != probe["expected_rows"]:
            self.logger.warning(
                "Connectivity test returned unexpected data",
                rows=len(quotes),
                expected_rows=probe["expected_rows"]
            )
            return ResultStatus.failure(
                ErrorKind.PROVIDER_UNAVAILABLE,
                f"Data from {self._description} not available or unreliable."
            )

        self.logger.info("Connectivity test passed", provider=self._description)
        return ResultStatus.ok()

    def _unsupported_data_type(self, query: Query) -> QueryResult:
        declared = getattr(query.data_type, "value", query.data_type)
        return QueryResult.error(
            ErrorKind.UNSUPPORTED_DATA_TYPE,
            f"GetTimeSeries: Market data request type ({declared}) not supported "
            f"by the Market Data Provider."
        )
