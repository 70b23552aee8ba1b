"""
Canonical data models for market data queries and their results.

This module defines immutable data structures for the queries accepted by the
provider, the raw quotes returned by quote sources, the normalized records
handed back to callers and the result type that carries them.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Generic, Optional, TypeVar, Union

from ..errors import ErrorKind
from ..utils.time import as_calendar_date

T = TypeVar("T")


class DataType(str, Enum):
    """Kinds of dataset a query can request."""
    SCALAR = "scalar"
    OPTION_CHAIN = "option_chain"

    @classmethod
    def parse(cls, value: Union["DataType", str, None]) -> Optional["DataType"]:
        """Resolve a declared data type, None if it is not a known tag."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class MarketDataCategory(str, Enum):
    """Broad categories of market data a host may ask about."""
    EQUITY_PRICE = "equity_price"
    EQUITY_VOLATILITY_SURFACE = "equity_volatility_surface"
    INTEREST_RATE = "interest_rate"
    FX_RATE = "fx_rate"


class MarketDataAccessType(str, Enum):
    """How a category of data can be reached."""
    LOCAL = "local"
    NOT_AVAILABLE = "not_available"


@dataclass(frozen=True)
class Query:
    """A request for exactly one dataset."""
    ticker: str
    field: str
    data_type: Union[DataType, str]
    date: date
    end_date: Optional[date] = None     # Only meaningful for range queries


@dataclass(frozen=True)
class RawQuote:
    """Quote as returned by a quote source. Option legs fill the optional fields."""
    session_date: date
    settlement_value: float
    contract_code: Optional[str] = None
    strike_price: Optional[float] = None
    maturity_date: Optional[date] = None

    @property
    def is_option(self) -> bool:
        """True if this quote describes an option leg."""
        return self.strike_price is not None and self.maturity_date is not None


@dataclass(frozen=True)
class DatedScalar:
    """Single value observed on a trading session."""
    timestamp: date
    value: float

    @classmethod
    def from_raw(cls, quote: RawQuote) -> "DatedScalar":
        """Build from a raw quote's session date and settlement value."""
        return cls(
            timestamp=as_calendar_date(quote.session_date),
            value=quote.settlement_value
        )


@dataclass(frozen=True)
class OptionQuoteView:
    """The subset of an option leg a surface builder needs."""
    contract_code: Optional[str]
    strike_price: Optional[float]
    maturity_date: Optional[date]
    settlement_value: float

    @classmethod
    def from_raw(cls, quote: RawQuote) -> "OptionQuoteView":
        return cls(
            contract_code=quote.contract_code,
            strike_price=quote.strike_price,
            maturity_date=quote.maturity_date,
            settlement_value=quote.settlement_value,
        )


@dataclass(frozen=True)
class OptionPriceSurface:
    """Option prices indexed by maturity (rows) and strike (columns)."""
    ticker: str
    as_of: date
    strikes: tuple[float, ...]
    maturities: tuple[date, ...]
    call_prices: tuple[tuple[Optional[float], ...], ...]
    put_prices: tuple[tuple[Optional[float], ...], ...]

    def call_price(self, strike: float, maturity: date) -> Optional[float]:
        """Call settlement for a strike/maturity pair, None if not quoted."""
        return self._lookup(self.call_prices, strike, maturity)

    def put_price(self, strike: float, maturity: date) -> Optional[float]:
        """Put settlement for a strike/maturity pair, None if not quoted."""
        return self._lookup(self.put_prices, strike, maturity)

    def _lookup(self, grid, strike: float, maturity: date) -> Optional[float]:
        try:
            row = self.maturities.index(maturity)
            col = self.strikes.index(strike)
        except ValueError:
            return None
        return grid[row][col]


@dataclass(frozen=True)
class SymbolDefinition:
    """A ticker supported by the provider."""
    name: str
    description: str


@dataclass(frozen=True)
class ResultStatus:
    """Outcome flag and message of a single operation."""
    has_errors: bool = False
    error_message: str = ""
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls) -> "ResultStatus":
        """Create a clean status."""
        return cls()

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "ResultStatus":
        """Create a failed status."""
        return cls(has_errors=True, error_message=message, error_kind=kind)


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """
    Result of a query operation: a payload or a classified error.

    The status governs payload validity, so a failed result never carries
    a payload.
    """

    status: ResultStatus
    payload: Optional[T] = None

    def __post_init__(self) -> None:
        if self.status.has_errors and self.payload is not None:
            raise ValueError("A failed QueryResult cannot carry a payload")

    @classmethod
    def success(cls, payload: Any) -> "QueryResult":
        """Create successful result with payload."""
        return cls(status=ResultStatus.ok(), payload=payload)

    @classmethod
    def error(cls, kind: ErrorKind, message: str) -> "QueryResult":
        """Create error result."""
        return cls(status=ResultStatus.failure(kind, message))

    @property
    def ok(self) -> bool:
        return not self.status.has_errors

    @property
    def has_errors(self) -> bool:
        return self.status.has_errors

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.status.error_kind

    @property
    def error_message(self) -> str:
        return self.status.error_message
