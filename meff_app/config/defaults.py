"""Default configuration parameters for the MEFF market data provider."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderParams:
    """Provider identity."""
    description: str = "MEFF"                        # User facing provider name
    symbol_description: str = "MEFF Market Equity"   # Attached to discovered tickers


@dataclass(frozen=True)
class QueryParams:
    """Query handling parameters."""
    supported_field: str = "close"                   # Only settlement prices are served


@dataclass(frozen=True)
class ConnectivityParams:
    """Connectivity self-test parameters."""
    probe_ticker: str = "GRF"                        # Well known series
    probe_date: str = "2011-01-31"                   # ISO date with exactly one session
    expected_rows: int = 1


@dataclass(frozen=True)
class SymbolParams:
    """Ticker pre-parsing parameters."""
    strip_prefixes: tuple[str, ...] = ("MEFF:",)
    uppercase: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    provider: ProviderParams
    query: QueryParams
    connectivity: ConnectivityParams
    symbols: SymbolParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        provider=ProviderParams(),
        query=QueryParams(),
        connectivity=ConnectivityParams(),
        symbols=SymbolParams(),
    )
