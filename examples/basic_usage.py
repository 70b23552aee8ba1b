#!/usr/bin/env python3
"""
Basic Usage Example - MEFF Market Data Provider

This script demonstrates the basic usage of the MEFF market data provider
with quotes loaded from a YAML fixture. It shows how to:
- Initialize the provider on top of a quote source
- Request a single quote, a time series and an option price surface
- Inspect failures through the result status

Run: python examples/basic_usage.py
"""

from datetime import date
from pathlib import Path

from meff_app.data.models import DataType, MarketDataCategory, Query
from meff_app.logging import configure_logging
from meff_app.provider import MarketDataProvider
from meff_app.sources import InMemoryQuoteSource

FIXTURE = Path(__file__).parent / "fixtures" / "meff_quotes.yaml"


def print_result(title: str, result) -> None:
    """Print a query result in a readable form."""
    print(f"\n📊 {title}")
    if result.has_errors:
        print(f"  ❌ {result.error_kind.value}: {result.error_message}")
        return

    payload = result.payload
    if isinstance(payload, list):
        for point in payload:
            print(f"  • {point.timestamp.isoformat()}  {point.value}")
    elif hasattr(payload, "strikes"):
        print(f"  Strikes   : {list(payload.strikes)}")
        print(f"  Maturities: {[m.isoformat() for m in payload.maturities]}")
        for maturity, row in zip(payload.maturities, payload.call_prices):
            print(f"  Calls {maturity.isoformat()}: {list(row)}")
    else:
        print(f"  ✅ {payload.timestamp.isoformat()}  {payload.value}")


def main() -> None:
    configure_logging(level="WARNING")

    source = InMemoryQuoteSource.from_yaml(FIXTURE)
    provider = MarketDataProvider(source)

    print(f"🚀 Provider: {provider.description}")
    print(f"Tickers: {[s.name for s in provider.supported_tickers()]}")
    print(f"Equity prices: {provider.data_availability(MarketDataCategory.EQUITY_PRICE).value}")

    status = provider.test_connectivity()
    print(f"Connectivity: {'OK' if not status.has_errors else status.error_message}")

    print_result(
        "Single quote GRF 2011-01-31",
        provider.dispatch(Query("GRF", "close", DataType.SCALAR, date(2011, 1, 31)))
    )
    print_result(
        "Time series GRF 2011-01-27 → 2011-02-01",
        provider.get_time_series(
            Query("GRF", "close", DataType.SCALAR, date(2011, 1, 27)),
            date(2011, 2, 1)
        )
    )
    print_result(
        "Option surface GRF 2011-01-31",
        provider.dispatch(Query("GRF", "close", DataType.OPTION_CHAIN, date(2011, 1, 31)))
    )
    print_result(
        "Unsupported field",
        provider.dispatch(Query("XYZ", "open", DataType.SCALAR, date(2011, 1, 31)))
    )
    print_result(
        "Weekend (empty data set)",
        provider.dispatch(Query("GRF", "close", DataType.SCALAR, date(2011, 1, 29)))
    )


if __name__ == "__main__":
    main()
