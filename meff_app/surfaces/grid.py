"""
Strike/maturity grid surface builder.

Places every call and put leg of an option chain on a grid whose rows are
maturities and whose columns are strikes, both ascending.
"""

from datetime import date
from typing import Optional

import structlog

from ..data.models import OptionPriceSurface, OptionQuoteView, QueryResult
from ..errors import ErrorKind
from .base import BaseSurfaceBuilder

logger = structlog.get_logger(__name__)

CALL = "C"
PUT = "P"


def option_kind(contract_code: Optional[str]) -> Optional[str]:
    """Option type marker of a contract code: "C", "P" or None."""
    if not contract_code:
        return None
    marker = contract_code.strip()[:1].upper()
    return marker if marker in (CALL, PUT) else None


class GridSurfaceBuilder(BaseSurfaceBuilder):
    """Reference surface builder producing call and put price grids."""

    def build(self, ticker: str, as_of: date,
              quotes: list[OptionQuoteView]) -> QueryResult:
        legs: dict[str, dict[tuple[date, float], float]] = {CALL: {}, PUT: {}}
        skipped = 0

        for quote in quotes:
            kind = option_kind(quote.contract_code)
            if kind is None or quote.strike_price is None or quote.maturity_date is None:
                skipped += 1
                continue
            legs[kind][(quote.maturity_date, quote.strike_price)] = quote.settlement_value

        if skipped:
            logger.warning(
                "Skipped unclassifiable option legs",
                ticker=ticker,
                skipped=skipped,
                total=len(quotes)
            )

        if not legs[CALL]:
            return QueryResult.error(
                ErrorKind.SURFACE_BUILD_FAILURE,
                f"No call options available for {ticker} on {as_of.isoformat()}."
            )

        points = list(legs[CALL]) + list(legs[PUT])
        maturities = tuple(sorted({maturity for maturity, _ in points}))
        strikes = tuple(sorted({strike for _, strike in points}))

        surface = OptionPriceSurface(
            ticker=ticker,
            as_of=as_of,
            strikes=strikes,
            maturities=maturities,
            call_prices=self._grid(legs[CALL], maturities, strikes),
            put_prices=self._grid(legs[PUT], maturities, strikes),
        )

        logger.debug(
            "Built option price surface",
            ticker=ticker,
            strikes=len(strikes),
            maturities=len(maturities)
        )
        return QueryResult.success(surface)

    @staticmethod
    def _grid(prices: dict[tuple[date, float], float],
              maturities: tuple[date, ...],
              strikes: tuple[float, ...]) -> tuple[tuple[Optional[float], ...], ...]:
        return tuple(
            tuple(prices.get((maturity, strike)) for strike in strikes)
            for maturity in maturities
        )
