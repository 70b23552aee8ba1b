"""Ticker pre-parsing applied before symbols are sent to the quote service."""

from typing import Optional

from ..config.defaults import SymbolParams


def preparse_symbol(ticker: str, params: Optional[SymbolParams] = None) -> str:
    """
    Normalize a ticker the way the quote service expects it.

    Surrounding whitespace is removed, a configured exchange prefix is
    dropped (``"MEFF:GRF"`` becomes ``"GRF"``) and the result is upper-cased.

    Args:
        ticker: Ticker as written by the caller
        params: Pre-parsing parameters, defaults when omitted

    Returns:
        The ticker to send to the quote source
    """
    params = params or SymbolParams()
    symbol = ticker.strip()

    for prefix in params.strip_prefixes:
        if prefix and symbol.upper().startswith(prefix.upper()):
            symbol = symbol[len(prefix):].strip()
            break

    if params.uppercase:
        symbol = symbol.upper()

    return symbol
