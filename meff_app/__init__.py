"""
MEFF App - Market Data Query Engine

Answers market-data queries (single quote, date-range time series and
option-chain price surfaces) against the MEFF quote service and normalizes
the results into typed records with an explicit result/status protocol.
"""

__version__ = "0.1.0"
__author__ = "MEFF App Team"
