"""
Query translation and normalization module.

Converts market data queries into quote source calls and normalizes the
raw quotes into dated scalars, single points and option price surfaces.
"""
