"""
Error kinds reported through query results.

Every failure the query engine can produce is tagged with exactly one of
these kinds. They are data returned to the caller, never raised.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classified query failures."""
    UNSUPPORTED_FIELD = "unsupported_field"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    EMPTY_DATASET = "empty_dataset"
    INCONSISTENT_SINGLE_POINT = "inconsistent_single_point"
    UNSUPPORTED_DATA_TYPE = "unsupported_data_type"
    SURFACE_BUILD_FAILURE = "surface_build_failure"
