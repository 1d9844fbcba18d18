"""Query contracts: error taxonomy and fail-fast boundary checks.

Key principle:
- Pydantic validates config correctness
- Contracts validate request and data correctness
"""

from cpcrain.contracts.failure import CpcError, InvalidInput, DataUnavailable, CorruptData
from cpcrain.contracts.base import require
from cpcrain.contracts.subarray import assert_subarray, SUBARRAY_DIMS

__all__ = [
    "CpcError",
    "InvalidInput",
    "DataUnavailable",
    "CorruptData",
    "require",
    "assert_subarray",
    "SUBARRAY_DIMS",
]
