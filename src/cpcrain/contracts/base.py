"""Base contract enforcement utilities.

require() is the single enforcement mechanism for all boundary checks.
"""

from typing import Type

from cpcrain.contracts.failure import CpcError, CorruptData


def require(condition: bool, message: str, error: Type[CpcError] = CorruptData) -> None:
    """Enforce a contract at a component boundary.

    Fail-fast: no recovery, no fallback, no silence.

    Parameters
    ----------
    condition : bool
        The invariant that must be true.

    message : str
        Explanation of the violation, surfaced to the caller.

    error : type, optional
        CpcError subclass to raise (default CorruptData).

    Raises
    ------
    CpcError
        The requested subclass, if condition is False.

    Examples
    --------
    >>> require("lon" in da.dims, "SubArray is missing 'lon'", InvalidInput)
    >>> require(n_time == len(calendar), "time axis length mismatch")
    """
    if not condition:
        raise error(message)
