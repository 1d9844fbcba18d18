"""Shared building blocks for the cpcrain config schemas.

CpcBaseModel carries the validation settings every layer uses; the
annotated field types below are the constraints that more than one
layer (param, user, internal) must agree on.
"""

from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict


def check_filename_pattern(v):
    """Filename patterns are formatted with the year; reject ones without it."""
    if v is not None and "{year}" not in v:
        raise ValueError(f"filename_pattern must contain '{{year}}', got {v!r}")
    return v


def normalize_level(v):
    """Accept lowercase level names."""
    if isinstance(v, str):
        return v.upper().strip()
    return v


FilenamePattern = Annotated[str, AfterValidator(check_filename_pattern)]
LogLevel = Annotated[
    Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    BeforeValidator(normalize_level),
]


class CpcBaseModel(BaseModel):
    """Base model for all cpcrain configuration schemas.

    Unknown fields are rejected, assignments are re-validated and string
    values are stripped. UserConfig relaxes ``extra``; InternalConfig adds
    ``frozen``.
    """

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        str_strip_whitespace=True,
    )
