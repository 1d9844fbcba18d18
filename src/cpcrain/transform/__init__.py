"""Dense array <-> long-form table transforms."""

from cpcrain.transform.tidy import melt, densify, TIDY_COLUMNS

__all__ = ["melt", "densify", "TIDY_COLUMNS"]
