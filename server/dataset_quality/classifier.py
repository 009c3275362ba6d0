"""Missing/present classification of single cell values."""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any

import numpy as np
import pandas as pd


def is_missing(value: Any) -> bool:
    """Return True for None, NaN-like scalars and blank strings.

    ``0``, ``False`` and any non-blank string are present. Values of an
    unexpected type (lists, dicts, ...) are treated as present.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if pd.api.types.is_scalar(value):
        # covers float("nan"), np.nan, pd.NA and pd.NaT
        return bool(pd.isna(value))
    return False


def normalize(value: Any) -> str:
    """Canonical text form used for equality and uniqueness comparisons.

    Never used to decide missingness. Integral floats drop their fractional
    part so that ``1`` and ``1.0`` compare equal.
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if isinstance(value, Integral):
        return str(int(value))
    if isinstance(value, Real):
        number = float(value)
        if math.isfinite(number) and number.is_integer():
            return str(int(number))
        return repr(number)
    return str(value)


def missing_mask(series: pd.Series) -> pd.Series:
    """Boolean mask, True where the value is missing."""
    return series.map(is_missing).astype(bool)
