"""Row filtering by missing and uniqueness predicates."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from .classifier import missing_mask, normalize
from .dataclass import FilterPredicate
from .dataset import Dataset


def any_missing_mask(dataset: Dataset) -> pd.Series:
    """True for rows that have at least one missing value."""
    mask = pd.Series(False, index=pd.RangeIndex(dataset.total_rows), dtype=bool)
    for field in dataset.fields:
        mask |= missing_mask(dataset.series(field))
    return mask


def unique_value_mask(series: pd.Series) -> pd.Series:
    """True where the value is present and its normalized form occurs once.

    Frequencies are counted over the present values of the whole series.
    """
    missing = missing_mask(series)
    present = series[~missing].map(normalize)
    frequency = present.map(present.value_counts())
    return (frequency == 1).reindex(series.index, fill_value=False).astype(bool)


def filter_rows(dataset: Dataset, predicate: FilterPredicate) -> List[Dict[str, Any]]:
    """Apply the enabled filters (AND-combined), keeping original row order.

    Either filter targeting a field outside the schema matches nothing.
    """
    keep = pd.Series(True, index=pd.RangeIndex(dataset.total_rows), dtype=bool)

    missing_filter = predicate.missing_filter
    if missing_filter.enabled:
        target = missing_filter.target_field
        if target is None:
            keep &= any_missing_mask(dataset)
        elif target in dataset:
            keep &= missing_mask(dataset.series(target))
        else:
            keep &= False

    unique_filter = predicate.unique_filter
    if unique_filter.enabled and unique_filter.target_field is not None:
        keep &= unique_value_mask(dataset.series(unique_filter.target_field))

    records = dataset.records
    return [records[i] for i in np.flatnonzero(keep.to_numpy())]


def take(rows: Sequence[Dict[str, Any]], limit: Optional[int]) -> List[Dict[str, Any]]:
    """Prefix of ``rows``; no cap when ``limit`` is None or negative."""
    if limit is None or limit < 0:
        return list(rows)
    return list(rows[:limit])
