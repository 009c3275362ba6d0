"""Per-column missing and unique counts."""

from __future__ import annotations

from typing import Dict

from .classifier import missing_mask, normalize
from .dataclass import FieldStatistics
from .dataset import Dataset


def percentage(part: int, whole: int) -> float:
    """``part / whole * 100``, 0.0 when ``whole`` is 0."""
    if whole == 0:
        return 0.0
    return float(part / whole * 100)


def compute_column_stats(dataset: Dataset) -> Dict[str, FieldStatistics]:
    """Missing/unique statistics for every field, in schema order.

    ``unique_count`` is taken over present values only, while ``unique_rate``
    is relative to the whole table (``unique_count / total_rows``), not to the
    present values.
    """
    total_rows = dataset.total_rows
    stats: Dict[str, FieldStatistics] = {}
    for field in dataset.fields:
        series = dataset.series(field)
        missing = missing_mask(series)
        missing_count = int(missing.sum())
        unique_count = int(series[~missing].map(normalize).nunique())

        stats[field] = FieldStatistics(
            missing_count=missing_count,
            present_count=total_rows - missing_count,
            unique_count=unique_count,
            missing_rate=percentage(missing_count, total_rows),
            unique_rate=percentage(unique_count, total_rows),
        )
    return stats
