"""Numeric column helpers: pair correlation and value distributions."""

from __future__ import annotations

import math
import warnings
from numbers import Real
from typing import Any, List, Optional, Sequence

import numpy as np
from scipy import stats

from .classifier import is_missing
from .dataclass import (
    ColumnDistribution,
    Domain,
    HistogramBin,
    NumericCorrelation,
    ScatterPoint,
    StatsSummary,
)
from .dataset import Dataset

DEFAULT_BINS = 30
MIN_BINS = 5
MAX_BINS = 200
CURVE_POINTS = 200


def as_number(value: Any) -> Optional[float]:
    """Float value of a present real number; None for anything else.

    Booleans and numeric-looking strings are not numbers here.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        return None
    if is_missing(value):
        return None
    return float(value)


def numeric_values(dataset: Dataset, field: str) -> List[float]:
    values = (as_number(value) for value in dataset.column(field))
    return [value for value in values if value is not None]


def numeric_correlation(
    dataset: Dataset, x_field: str, y_field: str
) -> NumericCorrelation:
    """Scatter points and Pearson coefficient for two numeric fields.

    Only rows where both values are present numbers contribute.
    """
    points: List[ScatterPoint] = []
    for x, y in zip(dataset.column(x_field), dataset.column(y_field)):
        x, y = as_number(x), as_number(y)
        if x is not None and y is not None:
            points.append(ScatterPoint(x=x, y=y))

    coefficient = None
    if len(points) > 1:
        with warnings.catch_warnings():
            # constant input yields nan with a warning
            warnings.simplefilter("ignore")
            r = stats.pearsonr([p.x for p in points], [p.y for p in points])[0]
        if math.isfinite(r):
            coefficient = float(r)

    return NumericCorrelation(
        x_field=x_field, y_field=y_field, points=points, coefficient=coefficient
    )


def compute_stats(values: Sequence[float]) -> StatsSummary:
    """Count, mean, population std, min and max over finite values."""
    array = np.asarray(values, dtype=float)
    finite = array[np.isfinite(array)]
    if finite.size == 0:
        return StatsSummary(count=0, mean=0.0, std=0.0, min=0.0, max=0.0)
    return StatsSummary(
        count=int(finite.size),
        mean=float(finite.mean()),
        std=float(finite.std()),
        min=float(finite.min()),
        max=float(finite.max()),
    )


def suggest_bin_count(values: Sequence[float], default_bins: int = DEFAULT_BINS) -> int:
    """Freedman-Diaconis bin count, clamped to [5, 200]."""
    if len(values) < 2:
        return max(MIN_BINS, min(10, default_bins))

    ordered = np.sort(np.asarray(values, dtype=float))
    n = ordered.size
    q1 = ordered[int(math.floor(0.25 * (n - 1)))]
    q3 = ordered[int(math.floor(0.75 * (n - 1)))]
    with np.errstate(invalid="ignore"):
        bin_width = 2 * (q3 - q1) / np.cbrt(n)
    if not np.isfinite(bin_width) or bin_width <= 0:
        return default_bins

    span = (ordered[-1] - ordered[0]) / bin_width
    if not np.isfinite(span):
        return MAX_BINS
    return int(max(MIN_BINS, min(MAX_BINS, math.ceil(span))))


def histogram(values: Sequence[float], bin_count: int = DEFAULT_BINS) -> List[HistogramBin]:
    """Equal-width histogram; density is normalized by bin width and count."""
    array = np.asarray(values, dtype=float)
    if array.size == 0:
        return []

    finite = array[np.isfinite(array)]
    if finite.size == 0 or finite.min() == finite.max():
        v = float(finite.min()) if finite.size else 0.0
        return [HistogramBin(x=v, start=v, end=v, count=int(array.size), density=1.0)]

    low, high = float(finite.min()), float(finite.max())
    counts, edges = np.histogram(finite, bins=bin_count, range=(low, high))
    width = (high - low) / bin_count
    n = array.size
    return [
        HistogramBin(
            x=float((edges[i] + edges[i + 1]) / 2),
            start=float(edges[i]),
            end=float(edges[i + 1]),
            count=int(count),
            density=float(count / (n * width)),
        )
        for i, count in enumerate(counts)
    ]


def normal_curve(
    domain_min: float,
    domain_max: float,
    mean: float,
    std: float,
    points: int = CURVE_POINTS,
) -> List[ScatterPoint]:
    """Normal density sampled at ``points + 1`` evenly spaced x values.

    The density is 0 everywhere when ``std <= 0``.
    """
    xs = np.linspace(domain_min, domain_max, points + 1)
    if std > 0:
        ys = stats.norm.pdf(xs, loc=mean, scale=std)
    else:
        ys = np.zeros_like(xs)
    return [ScatterPoint(x=float(x), y=float(y)) for x, y in zip(xs, ys)]


def column_distribution(
    dataset: Dataset, field: str, bins: Optional[int] = None
) -> ColumnDistribution:
    """Summary, histogram and fitted normal curve of a numeric field.

    The domain spans the histogram bins, or the value range when there are
    no bins.
    """
    values = numeric_values(dataset, field)
    summary = compute_stats(values)
    bin_count = bins if bins and bins > 0 else suggest_bin_count(values)
    histogram_bins = histogram(values, bin_count)

    if histogram_bins:
        domain = Domain(min=histogram_bins[0].start, max=histogram_bins[-1].end)
    else:
        domain = Domain(min=summary.min, max=summary.max)

    return ColumnDistribution(
        field=field,
        summary=summary,
        histogram=histogram_bins,
        normal_curve=normal_curve(domain.min, domain.max, summary.mean, summary.std),
        domain=domain,
    )
