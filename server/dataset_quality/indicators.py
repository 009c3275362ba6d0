"""Missingness indicator vectors."""

from __future__ import annotations

from typing import Dict, List

from .classifier import missing_mask
from .dataset import Dataset


def build_indicator(dataset: Dataset, field: str) -> List[bool]:
    return missing_mask(dataset.series(field)).tolist()


def build_indicators(dataset: Dataset) -> Dict[str, List[bool]]:
    """For each field, True at row ``i`` iff that row's value is missing."""
    return {field: build_indicator(dataset, field) for field in dataset.fields}
