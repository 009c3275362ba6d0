"""Immutable tabular snapshot consumed by the analytics functions."""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

import pandas as pd


def _ensure_serializable(values: Iterable) -> List[Optional[object]]:
    """Convert values to JSON-serializable format."""
    import numpy as np

    serializable: List[Optional[object]] = []
    for value in values:
        if pd.api.types.is_scalar(value) and pd.isna(value):
            serializable.append(None)
        elif isinstance(value, (np.integer, np.floating, np.bool_)):
            # Convert numpy scalar types to Python types
            serializable.append(value.item())
        elif isinstance(value, np.ndarray):
            serializable.append(value.tolist())
        else:
            serializable.append(value)
    return serializable


class Dataset:
    """Ordered schema plus ordered records.

    Every record is normalized against the schema once: fields missing from
    a record are stored as ``None`` and keys outside the schema are dropped.
    Row order is display order and tie-break order.
    """

    def __init__(
        self, fields: Sequence[str], records: Iterable[Mapping[str, Any]] = ()
    ):
        fields = list(fields)
        duplicates = [name for name, count in Counter(fields).items() if count > 1]
        if duplicates:
            raise ValueError(f"Duplicate field names in schema: {duplicates}")

        self._fields = tuple(fields)
        self._records = tuple(
            {name: record.get(name) for name in self._fields} for record in records
        )

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        fields: Optional[Sequence[str]] = None,
    ) -> "Dataset":
        """Build a dataset, inferring the schema from first-seen keys when
        ``fields`` is not given."""
        records = list(records)
        if fields is None:
            inferred: Dict[str, None] = {}
            for record in records:
                for key in record:
                    inferred.setdefault(key, None)
            fields = list(inferred)
        return cls(fields, records)

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "Dataset":
        """Build a dataset from a DataFrame, converting NaN to None."""
        fields = [str(column) for column in df.columns]
        records = [
            dict(zip(fields, _ensure_serializable(row)))
            for row in df.itertuples(index=False, name=None)
        ]
        return cls(fields, records)

    @property
    def fields(self) -> List[str]:
        return list(self._fields)

    @property
    def records(self) -> List[Dict[str, Any]]:
        return [dict(record) for record in self._records]

    @property
    def total_rows(self) -> int:
        return len(self._records)

    @property
    def total_fields(self) -> int:
        return len(self._fields)

    def __len__(self) -> int:
        return self.total_rows

    def __contains__(self, field: object) -> bool:
        return field in self._fields

    def column(self, field: str) -> List[Any]:
        """Values of ``field`` in row order; all None for an unknown field."""
        return [record.get(field) for record in self._records]

    def series(self, field: str) -> pd.Series:
        return pd.Series(
            self.column(field),
            index=pd.RangeIndex(self.total_rows),
            dtype=object,
            name=field,
        )

    @property
    def frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {name: self.series(name) for name in self._fields},
            index=pd.RangeIndex(self.total_rows),
            columns=list(self._fields),
        )

    def __repr__(self) -> str:
        return f"Dataset(fields={list(self._fields)!r}, rows={self.total_rows})"
