"""Dataset-wide completeness counters."""

from __future__ import annotations

from typing import Dict, Sequence

import pandas as pd

from .column_stats import percentage
from .dataclass import AggregateSummary
from .dataset import Dataset
from .indicators import build_indicator


def summarize(
    dataset: Dataset, indicators: Dict[str, Sequence[bool]]
) -> AggregateSummary:
    """Count missing cells and classify rows by how many fields they miss.

    Fields of ``dataset`` absent from ``indicators`` are rebuilt from the
    dataset.
    """
    fields = dataset.fields
    total_rows = dataset.total_rows
    total_fields = len(fields)

    matrix = pd.DataFrame(
        {
            field: list(indicators[field])
            if field in indicators
            else build_indicator(dataset, field)
            for field in fields
        },
        index=pd.RangeIndex(total_rows),
        columns=fields,
        dtype=bool,
    )
    missing_in_row = matrix.sum(axis=1).astype(int)

    total_cells = total_rows * total_fields
    missing_cells = int(missing_in_row.sum())
    rows_with_missing = int((missing_in_row > 0).sum())

    return AggregateSummary(
        total_rows=total_rows,
        total_fields=total_fields,
        total_cells=total_cells,
        missing_cells=missing_cells,
        missing_ratio=percentage(missing_cells, total_cells),
        rows_with_missing=rows_with_missing,
        rows_with_missing_ratio=percentage(rows_with_missing, total_rows),
        complete_rows=total_rows - rows_with_missing,
        single_missing_rows=int((missing_in_row == 1).sum()),
        multi_missing_rows=int((missing_in_row > 1).sum()),
        field_missing_counts={field: int(matrix[field].sum()) for field in fields},
    )
