"""Data models for dataset quality analytics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class FieldStatistics:
    """単一カラムの欠損・ユニーク統計"""

    missing_count: int
    present_count: int
    unique_count: int
    missing_rate: float  # 0-100
    unique_rate: float  # 0-100, unique_count / total_rows


@dataclass
class PairSimilarity:
    """2カラム間の欠損パターン類似度 (Jaccard)"""

    field_a: str
    field_b: str
    jaccard: float


@dataclass
class CorrelationResult:
    """欠損相関の分析結果"""

    top_fields: List[str]
    top_pairs: List[PairSimilarity]
    best_pair: Optional[PairSimilarity]


@dataclass
class AggregateSummary:
    """データセット全体の完全性サマリー"""

    total_rows: int
    total_fields: int
    total_cells: int
    missing_cells: int
    missing_ratio: float
    rows_with_missing: int
    rows_with_missing_ratio: float
    complete_rows: int
    single_missing_rows: int
    multi_missing_rows: int
    field_missing_counts: Dict[str, int]


@dataclass
class MissingFilter:
    """欠損フィルタ (target_field が None なら任意カラム)"""

    enabled: bool = False
    target_field: Optional[str] = None


@dataclass
class UniqueFilter:
    """ユニーク値フィルタ"""

    enabled: bool = False
    target_field: Optional[str] = None


@dataclass
class FilterPredicate:
    """行フィルタ条件 (AND結合)"""

    missing_filter: MissingFilter = field(default_factory=MissingFilter)
    unique_filter: UniqueFilter = field(default_factory=UniqueFilter)


@dataclass
class ScatterPoint:
    x: float
    y: float


@dataclass
class NumericCorrelation:
    """数値カラム2つのピアソン相関"""

    x_field: str
    y_field: str
    points: List[ScatterPoint]
    coefficient: Optional[float]


@dataclass
class StatsSummary:
    count: int
    mean: float
    std: float
    min: float
    max: float


@dataclass
class HistogramBin:
    x: float  # bin center
    start: float
    end: float
    count: int
    density: float


@dataclass
class Domain:
    min: float
    max: float


@dataclass
class ColumnDistribution:
    """数値カラムの分布 (正規分布カーブ付き)"""

    field: str
    summary: StatsSummary
    histogram: List[HistogramBin]
    normal_curve: List[ScatterPoint]
    domain: Domain


# Outputs of the analyzer / MCP tools


@dataclass
class ListDatasetsOutput:
    data_root: str
    datasets: List[str]


@dataclass
class ColumnStatisticsOutput:
    path: str
    total_rows: int
    columns: Dict[str, FieldStatistics]


@dataclass
class MissingnessIndicatorsOutput:
    path: str
    fields: List[str]
    indicators: Dict[str, List[bool]]


@dataclass
class MissingnessCorrelationOutput:
    path: str
    correlations: CorrelationResult
    pairs: List[PairSimilarity]


@dataclass
class FilteredRowsOutput:
    path: str
    columns: List[str]
    total_matches: int
    n_rows: int
    rows: List[Dict[str, Optional[Any]]]


@dataclass
class DatasetQualityReport:
    """包括的な欠損・ユニーク性レポート"""

    path: str
    column_statistics: Dict[str, FieldStatistics]
    summary: AggregateSummary
    indicators: Dict[str, List[bool]]
    correlations: CorrelationResult
    filtered_rows: FilteredRowsOutput
