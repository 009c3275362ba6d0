"""Dataset quality analytics: missingness, uniqueness and row filtering."""

from .analyzer import DatasetQualityAnalyzer
from .classifier import is_missing, normalize
from .column_stats import compute_column_stats
from .correlation import compute_correlations, pair_similarities
from .dataclass import (
    AggregateSummary,
    ColumnDistribution,
    ColumnStatisticsOutput,
    CorrelationResult,
    DatasetQualityReport,
    Domain,
    FieldStatistics,
    FilteredRowsOutput,
    FilterPredicate,
    ListDatasetsOutput,
    MissingFilter,
    MissingnessCorrelationOutput,
    MissingnessIndicatorsOutput,
    NumericCorrelation,
    PairSimilarity,
    UniqueFilter,
)
from .dataset import Dataset
from .indicators import build_indicators
from .numeric import column_distribution, numeric_correlation
from .row_filter import filter_rows, take
from .summary import summarize

__all__ = [
    "DatasetQualityAnalyzer",
    "Dataset",
    "is_missing",
    "normalize",
    "compute_column_stats",
    "build_indicators",
    "compute_correlations",
    "pair_similarities",
    "summarize",
    "filter_rows",
    "take",
    "numeric_correlation",
    "column_distribution",
    "AggregateSummary",
    "ColumnDistribution",
    "ColumnStatisticsOutput",
    "CorrelationResult",
    "DatasetQualityReport",
    "Domain",
    "FieldStatistics",
    "FilteredRowsOutput",
    "FilterPredicate",
    "ListDatasetsOutput",
    "MissingFilter",
    "MissingnessCorrelationOutput",
    "MissingnessIndicatorsOutput",
    "NumericCorrelation",
    "PairSimilarity",
    "UniqueFilter",
]
