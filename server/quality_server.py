"""MCP server for dataset missingness and uniqueness analysis."""

import logging
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP
from dataset_quality import (
    AggregateSummary,
    ColumnDistribution,
    ColumnStatisticsOutput,
    DatasetQualityAnalyzer,
    DatasetQualityReport,
    FilteredRowsOutput,
    FilterPredicate,
    ListDatasetsOutput,
    MissingFilter,
    MissingnessCorrelationOutput,
    MissingnessIndicatorsOutput,
    NumericCorrelation,
    UniqueFilter,
)
from dataset_quality.config import settings

logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP(
    "mcp-dataset-quality",
    stateless_http=True,
    host=settings.HOST,
    port=settings.PORT,
)

# Initialize analyzer instance
analyzer = DatasetQualityAnalyzer(settings.DATA_ROOT, preview_rows=settings.PREVIEW_ROWS)


def _predicate(
    missing_only: bool,
    missing_field: Optional[str],
    unique_only: bool,
    unique_field: Optional[str],
) -> FilterPredicate:
    return FilterPredicate(
        missing_filter=MissingFilter(enabled=missing_only, target_field=missing_field),
        unique_filter=UniqueFilter(enabled=unique_only, target_field=unique_field),
    )


# MCP Tool Wrappers


@mcp.tool()
def list_datasets() -> ListDatasetsOutput:
    """List CSV files available under the data directory."""
    return analyzer.list_datasets()


@mcp.tool()
def column_statistics(path: str) -> ColumnStatisticsOutput:
    """Return missing/unique counts and rates for each column."""
    return analyzer.column_statistics(path)


@mcp.tool()
def missingness_indicators(path: str) -> MissingnessIndicatorsOutput:
    """Return the per-column missingness indicator matrix."""
    return analyzer.missingness_indicators(path)


@mcp.tool()
def missingness_correlations(path: str) -> MissingnessCorrelationOutput:
    """
    Rank columns by missing count and column pairs by missingness similarity.

    Args:
        path: Path to CSV file

    Returns:
        MissingnessCorrelationOutput with the top 3 fields, the top 5 pairs,
        the best pair and the Jaccard similarity of every pair

    Example:
        >>> missingness_correlations("titanic.csv")
    """
    return analyzer.missingness_correlations(path)


@mcp.tool()
def missingness_summary(path: str) -> AggregateSummary:
    """Summarise missing cells and complete/incomplete rows."""
    return analyzer.missingness_summary(path)


@mcp.tool()
def filter_rows(
    path: str,
    missing_only: bool = False,
    missing_field: Optional[str] = None,
    unique_only: bool = False,
    unique_field: Optional[str] = None,
    limit: Optional[int] = None,
) -> FilteredRowsOutput:
    """
    Filter rows by missing values and/or unique values. Filters combine with AND.

    Args:
        path: Path to CSV file
        missing_only: Keep rows with a missing value
        missing_field: Column checked by the missing filter (None for any column)
        unique_only: Keep rows whose ``unique_field`` value occurs exactly once
        unique_field: Column checked by the uniqueness filter
        limit: Maximum number of rows returned

    Example:
        >>> filter_rows("titanic.csv", missing_only=True, missing_field="Age")
    """
    predicate = _predicate(missing_only, missing_field, unique_only, unique_field)
    return analyzer.filter_rows(path, predicate, limit)


@mcp.tool()
def analyze_dataset(
    path: str,
    missing_only: bool = False,
    missing_field: Optional[str] = None,
    unique_only: bool = False,
    unique_field: Optional[str] = None,
    limit: Optional[int] = None,
) -> DatasetQualityReport:
    """
    Generate a full missingness/uniqueness report for the dataset.

    Args:
        path: Path to CSV file
        missing_only: Keep rows with a missing value in the filtered view
        missing_field: Column checked by the missing filter (None for any column)
        unique_only: Keep rows whose ``unique_field`` value occurs exactly once
        unique_field: Column checked by the uniqueness filter
        limit: Maximum number of filtered rows returned

    Returns:
        DatasetQualityReport with column statistics, summary, indicator
        matrix, correlation rankings and the filtered rows
    """
    predicate = _predicate(missing_only, missing_field, unique_only, unique_field)
    return analyzer.analyze(path, predicate, limit)


@mcp.tool()
def numeric_correlation(path: str, x_field: str, y_field: str) -> NumericCorrelation:
    """Return scatter points and the Pearson coefficient of two numeric columns."""
    return analyzer.numeric_correlation(path, x_field, y_field)


@mcp.tool()
def column_distribution(
    path: str, field: str, bins: Optional[int] = None
) -> ColumnDistribution:
    """Return stats, a histogram and a fitted normal curve for a numeric column."""
    return analyzer.column_distribution(path, field, bins)


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Serving %s over %s", settings.DATA_ROOT, settings.TRANSPORT)
    mcp.run(transport=settings.TRANSPORT)


if __name__ == "__main__":
    main()
