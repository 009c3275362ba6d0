"""Dataset quality analysis over CSV files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

from .column_stats import compute_column_stats
from .correlation import compute_correlations, pair_similarities
from .dataclass import (
    AggregateSummary,
    ColumnDistribution,
    ColumnStatisticsOutput,
    DatasetQualityReport,
    FilteredRowsOutput,
    FilterPredicate,
    ListDatasetsOutput,
    MissingnessCorrelationOutput,
    MissingnessIndicatorsOutput,
    NumericCorrelation,
)
from .dataset import Dataset
from .indicators import build_indicators
from .numeric import column_distribution, numeric_correlation
from .row_filter import filter_rows, take
from .summary import summarize

logger = logging.getLogger(__name__)


class DatasetQualityAnalyzer:
    """欠損・ユニーク性分析のメインクラス"""

    def __init__(self, data_root: Path, preview_rows: int = 20):
        self.data_root = Path(data_root).resolve()
        self.preview_rows = preview_rows

    def _resolve_csv_path(self, path: str) -> Path:
        """CSVパスの解決"""
        csv_path = Path(path)
        if not csv_path.is_absolute():
            csv_path = self.data_root / csv_path

        try:
            csv_path = csv_path.resolve(strict=True)
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"CSV file not found: {path}") from exc

        if self.data_root not in csv_path.parents and csv_path != self.data_root:
            logger.warning("Rejected path outside data root: %s", path)
            raise ValueError("CSV path must be located within the data directory")

        return csv_path

    def list_datasets(self) -> ListDatasetsOutput:
        """データディレクトリ下の利用可能なCSVファイルをリスト"""
        datasets: List[str] = []
        if self.data_root.exists():
            for csv_file in sorted(self.data_root.rglob("*.csv")):
                try:
                    datasets.append(str(csv_file.relative_to(self.data_root)))
                except ValueError:
                    datasets.append(str(csv_file))
        return ListDatasetsOutput(data_root=str(self.data_root), datasets=datasets)

    def _read(self, path: str) -> Tuple[str, Dataset]:
        csv_path = self._resolve_csv_path(path)
        df = pd.read_csv(csv_path)
        dataset = Dataset.from_frame(df)
        logger.info(
            "Loaded %s (%d rows, %d fields)",
            csv_path,
            dataset.total_rows,
            dataset.total_fields,
        )
        return str(csv_path), dataset

    def load_dataset(self, path: str) -> Dataset:
        """CSVファイルを読み込み、Datasetスナップショットを作成"""
        return self._read(path)[1]

    def column_statistics(self, path: str) -> ColumnStatisticsOutput:
        """各カラムの欠損数・ユニーク数と比率"""
        csv_path, dataset = self._read(path)
        return ColumnStatisticsOutput(
            path=csv_path,
            total_rows=dataset.total_rows,
            columns=compute_column_stats(dataset),
        )

    def missingness_indicators(self, path: str) -> MissingnessIndicatorsOutput:
        """欠損インジケータ行列 (ヒートマップ用)"""
        csv_path, dataset = self._read(path)
        return MissingnessIndicatorsOutput(
            path=csv_path,
            fields=dataset.fields,
            indicators=build_indicators(dataset),
        )

    def missingness_correlations(self, path: str) -> MissingnessCorrelationOutput:
        """カラム間の欠損パターンの相関 (Jaccard)"""
        csv_path, dataset = self._read(path)
        indicators = build_indicators(dataset)
        return MissingnessCorrelationOutput(
            path=csv_path,
            correlations=compute_correlations(indicators),
            pairs=pair_similarities(indicators),
        )

    def missingness_summary(self, path: str) -> AggregateSummary:
        """行単位の完全性サマリー"""
        dataset = self.load_dataset(path)
        return summarize(dataset, build_indicators(dataset))

    def filter_rows(
        self,
        path: str,
        predicate: Optional[FilterPredicate] = None,
        limit: Optional[int] = None,
    ) -> FilteredRowsOutput:
        """
        欠損・ユニーク条件で行を抽出

        Args:
            path: CSVファイルパス
            predicate: フィルタ条件（Noneの場合は全行）
            limit: 返す行数の上限（Noneの場合は preview_rows）
        """
        csv_path, dataset = self._read(path)
        return self._filtered_rows(csv_path, dataset, predicate, limit)

    def _filtered_rows(
        self,
        path: str,
        dataset: Dataset,
        predicate: Optional[FilterPredicate],
        limit: Optional[int],
    ) -> FilteredRowsOutput:
        matches = filter_rows(dataset, predicate or FilterPredicate())
        rows = take(matches, self.preview_rows if limit is None else limit)
        return FilteredRowsOutput(
            path=path,
            columns=dataset.fields,
            total_matches=len(matches),
            n_rows=len(rows),
            rows=rows,
        )

    def analyze(
        self,
        path: str,
        predicate: Optional[FilterPredicate] = None,
        limit: Optional[int] = None,
    ) -> DatasetQualityReport:
        """
        包括的な欠損・ユニーク性レポートを生成

        Args:
            path: CSVファイルパス
            predicate: 行フィルタ条件
            limit: フィルタ結果の行数上限
        """
        csv_path, dataset = self._read(path)
        indicators = build_indicators(dataset)

        return DatasetQualityReport(
            path=csv_path,
            column_statistics=compute_column_stats(dataset),
            summary=summarize(dataset, indicators),
            indicators=indicators,
            correlations=compute_correlations(indicators),
            filtered_rows=self._filtered_rows(csv_path, dataset, predicate, limit),
        )

    def numeric_correlation(
        self, path: str, x_field: str, y_field: str
    ) -> NumericCorrelation:
        """数値カラム2つの散布図データと相関係数"""
        return numeric_correlation(self.load_dataset(path), x_field, y_field)

    def column_distribution(
        self, path: str, field: str, bins: Optional[int] = None
    ) -> ColumnDistribution:
        """数値カラムの基本統計・ヒストグラム・正規分布カーブ"""
        return column_distribution(self.load_dataset(path), field, bins)
