"""Tests for per-column statistics, indicators and the aggregate summary."""

import pytest

from dataset_quality import Dataset, build_indicators, compute_column_stats, summarize
from dataset_quality.column_stats import percentage


class TestColumnStats:
    """Tests for compute_column_stats."""

    def test_example_dataset(self, example_dataset):
        stats = compute_column_stats(example_dataset)

        a = stats["A"]
        assert (a.missing_count, a.present_count, a.unique_count) == (2, 3, 2)
        assert a.missing_rate == pytest.approx(40.0)
        assert a.unique_rate == pytest.approx(40.0)

        b = stats["B"]
        assert (b.missing_count, b.present_count, b.unique_count) == (1, 4, 3)
        assert b.missing_rate == pytest.approx(20.0)
        assert b.unique_rate == pytest.approx(60.0)

    def test_unique_rate_is_relative_to_all_rows(self):
        dataset = Dataset(["a"], [{"a": 1}, {"a": None}, {"a": None}, {"a": None}])
        stats = compute_column_stats(dataset)["a"]
        # 1 unique of 4 rows, not of 1 present value
        assert stats.unique_rate == pytest.approx(25.0)

    def test_schema_order_preserved(self, passenger_dataset):
        assert list(compute_column_stats(passenger_dataset)) == passenger_dataset.fields

    def test_counts_add_up(self, passenger_dataset):
        for stats in compute_column_stats(passenger_dataset).values():
            assert stats.missing_count + stats.present_count == passenger_dataset.total_rows
            assert 0 <= stats.missing_rate <= 100
            assert 0 <= stats.unique_rate <= 100

    def test_empty_dataset(self, empty_dataset):
        for stats in compute_column_stats(empty_dataset).values():
            assert stats.missing_count == 0
            assert stats.unique_count == 0
            assert stats.missing_rate == 0
            assert stats.unique_rate == 0

    def test_heterogeneous_values_normalized(self):
        dataset = Dataset(["a"], [{"a": 1}, {"a": "1"}, {"a": 1.0}, {"a": " 1 "}, {"a": "2"}])
        stats = compute_column_stats(dataset)["a"]
        assert stats.missing_count == 0
        assert stats.unique_count == 2

    def test_field_absent_from_record_is_missing(self):
        dataset = Dataset(["a", "b"], [{"a": 1}, {"a": 2, "b": "x"}])
        assert compute_column_stats(dataset)["b"].missing_count == 1

    def test_percentage_zero_guard(self):
        assert percentage(3, 0) == 0.0
        assert percentage(1, 4) == 25.0


class TestIndicators:
    """Tests for build_indicators."""

    def test_example_dataset(self, example_dataset):
        assert build_indicators(example_dataset) == {
            "A": [False, True, False, False, True],
            "B": [False, False, True, False, False],
        }

    def test_empty_dataset(self, empty_dataset):
        assert build_indicators(empty_dataset) == {"A": [], "B": []}


class TestSummarize:
    """Tests for summarize."""

    def test_example_dataset(self, example_dataset):
        summary = summarize(example_dataset, build_indicators(example_dataset))

        assert summary.total_rows == 5
        assert summary.total_fields == 2
        assert summary.total_cells == 10
        assert summary.missing_cells == 3
        assert summary.missing_ratio == pytest.approx(30.0)
        assert summary.rows_with_missing == 3
        assert summary.rows_with_missing_ratio == pytest.approx(60.0)
        assert summary.complete_rows == 2
        assert summary.single_missing_rows == 3
        assert summary.multi_missing_rows == 0
        assert summary.field_missing_counts == {"A": 2, "B": 1}

    def test_row_counts_add_up(self, passenger_dataset):
        summary = summarize(passenger_dataset, build_indicators(passenger_dataset))

        assert summary.rows_with_missing == (
            summary.single_missing_rows + summary.multi_missing_rows
        )
        assert summary.complete_rows + summary.rows_with_missing == summary.total_rows
        # rows 5 and 6 miss Age and Cabin (and Embarked for row 5)
        assert summary.multi_missing_rows == 2
        assert summary.single_missing_rows == 2
        assert summary.field_missing_counts["Cabin"] == 4

    def test_empty_dataset(self, empty_dataset):
        summary = summarize(empty_dataset, build_indicators(empty_dataset))
        assert summary.total_cells == 0
        assert summary.missing_ratio == 0
        assert summary.rows_with_missing_ratio == 0
        assert summary.complete_rows == 0

    def test_zero_fields(self):
        dataset = Dataset([], [{}, {}])
        summary = summarize(dataset, {})
        assert summary.total_rows == 2
        assert summary.total_cells == 0
        assert summary.missing_ratio == 0
        assert summary.complete_rows == 2

    def test_indicator_missing_for_field_is_rebuilt(self, example_dataset):
        indicators = build_indicators(example_dataset)
        del indicators["B"]
        summary = summarize(example_dataset, indicators)
        assert summary.field_missing_counts == {"A": 2, "B": 1}
