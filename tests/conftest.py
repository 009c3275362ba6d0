"""Shared fixtures for dataset quality tests."""

import pytest

from dataset_quality import Dataset, DatasetQualityAnalyzer


@pytest.fixture
def example_dataset() -> Dataset:
    """5 rows, fields [A, B]: A = [1, None, 1, 2, None], B = [x, x, "", y, z]."""
    return Dataset(
        ["A", "B"],
        [
            {"A": 1, "B": "x"},
            {"A": None, "B": "x"},
            {"A": 1, "B": ""},
            {"A": 2, "B": "y"},
            {"A": None, "B": "z"},
        ],
    )


@pytest.fixture
def empty_dataset() -> Dataset:
    return Dataset(["A", "B"], [])


@pytest.fixture
def passenger_dataset() -> Dataset:
    return Dataset(
        ["PassengerId", "Age", "Cabin", "Embarked", "Fare"],
        [
            {"PassengerId": 1, "Age": 22.0, "Cabin": None, "Embarked": "S", "Fare": 7.25},
            {"PassengerId": 2, "Age": 38.0, "Cabin": "C85", "Embarked": "C", "Fare": 71.2833},
            {"PassengerId": 3, "Age": 26.0, "Cabin": None, "Embarked": "S", "Fare": 7.925},
            {"PassengerId": 4, "Age": 35.0, "Cabin": "C123", "Embarked": "S", "Fare": 53.1},
            {"PassengerId": 5, "Age": None, "Cabin": None, "Embarked": "", "Fare": 8.05},
            {"PassengerId": 6, "Age": None, "Cabin": None, "Embarked": "Q", "Fare": 8.4583},
        ],
    )


@pytest.fixture
def data_root(tmp_path):
    root = tmp_path / "data"
    root.mkdir()
    (root / "example.csv").write_text("A,B\n1,x\n,x\n1,\n2,y\n,z\n")
    nested = root / "nested"
    nested.mkdir()
    (nested / "numbers.csv").write_text("x,y,label\n1,2,a\n2,4,b\n3,6,\n4,8,c\n")
    return root


@pytest.fixture
def analyzer(data_root) -> DatasetQualityAnalyzer:
    return DatasetQualityAnalyzer(data_root, preview_rows=20)
