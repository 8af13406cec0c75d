import numpy as np
import pandas as pd
import pytest
from sklearn.preprocessing import StandardScaler

from data import (
    DataUnit,
    GaussianDataset,
    GeneExpressionDataset,
    build_train_test_dataset,
)


def test_linear_dataset():
    x, y = GaussianDataset.linear(n_per_class=25, seed=3)

    assert x.shape == (50, 2)
    assert (y[:25] == 1).all() and (y[25:] == -1).all()
    assert x[:25].mean() > 0 > x[25:].mean()


def test_nonlinear_dataset_is_xor():
    x, y = GaussianDataset.nonlinear(n_per_class=41, std=0.1, seed=0)

    assert x.shape == (82, 2)
    product = x[:, 0] * x[:, 1]
    assert (np.sign(product) == y).all()


def test_generators_are_seeded():
    first, _ = GaussianDataset.nonlinear(seed=5)
    second, _ = GaussianDataset.nonlinear(seed=5)
    third, _ = GaussianDataset.nonlinear(seed=6)

    assert np.array_equal(first, second)
    assert not np.array_equal(first, third)


def test_multi_class_dataset():
    x, y = GaussianDataset.multi_class(n_per_class=10, n_classes=4)

    assert x.shape == (40, 2)
    assert sorted(set(y)) == ["Class 0", "Class 1", "Class 2", "Class 3"]

    df = GaussianDataset.to_frame(x, y)
    assert list(df.columns) == ["X1", "X2", "Label"]


def test_data_unit_from_arrays():
    x, y = GaussianDataset.linear(n_per_class=20)
    unit = DataUnit.build_from_arrays(x, y, train_size=0.75, seed=1)

    assert unit.train_x.shape == (30, 2)
    assert unit.test_x.shape == (10, 2)
    assert sorted(map(tuple, unit.x)) == sorted(map(tuple, x))
    assert set(unit.y) == {-1, 1}


def test_data_unit_maps_labels():
    x = np.zeros((6, 1))
    y = np.array(["ALL", "AML", "ALL", "AML", "ALL", "AML"])
    unit = DataUnit.build_from_arrays(
        x, y, train_size=4, positive_class="ALL", negative_class="AML"
    )

    assert set(unit.train_y) | set(unit.test_y) == {-1, 1}
    assert set(unit.index_to_label(unit.y)) == {"ALL", "AML"}


def test_data_unit_merge():
    x, y = GaussianDataset.linear(n_per_class=10)
    first = DataUnit.build_from_arrays(x, y, seed=0)
    second = DataUnit.build_from_arrays(x, y, seed=1)

    merged = first | second
    assert merged.train_x.shape == (20, 2)

    other = DataUnit.build_from_arrays(x, y, positive_class=-1, negative_class=1)
    with pytest.raises(AssertionError):
        first | other


def test_build_train_test_dataset():
    x, y = GaussianDataset.linear(n_per_class=10)
    df = GaussianDataset.to_frame(x, y)

    res = build_train_test_dataset(
        df, train_size=0.6, positive_class=1, negative_class=-1, to_one_hot=False
    )
    assert len(res["train"]) == 12
    assert len(res["test"]) == 8

    two_fold = build_train_test_dataset(
        df,
        train_size=4,
        positive_class=1,
        negative_class=-1,
        for_two_fold=True,
        return_data_unit=True,
    )
    assert two_fold["before"].train_x.shape == (8, 2)
    assert two_fold["after"].train_x.shape == (12, 2)


@pytest.fixture
def expression_file(tmp_path):
    rng = np.random.default_rng(0)
    df = pd.DataFrame(
        {
            "gene_flat": np.full(8, 5.0),
            "gene_low": rng.normal(5, 0.1, 8),
            "gene_high": rng.normal(5, 3.0, 8).clip(0),
            "Subtype": ["ALL", "AML"] * 4,
        },
        index=[f"patient_{i}" for i in range(8)],
    )
    path = tmp_path / "expression.csv"
    df.to_csv(path)
    return path


def test_load_gene_expression(expression_file):
    df = GeneExpressionDataset.load_file(expression_file)

    assert df.shape == (8, 4)
    assert df.index[0] == "patient_0"


def test_load_gene_expression_missing_label(expression_file):
    with pytest.raises(KeyError):
        GeneExpressionDataset.load_file(expression_file, label="Diagnosis")

    with pytest.raises(FileNotFoundError):
        GeneExpressionDataset.load_file(expression_file.with_name("missing.csv"))


def test_gene_expression_to_arrays(expression_file):
    df = GeneExpressionDataset.load_file(expression_file)

    x, y, genes = GeneExpressionDataset.to_arrays(df, top_genes=2, scaler=StandardScaler())

    assert genes == ["gene_high", "gene_low"]
    assert x.shape == (8, 2)
    assert np.allclose(x.mean(axis=0), 0)

    x_all, _, genes_all = GeneExpressionDataset.to_arrays(df, top_genes=None, log_transform=True)
    assert x_all.shape == (8, 3)
    assert np.allclose(x_all[:, genes_all.index("gene_flat")], np.log2(6.0))

    assert list(GeneExpressionDataset.binary_labels(y, "ALL")) == [1, -1] * 4
