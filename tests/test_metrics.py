import numpy as np
import pytest

from core import SVMParameter
from data import DataUnit
from SVM import SupportVectorMachine
from utils import (
    accuracy_vs_threshold,
    best_parameter,
    cross_validation_run,
    experiment_run,
    plot_accuracy_vs_threshold,
    plot_decision_boundary,
    plot_precision_recall,
    plot_roc,
    precision_recall,
    roc,
)

LABELS = np.array([1, 1, -1, -1, 1, -1])
SCORES = np.array([2.0, 0.5, -1.0, -0.2, 1.0, 0.1])


def test_roc_and_pr_of_perfect_ranking():
    scores = np.array([3.0, 2.0, -1.0, -2.0, 1.0, 0.5])

    assert roc(LABELS, scores).auc == pytest.approx(1.0)
    assert precision_recall(LABELS, scores).average_precision == pytest.approx(1.0)


def test_accuracy_vs_threshold():
    curve = accuracy_vs_threshold(LABELS, SCORES)

    assert np.array_equal(curve.thresholds, np.sort(SCORES))
    # threshold 0.5 separates the classes
    assert curve.best_accuracy == pytest.approx(1.0)
    assert curve.best_threshold == pytest.approx(0.5)
    assert curve.accuracy[0] == pytest.approx(0.5)


def test_plots_are_saved(tmp_path, linear_data):
    curves = {"model": roc(LABELS, SCORES)}
    plot_roc(curves, save_path=tmp_path / "roc.png", show=False)
    plot_precision_recall(
        {"model": precision_recall(LABELS, SCORES)},
        save_path=tmp_path / "pr.png",
        show=False,
    )
    plot_accuracy_vs_threshold(
        {"model": accuracy_vs_threshold(LABELS, SCORES)},
        save_path=tmp_path / "acc.png",
        show=False,
    )

    x, y = linear_data
    model = SupportVectorMachine(C=1).train(x, y)
    plot_decision_boundary(
        model, x, y, save_path=tmp_path / "boundary.png", show=False, resolution=20
    )

    for name in ("roc.png", "pr.png", "acc.png", "boundary.png"):
        assert (tmp_path / name).stat().st_size > 0


def test_experiment_run(tmp_path, linear_data):
    unit = DataUnit.build_from_arrays(*linear_data, train_size=0.5)

    results = experiment_run(
        unit, kernel_name="rbf", kernel_arg={"sigma": [1, 2]}, C_list=[1, 10]
    )

    assert [r.model.short_name for r in results] == [
        "rbf_sigma_1_C_1",
        "rbf_sigma_1_C_10",
        "rbf_sigma_2_C_1",
        "rbf_sigma_2_C_10",
    ]
    assert all(r.acc >= 0.9 for r in results)

    data = results[0].to_data_dict(tmp_path)
    assert data["model_name"] == "rbf_sigma_1_C_1"
    assert "image" in data

    results[0].plot_decision_boundary(save_folder=tmp_path, show=False, resolution=20)
    assert (tmp_path / "rbf_sigma_1_C_1.png").exists()


def test_cross_validation_run_and_best_parameter(xor_data):
    x, y = xor_data

    table = cross_validation_run(
        x, y, kernel_name="rbf", kernel_arg={"sigma": [0.5, 50]}, C_list=[1, 10], k=4
    )

    assert len(table) == 4
    assert {"model_name", "C", "sigma", "auc", "average_precision", "accuracy"} <= set(
        table.columns
    )
    assert table["auc"].between(0, 1).all()

    parameter = best_parameter(table, kernel_name="rbf")

    assert isinstance(parameter, SVMParameter)
    assert parameter.kernel_arg == {"sigma": 0.5}
    assert isinstance(parameter.C, float)
