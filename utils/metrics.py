from dataclasses import dataclass, field
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from sklearn.metrics import (
    auc,
    average_precision_score,
    precision_recall_curve,
    roc_curve,
)


@dataclass(slots=True)
class RocCurve:
    fpr: np.ndarray = field(repr=False)
    tpr: np.ndarray = field(repr=False)
    thresholds: np.ndarray = field(repr=False)
    auc: float


@dataclass(slots=True)
class PrecisionRecallCurve:
    precision: np.ndarray = field(repr=False)
    recall: np.ndarray = field(repr=False)
    thresholds: np.ndarray = field(repr=False)
    average_precision: float


@dataclass(slots=True)
class ThresholdCurve:
    thresholds: np.ndarray = field(repr=False)
    accuracy: np.ndarray = field(repr=False)

    @property
    def best_threshold(self) -> float:
        return float(self.thresholds[np.argmax(self.accuracy)])

    @property
    def best_accuracy(self) -> float:
        return float(np.max(self.accuracy))


def roc(labels: np.ndarray, scores: np.ndarray, pos_label=1) -> RocCurve:
    fpr, tpr, thresholds = roc_curve(labels, scores, pos_label=pos_label)
    return RocCurve(fpr=fpr, tpr=tpr, thresholds=thresholds, auc=float(auc(fpr, tpr)))


def precision_recall(
    labels: np.ndarray, scores: np.ndarray, pos_label=1
) -> PrecisionRecallCurve:
    precision, recall, thresholds = precision_recall_curve(
        labels, scores, pos_label=pos_label
    )
    return PrecisionRecallCurve(
        precision=precision,
        recall=recall,
        thresholds=thresholds,
        average_precision=float(
            average_precision_score(labels, scores, pos_label=pos_label)
        ),
    )


def accuracy_vs_threshold(labels: np.ndarray, scores: np.ndarray) -> ThresholdCurve:
    """Accuracy of `score >= threshold -> +1` at every distinct score."""
    labels, scores = np.asarray(labels).reshape(-1), np.asarray(scores).reshape(-1)
    thresholds = np.unique(scores)

    # [threshold, sample]
    y_hat = np.where(scores[None, :] >= thresholds[:, None], 1, -1)
    accuracy = np.mean(y_hat == labels[None, :], axis=1)

    return ThresholdCurve(thresholds=thresholds, accuracy=accuracy)


def _finish(fig, save_path: Path | None, show: bool):
    if save_path is not None:
        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, bbox_inches="tight", pad_inches=0.1)

    if show:
        plt.show()

    return fig


def plot_roc(
    curves: dict[str, RocCurve], save_path: Path | None = None, show: bool = True
):
    fig, ax = plt.subplots()

    for name, curve in curves.items():
        ax.plot(curve.fpr, curve.tpr, label=f"{name} (AUC {curve.auc:.3f})")

    ax.plot([0, 1], [0, 1], linestyle="--", color="grey")
    ax.set_xlabel("False positive rate")
    ax.set_ylabel("True positive rate")
    ax.set_title("ROC curve")
    ax.legend(loc="lower right")

    return _finish(fig, save_path, show)


def plot_precision_recall(
    curves: dict[str, PrecisionRecallCurve],
    save_path: Path | None = None,
    show: bool = True,
):
    fig, ax = plt.subplots()

    for name, curve in curves.items():
        ax.plot(
            curve.recall,
            curve.precision,
            label=f"{name} (AP {curve.average_precision:.3f})",
        )

    ax.set_xlabel("Recall")
    ax.set_ylabel("Precision")
    ax.set_title("Precision-recall curve")
    ax.legend(loc="lower left")

    return _finish(fig, save_path, show)


def plot_accuracy_vs_threshold(
    curves: dict[str, ThresholdCurve],
    save_path: Path | None = None,
    show: bool = True,
):
    fig, ax = plt.subplots()

    for name, curve in curves.items():
        ax.plot(curve.thresholds, curve.accuracy, label=name)

    ax.axvline(0.0, linestyle="--", color="grey")
    ax.set_xlabel("Decision threshold")
    ax.set_ylabel("Accuracy")
    ax.set_title("Accuracy vs threshold")
    ax.legend(loc="lower center")

    return _finish(fig, save_path, show)


def plot_decision_boundary(
    model,
    x: np.ndarray,
    y: np.ndarray,
    title: str = "Model decision boundary",
    save_path: Path | None = None,
    show: bool = True,
    resolution: int = 100,
    padding: float = 1.0,
    with_contours: bool = True,
):
    """
    Decision boundary of any 2D model returning decision values from
    `model(points)`.

    Parameters:
    - model: trained model, e.g. `SupportVectorMachine`.
    - x: samples, shape [num_samples, 2].
    - y: ±1 labels, shape [num_samples].
    - resolution: grid points per axis.
    - padding: margin added around the data range.
    - with_contours: draw the -1 / 0 / +1 margin lines.
    """
    x_min, x_max = x[:, 0].min() - padding, x[:, 0].max() + padding
    y_min, y_max = x[:, 1].min() - padding, x[:, 1].max() + padding
    xx, yy = np.meshgrid(
        np.linspace(x_min, x_max, resolution), np.linspace(y_min, y_max, resolution)
    )
    grid_points = np.c_[xx.ravel(), yy.ravel()]

    Z = np.asarray(model(grid_points)).reshape(xx.shape)

    fig, ax = plt.subplots()
    ax.contourf(xx, yy, np.sign(Z), alpha=0.3, cmap="bwr")
    ax.scatter(x[:, 0], x[:, 1], c=y, cmap="bwr", s=50, edgecolors="k")

    if with_contours:
        ax.contour(
            xx, yy, Z, levels=[-1, 0, 1], linestyles=["--", "-", "--"], colors="k"
        )

    ax.set_xlabel("X1")
    ax.set_ylabel("X2")
    ax.set_title(title)

    return _finish(fig, save_path, show)
