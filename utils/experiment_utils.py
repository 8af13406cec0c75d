from dataclasses import dataclass, field
from pathlib import Path
import time

import numpy as np
import pandas as pd

from core import SVMParameter, get_logger
from CrossValidation import CrossValidator
from data import DataUnit
from SVM import SupportVectorMachine

from .metrics import accuracy_vs_threshold, plot_decision_boundary, precision_recall, roc

logger = get_logger(__name__)


@dataclass
class ExperimentResult:
    model: SupportVectorMachine
    acc: float
    bias_: str
    alpha: np.ndarray
    training_time: float
    forward_time: float

    bias: float = field(repr=False)
    x_test: np.ndarray = field(repr=False)
    y_test: np.ndarray = field(repr=False)
    y_hat: np.ndarray = field(repr=False)

    @classmethod
    def build(
        cls,
        model: SupportVectorMachine,
        x: np.ndarray,
        y: np.ndarray,
        training_time: float,
    ):
        acc, y_hat = model.acc(x=x, y=y)
        alpha = model.alpha.reshape(-1)
        bias = model.bias
        bias_ = f"{bias:.4f}"

        start = time.time()
        model(x, with_sign=True)
        end = time.time()
        forward_time = end - start

        return cls(
            model, acc, bias_, alpha, training_time, forward_time, bias, x, y, y_hat
        )

    def to_data_dict(self, image_save_folder: Path = None) -> dict:
        data = {
            "model_name": str(self.model.short_name),
            "acc": f"{self.acc:.2f}",
            "support vector num": int(self.alpha.shape[0]),
            "bias": self.bias_,
        }

        if image_save_folder is not None:
            filename = image_save_folder.joinpath(f"{self.model.short_name}.png")
            data |= {"image": f"![alt]({filename})"}

        return data

    def plot_decision_boundary(self, save_folder: Path = None, show: bool = True, **kwargs):
        save_path = None
        if save_folder is not None:
            save_path = Path(save_folder).joinpath(f"{self.model.short_name}.png")

        return plot_decision_boundary(
            self.model,
            self.x_test,
            self.y_test,
            title=f"Model decision boundary\nModel:{self.model}\nAcc:{self.acc*100:.2f}%",
            save_path=save_path,
            show=show,
            **kwargs,
        )


def experiment_run(
    data_unit: DataUnit,
    kernel_name: str,
    kernel_arg: dict = dict(),
    C_list: list[float] = [1, 10, 100],
) -> list[ExperimentResult]:
    """Train on `data_unit.train_*`, evaluate on `data_unit.test_*`, per config."""
    train_x, train_y = data_unit.train_x, data_unit.train_y
    test_x, test_y = data_unit.test_x, data_unit.test_y

    model_list = []

    for parameter in SVMParameter.grid(C_list, kernel_name, kernel_arg):
        model = SupportVectorMachine.build(parameter)
        start = time.time()
        model.train(x=train_x, y=train_y)
        end = time.time()
        training_time = end - start

        result = ExperimentResult.build(
            model, x=test_x, y=test_y, training_time=training_time
        )
        logger.info(f"{parameter.short_name}: test acc {result.acc:.3f}")

        model_list.append(result)

    return model_list


def cross_validation_run(
    x: np.ndarray,
    y: np.ndarray,
    kernel_name: str,
    kernel_arg: dict = dict(),
    C_list: list[float] = [1, 10, 100],
    k: int = 5,
    seed: int = 0,
    n_jobs: int = 1,
) -> pd.DataFrame:
    """
    Cross-validated version of `experiment_run` for ±1 labels.

    Every configuration sees the same fold partition, so the rows are
    directly comparable.
    """
    validator = CrossValidator(k=k, seed=seed, n_jobs=n_jobs)
    rows = []

    for parameter in SVMParameter.grid(C_list, kernel_name, kernel_arg):
        result = validator.run(x, y, parameter)

        row = {
            "model_name": parameter.short_name,
            "C": parameter.C,
            **parameter.kernel_arg,
            "auc": roc(result.labels, result.scores).auc,
            "average_precision": precision_recall(
                result.labels, result.scores
            ).average_precision,
            "accuracy": result.accuracy,
            "best_threshold_accuracy": accuracy_vs_threshold(
                result.labels, result.scores
            ).best_accuracy,
        }
        logger.info(
            f"{parameter.short_name}: cv auc {row['auc']:.3f}, acc {row['accuracy']:.3f}"
        )
        rows.append(row)

    return pd.DataFrame(rows)


def best_parameter(
    table: pd.DataFrame, kernel_name: str, metric: str = "auc"
) -> SVMParameter:
    """Configuration of the best row of a `cross_validation_run` table."""
    best = table.loc[table[metric].idxmax()]

    kernel_arg = {
        name: np.asarray(best[name]).item()
        for name in table.columns
        if name
        not in (
            "model_name",
            "C",
            "auc",
            "average_precision",
            "accuracy",
            "best_threshold_accuracy",
        )
    }

    return SVMParameter(C=float(best["C"]), kernel_name=kernel_name, kernel_arg=kernel_arg)
