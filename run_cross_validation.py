# %% load libraries
from pathlib import Path

from rich import print

from core import SVMParameter
from CrossValidation import CrossValidator, cross_validate
from data import GaussianDataset
from utils import (
    accuracy_vs_threshold,
    best_parameter,
    cross_validation_run,
    plot_accuracy_vs_threshold,
    plot_precision_recall,
    plot_roc,
    precision_recall,
    roc,
)

SAVE_FOLDER = Path("./assets/cross_validation")
SAVE_FOLDER.mkdir(parents=True, exist_ok=True)

# %% sample dataset
x, y = GaussianDataset.nonlinear(n_per_class=100, std=0.6, seed=1)

# %% out-of-fold decision values
parameters = {
    "linear": SVMParameter(C=1, kernel_name="linear"),
    "rbf": SVMParameter(C=10, kernel_name="rbf", kernel_arg={"sigma": 0.5}),
}

scores = {
    name: cross_validate(x, y, k=10, classifier_config=parameter, seed=0)
    for name, parameter in parameters.items()
}

# %% ROC / precision-recall / accuracy vs threshold
plot_roc(
    {name: roc(y, score) for name, score in scores.items()},
    save_path=SAVE_FOLDER / "roc.png",
)
plot_precision_recall(
    {name: precision_recall(y, score) for name, score in scores.items()},
    save_path=SAVE_FOLDER / "precision_recall.png",
)
plot_accuracy_vs_threshold(
    {name: accuracy_vs_threshold(y, score) for name, score in scores.items()},
    save_path=SAVE_FOLDER / "accuracy_threshold.png",
)

# %% per-fold accuracy
validator = CrossValidator(k=10, seed=0, n_jobs=-1)
result = validator.run(x, y, parameters["rbf"])
print(f"Fold accuracy: {result.fold_accuracy()}")
print(f"Overall accuracy: {result.accuracy:.3f}")

# %% tune C and sigma
table = cross_validation_run(
    x,
    y,
    kernel_name="rbf",
    kernel_arg={"sigma": [2, 1, 0.5, 0.25, 0.1]},
    C_list=[0.1, 1, 10, 100],
    k=10,
)
print(table.sort_values("auc", ascending=False))

# %% keep the winner
parameter = best_parameter(table, kernel_name="rbf")
print(parameter)
parameter.save(SAVE_FOLDER / "best_parameter")

# %%
