# %% load libraries
from pathlib import Path

import pandas as pd
from rich import print

from data import DataUnit, GaussianDataset
from SVM import SupportVectorMachine
from utils import ExperimentResult, experiment_run

SAVE_FOLDER = Path("./assets/nonlinear")
SAVE_FOLDER.mkdir(parents=True, exist_ok=True)

# %% sample dataset, XOR layout
x, y = GaussianDataset.nonlinear(n_per_class=100, std=0.5, seed=0)
data_unit = DataUnit.build_from_arrays(x, y, train_size=0.5, seed=0)

# %% a linear kernel cannot separate it
model = SupportVectorMachine(C=10, kernel_name="linear")
model.train(data_unit.train_x, data_unit.train_y)
acc, _ = model.acc(data_unit.test_x, data_unit.test_y)
print(model)
print(f"Linear test accuracy: {acc:.2f}")

# %% rbf kernel, sweep sigma
rbf_output: list[ExperimentResult] = experiment_run(
    data_unit=data_unit,
    kernel_name="rbf",
    kernel_arg={"sigma": [5, 1, 0.5, 0.1, 0.05]},
    C_list=[10],
)
print(pd.DataFrame([result.to_data_dict(SAVE_FOLDER) for result in rbf_output]))

# %% polynomial kernel, sweep degree
poly_output: list[ExperimentResult] = experiment_run(
    data_unit=data_unit,
    kernel_name="poly",
    kernel_arg={"p": [2, 3, 4]},
    C_list=[1, 10],
)
print(pd.DataFrame([result.to_data_dict(SAVE_FOLDER) for result in poly_output]))

# %% decision boundaries
for result in rbf_output + poly_output:
    result.plot_decision_boundary(save_folder=SAVE_FOLDER)

# %% save / load the best model
best = max(rbf_output, key=lambda result: result.acc)
best.model.save(SAVE_FOLDER / "best_model")
model = SupportVectorMachine.load_from(SAVE_FOLDER / "best_model")
print(model)

# %%
