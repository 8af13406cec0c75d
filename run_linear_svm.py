# %% load libraries
from pathlib import Path

import pandas as pd
from rich import print

from data import DataUnit, GaussianDataset, build_train_test_dataset
from utils import ExperimentResult, experiment_run

SAVE_FOLDER = Path("./assets/linear")
SAVE_FOLDER.mkdir(parents=True, exist_ok=True)

# %% sample dataset
x, y = GaussianDataset.linear(n_per_class=100, distance=3.0, seed=0)
print(GaussianDataset.to_frame(x, y).head())

# %% train / test split
data_unit = DataUnit.build_from_arrays(x, y, train_size=0.5, seed=0)
print(data_unit)
print(data_unit.train_x.shape, data_unit.test_x.shape)

# %% sweep C for the linear kernel
output: list[ExperimentResult] = experiment_run(
    data_unit=data_unit,
    kernel_name="linear",
    C_list=[0.01, 0.1, 1, 10, 100],
)

# %% show result
print(pd.DataFrame([result.to_data_dict(SAVE_FOLDER) for result in output]))

# %% decision boundaries
for result in output:
    result.plot_decision_boundary(save_folder=SAVE_FOLDER)

# %% two-fold: train on one half, test on the other, then swap
two_fold = build_train_test_dataset(
    df_in=GaussianDataset.to_frame(x, y),
    train_size=0.5,
    positive_class=GaussianDataset.POSITIVE_CLASS,
    negative_class=GaussianDataset.NEGATIVE_CLASS,
    for_two_fold=True,
    return_data_unit=True,
    to_one_hot=False,
)

for state in ["before", "after"]:
    state_output = experiment_run(
        data_unit=two_fold[state], kernel_name="linear", C_list=[1]
    )
    print(f"{state}: test acc {state_output[0].acc:.2f}")

# %% both halves together
merged = two_fold["before"] | two_fold["after"]
print(merged.train_x.shape, merged.test_x.shape)

# %%
