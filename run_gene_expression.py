# %% load libraries
import os
from pathlib import Path

from rich import print
from sklearn.preprocessing import StandardScaler

from CrossValidation import CrossValidator
from data import GeneExpressionDataset
from SVM import SVMClassifier
from utils import (
    best_parameter,
    cross_validation_run,
    plot_precision_recall,
    plot_roc,
    precision_recall,
    roc,
)

# samples x genes table with a "Subtype" column, e.g. ALL / AML leukemia
DATA_FILE = Path(os.environ.get("GENE_EXPRESSION_FILE", "./leukemia.csv"))
POSITIVE_CLASS = "ALL"

dataset = GeneExpressionDataset()

# %% load
df = GeneExpressionDataset.load_file(DATA_FILE)
print(df.shape)
print(df[GeneExpressionDataset.LABEL].value_counts())

# %% pre-process
x, subtype, genes = GeneExpressionDataset.to_arrays(
    df, top_genes=100, log_transform=True, scaler=StandardScaler()
)
y = GeneExpressionDataset.binary_labels(subtype, POSITIVE_CLASS)
print(f"{x.shape[0]} samples, {len(genes)} genes")

# %% tune with cross-validation
table = cross_validation_run(
    x, y, kernel_name="linear", C_list=[0.001, 0.01, 0.1, 1, 10], k=5
)
print(table)

rbf_table = cross_validation_run(
    x,
    y,
    kernel_name="rbf",
    kernel_arg={"sigma": [50, 20, 10, 5]},
    C_list=[1, 10],
    k=5,
)
print(rbf_table)

# %% ROC / PR of the best configurations
validator = CrossValidator(k=5, seed=0)
linear_result = validator.run(x, y, best_parameter(table, "linear"))
rbf_result = validator.run(x, y, best_parameter(rbf_table, "rbf"))

plot_roc(
    {
        "linear": roc(y, linear_result.scores),
        "rbf": roc(y, rbf_result.scores),
    },
    save_path=dataset.assets_folder / "gene_expression_roc.png",
)
plot_precision_recall(
    {
        "linear": precision_recall(y, linear_result.scores),
        "rbf": precision_recall(y, rbf_result.scores),
    },
    save_path=dataset.assets_folder / "gene_expression_pr.png",
)

# %% multi-class subtypes, one-vs-one decision values per sample
if len(set(subtype)) > 2:
    multi = CrossValidator(k=5, seed=0, classifier=SVMClassifier()).run(
        x, subtype, best_parameter(table, "linear")
    )
    print(multi.scores.shape)

# %%
