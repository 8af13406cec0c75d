from pathlib import Path

import numpy as np
import pandas as pd


class GeneExpressionDataset:
    """
    Samples x genes expression table with one subtype label column, e.g. the
    ALL / AML leukemia data. Any CSV / TSV laid out that way can be loaded.
    """

    LABEL = "Subtype"
    TOP_GENES = 50
    ASSETS = "./assets"

    def __init__(self):

        self._assets_folder = Path(GeneExpressionDataset.ASSETS)
        self._assets_folder.mkdir(parents=True, exist_ok=True)

        return

    @property
    def assets_folder(self):
        return self._assets_folder

    @staticmethod
    def load_file(
        filename: str | Path,
        label: str = LABEL,
        sep: str | None = None,
        index_col: int | None = 0,
    ) -> pd.DataFrame:
        filename = Path(filename)

        if not filename.exists():
            raise FileNotFoundError(f"Expression file {filename} does not exist")

        if sep is None:
            sep = "\t" if filename.suffix in (".tsv", ".txt") else ","

        df = pd.read_csv(filename, sep=sep, index_col=index_col)

        if label not in df.columns:
            raise KeyError(f"label column {label!r} not in {filename}")

        return df

    @staticmethod
    def to_arrays(
        df_in: pd.DataFrame,
        label: str = LABEL,
        top_genes: int | None = TOP_GENES,
        log_transform: bool = False,
        scaler=None,
    ) -> tuple[np.ndarray, np.ndarray, list[str]]:
        """
        Split a table into `(x, y, gene_names)`.

        Keeps the `top_genes` highest-variance genes (all when None), applies
        `log2(x + 1)` when asked and then `scaler.fit_transform` if a scaler,
        e.g. sklearn's `StandardScaler`, is given.
        """
        if label not in df_in.columns:
            raise KeyError(f"label column {label!r} not in data")

        expression = df_in.drop(columns=[label]).astype(float)

        if log_transform:
            expression = np.log2(expression.clip(lower=0) + 1)

        if top_genes is not None and top_genes < expression.shape[1]:
            variance = expression.var(axis=0)
            keep = variance.sort_values(ascending=False).index[:top_genes]
            expression = expression[keep]

        x = expression.to_numpy()
        if scaler is not None:
            x = scaler.fit_transform(x)

        return x, df_in[label].to_numpy(), list(expression.columns)

    @staticmethod
    def binary_labels(y: np.ndarray, positive_class) -> np.ndarray:
        """One subtype against the rest as ±1."""
        return np.where(np.asarray(y) == positive_class, 1, -1)
