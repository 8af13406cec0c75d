import pandas as pd
from typing import Any

from .DataUnit import DataUnit


def process_data_to_one_hot(df_in: pd.DataFrame, label: str = "Label") -> pd.DataFrame:
    """
    Convert categorical feature columns to one-hot encoding. The label column
    is left untouched.
    """
    features = df_in.drop(columns=[label])
    categorical_cols = features.select_dtypes(include=["object", "category"]).columns

    df_out = pd.get_dummies(features, columns=categorical_cols, drop_first=True)

    # one-hot columns as 0 / 1 instead of True / False
    bool_cols = df_out.select_dtypes(include=["bool"]).columns
    df_out[bool_cols] = df_out[bool_cols].astype(int)

    df_out[label] = df_in[label]

    return df_out


def build_train_test_dataset(
    df_in: pd.DataFrame | tuple[pd.DataFrame, pd.Series],
    train_size: int | float,
    positive_class: Any,
    negative_class: Any,
    label: str = "Label",
    for_two_fold: bool = False,
    return_data_unit: bool = False,
    to_one_hot: bool = True,
):
    if isinstance(df_in, tuple):
        df_x, df_y = df_in
        df_in = df_x.copy()
        df_in[label] = df_y.to_numpy()

    if to_one_hot:
        df_in = process_data_to_one_hot(df_in, label=label)

    # have before and after -> for two-fold
    positive_data = df_in[df_in[label] == positive_class]
    negative_data = df_in[df_in[label] == negative_class]

    if isinstance(train_size, float) and 0 < train_size < 1:
        train_size_pos = int(len(positive_data) * train_size)
        train_size_neg = int(len(negative_data) * train_size)
    else:
        train_size_pos = int(train_size)
        train_size_neg = int(train_size)

    before = [positive_data[:train_size_pos], negative_data[:train_size_neg]]

    after = [positive_data[train_size_pos:], negative_data[train_size_neg:]]

    before, after = pd.concat(before), pd.concat(after)

    if for_two_fold:
        res = {
            "before": {
                "train": before,
                "test": after,
            },
            "after": {
                "train": after,
                "test": before,
            },
        }

        if return_data_unit:
            res["before"] = DataUnit.build_from_dict(
                data_dict=res["before"],
                positive_class=positive_class,
                negative_class=negative_class,
                label=label,
            )
            res["after"] = DataUnit.build_from_dict(
                data_dict=res["after"],
                positive_class=positive_class,
                negative_class=negative_class,
                label=label,
            )

    else:
        res = {
            "train": before,
            "test": after,
        }
        if return_data_unit:
            res = DataUnit.build_from_dict(
                data_dict=res,
                positive_class=positive_class,
                negative_class=negative_class,
                label=label,
            )

    return res
