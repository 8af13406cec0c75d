from dataclasses import dataclass, field
from typing import Any

import jax
import numpy as np


@dataclass(slots=True)
class DataUnit:
    train_x: np.ndarray
    train_y: np.ndarray
    test_x: np.ndarray
    test_y: np.ndarray

    positive_class: Any
    negative_class: Any

    label_to_index: np.vectorize = field(repr=False, default=None)
    index_to_label: np.vectorize = field(repr=False, default=None)

    @staticmethod
    def _label_maps(positive_class, negative_class):
        label_to_index = {positive_class: 1, negative_class: -1}
        index_to_label = {1: positive_class, -1: negative_class}

        return np.vectorize(label_to_index.get), np.vectorize(index_to_label.get)

    @staticmethod
    def build_from_dict(
        data_dict: dict,
        positive_class: Any,
        negative_class: Any,
        label: str = "Label",
    ):
        train_data = data_dict["train"]
        test_data = data_dict["test"]
        train_x, train_y = (
            train_data.drop(columns=[label]).to_numpy(dtype=float),
            train_data[label].to_numpy(),
        )
        test_x, test_y = (
            test_data.drop(columns=[label]).to_numpy(dtype=float),
            test_data[label].to_numpy(),
        )

        label_to_index_np, index_to_label_np = DataUnit._label_maps(
            positive_class, negative_class
        )

        return DataUnit(
            train_x=train_x,
            train_y=label_to_index_np(train_y),
            test_x=test_x,
            test_y=label_to_index_np(test_y),
            positive_class=positive_class,
            negative_class=negative_class,
            label_to_index=label_to_index_np,
            index_to_label=index_to_label_np,
        )

    @staticmethod
    def build_from_arrays(
        x: np.ndarray,
        y: np.ndarray,
        train_size: int | float = 0.5,
        positive_class: Any = 1,
        negative_class: Any = -1,
        seed: int = 0,
    ):
        """
        Shuffled train/test split of raw arrays.

        `train_size` is a fraction in (0, 1) or a sample count. Labels are
        mapped to ±1 through `positive_class` / `negative_class`.
        """
        x, y = np.asarray(x), np.asarray(y).reshape(-1)
        n = x.shape[0]

        if isinstance(train_size, float) and 0 < train_size < 1:
            n_train = int(n * train_size)
        else:
            n_train = int(train_size)

        assert 0 < n_train < n, f"train size {train_size} leaves no train or test data"

        order = np.asarray(jax.random.permutation(jax.random.PRNGKey(seed), n))
        train_idx, test_idx = order[:n_train], order[n_train:]

        label_to_index_np, index_to_label_np = DataUnit._label_maps(
            positive_class, negative_class
        )

        return DataUnit(
            train_x=x[train_idx],
            train_y=label_to_index_np(y[train_idx]),
            test_x=x[test_idx],
            test_y=label_to_index_np(y[test_idx]),
            positive_class=positive_class,
            negative_class=negative_class,
            label_to_index=label_to_index_np,
            index_to_label=index_to_label_np,
        )

    @property
    def x(self) -> np.ndarray:
        return np.concatenate([self.train_x, self.test_x], axis=0)

    @property
    def y(self) -> np.ndarray:
        return np.concatenate([self.train_y, self.test_y], axis=0)

    def __or__(self, other):
        if not isinstance(other, DataUnit):
            return NotImplemented

        assert (
            self.positive_class == other.positive_class
            and self.negative_class == other.negative_class
        ), "DataUnit must have the same positive and negative classes to be merged."

        train_x = np.concatenate([self.train_x, other.train_x], axis=0)
        train_y = np.concatenate([self.train_y, other.train_y], axis=0)
        test_x = np.concatenate([self.test_x, other.test_x], axis=0)
        test_y = np.concatenate([self.test_y, other.test_y], axis=0)

        return DataUnit(
            train_x=train_x,
            train_y=train_y,
            test_x=test_x,
            test_y=test_y,
            positive_class=self.positive_class,
            negative_class=self.negative_class,
            label_to_index=self.label_to_index,
            index_to_label=self.index_to_label,
        )
