import numpy as np
import pandas as pd


class GaussianDataset:
    """Synthetic 2D classification problems built from Gaussian clouds."""

    COLUMN_NAME = ["X1", "X2", "Label"]

    POSITIVE_CLASS = 1
    NEGATIVE_CLASS = -1

    @staticmethod
    def _stack(clouds: list[np.ndarray], labels: list) -> tuple[np.ndarray, np.ndarray]:
        x = np.concatenate(clouds, axis=0)
        y = np.concatenate(
            [np.full(len(cloud), label) for cloud, label in zip(clouds, labels)]
        )
        return x, y

    @staticmethod
    def linear(
        n_per_class: int = 50,
        distance: float = 3.0,
        std: float = 1.0,
        seed: int = 0,
    ) -> tuple[np.ndarray, np.ndarray]:
        """Two isotropic clouds centred at ±(distance / 2, distance / 2)."""
        rng = np.random.default_rng(seed)
        center = np.array([distance / 2, distance / 2])

        positive = rng.normal(center, std, size=(n_per_class, 2))
        negative = rng.normal(-center, std, size=(n_per_class, 2))

        return GaussianDataset._stack(
            [positive, negative],
            [GaussianDataset.POSITIVE_CLASS, GaussianDataset.NEGATIVE_CLASS],
        )

    @staticmethod
    def nonlinear(
        n_per_class: int = 50,
        std: float = 0.5,
        seed: int = 0,
    ) -> tuple[np.ndarray, np.ndarray]:
        """
        XOR layout: the positive class sits on (1, 1) and (-1, -1), the
        negative class on (1, -1) and (-1, 1). No line separates them.
        """
        rng = np.random.default_rng(seed)
        first, second = n_per_class // 2, n_per_class - n_per_class // 2

        positive = np.concatenate(
            [
                rng.normal([1.0, 1.0], std, size=(first, 2)),
                rng.normal([-1.0, -1.0], std, size=(second, 2)),
            ]
        )
        negative = np.concatenate(
            [
                rng.normal([1.0, -1.0], std, size=(first, 2)),
                rng.normal([-1.0, 1.0], std, size=(second, 2)),
            ]
        )

        return GaussianDataset._stack(
            [positive, negative],
            [GaussianDataset.POSITIVE_CLASS, GaussianDataset.NEGATIVE_CLASS],
        )

    @staticmethod
    def multi_class(
        n_per_class: int = 50,
        n_classes: int = 3,
        radius: float = 3.0,
        std: float = 1.0,
        seed: int = 0,
    ) -> tuple[np.ndarray, np.ndarray]:
        rng = np.random.default_rng(seed)
        angles = 2 * np.pi * np.arange(n_classes) / n_classes
        centers = radius * np.stack([np.cos(angles), np.sin(angles)], axis=1)

        clouds = [rng.normal(center, std, size=(n_per_class, 2)) for center in centers]

        return GaussianDataset._stack(
            clouds, [f"Class {i}" for i in range(n_classes)]
        )

    @staticmethod
    def to_frame(x: np.ndarray, y: np.ndarray) -> pd.DataFrame:
        df = pd.DataFrame(x, columns=GaussianDataset.COLUMN_NAME[:2])
        df[GaussianDataset.COLUMN_NAME[2]] = y
        return df
