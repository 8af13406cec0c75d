import numpy as np


class CrossValidationError(Exception):
    """Base class for cross-validation failures."""


class InvalidFoldCount(CrossValidationError, ValueError):
    def __init__(self, k, n: int):
        self.k = k
        self.n = n
        super().__init__(f"fold count must be an integer with 1 < k <= {n}, got {k!r}")


class DimensionMismatch(CrossValidationError, ValueError):
    pass


class ClassifierFailure(CrossValidationError, RuntimeError):
    """
    Raised when the classifier fails while training or scoring one fold.

    The original exception is kept as ``__cause__``.
    """

    def __init__(self, fold: int, held_out: np.ndarray, reason: str):
        self.fold = fold
        self.held_out = np.asarray(held_out)
        super().__init__(
            f"fold {fold} failed ({len(self.held_out)} held-out samples): {reason}"
        )
