from dataclasses import dataclass, field
from typing import Any, Iterator

import jax
import numpy as np
from jaxtyping import Array, Float
from joblib import Parallel, delayed

from core import (
    ClassifierFailure,
    DimensionMismatch,
    InvalidFoldCount,
    get_logger,
)
from SVM import Classifier, SVMClassifier

logger = get_logger(__name__)


def _as_key(seed: int | Array) -> Array:
    if isinstance(seed, (int, np.integer)):
        return jax.random.PRNGKey(int(seed))
    return seed


def _check_fold_count(n: int, k: Any) -> None:
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise InvalidFoldCount(k, n)

    if k <= 1 or k > n:
        raise InvalidFoldCount(k, n)


def _check_dataset(features, labels) -> tuple[np.ndarray, np.ndarray]:
    features, labels = np.asarray(features), np.asarray(labels)

    if features.ndim != 2:
        raise DimensionMismatch(
            f"features must be a [sample, feature] matrix, got shape {features.shape}"
        )

    # column labels [batch, 1]
    if labels.ndim == 2 and labels.shape[1] == 1:
        labels = labels.reshape(-1)

    if labels.ndim != 1 or labels.shape[0] != features.shape[0]:
        raise DimensionMismatch(
            f"{features.shape[0]} feature rows but labels have shape {labels.shape}"
        )

    return features, labels


def partition(n: int, k: int, seed: int | Array = 0) -> np.ndarray:
    """
    Assign each of `n` samples to one of `k` folds.

    The sample indices are shuffled with `jax.random.permutation` and cut into
    `k` contiguous groups; the first `n % k` groups get `ceil(n / k)` samples,
    the others `floor(n / k)`.

    Returns:
        fold_ids: int array of length `n`, `fold_ids[i]` is the fold of sample i.
    """
    _check_fold_count(n, k)

    permutation = np.asarray(jax.random.permutation(_as_key(seed), n))

    fold_ids = np.empty(n, dtype=np.int64)
    for fold, group in enumerate(np.array_split(permutation, k)):
        fold_ids[group] = fold

    return fold_ids


def fold_indices(
    fold_ids: np.ndarray, k: int
) -> Iterator[tuple[int, np.ndarray, np.ndarray]]:
    """Yield `(fold, train_idx, test_idx)` for every fold."""
    fold_ids = np.asarray(fold_ids)

    for fold in range(k):
        held_out = fold_ids == fold
        yield fold, np.flatnonzero(~held_out), np.flatnonzero(held_out)


def _run_fold(
    classifier: Classifier,
    features: np.ndarray,
    labels: np.ndarray,
    config: Any,
    fold: int,
    train_idx: np.ndarray,
    test_idx: np.ndarray,
) -> np.ndarray:
    logger.debug(f"fold {fold}: train {len(train_idx)} / held out {len(test_idx)}")

    unseen = np.setdiff1d(labels[test_idx], labels[train_idx])
    if unseen.size > 0:
        raise ClassifierFailure(
            fold,
            test_idx,
            f"held-out classes {unseen.tolist()} are missing from the training folds",
        )

    try:
        model = classifier.train(features[train_idx], labels[train_idx], config)
        values = np.asarray(classifier.score(model, features[test_idx]), dtype=float)
    except Exception as err:
        raise ClassifierFailure(fold, test_idx, f"{type(err).__name__}: {err}") from err

    if values.ndim == 0 or values.shape[0] != len(test_idx):
        raise ClassifierFailure(
            fold,
            test_idx,
            f"expected {len(test_idx)} decision values, got shape {values.shape}",
        )

    return values


def _write_fold(
    scores: np.ndarray | None,
    n: int,
    fold: int,
    test_idx: np.ndarray,
    values: np.ndarray,
) -> np.ndarray:
    if scores is None:
        scores = np.full((n,) + values.shape[1:], np.nan)

    if values.shape[1:] != scores.shape[1:]:
        raise ClassifierFailure(
            fold,
            test_idx,
            f"decision values of shape {values.shape[1:]} do not match {scores.shape[1:]} from earlier folds",
        )

    scores[test_idx] = values

    return scores


def _score_folds(
    features: np.ndarray,
    labels: np.ndarray,
    fold_ids: np.ndarray,
    k: int,
    config: Any,
    classifier: Classifier,
    n_jobs: int,
) -> np.ndarray:
    n = labels.shape[0]

    if n_jobs == 1:
        scores = None
        for fold, train_idx, test_idx in fold_indices(fold_ids, k):
            values = _run_fold(
                classifier, features, labels, config, fold, train_idx, test_idx
            )
            scores = _write_fold(scores, n, fold, test_idx, values)

        return scores

    jobs = list(fold_indices(fold_ids, k))
    values_list = Parallel(n_jobs=n_jobs, backend="threading")(
        delayed(_run_fold)(
            classifier, features, labels, config, fold, train_idx, test_idx
        )
        for fold, train_idx, test_idx in jobs
    )

    scores = None
    for (fold, _, test_idx), values in zip(jobs, values_list):
        scores = _write_fold(scores, n, fold, test_idx, values)

    return scores


def cross_validate(
    features: Float[np.ndarray, "n p"],
    labels: np.ndarray,
    k: int,
    classifier_config: Any,
    classifier: Classifier | None = None,
    seed: int | Array = 0,
    n_jobs: int = 1,
) -> np.ndarray:
    """
    Out-of-fold decision scores for every sample.

    The score of sample i comes from a model trained on the other `k - 1`
    folds only. `classifier_config` is handed to `classifier.train` as is for
    every fold.

    Raises:
        DimensionMismatch: labels do not line up with the feature rows.
        InvalidFoldCount: `k` is not an integer in (1, n].
        ClassifierFailure: training or scoring failed on some fold.
    """
    features, labels = _check_dataset(features, labels)
    fold_ids = partition(labels.shape[0], k, seed)

    if classifier is None:
        classifier = SVMClassifier()

    logger.info(f"cross-validating {labels.shape[0]} samples in {k} folds")

    return _score_folds(
        features, labels, fold_ids, k, classifier_config, classifier, n_jobs
    )


@dataclass(slots=True)
class CrossValidationResult:
    scores: np.ndarray
    fold_ids: np.ndarray
    labels: np.ndarray = field(repr=False)
    k: int

    def fold_accuracy(self) -> np.ndarray:
        # binary ±1 labels only, score >= 0 predicts +1
        if self.scores.ndim != 1:
            raise ValueError("fold accuracy needs one decision value per sample")

        y_hat = np.where(self.scores >= 0, 1, -1)
        correct = y_hat == self.labels

        return np.array([np.mean(correct[self.fold_ids == fold]) for fold in range(self.k)])

    @property
    def accuracy(self) -> float:
        if self.scores.ndim != 1:
            raise ValueError("accuracy needs one decision value per sample")

        return float(np.mean(np.where(self.scores >= 0, 1, -1) == self.labels))


class CrossValidator:
    def __init__(
        self,
        k: int = 5,
        seed: int | Array = 0,
        classifier: Classifier | None = None,
        n_jobs: int = 1,
    ):
        self._k = k
        self._seed = seed
        self._classifier = classifier if classifier is not None else SVMClassifier()
        self._n_jobs = n_jobs

        return

    @property
    def k(self) -> int:
        return self._k

    def split(self, n: int) -> np.ndarray:
        return partition(n, self._k, self._seed)

    def run(self, features, labels, classifier_config: Any) -> CrossValidationResult:
        features, labels = _check_dataset(features, labels)
        fold_ids = self.split(labels.shape[0])

        logger.info(
            f"cross-validating {labels.shape[0]} samples in {self._k} folds with {classifier_config}"
        )

        scores = _score_folds(
            features,
            labels,
            fold_ids,
            self._k,
            classifier_config,
            self._classifier,
            self._n_jobs,
        )

        return CrossValidationResult(
            scores=scores, fold_ids=fold_ids, labels=labels, k=self._k
        )

    def __repr__(self):
        return f"CrossValidator(k={self._k}, seed={self._seed}, n_jobs={self._n_jobs})"
