import jax
import numpy as np
import pytest

from core import InvalidFoldCount
from CrossValidation import CrossValidator, fold_indices, partition


@pytest.mark.parametrize("n,k", [(10, 2), (10, 3), (10, 5), (11, 4), (37, 10), (100, 7)])
def test_folds_cover_every_sample_once(n, k):
    fold_ids = partition(n, k, seed=0)

    assert fold_ids.shape == (n,)
    assert set(np.unique(fold_ids)) == set(range(k))

    held_out = [test_idx for _, _, test_idx in fold_indices(fold_ids, k)]
    merged = np.concatenate(held_out)
    assert sorted(merged.tolist()) == list(range(n))
    assert len(merged) == n


@pytest.mark.parametrize("n,k", [(10, 3), (11, 4), (37, 10), (100, 7), (5, 5)])
def test_fold_sizes_are_balanced(n, k):
    sizes = np.bincount(partition(n, k, seed=1), minlength=k)

    assert sizes.max() - sizes.min() <= 1
    assert sizes.sum() == n
    # remainder goes to the first n % k folds
    assert (sizes[: n % k] == n // k + 1).all()
    assert (sizes[n % k :] == n // k).all()


def test_train_and_test_indices_are_complementary():
    fold_ids = partition(23, 4, seed=2)

    for fold, train_idx, test_idx in fold_indices(fold_ids, 4):
        assert np.intersect1d(train_idx, test_idx).size == 0
        assert len(train_idx) + len(test_idx) == 23
        assert (fold_ids[test_idx] == fold).all()


def test_same_seed_same_partition():
    assert np.array_equal(partition(50, 5, seed=42), partition(50, 5, seed=42))


def test_different_seed_different_partition():
    assert not np.array_equal(partition(50, 5, seed=1), partition(50, 5, seed=2))


def test_explicit_key_matches_int_seed():
    assert np.array_equal(
        partition(30, 3, seed=jax.random.PRNGKey(7)), partition(30, 3, seed=7)
    )


def test_leave_one_out():
    fold_ids = partition(8, 8, seed=0)

    assert sorted(fold_ids.tolist()) == list(range(8))
    for _, train_idx, test_idx in fold_indices(fold_ids, 8):
        assert len(test_idx) == 1
        assert len(train_idx) == 7


@pytest.mark.parametrize("k", [-1, 0, 1, 11, 2.5, True, "5"])
def test_invalid_fold_count(k):
    with pytest.raises(InvalidFoldCount):
        partition(10, k)


def test_validator_split_uses_its_seed():
    validator = CrossValidator(k=4, seed=3)

    assert np.array_equal(validator.split(20), partition(20, 4, seed=3))
