import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from data import GaussianDataset


@pytest.fixture
def linear_data():
    return GaussianDataset.linear(n_per_class=30, distance=6.0, std=1.0, seed=0)


@pytest.fixture
def xor_data():
    return GaussianDataset.nonlinear(n_per_class=40, std=0.3, seed=0)


class MeanLabelClassifier:
    """Scores every sample with the mean label of the training rows."""

    def __init__(self):
        self.train_calls = []

    def train(self, features, labels, config):
        self.train_calls.append(np.asarray(features).copy())
        return float(np.mean(labels))

    def score(self, model, features):
        return np.full(len(features), model)


class EchoClassifier:
    """Scores a sample with its own first feature."""

    def __init__(self):
        self.trained_on = []
        self.scored = []

    def train(self, features, labels, config):
        self.trained_on.append(features[:, 0].copy())
        return None

    def score(self, model, features):
        self.scored.append(features[:, 0].copy())
        return features[:, 0]


class FailingClassifier:
    """Raises while training the `fail_at`-th fold."""

    def __init__(self, fail_at: int):
        self.fail_at = fail_at
        self.calls = 0

    def train(self, features, labels, config):
        call = self.calls
        self.calls += 1
        if call == self.fail_at:
            raise ArithmeticError("solver did not converge")
        return None

    def score(self, model, features):
        return np.zeros(len(features))


@pytest.fixture
def mean_label_classifier():
    return MeanLabelClassifier()


@pytest.fixture
def echo_classifier():
    return EchoClassifier()


@pytest.fixture
def failing_classifier():
    return FailingClassifier
