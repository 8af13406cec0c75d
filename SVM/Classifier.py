from typing import Any, Protocol, runtime_checkable

import numpy as np

from core import SVMParameter
from .SupportVectorMachine import SupportVectorMachine


@runtime_checkable
class Classifier(Protocol):
    """
    What the cross-validator needs from a learning library.

    `train` fits a fresh model on the given rows, `score` returns one
    continuous decision value per row (or one row of values per sample for
    multi-class models).
    """

    def train(self, features: np.ndarray, labels: np.ndarray, config: Any) -> Any: ...

    def score(self, model: Any, features: np.ndarray) -> np.ndarray: ...


class SVMClassifier:
    CLASSIFIER_NAME = "svm"

    @staticmethod
    def _parameter(config: SVMParameter | dict) -> SVMParameter:
        if isinstance(config, dict):
            config = SVMParameter(**config)

        if config.classifier != SVMClassifier.CLASSIFIER_NAME:
            raise NotImplementedError(
                f"{config.classifier} classifier not implemented. Available classifiers: ['{SVMClassifier.CLASSIFIER_NAME}']"
            )

        return config

    def train(
        self,
        features: np.ndarray,
        labels: np.ndarray,
        config: SVMParameter | dict,
    ) -> SupportVectorMachine:
        model = SupportVectorMachine.build(self._parameter(config))
        return model.train(features, labels)

    def score(self, model: SupportVectorMachine, features: np.ndarray) -> np.ndarray:
        return np.asarray(model(features))

    def predict(self, model: SupportVectorMachine, features: np.ndarray) -> np.ndarray:
        return np.asarray(model(features, with_sign=True))
