from pathlib import Path

import joblib
import numpy as np
from jaxtyping import Float
from sklearn.svm import SVC

from core import SVMParameter


def rbf(sigma: float) -> dict:
    # exp(-|x_1 - x_2|^2 / (2 sigma^2))
    return {"kernel": "rbf", "gamma": 1.0 / (2 * sigma**2)}


def poly(p: int) -> dict:
    # (x_1 . x_2) ** p
    return {"kernel": "poly", "degree": p, "gamma": 1.0, "coef0": 0.0}


def linear() -> dict:
    return {"kernel": "linear"}


class Kernel:
    kernel_dict = {
        "linear": linear,
        "rbf": rbf,
        "poly": poly,
    }

    @staticmethod
    def get_kernel(name: str, config: dict) -> dict:
        """Translate a kernel name and its arguments into `SVC` keyword arguments."""
        if name not in Kernel.kernel_dict:
            raise NotImplementedError(
                f"{name} kernel not implemented. Available kernels: {list(Kernel.kernel_dict.keys())}"
            )

        func = Kernel.kernel_dict[name]

        return func(**config)


class SupportVectorMachine:
    def __init__(
        self,
        C: float,
        kernel_name: str = "linear",
        kernel_arg: dict = dict(),
        tol: float = 1e-3,
    ):
        self._c = C
        self._tol = tol
        self._kernel_info = {"name": kernel_name, "arg": dict(kernel_arg)}

        # multi-class labels are decomposed one-vs-one by the library
        self._model = SVC(
            C=C,
            tol=tol,
            decision_function_shape="ovo",
            **Kernel.get_kernel(kernel_name, kernel_arg),
        )
        self._fitted = False

        return

    @classmethod
    def build(cls, parameter: SVMParameter):
        return cls(
            C=parameter.C,
            kernel_name=parameter.kernel_name,
            kernel_arg=parameter.kernel_arg,
            tol=parameter.tol,
        )

    @property
    def parameter(self) -> SVMParameter:
        return SVMParameter(
            C=self._c,
            kernel_name=self._kernel_info["name"],
            kernel_arg=dict(self._kernel_info["arg"]),
            tol=self._tol,
        )

    def save(self, path: str | Path) -> None:

        if isinstance(path, str):
            path = Path(path)

        self.parameter.save(path)

        if self._fitted:
            joblib.dump(self._model, path / "model.joblib")

        return

    @staticmethod
    def load_from(path: str | Path):

        if isinstance(path, str):
            path = Path(path)

        parameter = SVMParameter.load_from(path)
        model = SupportVectorMachine.build(parameter)

        model_path = path / "model.joblib"
        if model_path.exists():
            model._model = joblib.load(model_path)
            model._fitted = True

        return model

    @property
    def fitted(self) -> bool:
        return self._fitted

    @property
    def classes(self) -> np.ndarray:
        return self._model.classes_

    @property
    def alpha(self) -> np.ndarray:
        # dual_coef_ holds alpha_i * y_i for every support vector
        return np.abs(self._model.dual_coef_).T

    @property
    def bias(self) -> float | np.ndarray:
        intercept = self._model.intercept_
        if intercept.shape[0] == 1:
            return float(intercept[0])
        return intercept

    @property
    def support_vectors(self) -> np.ndarray:
        return self._model.support_vectors_

    def train(
        self, x: Float[np.ndarray, "batch feature"], y: np.ndarray
    ):  # [batch, feature]   [batch] or [batch, 1]
        x, y = np.asarray(x), np.asarray(y).reshape(-1)

        self._model.fit(x, y)
        self._fitted = True

        return self

    def __call__(self, x: np.ndarray, with_sign: bool = False) -> np.ndarray:
        # x [batch, feature]
        x = np.asarray(x)

        if with_sign:
            return self._model.predict(x)

        return self._model.decision_function(x)

    def predict(self, x: np.ndarray) -> np.ndarray:
        return self(x, with_sign=True)

    def acc(self, x: np.ndarray, y: np.ndarray) -> tuple[float, np.ndarray]:

        y_hat = self(x, True)

        return float(np.mean(y_hat == np.asarray(y).reshape(-1))), y_hat

    @property
    def info(self):
        if not self._fitted:
            return {"kernel": self._kernel_info, "C": self._c, "fitted": False}

        bias = self.bias
        return {
            "kernel": self._kernel_info,
            "support vector num": int(self._model.n_support_.sum()),
            "C": self._c,
            "b": f"{bias:.4f}" if isinstance(bias, float) else str(np.round(bias, 4)),
        }

    @property
    def short_name(self):
        return self.parameter.short_name

    def __str__(self):
        return str(self.info)

    def __repr__(self):
        return self.__str__()
