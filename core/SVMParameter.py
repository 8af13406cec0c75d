from dataclasses import dataclass, asdict, field
from pathlib import Path


import json


@dataclass(slots=True)
class SVMParameter:
    C: float
    kernel_name: str = "linear"
    kernel_arg: dict = field(default_factory=dict)
    tol: float = 1e-3
    classifier: str = "svm"

    def save(self, path: str | Path) -> Path:

        if isinstance(path, str):
            path = Path(path)

        path.mkdir(parents=True, exist_ok=True)

        parameter_path = path / "parameter.json"

        with open(parameter_path, "w") as f:
            json.dump(asdict(self), f, indent=4)

        return parameter_path

    @staticmethod
    def load_from(path: str | Path):

        if isinstance(path, str):
            path = Path(path)

        parameter_path = path / "parameter.json"

        if not parameter_path.exists():
            raise FileNotFoundError(f"Parameter file {parameter_path} does not exist")

        with open(parameter_path, "r") as f:
            data = json.load(f)

        return SVMParameter(**data)

    @staticmethod
    def grid(
        C_list: list[float],
        kernel_name: str = "linear",
        kernel_arg: dict = dict(),
    ) -> list["SVMParameter"]:
        """
        Expand `{"sigma": [5, 1, 0.5]}` style value lists into one parameter
        per (kernel argument, C) pair. Kernel argument is the outer loop.
        """
        if len(kernel_arg) != 0:
            kernel_arg_name, kernel_arg_value_list = next(iter(kernel_arg.items()))
            kernel_arg_list = [{kernel_arg_name: item} for item in kernel_arg_value_list]
        else:
            kernel_arg_list = [dict()]

        return [
            SVMParameter(C=c, kernel_name=kernel_name, kernel_arg=kernel_arg_item)
            for kernel_arg_item in kernel_arg_list
            for c in C_list
        ]

    @property
    def short_name(self) -> str:
        if len(self.kernel_arg) > 0:
            kernel_arg_name, kernel_arg = next(iter(self.kernel_arg.items()))
        else:
            kernel_arg_name, kernel_arg = "", ""

        return f"{self.kernel_name}_{kernel_arg_name}_{kernel_arg}_C_{self.C}"
