from .SVMParameter import SVMParameter
from .errors import (
    CrossValidationError,
    InvalidFoldCount,
    DimensionMismatch,
    ClassifierFailure,
)
from .log import get_logger
