from .CrossValidator import (
    CrossValidator,
    CrossValidationResult,
    cross_validate,
    fold_indices,
    partition,
)
