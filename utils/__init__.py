from .metrics import (
    RocCurve,
    PrecisionRecallCurve,
    ThresholdCurve,
    roc,
    precision_recall,
    accuracy_vs_threshold,
    plot_roc,
    plot_precision_recall,
    plot_accuracy_vs_threshold,
    plot_decision_boundary,
)
from .experiment_utils import (
    ExperimentResult,
    experiment_run,
    cross_validation_run,
    best_parameter,
)
