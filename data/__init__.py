from .DataUnit import DataUnit
from .functional import build_train_test_dataset, process_data_to_one_hot
from .GaussianDataset import GaussianDataset
from .GeneExpressionDataset import GeneExpressionDataset
