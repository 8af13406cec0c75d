from .SupportVectorMachine import SupportVectorMachine, Kernel
from .Classifier import Classifier, SVMClassifier
