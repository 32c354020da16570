from pseudonymizer.classification.base import BaseTokenClassifier
from pseudonymizer.classification.exceptions import ClassificationError
from pseudonymizer.classification.factory import ClassifierFactory
from pseudonymizer.classification.models import TokenPrediction

__all__ = ["BaseTokenClassifier", "ClassificationError", "ClassifierFactory", "TokenPrediction"]
