from abc import ABC, abstractmethod

from pseudonymizer.classification.models import TokenPrediction


class BaseTokenClassifier(ABC):
    """Contract for all token classification adapters."""

    @abstractmethod
    def predict(self, text: str) -> list[TokenPrediction]:
        """Classify every token of *text*.

        Args:
            text: One text unit (cell, paragraph, line). Never mutated.

        Returns:
            Predictions in input token order.

        Raises:
            ClassificationError: on any failure.
        """
