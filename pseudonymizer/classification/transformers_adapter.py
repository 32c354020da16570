"""Token classifier backed by a Hugging Face token-classification pipeline."""

from typing import Any

from transformers import pipeline

from pseudonymizer.classification.base import BaseTokenClassifier
from pseudonymizer.classification.exceptions import (
    ClassificationError,
    ClassifierUnavailableError,
)
from pseudonymizer.classification.models import TokenPrediction
from pseudonymizer.logging.logger import Log


class TransformersTokenClassifier(BaseTokenClassifier):
    """Runs a local or hub NER model without span aggregation.

    Aggregation is off: the engine rebuilds entity spans
    from the raw sub-word predictions.
    """

    def __init__(
        self,
        *,
        model_name: str,
        device: int = -1,
        local_files_only: bool = False,
    ) -> None:
        self._model_name = model_name
        self._device = device
        self._local_files_only = local_files_only
        self._pipeline: Any = None

    def predict(self, text: str) -> list[TokenPrediction]:
        ner = self._load()
        try:
            raw = ner(text)
        except Exception as exc:
            raise ClassificationError(f"Token classification failed: {exc}") from exc
        return [self._to_prediction(item) for item in raw]

    def _load(self) -> Any:
        if self._pipeline is None:
            Log.info(f"Loading token classification model '{self._model_name}'")
            try:
                self._pipeline = pipeline(
                    "token-classification",
                    model=self._model_name,
                    aggregation_strategy="none",
                    device=self._device,
                    model_kwargs={"local_files_only": self._local_files_only},
                )
            except Exception as exc:
                raise ClassifierUnavailableError(
                    f"Cannot load model '{self._model_name}': {exc}"
                ) from exc
            Log.info("Model loaded")
        return self._pipeline

    @staticmethod
    def _to_prediction(item: dict[str, Any]) -> TokenPrediction:
        try:
            return TokenPrediction(
                text=str(item["word"]),
                label=str(item["entity"]),
                score=float(item.get("score", 0.0)),
                start=item.get("start"),
                end=item.get("end"),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ClassificationError(f"Malformed prediction {item!r}: {exc}") from exc
