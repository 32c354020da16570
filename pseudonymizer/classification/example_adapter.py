"""Example token classifier adapter.

Use this module as a reference when implementing new classifier adapters.
Implement BaseTokenClassifier and register the engine in ClassifierFactory.
"""

import re
from typing import ClassVar

from pseudonymizer.classification.base import BaseTokenClassifier
from pseudonymizer.classification.models import TokenPrediction


class ExampleTokenClassifier(BaseTokenClassifier):
    """Lexicon-driven classifier with no model behind it.

    Tokens covered by an occurrence of a lexicon phrase are tagged B-/I- with
    the phrase's entity type, every other token is tagged "O". Each token
    keeps its leading whitespace, mimicking sub-word tokenizer output.
    Useful for local development, tests, and as a template for real adapters.
    """

    OUTSIDE_LABEL: ClassVar[str] = "O"

    _TOKEN_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s*(\w+|[^\w\s])")

    def __init__(self, lexicon: dict[str, str] | None = None) -> None:
        self._lexicon = dict(lexicon or {})

    def predict(self, text: str) -> list[TokenPrediction]:
        spans = self._find_phrases(text)
        predictions: list[TokenPrediction] = []
        for m in self._TOKEN_RE.finditer(text):
            start, end = m.start(1), m.end(1)
            label = self.OUTSIDE_LABEL
            for span_start, span_end, entity_type in spans:
                if span_start <= start and end <= span_end:
                    prefix = "B" if start == span_start else "I"
                    label = f"{prefix}-{entity_type}"
                    break
            predictions.append(
                TokenPrediction(text=m.group(0), label=label, score=1.0, start=start, end=end)
            )
        return predictions

    def _find_phrases(self, text: str) -> list[tuple[int, int, str]]:
        """Locate lexicon phrases, longest first; overlaps keep the earlier claim."""
        spans: list[tuple[int, int, str]] = []
        for phrase in sorted(self._lexicon, key=len, reverse=True):
            if not phrase:
                continue
            for m in re.finditer(re.escape(phrase), text):
                if not any(m.start() < e and m.end() > s for s, e, _ in spans):
                    spans.append((m.start(), m.end(), self._lexicon[phrase]))
        return spans
