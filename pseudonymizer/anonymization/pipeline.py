"""Anonymization pipeline: classify -> merge -> resolve -> rewrite.

Processing flow for one text unit:
1. Run the token classifier once over the unit.
2. Merge fragmentary predictions into whole entity spans.
3. For each span, in document order:
   a. Resolve its pseudonym in the caller's registry.
   b. Build a separator-tolerant pattern for it.
   c. Replace every match in the working text with the pseudonym.
4. Return the rewritten text and replacement artifacts.

Each span searches text already rewritten by earlier spans, so when two
spans could match the same source text the earlier span wins.
"""

import asyncio

from pseudonymizer.anonymization.base import BaseAnonymizer
from pseudonymizer.anonymization.fuzzy_matcher import (
    DEFAULT_MAX_SPAN_LENGTH,
    build_fuzzy_pattern,
    strip_to_alnum,
)
from pseudonymizer.anonymization.merger import merge_predictions
from pseudonymizer.anonymization.models import AnonymizationResult, Artifact
from pseudonymizer.anonymization.registry import PseudonymRegistry
from pseudonymizer.classification.base import BaseTokenClassifier
from pseudonymizer.classification.exceptions import ClassificationError
from pseudonymizer.classification.models import TokenPrediction
from pseudonymizer.logging.logger import Log


class AnonymizationPipeline(BaseAnonymizer):
    """Replaces classifier-detected entities with registry pseudonyms.

    The pipeline itself is stateless; all pseudonym state lives in the
    registry passed to each call. Pass the same registry for every unit of
    one document to get the same pseudonym for repeated mentions.
    """

    def __init__(
        self,
        classifier: BaseTokenClassifier,
        max_span_length: int = DEFAULT_MAX_SPAN_LENGTH,
    ) -> None:
        self._classifier = classifier
        self._max_span_length = max_span_length

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def anonymize(self, text: str, registry: PseudonymRegistry) -> AnonymizationResult:
        if not text:
            return AnonymizationResult(anonymized_text=text)
        predictions = self._classify(text)
        return self._rewrite(text, predictions, registry)

    async def anonymize_async(
        self,
        text: str,
        registry: PseudonymRegistry,
    ) -> AnonymizationResult:
        """Like ``anonymize``, with classification off the event loop.

        Merging and replacement run after the classifier returns and contain
        no await points, so registry updates for one unit are never
        interleaved with another coroutine's.
        """
        if not text:
            return AnonymizationResult(anonymized_text=text)
        predictions = await asyncio.to_thread(self._classify, text)
        return self._rewrite(text, predictions, registry)

    async def process_text_async(self, text: str, registry: PseudonymRegistry) -> str:
        result = await self.anonymize_async(text, registry)
        return result.anonymized_text

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _classify(self, text: str) -> list[TokenPrediction]:
        try:
            predictions = list(self._classifier.predict(text))
        except ClassificationError:
            raise
        except Exception as exc:
            raise ClassificationError(f"Token classification failed: {exc}") from exc
        Log.debug(f"Classifier returned {len(predictions)} tokens")
        return predictions

    def _rewrite(
        self,
        text: str,
        predictions: list[TokenPrediction],
        registry: PseudonymRegistry,
    ) -> AnonymizationResult:
        spans = merge_predictions(predictions)
        if Log.debug_enabled():
            Log.debug(f"Merged spans: {[(s.entity_type, s.text) for s in spans]}")

        result = AnonymizationResult(anonymized_text=text)
        for span in spans:
            if not strip_to_alnum(span.text):
                continue

            pseudonym = registry.resolve(span.entity_type, span.text)
            if pseudonym is None:
                continue

            pattern = build_fuzzy_pattern(span.text, self._max_span_length)
            if pattern is None:
                Log.debug(f"No usable pattern for {span.entity_type} span; left in place")
                result.skipped_spans.append(span)
                continue

            result.anonymized_text, count = pattern.subn(
                lambda _m, replacement=pseudonym: replacement,
                result.anonymized_text,
            )
            if count:
                result.artifacts.append(
                    Artifact(
                        type=span.entity_type,
                        original=span.text,
                        replacement=pseudonym,
                        occurrences=count,
                    )
                )

        Log.info(
            f"Anonymized unit: {len(spans)} spans, "
            f"{sum(a.occurrences for a in result.artifacts)} replacements, "
            f"{len(result.skipped_spans)} skipped"
        )
        return result
