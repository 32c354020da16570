from collections.abc import Iterable

from pseudonymizer.anonymization.base import BaseAnonymizer
from pseudonymizer.anonymization.exceptions import AnonymizationError
from pseudonymizer.anonymization.factory import AnonymizerFactory
from pseudonymizer.anonymization.registry import PseudonymRegistry
from pseudonymizer.classification.base import BaseTokenClassifier
from pseudonymizer.config.settings import Settings
from pseudonymizer.logging.logger import Log
from pseudonymizer.processor.exceptions import DocumentProcessingError
from pseudonymizer.processor.models import DocumentResult


class DocumentAnonymizer:
    """Anonymizes the text units of one document against one registry.

    Units (spreadsheet cells, paragraphs, lines) are processed strictly one
    at a time, in order, so a repeated entity gets the same pseudonym in
    every unit.
    """

    def __init__(self, anonymizer: BaseAnonymizer) -> None:
        self._anonymizer = anonymizer

    def anonymize_units(
        self,
        units: Iterable[str],
        registry: PseudonymRegistry | None = None,
    ) -> DocumentResult:
        """Run the anonymizer over every unit.

        Args:
            units: Text units in document order.
            registry: Registry to share with other documents; a fresh one
                      is used when omitted.

        Raises:
            DocumentProcessingError: when a unit fails. Pseudonyms already
                assigned to earlier units stay in the registry.
        """
        result = DocumentResult(registry=registry if registry is not None else PseudonymRegistry())
        for index, unit in enumerate(units):
            try:
                result.units.append(self._anonymizer.anonymize(unit, result.registry))
            except AnonymizationError:
                raise
            except Exception as exc:
                Log.error(f"Anonymization failed on unit {index}: {exc}")
                raise DocumentProcessingError(index, exc) from exc

        Log.info(
            f"Anonymized {len(result.units)} units, "
            f"{result.registry.size} distinct entities"
        )
        return result

    async def anonymize_units_async(
        self,
        units: Iterable[str],
        registry: PseudonymRegistry | None = None,
    ) -> DocumentResult:
        """Async variant; each unit is awaited before the next one starts."""
        result = DocumentResult(registry=registry if registry is not None else PseudonymRegistry())
        for index, unit in enumerate(units):
            try:
                result.units.append(await self._anonymizer.anonymize_async(unit, result.registry))
            except AnonymizationError:
                raise
            except Exception as exc:
                Log.error(f"Anonymization failed on unit {index}: {exc}")
                raise DocumentProcessingError(index, exc) from exc
        return result


def build_processor(
    settings: Settings,
    classifier: BaseTokenClassifier | None = None,
) -> DocumentAnonymizer:
    """Build a DocumentAnonymizer with the configured pipeline."""
    anonymizer = AnonymizerFactory.create(settings, classifier=classifier)
    return DocumentAnonymizer(anonymizer)
