from abc import ABC, abstractmethod

from pseudonymizer.anonymization.models import AnonymizationResult
from pseudonymizer.anonymization.registry import PseudonymRegistry


class BaseAnonymizer(ABC):
    """Contract for all anonymizers."""

    @abstractmethod
    def anonymize(self, text: str, registry: PseudonymRegistry) -> AnonymizationResult:
        """Replace every detected entity in *text* with its pseudonym.

        Args:
            text: One text unit (cell, paragraph, line).
            registry: Pseudonym store shared by every unit of the document.

        Returns:
            AnonymizationResult with the rewritten text and artifact list.

        Raises:
            ClassificationError: when the classifier fails; no partial text
                is returned for the unit.
        """

    async def anonymize_async(
        self,
        text: str,
        registry: PseudonymRegistry,
    ) -> AnonymizationResult:
        """Awaitable ``anonymize``; adapters with async backends override it."""
        return self.anonymize(text, registry)

    def process_text(self, text: str, registry: PseudonymRegistry) -> str:
        """Return only the anonymized text for *text*."""
        return self.anonymize(text, registry).anonymized_text
