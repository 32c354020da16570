from dataclasses import dataclass, field

from pseudonymizer.anonymization.models import AnonymizationResult
from pseudonymizer.anonymization.registry import PseudonymRegistry


@dataclass
class DocumentResult:
    """Accumulates per-unit results as a document is anonymized."""

    registry: PseudonymRegistry
    units: list[AnonymizationResult] = field(default_factory=list)

    @property
    def texts(self) -> list[str]:
        return [unit.anonymized_text for unit in self.units]
