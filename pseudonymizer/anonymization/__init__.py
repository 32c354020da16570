from pseudonymizer.anonymization.exceptions import AnonymizationError
from pseudonymizer.anonymization.models import AnonymizationResult, Artifact, MergedEntitySpan
from pseudonymizer.anonymization.pipeline import AnonymizationPipeline
from pseudonymizer.anonymization.registry import PseudonymRegistry

__all__ = [
    "AnonymizationError",
    "AnonymizationPipeline",
    "AnonymizationResult",
    "Artifact",
    "MergedEntitySpan",
    "PseudonymRegistry",
]
