"""Pseudonymization engine: replaces detected entities with stable placeholders."""

from pseudonymizer.anonymization import AnonymizationPipeline, PseudonymRegistry
from pseudonymizer.processor.processor import DocumentAnonymizer, build_processor

__all__ = [
    "AnonymizationPipeline",
    "DocumentAnonymizer",
    "PseudonymRegistry",
    "build_processor",
]
__version__ = "0.1.0"
