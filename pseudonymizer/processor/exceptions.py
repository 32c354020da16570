from pseudonymizer.anonymization.exceptions import AnonymizationError


class DocumentProcessingError(AnonymizationError):
    """Raised when one unit of a document cannot be anonymized."""

    def __init__(self, unit_index: int, cause: Exception) -> None:
        super().__init__(f"Unit {unit_index} could not be anonymized: {cause}")
        self.unit_index = unit_index
