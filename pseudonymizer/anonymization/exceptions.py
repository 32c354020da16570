class AnonymizationError(Exception):
    """Raised when a text unit cannot be anonymized."""
