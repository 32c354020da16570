class ClassificationError(Exception):
    """Raised when the token classifier cannot produce predictions."""


class ClassifierUnavailableError(ClassificationError):
    """Raised when the model backend cannot be loaded."""
