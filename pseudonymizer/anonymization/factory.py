from pseudonymizer.anonymization.pipeline import AnonymizationPipeline
from pseudonymizer.classification.base import BaseTokenClassifier
from pseudonymizer.classification.factory import ClassifierFactory
from pseudonymizer.config.settings import Settings


class AnonymizerFactory:
    """Creates the anonymization pipeline with its configured classifier."""

    @classmethod
    def create(
        cls,
        settings: Settings,
        classifier: BaseTokenClassifier | None = None,
    ) -> AnonymizationPipeline:
        if classifier is None:
            classifier = ClassifierFactory.create(settings)
        return AnonymizationPipeline(
            classifier=classifier,
            max_span_length=settings.max_span_length,
        )
