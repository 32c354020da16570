from pseudonymizer.classification.base import BaseTokenClassifier
from pseudonymizer.classification.example_adapter import ExampleTokenClassifier
from pseudonymizer.config.settings import Settings


class ClassifierFactory:
    """Creates the configured token classifier adapter."""

    ENGINES: tuple[str, ...] = ("transformers", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseTokenClassifier:
        engine = settings.classifier_engine.lower()
        if engine == "example":
            return ExampleTokenClassifier()
        if engine == "transformers":
            # Imported lazily: transformers pulls in torch.
            from pseudonymizer.classification.transformers_adapter import (
                TransformersTokenClassifier,
            )

            return TransformersTokenClassifier(
                model_name=settings.ner_model_name,
                device=settings.ner_device,
                local_files_only=settings.ner_local_files_only,
            )
        raise ValueError(
            f"Unknown classifier engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
