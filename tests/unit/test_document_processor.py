import asyncio
from unittest.mock import MagicMock

import pytest

from pseudonymizer.anonymization.base import BaseAnonymizer
from pseudonymizer.anonymization.models import AnonymizationResult
from pseudonymizer.anonymization.registry import PseudonymRegistry
from pseudonymizer.classification.example_adapter import ExampleTokenClassifier
from pseudonymizer.classification.exceptions import ClassificationError
from pseudonymizer.config.settings import Settings
from pseudonymizer.processor.exceptions import DocumentProcessingError
from pseudonymizer.processor.processor import DocumentAnonymizer, build_processor


def _echo_anonymizer() -> MagicMock:
    anonymizer = MagicMock(spec=BaseAnonymizer)
    anonymizer.anonymize.side_effect = lambda text, registry: AnonymizationResult(
        anonymized_text=text.upper()
    )
    return anonymizer


class TestAnonymizeUnits:
    def test_processes_units_in_order(self) -> None:
        processor = DocumentAnonymizer(_echo_anonymizer())
        result = processor.anonymize_units(["a", "b", "c"])
        assert result.texts == ["A", "B", "C"]

    def test_every_unit_shares_one_registry(self) -> None:
        anonymizer = _echo_anonymizer()
        result = DocumentAnonymizer(anonymizer).anonymize_units(["a", "b"])
        registries = {id(call.args[1]) for call in anonymizer.anonymize.call_args_list}
        assert registries == {id(result.registry)}

    def test_uses_caller_registry(self, registry: PseudonymRegistry) -> None:
        result = DocumentAnonymizer(_echo_anonymizer()).anonymize_units(["a"], registry)
        assert result.registry is registry

    def test_fresh_registry_per_call_by_default(self) -> None:
        processor = DocumentAnonymizer(_echo_anonymizer())
        first = processor.anonymize_units(["a"])
        second = processor.anonymize_units(["a"])
        assert first.registry is not second.registry

    def test_no_units(self) -> None:
        result = DocumentAnonymizer(_echo_anonymizer()).anonymize_units([])
        assert result.units == []

    def test_failing_unit_names_its_index(self) -> None:
        anonymizer = MagicMock(spec=BaseAnonymizer)
        anonymizer.anonymize.side_effect = [
            AnonymizationResult(anonymized_text="ok"),
            ClassificationError("model unavailable"),
        ]
        with pytest.raises(DocumentProcessingError, match="Unit 1") as exc_info:
            DocumentAnonymizer(anonymizer).anonymize_units(["x", "y", "z"])
        assert exc_info.value.unit_index == 1
        assert isinstance(exc_info.value.__cause__, ClassificationError)
        assert anonymizer.anonymize.call_count == 2


class TestWithPipeline:
    def test_cells_share_pseudonyms(self, scenario_lexicon: dict[str, str]) -> None:
        processor = build_processor(
            Settings(classifier_engine="example"),
            classifier=ExampleTokenClassifier(scenario_lexicon),
        )
        result = processor.anonymize_units(
            ["John Smith", "Phone: 555-1234", "Owner: John Smith", "Acme Ltd"]
        )
        assert result.texts == ["PERSON_1", "Phone: PHONE_1", "Owner: PERSON_1", "Acme Ltd"]
        assert result.registry.size == 2

    def test_registry_survives_a_failed_unit(self, scenario_lexicon: dict[str, str]) -> None:
        classifier = ExampleTokenClassifier(scenario_lexicon)
        real_predict = classifier.predict

        def flaky_predict(text: str):
            if text == "boom":
                raise RuntimeError("inference failed")
            return real_predict(text)

        classifier.predict = flaky_predict  # type: ignore[method-assign]
        processor = build_processor(Settings(classifier_engine="example"), classifier=classifier)
        registry = PseudonymRegistry()
        with pytest.raises(DocumentProcessingError):
            processor.anonymize_units(["John Smith", "boom"], registry)
        assert registry.lookup("JohnSmith") == "PERSON_1"

    def test_async_units_match_sync(self, scenario_lexicon: dict[str, str]) -> None:
        processor = build_processor(
            Settings(classifier_engine="example"),
            classifier=ExampleTokenClassifier(scenario_lexicon),
        )
        units = ["John Smith", "Call 555-1234", "John Smith again"]
        sync_result = processor.anonymize_units(units)
        async_result = asyncio.run(processor.anonymize_units_async(units))
        assert async_result.texts == sync_result.texts
