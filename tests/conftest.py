import pytest

from pseudonymizer.anonymization.registry import PseudonymRegistry
from pseudonymizer.classification.example_adapter import ExampleTokenClassifier
from pseudonymizer.classification.models import TokenPrediction


@pytest.fixture()
def registry() -> PseudonymRegistry:
    return PseudonymRegistry()


@pytest.fixture()
def scenario_text() -> str:
    return "John Smith lives at 123 Main St. Contact John Smith at 555-1234."


@pytest.fixture()
def scenario_lexicon() -> dict[str, str]:
    return {
        "John Smith": "PERSON",
        "123 Main St": "LOCATION",
        "555-1234": "PHONE",
    }


@pytest.fixture()
def scenario_classifier(scenario_lexicon: dict[str, str]) -> ExampleTokenClassifier:
    return ExampleTokenClassifier(scenario_lexicon)


@pytest.fixture()
def person_location_predictions() -> list[TokenPrediction]:
    return [
        TokenPrediction(text="John", label="B-PER", score=0.99),
        TokenPrediction(text=" Smith", label="I-PER", score=0.97),
        TokenPrediction(text=" works", label="O", score=0.99),
        TokenPrediction(text="London", label="B-LOC", score=0.95),
    ]
