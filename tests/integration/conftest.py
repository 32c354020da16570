import pytest

from pseudonymizer.config.settings import Settings


@pytest.fixture()
def example_settings() -> Settings:
    return Settings(classifier_engine="example", log_level="DEBUG")
