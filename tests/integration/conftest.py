import pytest

from privacy_relay.config.settings import Settings


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return Settings(log_level="DEBUG")
