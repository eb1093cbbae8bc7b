import pytest

from b64codec.config import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
