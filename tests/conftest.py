import importlib

import pytest

from rps_game import settings


@pytest.fixture
def env_settings(monkeypatch):
    """Set or clear RPS_* variables, then reload rps_game.settings.

    Usage: env_settings(RPS_SEED="7", RPS_LOG_LEVEL=None); None removes a variable.
    The module is reloaded again from the real environment afterwards.
    """
    def apply(**env):
        for name, value in env.items():
            if value is None:
                monkeypatch.delenv(name, raising=False)
            else:
                monkeypatch.setenv(name, value)
        return importlib.reload(settings)

    yield apply
    monkeypatch.undo()
    importlib.reload(settings)
