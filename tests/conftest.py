import pytest

from vinculum.utils.constants import DEFAULT_CONFIG


@pytest.fixture
def config():
    """A validated configuration dict with a small thread pool."""
    return {**DEFAULT_CONFIG, "max_workers": 2}


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """Runs the test from an empty directory with no VINCULUM_* overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("VINCULUM_SERVICE_URL", raising=False)
    monkeypatch.delenv("VINCULUM_LOG_LEVEL", raising=False)
    return tmp_path
