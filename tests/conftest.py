from pathlib import Path

import pytest

from junit_reporter.config import ENV_KEYS

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_path():
    def _path(name):
        return str(FIXTURES / name)
    return _path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep a developer's .env and environment out of the tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JUNIT_REPORTER_CONFIG", raising=False)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
