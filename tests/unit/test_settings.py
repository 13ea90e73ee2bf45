import pytest
from pydantic import ValidationError

from config.settings import Settings


def test_defaults(monkeypatch):
    for name in ("DB_PATH", "ENVIRONMENT", "SESSION_TIME_LIMIT_S", "DEFAULT_DIFFICULTY"):
        monkeypatch.delenv(name, raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.DB_PATH == "data/interviews.db"
    assert cfg.SESSION_TIME_LIMIT_S == 3600
    assert cfg.STALE_SESSION_HOURS == 24
    assert cfg.DEFAULT_DIFFICULTY == "mixed"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SESSION_TIME_LIMIT_S", "1800")
    monkeypatch.setenv("ENVIRONMENT", "production")
    cfg = Settings(_env_file=None)
    assert cfg.SESSION_TIME_LIMIT_S == 1800
    assert cfg.ENVIRONMENT == "production"


def test_assignment_is_validated():
    cfg = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        cfg.SESSION_TIME_LIMIT_S = 5
