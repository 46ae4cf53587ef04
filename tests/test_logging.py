import logging

import pytest

from tenpin import InvalidRoll
from tenpin import config


@pytest.fixture
def tenpin_logger():
    logger = logging.getLogger("tenpin")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers


def test_configure_logging_reads_env(monkeypatch, tenpin_logger):
    monkeypatch.setenv("TENPIN_LOG_LEVEL", " debug ")
    config.configure_logging()

    assert tenpin_logger.level == logging.DEBUG
    assert tenpin_logger.handlers


def test_invalid_level_falls_back_with_warning(monkeypatch, caplog):
    monkeypatch.setenv("TENPIN_LOG_LEVEL", "chatty")
    with caplog.at_level(logging.WARNING, logger="tenpin.config"):
        level = config._canon_level("TENPIN_LOG_LEVEL")

    assert level == "WARNING"
    assert "not a valid log level" in caplog.text


def test_unset_level_uses_default(monkeypatch):
    monkeypatch.delenv("TENPIN_LOG_LEVEL", raising=False)
    assert config._canon_level("TENPIN_LOG_LEVEL", default="INFO") == "INFO"


def test_game_logs_completion(game, caplog):
    with caplog.at_level(logging.INFO, logger="tenpin"):
        for _ in range(12):
            game.record_roll(10)

    assert "Game complete with score 300" in caplog.text


def test_game_logs_rejected_roll(game, caplog):
    with caplog.at_level(logging.DEBUG, logger="tenpin"):
        with pytest.raises(InvalidRoll):
            game.record_roll(-1)

    assert "Rejected roll -1" in caplog.text
