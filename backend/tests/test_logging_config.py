import logging

from quiz_api.core.logging_config import build_config, setup_logging


def test_setup_logging_is_idempotent(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    logfile = tmp_path / "quiz.log"
    setup_logging("debug", str(logfile))
    setup_logging("info")

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    for handler in root.handlers:
        handler.close()


def test_build_config_defaults():
    config = build_config("verbose")
    assert config["root"] == {"level": "INFO", "handlers": ["console"]}
    assert config["loggers"]["sqlalchemy.engine"] == {"level": "WARNING"}
    assert config["disable_existing_loggers"] is False
