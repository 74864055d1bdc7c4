"""Tests for hello_world.core.logging and the startup logs."""
from fastapi.testclient import TestClient
from loguru import logger

from hello_world.core.config import settings
from hello_world.core.logging import setup_logging
from hello_world.main import app


def test_log_file_sink(tmp_path, monkeypatch) -> None:
    log_file = tmp_path / "sub" / "app.log"
    original = settings.LOG_FILE
    monkeypatch.setattr(settings, "LOG_FILE", str(log_file))
    try:
        setup_logging()
        logger.info("written to file")
    finally:
        monkeypatch.setattr(settings, "LOG_FILE", original)
        # Removes the file sink and closes the file
        setup_logging()

    assert log_file.parent.is_dir()
    contents = log_file.read_text()
    assert "INFO" in contents
    assert "written to file" in contents


def test_no_log_file_by_default(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings, "LOG_FILE", None)
    setup_logging()
    logger.info("stderr only")
    assert list(tmp_path.iterdir()) == []


def test_startup_and_shutdown_logged(log_messages, monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "staging")
    with TestClient(app):
        pass

    messages = [r["message"] for r in log_messages if r["level"].name == "INFO"]
    assert any(
        "started" in m and "service=hello-world" in m and "version=1.0.0" in m and "environment=staging" in m
        for m in messages
    )
    assert any("shutting down" in m for m in messages)
