"""Unit tests for logging configuration."""

import json
import logging
from pathlib import Path

import pytest
from loguru import logger

from src.product_api.api.utils.app_startup import configure_logging
from src.product_api.runtime.config.config_data import ConfigData
from src.product_api.runtime.context import with_context


@pytest.fixture
def log_file(tmp_path: Path):
    path = tmp_path / "logs" / "app.log"
    override = ConfigData()
    override.logging.file = str(path)
    override.logging.format = "json"

    with with_context(override):
        configure_logging()
    try:
        yield path
    finally:
        # Back to the console-only default
        configure_logging()


def _records(path: Path) -> list[dict]:
    logger.complete()
    return [json.loads(line)["record"] for line in path.read_text().splitlines()]


def test_file_sink_writes_json_records(log_file: Path):
    logger.info("product saved")

    messages = [record["message"] for record in _records(log_file)]
    assert "product saved" in messages


def test_default_request_id_is_attached(log_file: Path):
    logger.info("outside a request")

    record = next(r for r in _records(log_file) if r["message"] == "outside a request")
    assert record["extra"]["request_id"] == "-"


def test_stdlib_logging_is_forwarded(log_file: Path):
    logging.getLogger("some.library").warning("from stdlib")

    record = next(r for r in _records(log_file) if r["message"] == "from stdlib")
    assert record["level"]["name"] == "WARNING"
    assert record["extra"]["logger_name"] == "some.library"


def test_uvicorn_access_logs_are_dropped(log_file: Path):
    access_logger = logging.getLogger("uvicorn.access")
    access_logger.setLevel(logging.INFO)
    access_logger.info("GET /products 200")

    messages = [record["message"] for record in _records(log_file)]
    assert "GET /products 200" not in messages
