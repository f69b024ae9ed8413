"""Tests for the loguru configuration applied at application import."""

import json
import logging

from loguru import logger

from src.paperwings.api.utils.app_startup import configure_logging
from src.paperwings.runtime.config.config_data import ConfigData, LoggingConfig
from src.paperwings.runtime.context import get_config, with_context


def _records(path):
    return [json.loads(line)["record"] for line in path.read_text().splitlines()]


class TestConfigureLogging:
    def test_json_file_sink_carries_app_context(self, tmp_path):
        log_file = tmp_path / "logs" / "api.log"
        override = ConfigData(logging=LoggingConfig(file=str(log_file), format="json"))

        try:
            with with_context(override):
                configure_logging()
                logger.info("catalog loaded")
                logger.complete()
        finally:
            configure_logging()

        record = _records(log_file)[-1]
        assert record["message"] == "catalog loaded"
        assert record["extra"]["request_id"] == "-"
        assert record["extra"]["app"] == get_config().app.name
        assert record["extra"]["environment"] == get_config().app.environment

    def test_stdlib_records_are_forwarded(self, tmp_path):
        log_file = tmp_path / "api.log"
        override = ConfigData(logging=LoggingConfig(file=str(log_file), format="json"))

        try:
            with with_context(override):
                configure_logging()
                logging.getLogger("uvicorn.error").warning("worker restarted")
                logging.getLogger("uvicorn.access").warning("GET /api/books 200")
                logger.complete()
        finally:
            configure_logging()

        records = _records(log_file)
        messages = [record["message"] for record in records]
        assert "worker restarted" in messages
        assert "GET /api/books 200" not in messages
        forwarded = next(r for r in records if r["message"] == "worker restarted")
        assert forwarded["extra"]["logger_name"] == "uvicorn.error"
