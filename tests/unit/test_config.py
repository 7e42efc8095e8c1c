"""Tests de la configuration (pydantic-settings) et du logging (loguru)."""

import json
from pathlib import Path

import pytest
from loguru import logger

from repository_mediatime.config import Settings
from repository_mediatime.lang import COMPONENT
from repository_mediatime.logging_config import NO_INSTANCE, configure_logging, instance_logger


class TestSettings:

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MEDIATIME_WWWROOT", "https://moodle.example.org/")
        monkeypatch.setenv("MEDIATIME_ENABLED_SOURCES", '["file"]')

        settings = Settings()

        assert settings.wwwroot == "https://moodle.example.org"
        assert settings.enabled_sources == ["file"]

    def test_paths_are_expanded(self):
        settings = Settings(temp_dir="~/mediatime-temp")

        assert settings.temp_dir == Path.home() / "mediatime-temp"


class TestConfigureLogging:

    @pytest.fixture
    def log_settings(self, tmp_path):
        return Settings(log_level="WARNING", log_file=tmp_path / "logs" / "mediatime.log")

    def _records(self, settings):
        logger.complete()
        logger.remove()
        lines = settings.log_file.read_text().splitlines()
        return {entry["record"]["message"]: entry["record"] for entry in map(json.loads, lines)}

    def test_writes_json_log_file(self, log_settings):
        configure_logging(log_settings)
        logger.info("Message de test")

        records = self._records(log_settings)

        assert records["Message de test"]["level"]["name"] == "INFO"

    def test_instance_context_is_bound(self, log_settings):
        """Les messages d'une instance portent le composant et l'identifiant."""
        configure_logging(log_settings)
        instance_logger(7).info("Listing Media Time", count=2)
        logger.info("Sans instance")

        records = self._records(log_settings)

        assert records["Listing Media Time"]["extra"] == {
            "component": COMPONENT,
            "repository": 7,
            "count": 2,
        }
        assert records["Sans instance"]["extra"] == {"component": COMPONENT, "repository": NO_INSTANCE}
