"""
Tests unitaires pour les commandes CLI du depot.

Le Container du module main est reconfigure avec les Settings de test ;
la base SQLite temporaire est peuplee avant chaque commande.
"""

import httpx
import pytest
import respx
from dependency_injector import providers
from typer.testing import CliRunner

from repository_mediatime import main
from repository_mediatime.infrastructure.persistence.database import init_db
from tests.fixtures.records import VIDEO_URL, WWWROOT, seed_database

runner = CliRunner()


@pytest.fixture
def cli_container(test_settings):
    """Container du module main pointant vers la base de test."""
    main.container.config.override(providers.Object(test_settings))
    main.container.reset_singletons()
    init_db(test_settings.database_url)
    seed_database(test_settings.database_url)
    yield main.container
    main.container.shutdown_resources()
    main.container.config.reset_override()
    main.container.reset_singletons()


class TestInfoCommands:

    def test_version(self):
        result = runner.invoke(main.app, ["version"])

        assert result.exit_code == 0
        assert f"v{main.__version__}" in result.output

    def test_info(self, cli_container):
        result = runner.invoke(main.app, ["info"])

        assert result.exit_code == 0
        assert WWWROOT in result.output
        assert "file, streaming" in result.output


class TestListingCommand:

    def test_lists_resources(self, cli_container):
        result = runner.invoke(main.app, ["listing", "1"])

        assert result.exit_code == 0
        assert "Ressources Media Time (2)" in result.output
        assert "Intro.mp4" in result.output
        assert "Sam Student" in result.output
        assert "Disabled" not in result.output

    def test_unknown_instance(self, cli_container):
        result = runner.invoke(main.app, ["listing", "99"])

        assert result.exit_code == 1
        assert "Erreur" in result.output


class TestLinkCommand:

    def test_prints_video_url(self, cli_container):
        result = runner.invoke(main.app, ["link", "1", "11"])

        assert result.exit_code == 0
        assert VIDEO_URL in result.output

    def test_unknown_source(self, cli_container):
        result = runner.invoke(main.app, ["link", "1", "404"])

        assert result.exit_code == 1


class TestFetchCommand:

    @respx.mock
    def test_downloads_into_temp_dir(self, cli_container, test_settings):
        respx.get(VIDEO_URL).mock(return_value=httpx.Response(200, content=b"video-bytes"))

        result = runner.invoke(main.app, ["fetch", "1", "11", "--save-as", "intro.mp4"])

        assert result.exit_code == 0
        target = test_settings.temp_dir / "download" / "repository_mediatime" / "intro.mp4"
        assert target.read_bytes() == b"video-bytes"
        assert VIDEO_URL in result.output

    @respx.mock
    def test_download_failure(self, cli_container):
        respx.get(VIDEO_URL).mock(return_value=httpx.Response(404))

        result = runner.invoke(main.app, ["fetch", "1", "11"])

        assert result.exit_code == 1
        assert "Erreur" in result.output
