"""Tests pour SettingsSourceRegistry."""

from repository_mediatime.adapters.source_registry import SettingsSourceRegistry


def test_enabled_sources():
    registry = SettingsSourceRegistry(["file", " streaming ", "", "file"])

    assert registry.get_enabled_sources() == frozenset({"file", "streaming"})


def test_no_source():
    assert SettingsSourceRegistry([]).get_enabled_sources() == frozenset()
