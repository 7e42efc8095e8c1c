"""
Registre des plugins sources Media Time.

Les sources actives sont lues depuis la configuration (MEDIATIME_ENABLED_SOURCES).
"""

from collections.abc import Iterable

from repository_mediatime.core.ports.repositories import ISourceRegistry


class SettingsSourceRegistry(ISourceRegistry):
    """Implementation de ISourceRegistry a partir d'une liste de tags configuree."""

    def __init__(self, enabled_sources: Iterable[str]) -> None:
        self._sources = frozenset(s.strip() for s in enabled_sources if s and s.strip())

    def get_enabled_sources(self) -> frozenset[str]:
        return self._sources
