"""
Resolveur HTTP des ressources Media Time.

Implemente IMediaResolver : les URL de vignette et de video sont lues dans
le contenu decode de l'enregistrement (relatives a wwwroot ou absolues),
et les octets de la video sont telecharges avec httpx.

Usage:
    client = httpx.Client(timeout=30.0, follow_redirects=True)
    resolver = HttpMediaResolver(client)
    resource = resolver.resolve(record)
    url = resource.video_url(renderer)
"""

from urllib.parse import urlsplit

import httpx
from loguru import logger

from repository_mediatime.core.entities.media import MediaRecord
from repository_mediatime.core.entities.request import RendererContext
from repository_mediatime.core.exceptions import MediaFetchError
from repository_mediatime.core.ports.resolver import IMediaResolver, IMediaResource


def _absolute(url: str, renderer: RendererContext) -> str:
    """Rend une URL absolue par rapport a la racine du site."""
    if urlsplit(url).scheme:
        return url
    return renderer.url(url)


class HttpMediaResource(IMediaResource):
    """
    Ressource Media Time resolue, dont la video est accessible par HTTP.

    Aucune valeur n'est mise en cache : chaque appel relit le contenu.
    """

    def __init__(self, record: MediaRecord, client: httpx.Client) -> None:
        self.record = record
        self._client = client

    def image_url(self, renderer: RendererContext) -> str:
        """URL de la vignette, ou l'image par defaut du site."""
        poster = self.record.content.posterimage
        if poster:
            return _absolute(poster, renderer)
        return _absolute(renderer.default_image, renderer) if renderer.default_image else ""

    def video_url(self, renderer: RendererContext) -> str:
        """URL de la video, chaine vide si la ressource n'en a pas."""
        url = self.record.content.videourl
        return _absolute(url, renderer) if url else ""

    def video_file_content(self, renderer: RendererContext) -> bytes:
        """
        Telecharge la video.

        Raises:
            MediaFetchError: URL absente, erreur reseau ou statut HTTP en erreur
        """
        url = self.video_url(renderer)
        if not url:
            raise MediaFetchError(f"Aucune video pour la ressource {self.record.id}")
        logger.debug("Telechargement de la video", id=self.record.id, url=url)
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Echec du telechargement", id=self.record.id, url=url, error=str(e))
            raise MediaFetchError(f"Telechargement impossible : {url}") from e
        return response.content


class HttpMediaResolver(IMediaResolver):
    """Fabrique de HttpMediaResource partageant un client httpx."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def resolve(self, record: MediaRecord) -> HttpMediaResource:
        return HttpMediaResource(record, self._client)
