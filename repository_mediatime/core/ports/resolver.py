"""
Interfaces ports pour la resolution des ressources Media Time.

Le resolveur transforme un enregistrement en ressource capable de fournir
les URL de vignette et de video ainsi que les octets du media. Tous les
calculs sont paresseux : rien n'est recupere avant l'appel.
"""

from abc import ABC, abstractmethod

from repository_mediatime.core.entities.media import MediaRecord
from repository_mediatime.core.entities.request import RendererContext


class IMediaResource(ABC):
    """Ressource Media Time resolue."""

    record: MediaRecord

    @abstractmethod
    def image_url(self, renderer: RendererContext) -> str:
        """URL de la vignette de la ressource."""
        ...

    @abstractmethod
    def video_url(self, renderer: RendererContext) -> str:
        """URL de la video de la ressource."""
        ...

    @abstractmethod
    def video_file_content(self, renderer: RendererContext) -> bytes:
        """
        Recupere les octets de la video.

        Leve MediaFetchError si le telechargement echoue.
        """
        ...


class IMediaResolver(ABC):
    """Fabrique de ressources a partir des enregistrements."""

    @abstractmethod
    def resolve(self, record: MediaRecord) -> IMediaResource:
        ...
