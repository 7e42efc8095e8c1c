"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports store :
- IMediaRecordRepository : Lecture des enregistrements Media Time
- ISourceRegistry : Plugins sources actives
- IOptionStore : Options d'instance et de type, creation d'instance
- IUserDirectory : Utilisateurs de l'hote

Ports ressources :
- IMediaResolver / IMediaResource : Resolution des URL et des octets

Ports fichiers :
- ITempFileStore : Repertoire temporaire de telechargement
- IFileServer : Primitive d'envoi de fichiers de l'hote
"""

from repository_mediatime.core.ports.file_server import IFileServer
from repository_mediatime.core.ports.file_system import ITempFileStore
from repository_mediatime.core.ports.repositories import (
    IMediaRecordRepository,
    IOptionStore,
    ISourceRegistry,
    IUserDirectory,
)
from repository_mediatime.core.ports.resolver import IMediaResolver, IMediaResource

__all__ = [
    "IFileServer",
    "ITempFileStore",
    "IMediaRecordRepository",
    "IOptionStore",
    "ISourceRegistry",
    "IUserDirectory",
    "IMediaResolver",
    "IMediaResource",
]
