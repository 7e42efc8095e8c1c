"""
Primitive d'envoi de fichiers pour FastAPI.

Implemente IFileServer : le fichier temporaire est envoye via FileResponse
puis supprime une fois la reponse transmise.
"""

import mimetypes
from pathlib import Path
from typing import Any, Optional

from fastapi import HTTPException
from fastapi.responses import FileResponse
from loguru import logger
from starlette.background import BackgroundTask

from ..core.ports.file_server import IFileServer


class FastAPIFileServer(IFileServer):
    """
    Envoi de fichiers au client HTTP.

    Args :
        default_lifetime : Duree de cache utilisee quand lifetime vaut None
    """

    def __init__(self, default_lifetime: int = 86400) -> None:
        self._default_lifetime = default_lifetime

    def send_file(
        self,
        path: Path,
        filename: str,
        lifetime: Optional[int] = None,
        filter_mode: int = 0,
        forcedownload: bool = False,
        mimetype: str = "",
        dontdie: bool = False,
        options: Optional[dict[str, Any]] = None,
    ) -> FileResponse:
        """Construit la reponse HTTP du fichier (le filtrage de contenu n'est pas applique)."""
        if lifetime is None:
            lifetime = self._default_lifetime
        media_type = mimetype or mimetypes.guess_type(filename)[0] or "application/octet-stream"
        headers = {
            "Cache-Control": f"public, max-age={lifetime}" if lifetime > 0 else "no-cache, no-store",
        }
        disposition = "attachment" if forcedownload else "inline"
        logger.debug(
            "Envoi de fichier",
            filename=filename,
            lifetime=lifetime,
            filter=filter_mode,
            forcedownload=forcedownload,
        )

        return FileResponse(
            path,
            filename=filename or None,
            media_type=media_type,
            headers=headers,
            content_disposition_type=disposition,
            background=BackgroundTask(Path(path).unlink, missing_ok=True),
        )

    def send_file_not_found(self) -> None:
        """Interrompt la requete avec une reponse 404."""
        raise HTTPException(status_code=404, detail="File not found")
