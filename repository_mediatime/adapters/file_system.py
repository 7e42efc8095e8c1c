"""
Adaptateur pour le repertoire temporaire de telechargement.

Implementation concrete de ITempFileStore : les fichiers sont prepares dans
<temp_dir>/download/repository_mediatime/ et ne peuvent jamais en sortir.
"""

import os
import tempfile
import time
from pathlib import Path

from loguru import logger

from repository_mediatime.core.ports.file_system import ITempFileStore

# Sous-repertoire reserve au depot dans le repertoire temporaire
DOWNLOAD_SUBDIR = Path("download") / "repository_mediatime"

# Nom utilise quand aucun nom n'est fourni
DEFAULT_FILENAME = "file"


class TempFileStore(ITempFileStore):
    """
    Implementation de ITempFileStore sur le systeme de fichiers local.

    Args :
        temp_dir : Repertoire temporaire gere par l'application
    """

    def __init__(self, temp_dir: Path) -> None:
        self._directory = Path(temp_dir).expanduser() / DOWNLOAD_SUBDIR

    @property
    def directory(self) -> Path:
        return self._directory

    def prepare_file(self, filename: str = "") -> Path:
        """
        Reserve un fichier vide dans le repertoire de telechargement.

        Seul le nom de base est conserve ; un nom vide donne "file". La
        reservation est atomique (creation exclusive) : si le nom est deja
        pris, un fichier unique *.tmp est cree a la place. Deux appels ne
        retournent donc jamais le meme chemin tant que le premier existe.
        """
        self._directory.mkdir(parents=True, exist_ok=True)
        name = Path(str(filename or "").replace("\\", "/")).name
        if name in ("", ".", ".."):
            name = DEFAULT_FILENAME
        path = self._directory / name
        if path.resolve().parent != self._directory.resolve():
            raise ValueError(f"Nom de fichier invalide : {filename!r}")
        try:
            with path.open("xb"):
                pass
        except FileExistsError:
            fd, unique = tempfile.mkstemp(
                dir=self._directory, prefix=f"{int(time.time())}_", suffix=".tmp"
            )
            os.close(fd)
            path = Path(unique)
        logger.debug("Fichier temporaire reserve", path=str(path))
        return path

    def write_bytes(self, path: Path, content: bytes) -> Path:
        """Ecrit le contenu ; les erreurs d'E/S (OSError) sont propagees."""
        path.write_bytes(content)
        logger.debug("Fichier temporaire ecrit", path=str(path), size=len(content))
        return path
