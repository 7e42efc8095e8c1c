"""
Interface port pour les fichiers temporaires de telechargement.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ITempFileStore(ABC):
    """
    Interface du repertoire temporaire gere par l'hote.

    Les chemins retournes restent toujours a l'interieur du repertoire gere.
    """

    @abstractmethod
    def prepare_file(self, filename: str = "") -> Path:
        """
        Reserve un fichier vide pour un telechargement.

        Cree les repertoires parents si necessaire. La reservation est
        atomique ; un nom deja utilise est remplace par un nom unique.

        Args :
            filename : Nom souhaite (sans chemin)

        Retourne :
            Chemin du fichier reserve, a ecrire
        """
        ...

    @abstractmethod
    def write_bytes(self, path: Path, content: bytes) -> Path:
        """
        Ecrit le contenu dans le fichier prepare.

        Leve OSError si l'ecriture echoue.
        """
        ...
