"""
Interface port pour la primitive d'envoi de fichiers de l'hote.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional


class IFileServer(ABC):
    """
    Interface d'envoi de fichiers au client.

    Gere les en-tetes de cache (duree de vie) et le mode telechargement
    force ou affichage dans le navigateur.
    """

    @abstractmethod
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
    ) -> Any:
        """
        Envoie un fichier local au client.

        Args :
            path : Fichier a envoyer
            filename : Nom presente au client
            lifetime : Duree de cache en secondes (None = valeur de l'hote)
            filter_mode : 0 = pas de filtre, 1 = tous les fichiers, 2 = HTML seulement
            forcedownload : Force le telechargement plutot que l'affichage
            mimetype : Type MIME impose (vide = deduit du nom)
            dontdie : Ne pas terminer la requete apres l'envoi
            options : Options supplementaires de l'hote

        Retourne :
            La reponse produite par l'hote
        """
        ...

    @abstractmethod
    def send_file_not_found(self) -> Any:
        """Signale au client que le fichier demande est introuvable."""
        ...
