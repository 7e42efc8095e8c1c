"""
Helpers pour les URL de medias.
"""

import re
from urllib.parse import urlsplit

# Motif de l'hote, applique a l'URL complete
_EXTENSION = re.compile(r"[^#?]+\.([a-z0-9]+)(?:[#?].*)?", re.IGNORECASE | re.DOTALL)


def get_extension(url: str) -> str:
    """
    Retourne l'extension (en minuscules) d'une URL, comme le selecteur de l'hote.

    Le motif porte sur l'URL complete, sans decoupage : la query string et le
    fragment sont ignores, mais une URL sans chemin prend l'extension du nom
    d'hote ("https://cdn.example.com" -> "com"). Retourne une chaine vide si
    aucune extension alphanumerique ne termine l'URL.

    Exemple :
        get_extension("https://cdn.example.com/v/Intro.MP4?token=1") -> "mp4"
    """
    if not url:
        return ""
    match = _EXTENSION.fullmatch(url)
    return match.group(1).lower() if match else ""


def last_path_segment(url: str) -> str:
    """Retourne le dernier segment du chemin d'une URL (nom du fichier servi)."""
    path = urlsplit(url).path
    return path.rstrip("/").split("/")[-1] if path else ""
