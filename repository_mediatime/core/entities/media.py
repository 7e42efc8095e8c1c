"""
Entites des ressources Media Time.

Un enregistrement Media Time est cree et modifie exclusivement par l'outil
Media Time ; le depot ne fait que le lire. Le contenu JSON est decode une
seule fois, a la frontiere du store, en MediaContent.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

# Cles du contenu JSON exposees comme attributs types
_KNOWN_KEYS = frozenset({"title", "description", "videourl", "posterimage"})


@dataclass(frozen=True)
class MediaContent:
    """
    Contenu decode d'un enregistrement Media Time.

    Attributs :
        title : Titre de la ressource
        description : Description libre
        videourl : URL de la video (absolue ou relative a wwwroot)
        posterimage : URL de l'image de vignette
        extra : Cles supplementaires propres a la source productrice
    """

    title: str = ""
    description: str = ""
    videourl: Optional[str] = None
    posterimage: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, raw: Optional[str]) -> "MediaContent":
        """
        Decode le champ content stocke en base.

        Un contenu absent ou invalide donne un MediaContent vide plutot
        qu'une erreur, comme le decodage JSON de l'hote.
        """
        if not raw:
            return cls()
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            return cls()
        if not isinstance(data, dict):
            return cls()
        return cls(
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            videourl=data.get("videourl") or None,
            posterimage=data.get("posterimage") or None,
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )


@dataclass(frozen=True)
class MediaRecord:
    """
    Projection en lecture seule d'un enregistrement Media Time.

    Attributs :
        id : Identifiant unique
        source : Tag du plugin source ayant produit l'enregistrement
        content : Contenu decode
        timecreated : Timestamp Unix de creation
        timemodified : Timestamp Unix de derniere modification
        usermodified : Identifiant de l'utilisateur ayant modifie la ressource
    """

    id: int
    source: str
    content: MediaContent
    timecreated: int = 0
    timemodified: int = 0
    usermodified: int = 0
