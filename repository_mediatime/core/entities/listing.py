"""
Entites de listing et de configuration d'instance.

Les entrees de listing sont recalculees a chaque appel et ne sont jamais
persistees. Les cles de to_dict() sont celles attendues par le selecteur
de fichiers de l'hote.
"""

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any

from repository_mediatime.utils.params import clean_int


class ReturnType(IntFlag):
    """
    Types de retour d'un fichier choisi (constantes de l'hote).

    EXTERNAL : lien vers l'URL externe
    INTERNAL : copie des octets dans l'hote
    REFERENCE : pointeur par reference, servi a la demande
    """

    EXTERNAL = 1
    INTERNAL = 2
    REFERENCE = 4

    @classmethod
    def all(cls) -> "ReturnType":
        """Retourne le masque complet des trois types."""
        return cls.EXTERNAL | cls.INTERNAL | cls.REFERENCE


@dataclass(frozen=True)
class ListingEntry:
    """Entree du selecteur de fichiers pour un enregistrement Media Time."""

    title: str
    shorttitle: str
    thumbnail: str
    realicon: str
    datecreated: int
    datemodified: int
    url: str
    source: int
    author: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "shorttitle": self.shorttitle,
            "thumbnail": self.thumbnail,
            "realicon": self.realicon,
            "datemodified": self.datemodified,
            "datecreated": self.datecreated,
            "url": self.url,
            "source": self.source,
            "author": self.author,
        }


@dataclass(frozen=True)
class ListingResponse:
    """
    Reponse de listing.

    Attributs :
        manage : URL de la page de gestion Media Time
        entries : Entrees du listing (liste plate, sans dossier ni pagination)
        nologin : Aucune connexion requise
        nosearch : Recherche desactivee
    """

    manage: str
    entries: list[ListingEntry] = field(default_factory=list)
    nologin: bool = True
    nosearch: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "manage": self.manage,
            "nologin": self.nologin,
            "nosearch": self.nosearch,
            "list": [entry.to_dict() for entry in self.entries],
        }


@dataclass(frozen=True)
class InstanceOptions:
    """Drapeaux de types de retour d'une instance de depot (0 ou 1)."""

    externalfile: int = 0
    internalfile: int = 0
    filereference: int = 0

    NAMES = ("externalfile", "internalfile", "filereference")

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "InstanceOptions":
        """Construit les options en convertissant chaque drapeau en entier (absent -> 0)."""
        return cls(**{name: clean_int(data.get(name)) for name in cls.NAMES})

    def any_enabled(self) -> bool:
        return bool(self.externalfile or self.internalfile or self.filereference)

    def to_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in self.NAMES}
