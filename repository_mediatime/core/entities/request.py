"""
Contexte de requete et objets echanges avec l'hote.

L'etat global de l'hote (utilisateur courant, moteur de rendu) est passe
explicitement via RequestContext.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Capacite requise pour configurer ou creer une instance du depot
SITE_CONFIG_CAPABILITY = "site:config"


@dataclass(frozen=True)
class Principal:
    """
    Utilisateur agissant pour la requete.

    Attributs :
        id : Identifiant de l'utilisateur (0 = invite)
        fullname : Nom complet affichable
        capabilities : Capacites accordees dans le contexte systeme
    """

    id: int = 0
    fullname: str = ""
    capabilities: frozenset[str] = frozenset()

    def has_capability(self, capability: str) -> bool:
        return capability in self.capabilities


@dataclass(frozen=True)
class RendererContext:
    """
    Contexte de rendu utilise pour construire les URL des ressources.

    Attributs :
        wwwroot : URL racine du site hote (sans slash final)
        default_image : Image utilisee quand une ressource n'a pas de vignette
    """

    wwwroot: str
    default_image: str = ""

    def url(self, path: str) -> str:
        """Construit une URL absolue a partir d'un chemin relatif au site."""
        return f"{self.wwwroot.rstrip('/')}/{path.lstrip('/')}"


@dataclass(frozen=True)
class RequestContext:
    """Etat de la requete entrante, transmis explicitement a l'adaptateur."""

    user: Principal
    renderer: RendererContext
    context_id: int = 1


@dataclass(frozen=True)
class StoredFile:
    """Fichier de l'hote contenant une reference vers une ressource Media Time."""

    reference: str
    filename: str = ""
    userid: Optional[int] = None


@dataclass(frozen=True)
class FetchedFile:
    """
    Resultat d'un telechargement vers le repertoire temporaire.

    Attributs :
        path : Emplacement local du fichier
        url : URL de la source
    """

    path: Path
    url: str


@dataclass(frozen=True)
class RepositoryInstance:
    """Instance de depot enregistree dans l'hote."""

    id: int
    type_name: str
    name: str = ""
    userid: int = 0
    contextid: int = 1
    readonly: bool = False
    options: dict[str, int] = field(default_factory=dict)
