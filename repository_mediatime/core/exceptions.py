"""
Exceptions du depot Media Time.

Aucune operation ne relance : chaque erreur remonte immediatement
au cycle de requete de l'hote, qui se charge de l'afficher.
"""

from typing import Optional


class MediaTimeError(Exception):
    """Erreur de base du depot Media Time."""


class NotFoundError(MediaTimeError):
    """
    Exception levee quand un enregistrement ou une ressource est introuvable.

    Attributes:
        source: Identifiant recherche
    """

    def __init__(self, source: object) -> None:
        self.source = source
        super().__init__(f"Ressource Media Time introuvable : {source}")


class MissingCapabilityError(MediaTimeError):
    """Exception levee quand l'utilisateur n'a pas la capacite requise."""

    def __init__(self, capability: str, userid: Optional[int] = None) -> None:
        self.capability = capability
        self.userid = userid
        super().__init__(f"Capacite manquante : {capability}")


class InstanceValidationError(MediaTimeError):
    """
    Exception levee quand le formulaire d'instance est invalide.

    Attributes:
        errors: Erreurs par nom de champ
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))


class MediaFetchError(MediaTimeError, OSError):
    """Exception levee quand les octets d'un media ne peuvent pas etre recuperes."""


class InstanceSaveError(MediaTimeError):
    """
    Exception levee quand les options d'une nouvelle instance ne sont pas enregistrees.

    L'instance a deja ete supprimee quand l'exception est levee.
    """

    def __init__(self, instance_id: int) -> None:
        self.instance_id = instance_id
        super().__init__(f"Options de l'instance {instance_id} non enregistrees")
