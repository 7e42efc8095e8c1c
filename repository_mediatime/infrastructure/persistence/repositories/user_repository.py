"""
Implementation SQLModel de l'annuaire des utilisateurs.
"""

from typing import Optional

from sqlmodel import Session

from repository_mediatime.core.entities.request import SITE_CONFIG_CAPABILITY, Principal
from repository_mediatime.core.ports.repositories import IUserDirectory
from repository_mediatime.infrastructure.persistence.models import UserModel


class SQLModelUserRepository(IUserDirectory):
    """Lecture des utilisateurs de l'hote et de leurs capacites systeme."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_user(self, userid: int) -> Optional[Principal]:
        """Recupere un utilisateur. Les utilisateurs supprimes sont ignores."""
        model = self._session.get(UserModel, userid)
        if model is None or model.deleted:
            return None
        capabilities = set(model.capabilities)
        # Les administrateurs du site ont toutes les capacites de configuration
        if model.siteadmin:
            capabilities.add(SITE_CONFIG_CAPABILITY)
        return Principal(
            id=model.id,
            fullname=f"{model.firstname} {model.lastname}".strip(),
            capabilities=frozenset(capabilities),
        )
