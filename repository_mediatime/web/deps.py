"""
Dependances partagees de l'application web.

Fournit la session de base de donnees, le contexte de requete
(utilisateur courant) et l'InstanceManager de la requete.
"""

from collections.abc import Generator

from fastapi import Depends, Header, Request
from sqlmodel import Session

from ..container import Container, build_instance_manager
from ..core.entities.request import Principal, RequestContext
from ..infrastructure.persistence.database import get_engine
from ..services.instance_manager import InstanceManager
from .file_server import FastAPIFileServer

# En-tete transmis par l'hote pour identifier l'utilisateur courant
USER_HEADER = "X-Mediatime-User"


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_db_session(container: Container = Depends(get_container)) -> Generator[Session, None, None]:
    """Ouvre une session par requete, fermee a la fin de la reponse."""
    with Session(get_engine(container.config().database_url)) as session:
        yield session


def get_request_context(
    container: Container = Depends(get_container),
    session: Session = Depends(get_db_session),
    user_id: int = Header(default=0, alias=USER_HEADER),
) -> RequestContext:
    """Construit le contexte de la requete ; un utilisateur inconnu est traite en invite."""
    principal = None
    if user_id:
        principal = container.user_repository(session=session).get_user(user_id)
    return RequestContext(user=principal or Principal(), renderer=container.renderer())


def get_instance_manager(
    container: Container = Depends(get_container),
    session: Session = Depends(get_db_session),
) -> InstanceManager:
    file_server = FastAPIFileServer(default_lifetime=container.config().file_lifetime)
    return build_instance_manager(container, session, file_server=file_server)
