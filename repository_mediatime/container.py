"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Les repositories SQLModel recoivent la session de la requete : utiliser
build_instance_manager() pour obtenir un InstanceManager dont toutes les
instances partagent une meme session.
"""

from typing import Any, Optional

import httpx
from dependency_injector import containers, providers
from sqlmodel import Session

from .adapters.file_system import TempFileStore
from .adapters.media.http_resolver import HttpMediaResolver
from .adapters.source_registry import SettingsSourceRegistry
from .config import Settings
from .core.entities.request import RendererContext, RequestContext
from .core.ports.file_server import IFileServer
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import (
    SQLModelMediaRecordRepository,
    SQLModelOptionRepository,
    SQLModelUserRepository,
)
from .services.instance_manager import InstanceManager
from .services.mediatime_repository import MediaTimeRepository


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        with Session(get_engine(container.config().database_url)) as session:
            manager = build_instance_manager(container, session)
            repo = manager.load(1, request)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db, database_url=config.provided.database_url)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(
        lambda database_url: next(get_session(database_url)),
        database_url=config.provided.database_url,
    )

    # Repositories - Factory pour nouvelle instance avec la session fournie
    media_record_repository = providers.Factory(SQLModelMediaRecordRepository, session=session)
    option_repository = providers.Factory(SQLModelOptionRepository, session=session)
    user_repository = providers.Factory(SQLModelUserRepository, session=session)

    # Adapters sans etat - Singletons
    source_registry = providers.Singleton(
        SettingsSourceRegistry,
        enabled_sources=config.provided.enabled_sources,
    )
    temp_file_store = providers.Singleton(TempFileStore, temp_dir=config.provided.temp_dir)

    # Client HTTP partage par le resolveur
    http_client = providers.Singleton(
        httpx.Client,
        timeout=config.provided.http_timeout,
        follow_redirects=True,
    )
    media_resolver = providers.Singleton(HttpMediaResolver, client=http_client)

    # Contexte de rendu construit depuis la configuration
    renderer = providers.Singleton(
        RendererContext,
        wwwroot=config.provided.wwwroot,
        default_image=config.provided.default_image,
    )


def build_instance_manager(
    container: Container,
    session: Session,
    file_server: Optional[IFileServer] = None,
) -> InstanceManager:
    """
    Construit un InstanceManager dont les repositories partagent la session.

    Args :
        container : Container de l'application
        session : Session SQLModel de la requete
        file_server : Primitive d'envoi de fichiers (web uniquement)
    """
    records = container.media_record_repository(session=session)
    options = container.option_repository(session=session)
    users = container.user_repository(session=session)

    def builder(instance_id: int, request: RequestContext, instance_options: dict[str, Any]) -> MediaTimeRepository:
        return MediaTimeRepository(
            instance_id,
            request,
            records=records,
            sources=container.source_registry(),
            option_store=options,
            users=users,
            resolver=container.media_resolver(),
            temp_store=container.temp_file_store(),
            file_server=file_server,
            options=instance_options,
        )

    return InstanceManager(option_store=options, builder=builder)
