"""
Fixtures pytest partagees pour les tests du depot Media Time.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports (store, registre des sources, resolveur, envoi de fichiers)
- Session SQLModel sur une base SQLite en memoire
- Contextes de requete (administrateur et invite)
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Optional
from unittest.mock import MagicMock

import pytest
from sqlmodel import Session, SQLModel, create_engine

from repository_mediatime.adapters.file_system import TempFileStore
from repository_mediatime.config import Settings
from repository_mediatime.core.entities.media import MediaRecord
from repository_mediatime.core.entities.request import (
    SITE_CONFIG_CAPABILITY,
    Principal,
    RendererContext,
    RequestContext,
)
from repository_mediatime.core.ports.file_server import IFileServer
from repository_mediatime.core.ports.repositories import (
    IMediaRecordRepository,
    IOptionStore,
    ISourceRegistry,
    IUserDirectory,
)
from repository_mediatime.core.ports.resolver import IMediaResolver, IMediaResource
from repository_mediatime.infrastructure.persistence import models  # noqa: F401
from repository_mediatime.services.mediatime_repository import MediaTimeRepository
from tests.fixtures.records import WWWROOT


@pytest.fixture
def renderer() -> RendererContext:
    return RendererContext(wwwroot=WWWROOT, default_image="/admin/tool/mediatime/pix/monologo.svg")


@pytest.fixture
def admin() -> Principal:
    return Principal(id=2, fullname="Admin User", capabilities=frozenset({SITE_CONFIG_CAPABILITY}))


@pytest.fixture
def guest() -> Principal:
    return Principal()


@pytest.fixture
def admin_request(admin: Principal, renderer: RendererContext) -> RequestContext:
    return RequestContext(user=admin, renderer=renderer)


@pytest.fixture
def guest_request(guest: Principal, renderer: RendererContext) -> RequestContext:
    return RequestContext(user=guest, renderer=renderer)


@pytest.fixture
def mock_records() -> MagicMock:
    """
    Mock de IMediaRecordRepository.

    Par defaut : aucun enregistrement. Configurer iter_by_sources et get_by_id
    dans chaque test.
    """
    mock = MagicMock(spec=IMediaRecordRepository)
    mock.iter_by_sources.return_value = iter([])
    mock.get_by_id.return_value = None
    return mock


@pytest.fixture
def mock_sources() -> MagicMock:
    """Mock de ISourceRegistry avec les sources file et streaming actives."""
    mock = MagicMock(spec=ISourceRegistry)
    mock.get_enabled_sources.return_value = frozenset({"file", "streaming"})
    return mock


@pytest.fixture
def mock_option_store() -> MagicMock:
    mock = MagicMock(spec=IOptionStore)
    mock.get_instance_options.return_value = {}
    mock.set_instance_options.return_value = True
    return mock


@pytest.fixture
def mock_users() -> MagicMock:
    """Mock de IUserDirectory : l'utilisateur 2 est "Admin User"."""
    mock = MagicMock(spec=IUserDirectory)

    def get_user(userid: int) -> Optional[Principal]:
        if userid == 2:
            return Principal(id=2, fullname="Admin User")
        return None

    mock.get_user.side_effect = get_user
    return mock


@pytest.fixture
def mock_resolver() -> MagicMock:
    """
    Mock de IMediaResolver.

    Les ressources resolues renvoient les URL du contenu et des octets fixes.
    """
    mock = MagicMock(spec=IMediaResolver)

    def resolve(record: MediaRecord) -> MagicMock:
        resource = MagicMock(spec=IMediaResource)
        resource.record = record
        resource.image_url.return_value = record.content.posterimage or ""
        resource.video_url.return_value = record.content.videourl or ""
        resource.video_file_content.return_value = b"video-bytes"
        return resource

    mock.resolve.side_effect = resolve
    return mock


@pytest.fixture
def mock_file_server() -> MagicMock:
    mock = MagicMock(spec=IFileServer)
    mock.send_file.return_value = "sent"
    mock.send_file_not_found.return_value = "not-found"
    return mock


@pytest.fixture
def temp_store(tmp_path: Path) -> TempFileStore:
    return TempFileStore(tmp_path / "temp")


@pytest.fixture
def make_repository(
    admin_request: RequestContext,
    mock_records: MagicMock,
    mock_sources: MagicMock,
    mock_option_store: MagicMock,
    mock_users: MagicMock,
    mock_resolver: MagicMock,
    temp_store: TempFileStore,
    mock_file_server: MagicMock,
):
    """Fabrique de MediaTimeRepository branchee sur les mocks des ports."""

    def factory(options: Optional[dict] = None, request: Optional[RequestContext] = None):
        return MediaTimeRepository(
            7,
            request or admin_request,
            records=mock_records,
            sources=mock_sources,
            option_store=mock_option_store,
            users=mock_users,
            resolver=mock_resolver,
            temp_store=temp_store,
            file_server=mock_file_server,
            options=options if options is not None else {},
        )

    return factory


@pytest.fixture
def session():
    """Session SQLModel sur une base SQLite en memoire, tables creees."""
    engine = create_engine("sqlite:///:memory:")
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler base, repertoire temporaire et logs.
    """
    return Settings(
        wwwroot=WWWROOT,
        database_url=f"sqlite:///{tmp_path}/test.db",
        temp_dir=tmp_path / "temp",
        enabled_sources=["file", "streaming"],
        file_lifetime=3600,
        log_file=tmp_path / "test.log",
    )
