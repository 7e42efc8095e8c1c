"""
Configuration de la base de donnees SQLite.

Ce module fournit :
- Engine SQLite configure pour multi-thread (serveur web), un par URL
- Session factory avec context manager
- Fonction d'initialisation des tables

La base de donnees est configuree via MEDIATIME_DATABASE_URL (defaut: sqlite:///mediatime.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine

# Engines globaux par URL - crees lors du premier appel a get_engine()
_engines: dict[str, Engine] = {}


def get_engine(database_url: Optional[str] = None) -> Engine:
    """
    Retourne l'engine de la base, en le creant si necessaire.

    Args :
        database_url : URL SQLAlchemy (defaut : configuration de l'application)
    """
    if database_url is None:
        from repository_mediatime.config import Settings
        database_url = Settings().database_url

    engine = _engines.get(database_url)
    if engine is None:
        # Creer le repertoire parent si l'URL est un fichier SQLite
        if database_url.startswith("sqlite:///") and not database_url.startswith("sqlite:///:memory:"):
            db_path = Path(database_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(exist_ok=True, parents=True)

        connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
        engine = create_engine(database_url, echo=False, connect_args=connect_args)
        _engines[database_url] = engine
    return engine


def get_session(database_url: Optional[str] = None) -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation dans une dependance FastAPI ou avec next() :
        session = next(get_session())

    Ou avec context manager :
        with Session(get_engine()) as session:
            # operations

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(get_engine(database_url)) as session:
        yield session


def init_db(database_url: Optional[str] = None) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Les modeles sont importes ici pour enregistrer leurs metadonnees
    dans SQLModel.metadata sans import circulaire.

    Doit etre appelee une fois au demarrage de l'application.
    """
    from repository_mediatime.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(get_engine(database_url))
