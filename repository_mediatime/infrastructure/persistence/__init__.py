"""
Module de persistance SQLite.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine SQLite, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports du domaine

La conversion entre modeles et entites de domaine se fait dans les repositories.
"""

from repository_mediatime.infrastructure.persistence.database import (
    get_engine,
    get_session,
    init_db,
)

__all__ = [
    "get_engine",
    "get_session",
    "init_db",
]
