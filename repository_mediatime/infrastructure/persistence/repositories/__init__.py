"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces definies
dans repository_mediatime/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from repository_mediatime.infrastructure.persistence.repositories.media_record_repository import (
    SQLModelMediaRecordRepository,
)
from repository_mediatime.infrastructure.persistence.repositories.option_repository import (
    SQLModelOptionRepository,
)
from repository_mediatime.infrastructure.persistence.repositories.user_repository import (
    SQLModelUserRepository,
)

__all__ = [
    "SQLModelMediaRecordRepository",
    "SQLModelOptionRepository",
    "SQLModelUserRepository",
]
