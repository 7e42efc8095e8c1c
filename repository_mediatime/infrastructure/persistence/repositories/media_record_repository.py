"""
Implementation SQLModel du store Media Time.

Implemente l'interface IMediaRecordRepository pour la lecture des ressources
Media Time dans la table tool_mediatime.
"""

from collections.abc import Iterator
from typing import Optional

from loguru import logger
from sqlmodel import Session, select

from repository_mediatime.core.entities.media import MediaContent, MediaRecord
from repository_mediatime.core.ports.repositories import IMediaRecordRepository
from repository_mediatime.infrastructure.persistence.models import MediaTimeRecordModel


class SQLModelMediaRecordRepository(IMediaRecordRepository):
    """
    Repository SQLModel pour les ressources Media Time.

    Le contenu JSON est decode une seule fois, lors de la conversion
    du modele DB en entite MediaRecord.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: MediaTimeRecordModel) -> MediaRecord:
        """Convertit un modele DB en entite domaine."""
        return MediaRecord(
            id=model.id,
            source=model.source,
            content=MediaContent.from_json(model.content),
            timecreated=int(model.timecreated or 0),
            timemodified=int(model.timemodified or 0),
            usermodified=int(model.usermodified or 0),
        )

    def iter_by_sources(self, sources: frozenset[str]) -> Iterator[MediaRecord]:
        """
        Parcourt les ressources des sources donnees, les plus recentes d'abord.

        A timecreated egal, l'ordre d'insertion (id croissant) est conserve.
        Le resultat est ferme a la fin du parcours ou a la fermeture du generateur.
        """
        if not sources:
            return
        statement = (
            select(MediaTimeRecordModel)
            .where(MediaTimeRecordModel.source.in_(sorted(sources)))
            .order_by(MediaTimeRecordModel.timecreated.desc(), MediaTimeRecordModel.id)
        )
        result = self._session.exec(statement)
        try:
            for model in result:
                yield self._to_entity(model)
        finally:
            result.close()
            logger.debug("Curseur tool_mediatime ferme", sources=sorted(sources))

    def get_by_id(self, record_id: int) -> Optional[MediaRecord]:
        """Recupere une ressource par son ID."""
        model = self._session.get(MediaTimeRecordModel, record_id)
        if model:
            return self._to_entity(model)
        return None
