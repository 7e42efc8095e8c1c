"""
Implementation SQLModel du store de configuration.

Implemente IOptionStore : options par instance (repository_instance_config),
options globales par type (config_plugins) et creation des instances.
Les valeurs sont stockees sous forme de chaines, comme dans l'hote.
"""

import time
from typing import Any, Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from repository_mediatime.core.entities.request import RepositoryInstance
from repository_mediatime.core.ports.repositories import IOptionStore
from repository_mediatime.infrastructure.persistence.models import (
    ConfigPluginModel,
    RepositoryInstanceConfigModel,
    RepositoryInstanceModel,
)


def _to_db_value(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return str(int(value))
    return str(value)


class SQLModelOptionRepository(IOptionStore):
    """Repository SQLModel pour les instances de depot et leurs options."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_instance_options(self, instance_id: int) -> dict[str, Any]:
        statement = select(RepositoryInstanceConfigModel).where(
            RepositoryInstanceConfigModel.instanceid == instance_id
        )
        return {row.name: row.value for row in self._session.exec(statement).all()}

    def set_instance_options(self, instance_id: int, options: dict[str, Any]) -> bool:
        """Insere ou met a jour chaque option de l'instance dans une seule transaction."""
        try:
            for name, value in options.items():
                statement = select(RepositoryInstanceConfigModel).where(
                    RepositoryInstanceConfigModel.instanceid == instance_id,
                    RepositoryInstanceConfigModel.name == name,
                )
                row = self._session.exec(statement).first()
                if row is None:
                    row = RepositoryInstanceConfigModel(instanceid=instance_id, name=name)
                row.value = _to_db_value(value)
                self._session.add(row)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Echec d'enregistrement des options", instance=instance_id, error=str(e))
            return False
        return True

    def get_type_options(self, type_name: str) -> dict[str, Any]:
        statement = select(ConfigPluginModel).where(ConfigPluginModel.plugin == type_name)
        return {row.name: row.value for row in self._session.exec(statement).all()}

    def set_type_options(self, type_name: str, options: dict[str, Any]) -> bool:
        try:
            for name, value in options.items():
                statement = select(ConfigPluginModel).where(
                    ConfigPluginModel.plugin == type_name,
                    ConfigPluginModel.name == name,
                )
                row = self._session.exec(statement).first()
                if row is None:
                    row = ConfigPluginModel(plugin=type_name, name=name)
                row.value = _to_db_value(value)
                self._session.add(row)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Echec d'enregistrement des options de type", type=type_name, error=str(e))
            return False
        return True

    def create_instance(
        self,
        type_name: str,
        userid: int,
        contextid: int,
        name: str = "",
        readonly: bool = False,
    ) -> RepositoryInstance:
        now = int(time.time())
        model = RepositoryInstanceModel(
            typename=type_name,
            name=name,
            userid=userid,
            contextid=contextid,
            readonly=readonly,
            timecreated=now,
            timemodified=now,
        )
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model, {})

    def get_instance(self, instance_id: int) -> Optional[RepositoryInstance]:
        model = self._session.get(RepositoryInstanceModel, instance_id)
        if model is None:
            return None
        return self._to_entity(model, self.get_instance_options(instance_id))

    def delete_instance(self, instance_id: int) -> None:
        statement = select(RepositoryInstanceConfigModel).where(
            RepositoryInstanceConfigModel.instanceid == instance_id
        )
        for row in self._session.exec(statement).all():
            self._session.delete(row)
        model = self._session.get(RepositoryInstanceModel, instance_id)
        if model is not None:
            self._session.delete(model)
        self._session.commit()
        logger.info("Instance supprimee", instance=instance_id)

    def _to_entity(self, model: RepositoryInstanceModel, options: dict[str, Any]) -> RepositoryInstance:
        return RepositoryInstance(
            id=model.id,
            type_name=model.typename,
            name=model.name,
            userid=model.userid,
            contextid=model.contextid,
            readonly=model.readonly,
            options=options,
        )
