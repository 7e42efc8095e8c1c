"""
Modeles SQLModel pour la base de donnees.

Ces modeles representent les tables partagees avec la plateforme hote.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- tool_mediatime: Ressources Media Time (ecrites par l'outil Media Time)
- repository_instances: Instances de depot
- repository_instance_config: Options par instance
- config_plugins: Options globales par type de depot
- users: Utilisateurs de l'hote

Les champs JSON (*_json) stockent des structures serialisees.
"""

from __future__ import annotations

import json
from typing import Optional

from sqlmodel import Field, Index, SQLModel


class MediaTimeRecordModel(SQLModel, table=True):
    """
    Modele representant une ressource Media Time.

    Le champ content contient un objet JSON avec au moins un titre.
    """

    __tablename__ = "tool_mediatime"
    __table_args__ = (Index("ix_tool_mediatime_source_timecreated", "source", "timecreated"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    source: str = Field(index=True)
    content: str = "{}"  # JSON: {"title": "...", "videourl": "..."}
    timecreated: int = 0
    timemodified: int = 0
    usermodified: int = 0


class RepositoryInstanceModel(SQLModel, table=True):
    """Modele representant une instance de depot."""

    __tablename__ = "repository_instances"

    id: Optional[int] = Field(default=None, primary_key=True)
    typename: str = Field(index=True)
    name: str = ""
    userid: int = 0
    contextid: int = 1
    readonly: bool = False
    timecreated: int = 0
    timemodified: int = 0


class RepositoryInstanceConfigModel(SQLModel, table=True):
    """Option d'une instance de depot (une ligne par option)."""

    __tablename__ = "repository_instance_config"
    __table_args__ = (Index("ix_instance_config_instance_name", "instanceid", "name", unique=True),)

    id: Optional[int] = Field(default=None, primary_key=True)
    instanceid: int = Field(index=True)
    name: str
    value: Optional[str] = None


class ConfigPluginModel(SQLModel, table=True):
    """Option globale d'un plugin (type de depot)."""

    __tablename__ = "config_plugins"
    __table_args__ = (Index("ix_config_plugins_plugin_name", "plugin", "name", unique=True),)

    id: Optional[int] = Field(default=None, primary_key=True)
    plugin: str = Field(index=True)
    name: str
    value: Optional[str] = None


class UserModel(SQLModel, table=True):
    """Utilisateur de l'hote."""

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True)
    firstname: str = ""
    lastname: str = ""
    siteadmin: bool = False
    capabilities_json: Optional[str] = None  # JSON: ["site:config", ...]
    deleted: bool = False

    @property
    def capabilities(self) -> list[str]:
        """Retourne les capacites deserialisees."""
        if self.capabilities_json:
            return json.loads(self.capabilities_json)
        return []
