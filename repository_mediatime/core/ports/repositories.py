"""
Interfaces ports pour les stores externes.

Interfaces abstraites (ports) définissant les contrats du store Media Time,
du registre des sources, du store de configuration et de l'annuaire des
utilisateurs. Les implémentations (adaptateurs) fournissent les mécanismes
concrets (SQLite via SQLModel, paramètres de l'application, mocks en test).
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, Optional

from repository_mediatime.core.entities.media import MediaRecord
from repository_mediatime.core.entities.request import Principal, RepositoryInstance


class IMediaRecordRepository(ABC):
    """
    Interface du store des enregistrements Media Time.

    Le dépôt ne fait que lire : aucune méthode d'écriture n'est exposée.
    """

    @abstractmethod
    def iter_by_sources(self, sources: frozenset[str]) -> Iterator[MediaRecord]:
        """
        Parcourt les enregistrements dont la source est dans l'ensemble donné.

        Les enregistrements sont produits par date de création décroissante.
        Le curseur sous-jacent est libere à la fin de l'iteration, y compris
        si l'appelant abandonne le generateur.
        """
        ...

    @abstractmethod
    def get_by_id(self, record_id: int) -> Optional[MediaRecord]:
        """Récupère un enregistrement par son ID, ou None s'il n'existe pas."""
        ...


class ISourceRegistry(ABC):
    """Interface du registre des plugins sources Media Time."""

    @abstractmethod
    def get_enabled_sources(self) -> frozenset[str]:
        """Retourne les tags des plugins sources actives."""
        ...


class IOptionStore(ABC):
    """
    Interface du store de configuration de l'hôte.

    Persiste les options par instance de dépôt et les options globales
    du type de dépôt.
    """

    @abstractmethod
    def get_instance_options(self, instance_id: int) -> dict[str, Any]:
        """Retourne les options enregistrées pour une instance."""
        ...

    @abstractmethod
    def set_instance_options(self, instance_id: int, options: dict[str, Any]) -> bool:
        """Enregistre les options d'une instance. Retourne True si reussi."""
        ...

    @abstractmethod
    def get_type_options(self, type_name: str) -> dict[str, Any]:
        """Retourne les options globales d'un type de dépôt."""
        ...

    @abstractmethod
    def set_type_options(self, type_name: str, options: dict[str, Any]) -> bool:
        """Enregistre les options globales d'un type de dépôt."""
        ...

    @abstractmethod
    def create_instance(
        self,
        type_name: str,
        userid: int,
        contextid: int,
        name: str = "",
        readonly: bool = False,
    ) -> RepositoryInstance:
        """Cree une instance de dépôt et retourne son enregistrement."""
        ...

    @abstractmethod
    def get_instance(self, instance_id: int) -> Optional[RepositoryInstance]:
        """Récupère une instance par son ID, avec ses options."""
        ...

    @abstractmethod
    def delete_instance(self, instance_id: int) -> None:
        """Supprime une instance et toutes ses options."""
        ...


class IUserDirectory(ABC):
    """Interface de l'annuaire des utilisateurs de l'hôte."""

    @abstractmethod
    def get_user(self, userid: int) -> Optional[Principal]:
        """Récupère un utilisateur (nom complet et capacites), ou None."""
        ...
