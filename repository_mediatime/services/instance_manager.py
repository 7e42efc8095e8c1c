"""
Service de gestion des instances du depot Media Time.

Cree les instances (avec controle de capacite et validation des types de
retour) et reconstruit l'adaptateur MediaTimeRepository d'une instance
existante pour la requete courante.
"""

from collections.abc import Callable
from typing import Any

from repository_mediatime.core.entities.form import ConfigForm
from repository_mediatime.core.entities.request import RepositoryInstance, RequestContext
from repository_mediatime.core.exceptions import (
    InstanceSaveError,
    InstanceValidationError,
    NotFoundError,
)
from repository_mediatime.core.ports.repositories import IOptionStore
from repository_mediatime.logging_config import instance_logger
from repository_mediatime.services.mediatime_repository import (
    TYPE_NAME,
    MediaTimeRepository,
    require_site_config,
)

# Fabrique d'adaptateur : (instance_id, request, options) -> MediaTimeRepository
RepositoryBuilder = Callable[[int, RequestContext, dict[str, Any]], MediaTimeRepository]


class InstanceManager:
    """
    Creation et chargement des instances du depot.

    Args :
        option_store : Store de configuration de l'hote
        builder : Fabrique de MediaTimeRepository pour une instance
    """

    def __init__(self, option_store: IOptionStore, builder: RepositoryBuilder) -> None:
        self._option_store = option_store
        self._builder = builder

    def create(
        self,
        type_name: str,
        userid: int,
        request: RequestContext,
        params: dict[str, Any],
        readonly: bool = False,
    ) -> MediaTimeRepository:
        """
        Cree une instance du depot.

        Raises:
            MissingCapabilityError: Si l'utilisateur ne peut pas configurer le site
            InstanceValidationError: Si aucun type de retour n'est selectionne
            InstanceSaveError: Si les options ne sont pas enregistrees (instance supprimee)
        """
        require_site_config(request.user)

        errors = MediaTimeRepository.instance_form_validation(None, params)
        if errors:
            raise InstanceValidationError(errors)

        instance = self._option_store.create_instance(
            type_name,
            userid,
            request.context_id,
            name=str(params.get("name") or ""),
            readonly=bool(readonly),
        )
        repository = self._builder(instance.id, request, {})
        if not repository.set_option(params):
            self._option_store.delete_instance(instance.id)
            instance_logger(instance.id).error("Creation d'instance annulee", user=userid)
            raise InstanceSaveError(instance.id)
        instance_logger(instance.id).info("Instance Media Time creee", user=userid)
        return repository

    def load(self, instance_id: int, request: RequestContext) -> MediaTimeRepository:
        """
        Charge une instance existante pour la requete courante.

        Raises:
            NotFoundError: Si l'instance n'existe pas ou n'est pas de ce type
        """
        instance = self._get_instance(instance_id)
        return self._builder(instance.id, request, instance.options)

    def get_type_settings(self) -> dict[str, Any]:
        """Options globales du type de depot, limitees aux noms reconnus."""
        stored = self._option_store.get_type_options(TYPE_NAME)
        return {name: stored.get(name) for name in MediaTimeRepository.get_type_option_names()}

    def save_type_settings(self, request: RequestContext, data: dict[str, Any]) -> bool:
        """
        Enregistre les options globales du type ; les cles inconnues sont ignorees.

        Raises:
            MissingCapabilityError: Si l'utilisateur ne peut pas configurer le site
        """
        require_site_config(request.user)
        names = MediaTimeRepository.get_type_option_names()
        settings = {name: value for name, value in data.items() if name in names}
        return self._option_store.set_type_options(TYPE_NAME, settings)

    def config_form(self, request: RequestContext) -> tuple[ConfigForm, bool]:
        """Construit le formulaire de configuration pour l'utilisateur courant."""
        form = ConfigForm()
        allowed = MediaTimeRepository.instance_config_form(form, request.user)
        return form, allowed

    def _get_instance(self, instance_id: int) -> RepositoryInstance:
        instance = self._option_store.get_instance(instance_id)
        if instance is None or instance.type_name != TYPE_NAME:
            raise NotFoundError(instance_id)
        return instance
