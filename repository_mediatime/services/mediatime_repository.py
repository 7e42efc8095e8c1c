"""
Dépôt de fichiers Media Time.

Ce module fournit l'adaptateur entre le store Media Time et le contrat de
dépôt de l'hôte :
- Listing plat des ressources des sources actives (plus récentes d'abord)
- Resolution d'une ressource en URL externe ou en fichier telecharge
- Envoi d'un fichier reference au client
- Validation et enregistrement des types de retour de l'instance
"""

from pathlib import Path
from typing import Any, Optional

from loguru import logger

from repository_mediatime.core.entities.form import ConfigForm
from repository_mediatime.core.entities.listing import (
    InstanceOptions,
    ListingEntry,
    ListingResponse,
    ReturnType,
)
from repository_mediatime.core.entities.media import MediaRecord
from repository_mediatime.core.entities.request import (
    SITE_CONFIG_CAPABILITY,
    FetchedFile,
    Principal,
    RequestContext,
    StoredFile,
)
from repository_mediatime.core.exceptions import MissingCapabilityError, NotFoundError
from repository_mediatime.core.ports.file_server import IFileServer
from repository_mediatime.core.ports.file_system import ITempFileStore
from repository_mediatime.core.ports.repositories import (
    IMediaRecordRepository,
    IOptionStore,
    ISourceRegistry,
    IUserDirectory,
)
from repository_mediatime.core.ports.resolver import IMediaResolver, IMediaResource
from repository_mediatime.lang import get_string
from repository_mediatime.logging_config import instance_logger
from repository_mediatime.utils.params import clean_int
from repository_mediatime.utils.urls import get_extension, last_path_segment

# Nom du type de dépôt dans l'hôte
TYPE_NAME = "mediatime"

# Page de gestion de l'outil Media Time
MANAGE_PATH = "/admin/tool/mediatime/index.php"


def require_site_config(principal: Principal) -> None:
    """
    Vérifie que l'utilisateur peut configurer le site.

    Raises:
        MissingCapabilityError: Si la capacite site:config est absente
    """
    if not principal.has_capability(SITE_CONFIG_CAPABILITY):
        logger.warning("Capacite manquante", capability=SITE_CONFIG_CAPABILITY, user=principal.id)
        raise MissingCapabilityError(SITE_CONFIG_CAPABILITY, principal.id)


class MediaTimeRepository:
    """
    Instance du dépôt Media Time pour une requête.

    L'etat de la requête (utilisateur, contexte de rendu) est recu a la
    construction ; l'instance ne conserve rien d'une requête à l'autre.

    Example:
        repo = MediaTimeRepository(instance_id, request, records=..., ...)
        listing = repo.get_listing()
        fetched = repo.get_file(repo.get_file_reference(42), "intro.mp4")
    """

    def __init__(
        self,
        instance_id: int,
        request: RequestContext,
        *,
        records: IMediaRecordRepository,
        sources: ISourceRegistry,
        option_store: IOptionStore,
        users: IUserDirectory,
        resolver: IMediaResolver,
        temp_store: ITempFileStore,
        file_server: Optional[IFileServer] = None,
        options: Optional[dict[str, Any]] = None,
    ) -> None:
        self.id = instance_id
        self.request = request
        self._records = records
        self._sources = sources
        self._option_store = option_store
        self._users = users
        self._resolver = resolver
        self._temp_store = temp_store
        self._file_server = file_server
        self._log = instance_logger(instance_id)
        if options is None:
            options = option_store.get_instance_options(instance_id)
        self._options: dict[str, Any] = dict(options)

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def print_login(self) -> ListingResponse:
        """Aucune connexion n'est requise : retourne directement le listing."""
        return self.get_listing()

    def get_listing(self, path: str = "", page: str = "") -> ListingResponse:
        """
        Retourne la liste plate des ressources Media Time.

        Les arguments path et page sont ignores : pas de dossiers ni de pagination.
        """
        renderer = self.request.renderer
        manage = renderer.url(f"{MANAGE_PATH}?repository={self.id}")
        return ListingResponse(manage=manage, entries=self._get_mediatime_resources())

    def _get_mediatime_resources(self) -> list[ListingEntry]:
        """Construit les entrees des ressources des sources actives."""
        sources = self._sources.get_enabled_sources()
        if not sources:
            self._log.debug("Aucune source Media Time active")
            return []

        entries = [self._to_entry(record) for record in self._records.iter_by_sources(sources)]
        self._log.debug("Listing Media Time", count=len(entries))
        return entries

    def _to_entry(self, record: MediaRecord) -> ListingEntry:
        renderer = self.request.renderer
        resource = self._resolver.resolve(record)
        image_url = resource.image_url(renderer)
        video_url = resource.video_url(renderer)
        title = record.content.title
        return ListingEntry(
            title=f"{title}.{get_extension(video_url)}",
            shorttitle=title,
            thumbnail=image_url,
            realicon=image_url,
            datecreated=record.timecreated,
            datemodified=record.timecreated,
            url=renderer.url(f"{MANAGE_PATH}?id={record.id}"),
            source=record.id,
            author=self._author_name(record.usermodified),
        )

    def _author_name(self, userid: int) -> str:
        user = self._users.get_user(userid) if userid else None
        return user.fullname if user else ""

    # ------------------------------------------------------------------
    # Resolution et telechargement
    # ------------------------------------------------------------------

    def get_resource(self, source: Any) -> IMediaResource:
        """
        Résout une ressource Media Time par son identifiant.

        Raises:
            NotFoundError: Si l'enregistrement n'existe pas
        """
        record = self._records.get_by_id(clean_int(source))
        if record is None:
            raise NotFoundError(source)
        return self._resolver.resolve(record)

    def get_link(self, source: Any) -> str:
        """Retourne l'URL de la vidéo de la ressource (recalculée à chaque appel)."""
        return self.get_resource(source).video_url(self.request.renderer)

    def get_file(self, reference: str, saveas: str = "") -> FetchedFile:
        """
        Télécharge la vidéo référencée dans le répertoire temporaire.

        Args :
            reference : Contenu du champ reference du fichier de l'hôte
            saveas : Nom souhaite (sans chemin) du fichier temporaire

        Retourne :
            FetchedFile avec le chemin local et l'URL de la source

        Raises:
            NotFoundError: Si la ressource n'existe pas
            OSError: Si le telechargement ou l'ecriture echoue
        """
        path: Path = self._temp_store.prepare_file(saveas)
        renderer = self.request.renderer
        try:
            resource = self.get_resource(reference)
            self._temp_store.write_bytes(path, resource.video_file_content(renderer))
        except Exception:
            # Le fichier reserve ne doit pas survivre a un echec
            path.unlink(missing_ok=True)
            raise
        self._log.info("Ressource téléchargée", reference=reference, path=str(path))
        return FetchedFile(path=path, url=resource.video_url(renderer))

    def get_file_reference(self, source: Any) -> str:
        """Prepare la reference a stocker : l'identifiant converti en entier."""
        return str(clean_int(source))

    # ------------------------------------------------------------------
    # Capacites
    # ------------------------------------------------------------------

    @staticmethod
    def get_type_option_names() -> list[str]:
        """Noms des options globales du type de dépôt."""
        return ["mediatimefilesnumber", "mediatimefilestimelimit", "pluginname"]

    @staticmethod
    def get_instance_option_names() -> list[str]:
        """Noms des options de l'instance."""
        return list(InstanceOptions.NAMES)

    def get_option(self, name: str) -> Any:
        return self._options.get(name)

    def supported_returntypes(self) -> ReturnType:
        """
        Types de retour actives sur l'instance.

        Une instance dont aucun drapeau n'est actif accepte les trois types.
        """
        if clean_int(self.get_option("externalfile")):
            returntypes = ReturnType.EXTERNAL
        else:
            returntypes = ReturnType(0)
        if clean_int(self.get_option("internalfile")):
            returntypes |= ReturnType.INTERNAL
        if clean_int(self.get_option("filereference")):
            returntypes |= ReturnType.REFERENCE
        if not returntypes:
            return ReturnType.all()
        return returntypes

    def file_is_accessible(self, source: Any) -> bool:
        """
        Vérifie que l'utilisateur peut acceder au fichier choisi.

        Toujours vrai : les ressources Media Time n'ont pas encore de
        proprietaire verifiable.
        """
        return True

    def has_moodle_files(self) -> bool:
        """Le dépôt ne sert pas a parcourir les fichiers de l'hôte."""
        return False

    def contains_private_data(self) -> bool:
        return False

    # ------------------------------------------------------------------
    # Configuration de l'instance
    # ------------------------------------------------------------------

    def set_option(self, options: Optional[dict[str, Any]] = None) -> bool:
        """
        Enregistre les options de l'instance.

        Seuls les noms de get_instance_option_names() sont enregistres ; les
        trois drapeaux sont convertis en entier (absent -> 0) et toute autre
        cle est ignoree.
        """
        options = InstanceOptions.from_mapping(options or {}).to_dict()
        ret = self._option_store.set_instance_options(self.id, options)
        if ret:
            self._options.update(options)
        self._log.info("Options du dépôt enregistrées", success=ret)
        return ret

    @staticmethod
    def instance_config_form(form: ConfigForm, principal: Principal) -> bool:
        """
        Construit le formulaire de configuration d'une instance.

        Sans la capacite site:config, un message statique est ajoute et False
        est retourne pour interrompre la construction du formulaire.
        """
        try:
            require_site_config(principal)
        except MissingCapabilityError:
            form.add_element(
                "static",
                None,
                "",
                get_string("nopermissions", what=get_string("configplugin")),
            )
            return False

        form.add_element(
            "checkbox",
            "externalfile",
            get_string("returntypes"),
            get_string("externalfile"),
        )
        form.set_type("externalfile", "int")
        form.set_default("externalfile", 1)
        form.add_element("checkbox", "internalfile", "", get_string("internalfile"))
        form.set_type("internalfile", "int")
        form.add_element("checkbox", "filereference", "", get_string("filereference"))
        form.set_type("filereference", "int")
        form.set_default("filereference", 1)
        return True

    @staticmethod
    def instance_form_validation(
        form: Optional[ConfigForm], data: dict[str, Any], errors: Optional[dict[str, str]] = None
    ) -> dict[str, str]:
        """
        Valide le formulaire d'instance : au moins un type de retour est requis.

        Retourne une nouvelle table d'erreurs ; data et errors ne sont pas modifies.
        """
        errors = dict(errors or {})
        if not InstanceOptions.from_mapping(data).any_enabled():
            errors["filereference"] = get_string("selectreturntype")
        return errors

    # ------------------------------------------------------------------
    # Envoi de fichiers
    # ------------------------------------------------------------------

    def send_file(
        self,
        storedfile: StoredFile,
        lifetime: Optional[int] = None,
        filter_mode: int = 0,
        forcedownload: bool = False,
        options: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Sert le fichier reference par un fichier de l'hôte.

        Si la ressource est introuvable, le signal "fichier introuvable"
        de l'hôte est emis et rien n'est envoye.
        """
        if self._file_server is None:
            raise RuntimeError("Aucune primitive d'envoi de fichiers configuree")

        reference = storedfile.reference
        try:
            self.get_resource(reference)
        except NotFoundError:
            self._log.warning("Fichier reference introuvable", reference=reference)
            return self._file_server.send_file_not_found()

        fetched = self.get_file(reference)
        filename = last_path_segment(fetched.url)
        return self._file_server.send_file(
            fetched.path,
            filename,
            lifetime,
            filter_mode,
            forcedownload,
            "",
            options=options,
        )
