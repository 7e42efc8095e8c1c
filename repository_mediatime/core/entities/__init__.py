"""
Entites du domaine Media Time.

Exports :
- MediaRecord, MediaContent : enregistrement Media Time et son contenu decode
- ListingEntry, ListingResponse : reponse du selecteur de fichiers
- InstanceOptions, ReturnType : drapeaux de types de retour
- ConfigForm, FormElement : formulaire de configuration d'instance
- Principal, RendererContext, RequestContext : etat de la requete
- StoredFile, FetchedFile, RepositoryInstance : objets echanges avec l'hote
"""

from repository_mediatime.core.entities.form import ConfigForm, FormElement
from repository_mediatime.core.entities.listing import (
    InstanceOptions,
    ListingEntry,
    ListingResponse,
    ReturnType,
)
from repository_mediatime.core.entities.media import MediaContent, MediaRecord
from repository_mediatime.core.entities.request import (
    SITE_CONFIG_CAPABILITY,
    FetchedFile,
    Principal,
    RendererContext,
    RepositoryInstance,
    RequestContext,
    StoredFile,
)

__all__ = [
    "ConfigForm",
    "FormElement",
    "InstanceOptions",
    "ListingEntry",
    "ListingResponse",
    "ReturnType",
    "MediaContent",
    "MediaRecord",
    "SITE_CONFIG_CAPABILITY",
    "FetchedFile",
    "Principal",
    "RendererContext",
    "RepositoryInstance",
    "RequestContext",
    "StoredFile",
]
