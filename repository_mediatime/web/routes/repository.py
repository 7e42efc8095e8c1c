"""
Routes d'une instance du depot : listing, lien, envoi de fichier et options.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends

from ...core.entities.request import RequestContext, StoredFile
from ...core.exceptions import InstanceValidationError
from ...services.instance_manager import InstanceManager
from ...services.mediatime_repository import MediaTimeRepository, require_site_config
from ..deps import get_instance_manager, get_request_context

router = APIRouter(prefix="/repository")


@router.get("/{instance_id}/listing")
def listing(
    instance_id: int,
    path: str = "",
    page: str = "",
    manager: InstanceManager = Depends(get_instance_manager),
    request: RequestContext = Depends(get_request_context),
) -> dict[str, Any]:
    """Liste plate des ressources Media Time pour le selecteur de fichiers."""
    repo = manager.load(instance_id, request)
    return repo.get_listing(path, page).to_dict()


@router.get("/{instance_id}/link/{source}")
def link(
    instance_id: int,
    source: str,
    manager: InstanceManager = Depends(get_instance_manager),
    request: RequestContext = Depends(get_request_context),
) -> dict[str, str]:
    """URL externe de la video d'une ressource."""
    repo = manager.load(instance_id, request)
    return {"url": repo.get_link(source), "reference": repo.get_file_reference(source)}


@router.get("/{instance_id}/file/{reference}")
def serve_file(
    instance_id: int,
    reference: str,
    lifetime: Optional[int] = None,
    forcedownload: bool = False,
    manager: InstanceManager = Depends(get_instance_manager),
    request: RequestContext = Depends(get_request_context),
):
    """Sert la video referencee par un fichier de l'hote."""
    repo = manager.load(instance_id, request)
    return repo.send_file(StoredFile(reference=reference), lifetime, 0, forcedownload)


@router.get("/{instance_id}/capabilities")
def capabilities(
    instance_id: int,
    manager: InstanceManager = Depends(get_instance_manager),
    request: RequestContext = Depends(get_request_context),
) -> dict[str, Any]:
    """Capacites de l'instance utilisees par l'hote pour l'interface."""
    repo = manager.load(instance_id, request)
    return {
        "returntypes": int(repo.supported_returntypes()),
        "has_moodle_files": repo.has_moodle_files(),
        "contains_private_data": repo.contains_private_data(),
    }


@router.put("/{instance_id}/options")
def update_options(
    instance_id: int,
    data: dict[str, Any] = Body(...),
    manager: InstanceManager = Depends(get_instance_manager),
    request: RequestContext = Depends(get_request_context),
) -> dict[str, Any]:
    """Valide et enregistre les types de retour de l'instance."""
    require_site_config(request.user)
    repo = manager.load(instance_id, request)
    errors = MediaTimeRepository.instance_form_validation(None, data)
    if errors:
        raise InstanceValidationError(errors)
    saved = repo.set_option(data)
    return {"saved": saved, "returntypes": int(repo.supported_returntypes())}
