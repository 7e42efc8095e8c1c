"""
Routes du type de depot : formulaire de configuration et creation d'instance.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from ...core.entities.request import RequestContext
from ...services.instance_manager import InstanceManager
from ...services.mediatime_repository import TYPE_NAME, MediaTimeRepository
from ..deps import get_instance_manager, get_request_context

router = APIRouter(prefix=f"/repository/types/{TYPE_NAME}")


@router.get("/form")
def instance_form(
    manager: InstanceManager = Depends(get_instance_manager),
    request: RequestContext = Depends(get_request_context),
) -> dict[str, Any]:
    """Formulaire de configuration d'instance pour l'utilisateur courant."""
    form, allowed = manager.config_form(request)
    return {"allowed": allowed, **form.to_dict()}


@router.get("/options")
def option_names() -> dict[str, list[str]]:
    """Noms des options reconnues par le type de depot."""
    return {
        "type": MediaTimeRepository.get_type_option_names(),
        "instance": MediaTimeRepository.get_instance_option_names(),
    }


@router.post("/instances", status_code=status.HTTP_201_CREATED)
def create_instance(
    params: dict[str, Any] = Body(...),
    manager: InstanceManager = Depends(get_instance_manager),
    request: RequestContext = Depends(get_request_context),
) -> dict[str, Any]:
    """Cree une instance du depot (capacite site:config requise)."""
    readonly = bool(params.pop("readonly", False))
    repo = manager.create(TYPE_NAME, request.user.id, request, params, readonly=readonly)
    return {"id": repo.id, "returntypes": int(repo.supported_returntypes())}


@router.get("/settings")
def type_settings(manager: InstanceManager = Depends(get_instance_manager)) -> dict[str, Any]:
    """Options globales du type de depot."""
    return manager.get_type_settings()


@router.put("/settings")
def update_type_settings(
    data: dict[str, Any] = Body(...),
    manager: InstanceManager = Depends(get_instance_manager),
    request: RequestContext = Depends(get_request_context),
) -> dict[str, Any]:
    """Enregistre les options globales du type (capacite site:config requise)."""
    saved = manager.save_type_settings(request, data)
    return {"saved": saved, **manager.get_type_settings()}
