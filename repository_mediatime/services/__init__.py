"""
Couche application : adaptateur de depot et gestion des instances.
"""

from repository_mediatime.services.instance_manager import InstanceManager
from repository_mediatime.services.mediatime_repository import (
    TYPE_NAME,
    MediaTimeRepository,
    require_site_config,
)

__all__ = ["InstanceManager", "MediaTimeRepository", "TYPE_NAME", "require_site_config"]
