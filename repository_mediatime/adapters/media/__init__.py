"""
Resolution des ressources Media Time.
"""

from repository_mediatime.adapters.media.http_resolver import (
    HttpMediaResolver,
    HttpMediaResource,
)

__all__ = ["HttpMediaResolver", "HttpMediaResource"]
