"""
Journalisation du dépôt Media Time via loguru.

Chaque message porte le composant ("repository_mediatime") et l'instance de
dépôt concernée dans son contexte `extra` :
- console : lignes colorées préfixées par composant et instance
- fichier : une ligne JSON par message, avec rotation et compression

Les adaptateurs d'instance journalisent via instance_logger(), qui lie
l'identifiant de l'instance à tous leurs messages.
"""

import sys

from loguru import logger

from .config import Settings
from .lang import COMPONENT

# Valeur affichée quand un message n'est lié à aucune instance
NO_INSTANCE = "-"

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[component]}#{extra[repository]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def instance_logger(instance_id: int):
    """Logger lié au composant et à une instance de dépôt."""
    return logger.bind(component=COMPONENT, repository=instance_id)


def configure_logging(settings: Settings) -> None:
    """Installe les sorties console et fichier décrites par la configuration.

    Args :
        settings : Paramètres de l'application (log_level, log_file,
            log_rotation_size, log_retention_count)
    """
    logger.remove()
    logger.configure(extra={"component": COMPONENT, "repository": NO_INSTANCE})

    logger.add(sys.stderr, level=settings.log_level, format=_CONSOLE_FORMAT, colorize=True)

    # Fichier JSON : tout le détail, y compris DEBUG
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        "Journalisation configurée",
        log_file=str(settings.log_file),
        console_level=settings.log_level,
    )
