"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le prefixe
MEDIATIME_, et peut optionnellement etre fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent du package)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent etre surchargés via des variables d'environnement
    avec le prefixe MEDIATIME_.
    Exemple : MEDIATIME_LOG_LEVEL=DEBUG
    Les listes se fournissent en JSON : MEDIATIME_ENABLED_SOURCES='["file"]'

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIATIME_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Site hôte
    wwwroot: str = Field(default="http://localhost:8000")
    default_image: str = Field(default="/admin/tool/mediatime/pix/monologo.svg")

    # Base de données
    database_url: str = Field(default="sqlite:///mediatime.db")

    # Répertoire temporaire de telechargement
    temp_dir: Path = Field(default=Path("~/.cache/mediatime/temp"))

    # Plugins sources actives (registre des sources)
    enabled_sources: list[str] = Field(default_factory=lambda: ["file", "streaming", "videotime"])

    # Envoi de fichiers : duree de cache par défaut en secondes
    file_lifetime: int = Field(default=86400, ge=0)

    # Client HTTP du resolveur
    http_timeout: float = Field(default=30.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/mediatime.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("temp_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("wwwroot")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Retire le slash final de l'URL racine."""
        return v.rstrip("/")
