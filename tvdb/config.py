"""
Configuration du client via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe TVDB_,
et peut optionnellement être fournie via un fichier .env.

La clé API est optionnelle ici : la ligne de commande refuse de s'exécuter sans elle.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tvdb.utils.constants import DEFAULT_BASE_URL, DEFAULT_LANGUAGE

# Trouver le fichier .env à la racine du projet (parent de tvdb/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres du client avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe TVDB_.
    Exemple : TVDB_API_KEY=90D7DF3AE9E4841E

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="TVDB_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API
    api_key: Optional[str] = Field(default=None)
    base_url: str = Field(default=DEFAULT_BASE_URL)
    language: str = Field(default=DEFAULT_LANGUAGE)

    # Compte utilisateur par défaut pour les commandes favoris/notes
    account_id: Optional[str] = Field(default=None)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/tvdb.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, v: str) -> str:
        """Exige un schéma http(s) et retire le / final."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("language")
    @classmethod
    def check_language(cls, v: str) -> str:
        """Code langue ISO 639-1 sur deux lettres, en minuscules."""
        v = v.strip().lower()
        if len(v) != 2 or not v.isalpha():
            raise ValueError(f"language must be a two-letter code, got {v!r}")
        return v

    @property
    def api_enabled(self) -> bool:
        """Vérifie si la clé API TVDB est configurée."""
        return bool(self.api_key)
