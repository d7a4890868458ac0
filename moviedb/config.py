"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MOVIEDB_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de moviedb/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MOVIEDB_.
    Exemple : MOVIEDB_DATABASE_URL=sqlite:///catalogue.db

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIEDB_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///database/moviedatabase.db")

    # Suggestions d'acteurs (saisie interactive)
    suggestion_min_chars: int = Field(default=3, ge=1)
    suggestion_debounce_ms: int = Field(default=250, ge=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/moviedb.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules."""
        return v.upper()

    @property
    def suggestion_debounce_seconds(self) -> float:
        """Délai d'attente avant une recherche de suggestions, en secondes."""
        return self.suggestion_debounce_ms / 1000
