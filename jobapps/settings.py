"""Application settings loaded from environment variables."""

from pathlib import Path

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jobapps.grading.multi_choice import DEFAULT_EXTRAS_PENALTY

BASE_DIR = Path(__file__).resolve().parents[1]
DEFAULT_DATA_DIR = BASE_DIR / "data"


class Settings(BaseSettings):
    """Runtime configuration for the job application service."""

    model_config = SettingsConfigDict(env_prefix="JOBAPPS_", extra="ignore")

    app_name: str = "Job Application Service API"
    use_in_memory: bool = Field(
        default=False,
        validation_alias=AliasChoices("JOBAPPS_USE_IN_MEMORY", "USE_IN_MEMORY"),
    )
    data_dir: str = Field(
        default=str(DEFAULT_DATA_DIR),
        validation_alias=AliasChoices("JOBAPPS_DATA_DIR", "DATA_DIR"),
    )
    database_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("JOBAPPS_DATABASE_URL", "DATABASE_URL"),
    )

    # Scoring
    multi_choice_extras_penalty: float = Field(default=DEFAULT_EXTRAS_PENALTY, ge=0, le=1)

    # Listing
    default_page_size: int = Field(default=50, ge=1)

    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("JOBAPPS_LOG_LEVEL", "LOG_LEVEL"),
    )

    host: str = "127.0.0.1"
    port: int = Field(default=3000, validation_alias=AliasChoices("JOBAPPS_PORT", "PORT"))

    # CORS configuration
    cors_allow_origins: str = Field(
        default="*",
        validation_alias=AliasChoices("JOBAPPS_CORS_ALLOW_ORIGINS", "CORS_ALLOW_ORIGINS"),
    )

    @model_validator(mode="after")
    def _set_database_url(self) -> "Settings":
        if not self.database_url:
            self.database_url = f"sqlite:///{Path(self.data_dir) / 'jobapps.db'}"
        return self

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir)

    @property
    def storage_mode(self) -> str:
        return "memory" if self.use_in_memory else "sql"

    @property
    def cors_origin_list(self) -> list[str]:
        if self.cors_allow_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


settings = Settings()
