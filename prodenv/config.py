"""Runtime configuration for the production env initializer."""
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


SOURCE_ROOT = Path(__file__).resolve().parent.parent


def default_root_dir() -> Path:
    """Use the source checkout when running from one, otherwise the working directory."""
    if (SOURCE_ROOT / "pyproject.toml").is_file():
        return SOURCE_ROOT
    return Path.cwd()


class Settings(BaseSettings):
    """Configuration loaded from ``PRODENV_*`` environment variables."""

    ROOT_DIR: Path = Field(
        default_factory=default_root_dir,
        description="Directory holding the template and the generated env file",
    )
    TEMPLATE_FILENAME: str = Field(
        default=".prod.env", description="Template env file, relative to ROOT_DIR"
    )
    OUTPUT_FILENAME: str = Field(
        default=".prod.secrets.env", description="Default output env file, relative to ROOT_DIR"
    )
    PLACEHOLDER: str = Field(default="CHANGE_ME", min_length=1, description="Sentinel value to replace")
    API_KEY_BYTES: int = Field(default=48, ge=16, description="Entropy for API key tokens")
    PASSWORD_BYTES: int = Field(default=36, ge=16, description="Entropy for password tokens")
    OUTPUT_FILE_MODE: int = Field(default=0o600, description="Permissions applied to the output file")
    LOG_LEVEL: str = Field(default="WARNING", description="Logging level for diagnostics")

    model_config = {
        "env_prefix": "PRODENV_",
        "case_sensitive": False,
    }

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def template_path(self) -> Path:
        return self.ROOT_DIR / self.TEMPLATE_FILENAME

    @property
    def default_output_path(self) -> Path:
        return self.ROOT_DIR / self.OUTPUT_FILENAME

    def resolve_output(self, value: str | None) -> Path:
        """Resolve an ``--out`` value; relative paths are anchored at ROOT_DIR."""
        if not value:
            return self.default_output_path
        return self.ROOT_DIR / Path(value).expanduser()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached instance of the settings."""
    return Settings()
