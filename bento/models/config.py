"""Configuration loading for the Bento client."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from bento import credentials
from bento.paths import get_default_config_path

SANDBOX_URI = "https://sandbox-api.bentoforbusiness.com/api"
PRODUCTION_URI = "https://api.bentoforbusiness.com"

ENVIRONMENT_URIS = {
    "sandbox": SANDBOX_URI,
    "production": PRODUCTION_URI,
}


class Config(BaseModel):
    """Credentials from keyring plus optional settings from config.yml.

    config.yml may set ``environment``, ``timeout`` (seconds) and
    ``api_uri`` (overrides the environment's URI).
    """

    access_key: str = Field(..., min_length=1)
    secret_key: str = Field(..., min_length=1)
    environment: str = Field("sandbox", pattern=r"^(sandbox|production)$")
    timeout: Optional[float] = Field(None, gt=0)
    api_uri_override: Optional[str] = Field(None, alias="api_uri")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def api_uri(self) -> str:
        return self.api_uri_override or ENVIRONMENT_URIS[self.environment]

    @staticmethod
    def load_settings(config_path: Optional[Path] = None) -> dict:
        """Read config.yml, returning an empty dict when it does not exist."""
        config_path = config_path or get_default_config_path()
        if not config_path.exists():
            return {}

        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def load(cls, config_path: Optional[Path] = None):
        """Load configuration from keyring (with .env fallback) and config.yml."""
        settings = cls.load_settings(config_path)

        access_key = credentials.get_access_key()
        secret_key = credentials.get_secret_key()
        environment = settings.get("environment") or credentials.get_environment().value

        return cls(
            access_key=access_key.value if access_key else None,
            secret_key=secret_key.value if secret_key else None,
            environment=environment,
            timeout=settings.get("timeout"),
            api_uri=settings.get("api_uri"),
        )
