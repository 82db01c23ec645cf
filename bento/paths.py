"""Path utilities for the Bento home directory."""

from pathlib import Path


def get_bento_home() -> Path:
    """Get Bento home directory (~/.bento/), creating it if needed."""
    home = Path.home() / ".bento"
    home.mkdir(parents=True, exist_ok=True)
    return home


def get_default_config_path() -> Path:
    return get_bento_home() / "config.yml"


def get_default_env_path() -> Path:
    return get_bento_home() / ".env"
