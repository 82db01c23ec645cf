"""Credential management using system keyring."""

import os
from typing import Optional

import keyring
from dotenv import load_dotenv
from keyring.errors import PasswordDeleteError

from bento.models.credentials import AccessKey, Environment, SecretKey
from bento.paths import get_default_env_path

# Keyring service name
SERVICE_NAME = "bento"

KEY_ACCESS_KEY = "access_key"
KEY_SECRET_KEY = "secret_key"
KEY_ENVIRONMENT = "environment"

# Credential configuration: key names and their validation models
CREDENTIALS = {
    KEY_ACCESS_KEY: AccessKey,
    KEY_SECRET_KEY: SecretKey,
    KEY_ENVIRONMENT: Environment,
}


def get(key: str) -> Optional[str]:
    """Get a credential from keyring."""
    return keyring.get_password(SERVICE_NAME, key)


def get_credential(key: str, fallback_to_env: bool = True) -> Optional[str]:
    """Get a credential from keyring, falling back to the environment.

    Environment variables are the upper-cased key (ACCESS_KEY, ...) and may
    come from ~/.bento/.env.
    """
    value = get(key)
    if value is not None:
        return value

    if fallback_to_env:
        load_dotenv(get_default_env_path())
        return os.getenv(key.upper())

    return None


def store_credential(key: str, value: str) -> bool:
    """Store a credential in keyring with validation."""
    if not value:
        return True  # Allow empty values

    model_class = CREDENTIALS.get(key)
    if model_class:
        model_class(value=value)  # Let Pydantic ValidationError propagate

    keyring.set_password(SERVICE_NAME, key, value)
    return True


def delete_credential(key: str) -> bool:
    """Remove a credential from keyring. Missing credentials count as deleted."""
    try:
        keyring.delete_password(SERVICE_NAME, key)
    except PasswordDeleteError:
        pass
    return True


def get_access_key() -> Optional[AccessKey]:
    """Get validated access key."""
    raw = get_credential(KEY_ACCESS_KEY)
    return AccessKey(value=raw) if raw else None


def get_secret_key() -> Optional[SecretKey]:
    """Get validated secret key."""
    raw = get_credential(KEY_SECRET_KEY)
    return SecretKey(value=raw) if raw else None


def get_environment() -> Environment:
    """Get validated environment setting, sandbox unless set."""
    raw = get_credential(KEY_ENVIRONMENT)
    return Environment(value=raw if raw else "sandbox")


def set_access_key(access_key: str) -> bool:
    return store_credential(KEY_ACCESS_KEY, access_key)


def set_secret_key(secret_key: str) -> bool:
    return store_credential(KEY_SECRET_KEY, secret_key)


def set_environment(env: str) -> bool:
    """Set environment with validation."""
    return store_credential(KEY_ENVIRONMENT, env)
