"""Individual credential models for validation."""

from pydantic import BaseModel, Field


class AccessKey(BaseModel):
    """Bento API access key."""
    value: str = Field(min_length=1, pattern=r"^\S+$")


class SecretKey(BaseModel):
    """Bento API secret key."""
    value: str = Field(min_length=1, pattern=r"^\S+$")


class Environment(BaseModel):
    """Which Bento environment to talk to."""
    value: str = Field(pattern=r"^(sandbox|production)$")
