"""Pydantic model for a discovered rc file (immutable, serialisable)."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, computed_field


class Scope(str, Enum):
    """Discovery tier an rc file was found in, in precedence order."""
    SYSTEM = "SYSTEM"
    USER = "USER"
    PROJECT = "PROJECT"


class ConfigFileRef(BaseModel):
    """One candidate rc file, before it is read."""
    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1, description="Path to the rc file as discovered")
    scope: Scope = Field(..., description="Tier the file was found in")

    @computed_field
    @property
    def is_project(self) -> bool:
        """True for the file found by the directory-ancestry search."""
        return self.scope == Scope.PROJECT

    def __str__(self) -> str:
        return self.path
