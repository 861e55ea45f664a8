"""Pydantic models describing the cmdex configuration file."""

from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class StoreConfig(_StrictModel):
    path: str = "cmdex.db"
    lock_timeout: float = Field(default=1.0, ge=0)

    @field_validator("path")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("store.path must not be empty")
        return value


class RunConfig(_StrictModel):
    split_mode: Literal["fields", "shell"] = "fields"


class CmdexConfig(_StrictModel):
    store: StoreConfig = Field(default_factory=StoreConfig)
    run: RunConfig = Field(default_factory=RunConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CmdexConfig":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
