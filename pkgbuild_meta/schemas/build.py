"""Pydantic models describing build metadata."""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(value: Any) -> Any:
    # npm's legacy license object: {"type": "MIT", "url": "..."}
    if isinstance(value, dict) and "type" in value:
        return str(value["type"])
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, list):
        return ", ".join(str(_as_text(item)) for item in value)
    return str(value)


class ProjectDescriptor(BaseModel):
    """Snapshot of the fields read from ``package.json``."""

    name: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    description: Optional[str] = None
    author: Optional[str] = None
    license: Optional[str] = None
    repository_url: Optional[str] = Field(default=None, alias="repository")

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    @field_validator("version")
    @classmethod
    def _version_is_path_component(cls, value: str) -> str:
        # The version keys an output directory under dist/ and a ledger line.
        if "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError(f"Version '{value}' cannot be used as a directory name.")
        if any(char.isspace() for char in value):
            raise ValueError(f"Version '{value}' must not contain whitespace.")
        return value

    @field_validator("description", "license", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("author", mode="before")
    @classmethod
    def _normalize_author(cls, value: Any) -> Any:
        if isinstance(value, dict):
            parts = [str(value.get("name") or "").strip()]
            if value.get("email"):
                parts.append(f"<{value['email']}>")
            if value.get("url"):
                parts.append(f"({value['url']})")
            return " ".join(part for part in parts if part)
        return value

    @field_validator("repository_url", mode="before")
    @classmethod
    def _repository_url(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return value.get("url")
        return value


class Manifest(BaseModel):
    files: List[str] = Field(default_factory=list)
    version: str
    dependencies: List[str] = Field(default_factory=list, alias="deps")
    build_timestamp_millis: int = Field(..., alias="build_timestamp", description="Wall-clock build time in ms.")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class RegistryDescriptor(BaseModel):
    latest_version: str
    latest_timestamp_millis: int = Field(..., alias="latest_timestamp")
    type: Literal["program"] = "program"
    description: str = ""
    author: str = ""
    license: str = ""
    repository_url: str = Field(default="", alias="repo_url")
    homepage_url: str = ""
    long_description: Optional[str] = Field(
        default=None,
        alias="long_desc",
        description="README contents; omitted from the artifact when there is no README.",
    )

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
