"""
Typed configuration helpers for the lesson viewer.

Everything here is plain data: the viewer reads a `ViewerConfig` once at
bootstrap and hands the relevant values to the loader, editor and
formatter it constructs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_CARET_SENTINEL = "CARET"
DEFAULT_BULLET_INDENT = "    "


class ViewerConfig(BaseModel):
    """Presentation and protocol settings for one viewer instance."""

    model_config = ConfigDict(extra="ignore")

    caret_sentinel: str = Field(
        default=DEFAULT_CARET_SENTINEL,
        description="Literal token in default code marking the initial caret offset.",
    )
    bullet_indent: str = Field(default=DEFAULT_BULLET_INDENT, description="Prefix for every rendered bullet item.")
    title_template: str = Field(
        default="[bold italic]{number:02d}[/bold italic]  {title}",
        description="Format string for the lesson title; receives `number` (1-based) and `title`.",
    )
    code_style: str = Field(default="bold cyan", description="Rich style applied to <code> spans.")
    reset_prompt: str = "Are you sure you want to reset your code?"
    solution_prompt: str = "Are you sure you want to see the solution code?\nThis will overwrite your current code."
    log_level: str = "INFO"
    event_log_path: Optional[Path] = None

    @field_validator("caret_sentinel")
    @classmethod
    def sentinel_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("caret_sentinel must be a non-empty token")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("event_log_path", mode="before")
    @classmethod
    def coerce_path(cls, value: Any) -> Any:
        if value in (None, ""):
            return None
        return Path(value).expanduser()


def read_yaml_file(path: Path) -> Dict[str, Any]:
    """Load a YAML file and return a dictionary."""
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Malformed YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at root of {path}, received {type(data)}")
    return data


def load_viewer_config(path: Path | None = None, *, base_dir: Path | None = None) -> ViewerConfig:
    """Load the viewer config YAML; a missing path yields the defaults."""
    if path is None:
        return ViewerConfig()
    path = path.expanduser().resolve()
    data = read_yaml_file(path)
    event_log = data.get("event_log_path")
    if event_log:
        candidate = Path(event_log).expanduser()
        if not candidate.is_absolute():
            data["event_log_path"] = str(((base_dir or path.parent) / candidate).resolve())
    try:
        return ViewerConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid viewer config in {path}") from exc


def merge_viewer_config(base: ViewerConfig, overrides: Dict[str, Any]) -> ViewerConfig:
    """Return a new ViewerConfig with CLI or environment overrides applied."""
    payload = base.model_dump()
    payload.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ViewerConfig.model_validate(payload)
    except ValidationError as exc:
        raise ValueError("Invalid overrides for ViewerConfig") from exc


__all__ = [
    "DEFAULT_BULLET_INDENT",
    "DEFAULT_CARET_SENTINEL",
    "ViewerConfig",
    "load_viewer_config",
    "merge_viewer_config",
    "read_yaml_file",
]
