"""Read-only lesson content: courses, their views, and the YAML loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .config import read_yaml_file


class CourseView(BaseModel):
    """One lesson's full content payload."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    subject: str
    explanation: str = ""
    code_bullet_points: Tuple[str, ...] = ()
    example_bullet_points: Tuple[str, ...] = ()
    goal: str = ""
    instruction_bullet_points: Tuple[str, ...] = ()
    default_code: str = ""
    solution_code: str = ""
    ce_settings: Dict[str, Any] = Field(default_factory=dict)
    game_scene: Optional[str] = None
    validator_ref: Optional[str] = Field(default=None, alias="validator")

    @field_validator(
        "code_bullet_points",
        "example_bullet_points",
        "instruction_bullet_points",
        mode="before",
    )
    @classmethod
    def never_null(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return tuple("" if item is None else str(item) for item in value)

    @field_validator("explanation", "goal", "default_code", "solution_code", mode="before")
    @classmethod
    def blank_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("ce_settings", mode="before")
    @classmethod
    def empty_settings(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("game_scene", "validator_ref", mode="before")
    @classmethod
    def blank_reference(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class Course(BaseModel):
    """Ordered lesson sequence with a display title."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    views: Tuple[CourseView, ...] = Field(default=(), alias="courseViews")

    @property
    def view_count(self) -> int:
        return len(self.views)

    def index_of(self, view: CourseView | None) -> int | None:
        """Position of ``view`` in the sequence, matched by identity; ``None`` when absent."""
        if view is None:
            return None
        for index, candidate in enumerate(self.views):
            if candidate is view:
                return index
        return None


def load_course(path: Path) -> Course:
    """Parse a course YAML file into a typed `Course`."""
    path = path.expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Course file {path} not found")
    data = read_yaml_file(path)
    try:
        return Course.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid course content in {path}") from exc


__all__ = ["Course", "CourseView", "load_course"]
