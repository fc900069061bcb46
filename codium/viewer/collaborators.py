"""Narrow interfaces the loader calls through; widget toolkits implement them."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol, Sequence, runtime_checkable

from codium.core.content import Course, CourseView
from codium.validators.base import Validator

Callback = Callable[[], None]


@runtime_checkable
class TextLabel(Protocol):
    def set_text(self, text: str) -> None: ...


@runtime_checkable
class BulletContainer(Protocol):
    """Section holding rendered bullet items.

    ``create_item`` returns ``None`` (or raises `MissingDisplayPrimitive`)
    when the container cannot produce a text item.
    """

    def create_item(self) -> Optional[TextLabel]: ...

    def clear(self) -> None: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...


@runtime_checkable
class ContentStore(Protocol):
    current_course: Optional[Course]
    current_view: Optional[CourseView]

    def index_of(self, view: CourseView | None) -> Optional[int]: ...


@runtime_checkable
class TextFormatter(Protocol):
    def format(self, raw: str) -> str: ...


@runtime_checkable
class StepTracker(Protocol):
    def set_goal(self, text: str) -> None: ...

    def register_steps(self, steps: Sequence[str]) -> None: ...

    def notify_solution_shown(self) -> None: ...


@runtime_checkable
class CodeEnvironment(Protocol):
    def apply_settings(self, settings: Mapping[str, Any]) -> None: ...

    def install_validator(self, validator: Validator | None) -> None: ...


@runtime_checkable
class SceneController(Protocol):
    def setup_scene(self, scene_id: str) -> None: ...

    def configure_code_only(self) -> None: ...


@runtime_checkable
class ModalPanel(Protocol):
    """Yes/no prompt. Dismissal without a choice must call ``on_no``."""

    def request_confirmation(self, message: str, on_yes: Callback, on_no: Callback) -> None: ...


@runtime_checkable
class LessonSelector(Protocol):
    def clear(self) -> None: ...

    def add_entry(self, index: int, label: str) -> None: ...

    def rebuild(self) -> None: ...

    def refresh(self) -> None: ...


@runtime_checkable
class CodeField(Protocol):
    """Widget mirroring the editor state."""

    def show(self, text: str, caret: int) -> None: ...

    def focus(self) -> None: ...


__all__ = [
    "BulletContainer",
    "Callback",
    "CodeEnvironment",
    "CodeField",
    "ContentStore",
    "LessonSelector",
    "ModalPanel",
    "SceneController",
    "StepTracker",
    "TextFormatter",
    "TextLabel",
]
