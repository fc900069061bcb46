"""Lesson viewer core: bullet projection, editor state, confirmation gate and loader."""

from __future__ import annotations

from .bullets import BulletProjection, MissingDisplayPrimitive, project_bullets
from .confirmation import ConfirmationGate, GateState
from .editor import CodeEditor, strip_caret_sentinel
from .loader import CourseViewLoader, LoadState, ViewWidgets

__all__ = [
    "BulletProjection",
    "CodeEditor",
    "ConfirmationGate",
    "CourseViewLoader",
    "GateState",
    "LoadState",
    "MissingDisplayPrimitive",
    "ViewWidgets",
    "project_bullets",
    "strip_caret_sentinel",
]
