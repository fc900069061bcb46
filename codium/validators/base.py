"""Capability shared by every lesson validator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from codium.core.content import CourseView


class Verdict(str, Enum):
    """Outcome of evaluating the learner's code."""

    PASSED = "passed"
    FAILED = "failed"
    PENDING = "pending"


@dataclass(frozen=True, slots=True)
class EditorSnapshot:
    """Editor state handed to validators."""

    text: str
    caret: int = 0


class Validator(ABC):
    """Judges whether learner code satisfies one lesson's goal.

    Instances are scoped to a single view and are released by the loader
    before the next view's validator is installed.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""

    def __init__(self, view: CourseView) -> None:
        self.view = view
        self.released = False

    @abstractmethod
    def evaluate(self, state: EditorSnapshot) -> Verdict:
        """Return the verdict for ``state``."""

    def release(self) -> None:
        """Free anything the validator holds; idempotent."""
        self.released = True


__all__ = ["EditorSnapshot", "Validator", "Verdict"]
