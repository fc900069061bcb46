"""Editor text and caret state, including the caret-sentinel protocol.

Lesson authors mark the initial caret position in ``default_code`` with
a sentinel token (``CARET`` unless configured otherwise). The first
occurrence is the marker and is removed; any later occurrence is left in
the text verbatim.
"""

from __future__ import annotations

import logging

from codium.core.config import DEFAULT_CARET_SENTINEL
from codium.core.content import CourseView
from codium.validators.base import EditorSnapshot

from .collaborators import CodeField

LOGGER = logging.getLogger(__name__)


def strip_caret_sentinel(code: str, sentinel: str = DEFAULT_CARET_SENTINEL) -> tuple[str, int]:
    """Return ``(text, caret)``; caret is 0 when the sentinel is absent."""
    index = code.find(sentinel) if sentinel else -1
    if index == -1:
        return code, 0
    return code[:index] + code[index + len(sentinel) :], index


class CodeEditor:
    """Owns the code shown to the learner for the current view."""

    def __init__(self, field: CodeField | None = None, *, sentinel: str = DEFAULT_CARET_SENTINEL) -> None:
        self.field = field
        self.sentinel = sentinel
        self.text = ""
        self.caret = 0
        self.focused = False

    def clear(self) -> None:
        self.text = ""
        self.caret = 0
        self.focused = False

    def load_default(self, view: CourseView) -> None:
        text, caret = strip_caret_sentinel(view.default_code, self.sentinel)
        if self.sentinel and view.default_code.count(self.sentinel) > 1:
            LOGGER.warning(
                "Default code for %r has more than one %s marker; only the first positions the caret",
                view.subject,
                self.sentinel,
            )
        self._apply(text, caret)
        self.focus()

    def load_solution(self, view: CourseView) -> None:
        self._apply(view.solution_code, min(self.caret, len(view.solution_code)))

    def type_text(self, text: str, caret: int | None = None) -> None:
        """Replace the editor contents the way a learner edit would."""
        self._apply(text, len(text) if caret is None else caret)

    def focus(self) -> None:
        self.focused = True
        if self.field is not None:
            self.field.focus()

    def snapshot(self) -> EditorSnapshot:
        return EditorSnapshot(text=self.text, caret=self.caret)

    def _apply(self, text: str, caret: int) -> None:
        self.text = text
        self.caret = caret
        if self.field is not None:
            self.field.show(text, caret)


__all__ = ["CodeEditor", "strip_caret_sentinel"]
