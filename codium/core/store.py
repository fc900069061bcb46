"""In-memory content store holding loaded courses and the current selection."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from .content import Course, CourseView, load_course

LOGGER = logging.getLogger(__name__)


class CourseStore:
    """Supplies courses and tracks which course/view the learner has selected."""

    def __init__(self, courses: List[Course] | None = None) -> None:
        self._courses: Dict[str, Course] = {}
        self.current_course: Optional[Course] = None
        self.current_view: Optional[CourseView] = None
        for course in courses or []:
            self.add(course)

    @classmethod
    def from_directory(cls, directory: Path, *, pattern: str = "*.yaml") -> "CourseStore":
        directory = directory.expanduser().resolve()
        if not directory.is_dir():
            raise FileNotFoundError(f"Course directory {directory} not found")
        store = cls()
        for path in sorted(directory.glob(pattern)):
            store.add(load_course(path))
        LOGGER.debug("Loaded %d course(s) from %s", len(store), directory)
        return store

    def __len__(self) -> int:
        return len(self._courses)

    def add(self, course: Course) -> None:
        if course.title in self._courses:
            raise ValueError(f"Course {course.title!r} already loaded")
        self._courses[course.title] = course

    def get(self, title: str) -> Course:
        return self._courses[title]

    @property
    def courses(self) -> List[Course]:
        return list(self._courses.values())

    def select(self, course: Course, index: int = 0) -> Optional[CourseView]:
        """Make ``course.views[index]`` the current view; out of range clears the view."""
        self.current_course = course
        if 0 <= index < course.view_count:
            self.current_view = course.views[index]
        else:
            LOGGER.warning("Course %r has no view at index %d", course.title, index)
            self.current_view = None
        return self.current_view

    def index_of(self, view: CourseView | None) -> Optional[int]:
        if self.current_course is None:
            return None
        return self.current_course.index_of(view)


__all__ = ["CourseStore"]
