"""Static checks for course content, run before a course is shown."""

from __future__ import annotations

from codium.core.config import DEFAULT_CARET_SENTINEL
from codium.core.content import Course

from .registry import UnresolvedValidator, ValidatorRegistry


def validate_course(
    course: Course,
    registry: ValidatorRegistry,
    *,
    sentinel: str = DEFAULT_CARET_SENTINEL,
) -> tuple[list[str], list[str]]:
    """Return ``(errors, warnings)`` for every view in ``course``."""
    errors: list[str] = []
    warnings: list[str] = []

    if not course.views:
        warnings.append(f"Course {course.title!r} has no views")

    for index, view in enumerate(course.views):
        label = f"View {index + 1:02d} ({view.subject or 'untitled'})"
        if not view.subject.strip():
            warnings.append(f"{label} has an empty subject")
        if view.validator_ref is None:
            warnings.append(f"{label} references no validator and can never be completed")
        elif isinstance(registry.resolve(view.validator_ref), UnresolvedValidator):
            errors.append(f"{label} references unknown validator {view.validator_ref!r}")
        occurrences = view.default_code.count(sentinel)
        if occurrences > 1:
            warnings.append(
                f"{label} default code contains {occurrences} {sentinel} markers; only the first positions the caret"
            )
        if sentinel in view.solution_code:
            warnings.append(f"{label} solution code contains the {sentinel} marker")

    return errors, warnings


__all__ = ["validate_course"]
