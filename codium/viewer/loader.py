"""Materialises one course view into the viewer's widgets and collaborators."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence

from rich.markup import escape

from codium.core.config import ViewerConfig
from codium.core.content import Course, CourseView
from codium.core.events import LoadReport, Severity, ViewerEvent, ViewerEventLog
from codium.core.formatting import CodeTagFormatter
from codium.validators.base import Validator, Verdict
from codium.validators.defaults import build_default_registry
from codium.validators.registry import UnresolvedValidator, ValidatorRegistry

from .bullets import project_bullets
from .collaborators import (
    BulletContainer,
    CodeEnvironment,
    ContentStore,
    LessonSelector,
    ModalPanel,
    SceneController,
    StepTracker,
    TextFormatter,
    TextLabel,
)
from .confirmation import ConfirmationGate
from .editor import CodeEditor

LOGGER_NAME = "codium.viewer"


class LoadState(str, Enum):
    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"


@dataclass(slots=True)
class ViewWidgets:
    """Display slots of the lesson screen."""

    title: TextLabel | None = None
    subject: TextLabel | None = None
    explanation: TextLabel | None = None
    code_bullets: BulletContainer | None = None
    examples: BulletContainer | None = None


class CourseViewLoader:
    """Loads a course view and owns the active validator while it is shown.

    Collaborators are injected. A missing one is reported once at
    construction and the steps that need it are skipped on every load.
    No load error propagates out of this class.
    """

    def __init__(
        self,
        *,
        widgets: ViewWidgets | None = None,
        editor: CodeEditor | None = None,
        store: ContentStore | None = None,
        steps: StepTracker | None = None,
        environment: CodeEnvironment | None = None,
        scene: SceneController | None = None,
        modal: ModalPanel | None = None,
        selector: LessonSelector | None = None,
        formatter: TextFormatter | None = None,
        registry: ValidatorRegistry | None = None,
        config: ViewerConfig | None = None,
        event_log: ViewerEventLog | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or ViewerConfig()
        self.widgets = widgets or ViewWidgets()
        self.editor = editor or CodeEditor(sentinel=self.config.caret_sentinel)
        self.store = store
        self.steps = steps
        self.environment = environment
        self.scene = scene
        self.selector = selector
        self.formatter = formatter or CodeTagFormatter(self.config.code_style)
        self.registry = registry if registry is not None else build_default_registry()
        self.event_log = event_log
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.gate = ConfirmationGate(modal)

        self.state = LoadState.UNLOADED
        self.course: Course | None = None
        self.view: CourseView | None = None
        self.view_index: int | None = None
        self.last_report: LoadReport | None = None
        self._validator: Validator | None = None

        self.startup_report = LoadReport()
        self.missing_collaborators = self._check_collaborators()

    # ------------------------------------------------------------------ setup

    def _check_collaborators(self) -> List[str]:
        required: Dict[str, object | None] = {
            "title": self.widgets.title,
            "subject": self.widgets.subject,
            "explanation": self.widgets.explanation,
            "code_bullets": self.widgets.code_bullets,
            "examples": self.widgets.examples,
            "store": self.store,
            "steps": self.steps,
            "environment": self.environment,
            "scene": self.scene,
            "modal": self.gate.modal,
            "selector": self.selector,
        }
        missing = [name for name, value in required.items() if value is None]
        for name in missing:
            self.logger.error("No %s collaborator referenced; dependent features are disabled", name)
            self.startup_report.add("error", "startup", f"Missing collaborator: {name}")
        return missing

    @property
    def validator(self) -> Validator | None:
        return self._validator

    # ---------------------------------------------------------------- loading

    def load_current_course_view(self) -> LoadReport | None:
        """Load whatever view the content store has selected."""
        if self.store is None or self.store.current_view is None:
            self.logger.error("No current course view.")
            return None
        course = self.store.current_course
        index = self.store.index_of(self.store.current_view)
        if course is None or index is None:
            self.logger.warning("Current course view %r is not part of the current course", self.store.current_view.subject)
            return None
        return self.load_course_view_data(course, index)

    def load_course_view_data(self, course: Course, index: int) -> LoadReport:
        report = LoadReport(view_index=index)
        if index < 0 or index >= course.view_count:
            self._issue(
                report,
                "warning",
                "select",
                f"CourseView couldn't be loaded because index {index} is outside the {course.view_count} view(s) of {course.title!r}",
            )
            return report

        view = course.views[index]
        self._release_validator(report)
        self.state = LoadState.LOADING
        self.course = course
        self.view = view
        self.view_index = index
        self.editor.clear()

        self._load_title(course, index)
        self._set_label(self.widgets.subject, escape(view.subject))
        self._set_label(self.widgets.explanation, self.formatter.format(view.explanation))
        self._project(view.code_bullet_points, self.widgets.code_bullets, "code_bullet_points", report)
        self._project(view.example_bullet_points, self.widgets.examples, "example_bullet_points", report)
        self.editor.load_default(view)
        self._load_instructions(view)
        if self.environment is not None:
            self.environment.apply_settings(view.ce_settings)
        self._install_validator(view, report)
        self._setup_scene(view)
        self._rebuild_selector(course)

        self.state = LoadState.LOADED
        self.last_report = report
        if self.event_log is not None:
            self.event_log.log_report(
                "load_view",
                f"Loaded view {index + 1} of {course.title!r}",
                report,
                subject=view.subject,
                validator=view.validator_ref if self._validator is not None else None,
            )
        return report

    def _load_title(self, course: Course, index: int) -> None:
        title = self.config.title_template.format(number=index + 1, title=escape(course.title))
        self._set_label(self.widgets.title, title)

    def _project(
        self,
        fragments: Sequence[str],
        container: BulletContainer | None,
        section: str,
        report: LoadReport,
    ) -> None:
        if container is None:
            return
        container.clear()
        container.show()
        projection = project_bullets(
            fragments,
            container,
            self.formatter.format,
            indent=self.config.bullet_indent,
            section=section,
            context=self._context(),
        )
        if projection.aborted:
            self._issue(
                report,
                "error",
                section,
                f"Bullet item could not be rendered; {section} stopped after {projection.rendered} item(s)",
            )

    def _load_instructions(self, view: CourseView) -> None:
        if self.steps is None:
            return
        self.steps.set_goal(self.formatter.format(view.goal))
        self.steps.register_steps([self.formatter.format(step) for step in view.instruction_bullet_points])

    def _install_validator(self, view: CourseView, report: LoadReport) -> None:
        if view.validator_ref is None:
            self._issue(report, "warning", "validator", "No validator referenced in course view; it cannot be completed.")
            return
        resolution = self.registry.resolve(view.validator_ref)
        if isinstance(resolution, UnresolvedValidator):
            self._issue(report, "error", "validator", f"Referenced validator {resolution.name!r} is not valid.")
            return
        try:
            validator = self.registry.build(resolution.name, view)
        except Exception as exc:  # noqa: BLE001 - content-supplied factories must not break the load
            self._issue(report, "error", "validator", f"Validator {resolution.name!r} failed to build: {exc}")
            return
        self._validator = validator
        if self.environment is not None:
            self.environment.install_validator(validator)

    def _release_validator(self, report: LoadReport | None = None) -> None:
        validator, self._validator = self._validator, None
        if validator is None:
            return
        try:
            validator.release()
        except Exception as exc:  # noqa: BLE001 - content-supplied validators must not break the load
            if report is not None:
                message = f"Validator {type(validator).__name__!r} failed to release: {exc}"
                self._issue(report, "error", "validator", message)
            else:
                self.logger.error("Validator %r failed to release: %s", type(validator).__name__, exc)
        if self.environment is not None:
            self.environment.install_validator(None)

    def _setup_scene(self, view: CourseView) -> None:
        if self.scene is None:
            return
        if view.game_scene is not None:
            self.scene.setup_scene(view.game_scene)
        else:
            self.scene.configure_code_only()

    def _rebuild_selector(self, course: Course) -> None:
        if self.selector is None:
            return
        self.selector.clear()
        for position, entry in enumerate(course.views):
            self.selector.add_entry(position, entry.subject)
        self.selector.rebuild()

    def update_course_view(self) -> None:
        """Refresh lesson-selector state, e.g. after a view was completed."""
        if self.selector is not None:
            self.selector.refresh()

    # ------------------------------------------------------------ editor data

    def _current_view(self) -> CourseView | None:
        if self.state is LoadState.LOADED and self.view is not None:
            return self.view
        if self.store is not None:
            return self.store.current_view
        return self.view

    def load_current_default_code(self) -> bool:
        view = self._current_view()
        if view is None:
            self.logger.error("No current course view.")
            return False
        self.editor.load_default(view)
        return True

    def load_current_solution_code(self) -> bool:
        view = self._current_view()
        if view is None:
            self.logger.error("No current course view.")
            return False
        self.editor.load_solution(view)
        return True

    def evaluate(self) -> Verdict:
        if self._validator is None:
            return Verdict.PENDING
        return self._validator.evaluate(self.editor.snapshot())

    # ------------------------------------------------------- gated actions

    def reset_code(self) -> Optional[int]:
        return self.gate.request(self.config.reset_prompt, self._reset_code)

    def _reset_code(self) -> None:
        self.load_current_default_code()

    def show_solution(self) -> Optional[int]:
        return self.gate.request(self.config.solution_prompt, self._show_solution)

    def _show_solution(self) -> None:
        if not self.load_current_solution_code():
            return
        if self.steps is not None:
            self.steps.notify_solution_shown()
        self._log_event("show_solution", "Solution revealed", {"index": self.view_index})

    def close(self) -> None:
        """Tear the view down and release the active validator."""
        self.gate.cancel()
        self._release_validator()
        self.editor.clear()
        self.course = None
        self.view = None
        self.view_index = None
        self.state = LoadState.UNLOADED

    # -------------------------------------------------------------- helpers

    def _context(self) -> str:
        if self.view is None:
            return "(no view)"
        return f"(view {self.view_index}, {self.view.subject!r})"

    def _set_label(self, label: TextLabel | None, text: str) -> None:
        if label is not None:
            label.set_text(text)

    def _issue(self, report: LoadReport, severity: Severity, stage: str, message: str) -> None:
        subject = self.view.subject if self.view is not None and report.view_index == self.view_index else None
        report.add(severity, stage, message, subject=subject)
        level = logging.ERROR if severity == "error" else logging.WARNING
        self.logger.log(level, "%s %s: %s", stage, self._context() if subject else f"(index {report.view_index})", message)

    def _log_event(self, stage: str, message: str, payload: Dict[str, object]) -> None:
        if self.event_log is not None:
            self.event_log.log(ViewerEvent(stage=stage, message=message, payload=payload))


__all__ = ["CourseViewLoader", "LOGGER_NAME", "LoadState", "ViewWidgets"]
