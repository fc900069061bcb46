"""Rich-backed implementations of the viewer collaborators.

Widgets only hold state; `ConsoleScreen.render` draws the whole lesson
in one pass once the loader is done.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from codium.core.config import ViewerConfig
from codium.core.events import ViewerEventLog
from codium.validators.base import Validator
from codium.validators.registry import ValidatorRegistry
from codium.viewer.collaborators import ContentStore
from codium.viewer.editor import CodeEditor
from codium.viewer.loader import CourseViewLoader, ViewWidgets


@dataclass
class ConsoleLabel:
    text: str = ""

    def set_text(self, text: str) -> None:
        self.text = text


@dataclass
class ConsoleBulletList:
    items: List[ConsoleLabel] = field(default_factory=list)
    visible: bool = True

    def create_item(self) -> ConsoleLabel:
        item = ConsoleLabel()
        self.items.append(item)
        return item

    def clear(self) -> None:
        self.items.clear()

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False


@dataclass
class ConsoleCodeField:
    text: str = ""
    caret: int = 0
    focused: bool = False

    def show(self, text: str, caret: int) -> None:
        self.text = text
        self.caret = caret

    def focus(self) -> None:
        self.focused = True


@dataclass
class ConsoleStepTracker:
    goal: str = ""
    steps: List[str] = field(default_factory=list)
    solution_shown: bool = False

    def set_goal(self, text: str) -> None:
        self.goal = text

    def register_steps(self, steps: Sequence[str]) -> None:
        self.steps = list(steps)
        self.solution_shown = False

    def notify_solution_shown(self) -> None:
        self.solution_shown = True


@dataclass
class ConsoleEnvironment:
    settings: Dict[str, Any] = field(default_factory=dict)
    validator: Optional[Validator] = None

    def apply_settings(self, settings: Mapping[str, Any]) -> None:
        self.settings = dict(settings)

    def install_validator(self, validator: Validator | None) -> None:
        self.validator = validator


@dataclass
class ConsoleScene:
    scene_id: Optional[str] = None
    code_only: bool = False

    def setup_scene(self, scene_id: str) -> None:
        self.scene_id = scene_id
        self.code_only = False

    def configure_code_only(self) -> None:
        self.scene_id = None
        self.code_only = True


class ConsoleModal:
    """Answers immediately: either a fixed answer or an interactive Rich prompt."""

    def __init__(self, console: Console, *, auto_answer: bool | None = None) -> None:
        self.console = console
        self.auto_answer = auto_answer

    def request_confirmation(self, message: str, on_yes: Callable[[], None], on_no: Callable[[], None]) -> None:
        if self.auto_answer is None:
            accepted = Confirm.ask(message, console=self.console, default=False)
        else:
            accepted = self.auto_answer
        (on_yes if accepted else on_no)()


@dataclass
class ConsoleSelector:
    entries: Dict[int, str] = field(default_factory=dict)
    rebuilds: int = 0

    def clear(self) -> None:
        self.entries.clear()

    def add_entry(self, index: int, label: str) -> None:
        self.entries[index] = label

    def rebuild(self) -> None:
        self.rebuilds += 1

    def refresh(self) -> None:
        self.rebuilds += 1


class ConsoleScreen:
    """One lesson screen drawn with Rich."""

    def __init__(self, console: Console, *, auto_answer: bool | None = None) -> None:
        self.console = console
        self.widgets = ViewWidgets(
            title=ConsoleLabel(),
            subject=ConsoleLabel(),
            explanation=ConsoleLabel(),
            code_bullets=ConsoleBulletList(),
            examples=ConsoleBulletList(),
        )
        self.code_field = ConsoleCodeField()
        self.steps = ConsoleStepTracker()
        self.environment = ConsoleEnvironment()
        self.scene = ConsoleScene()
        self.modal = ConsoleModal(console, auto_answer=auto_answer)
        self.selector = ConsoleSelector()

    def build_loader(
        self,
        store: ContentStore,
        *,
        config: ViewerConfig,
        registry: ValidatorRegistry,
        event_log: ViewerEventLog | None = None,
    ) -> CourseViewLoader:
        return CourseViewLoader(
            widgets=self.widgets,
            editor=CodeEditor(self.code_field, sentinel=config.caret_sentinel),
            store=store,
            steps=self.steps,
            environment=self.environment,
            scene=self.scene,
            modal=self.modal,
            selector=self.selector,
            registry=registry,
            config=config,
            event_log=event_log,
        )

    def render(self, *, current_index: int | None = None) -> None:
        widgets = self.widgets
        self.console.print(Text.from_markup(widgets.title.text))
        self.console.print(Panel(Text.from_markup(widgets.explanation.text), title=widgets.subject.text))
        for heading, section in (("Code", widgets.code_bullets), ("Examples", widgets.examples)):
            if section.visible:
                bullets = Group(*(Text.from_markup(item.text) for item in section.items))
                self.console.print(Panel(bullets, title=heading))

        language = str(self.environment.settings.get("language", "python"))
        self.console.print(Panel(Syntax(self.code_field.text or " ", language), title="Editor"))

        steps = Table(show_header=False, box=None)
        steps.add_column(justify="right")
        steps.add_column()
        for number, step in enumerate(self.steps.steps, start=1):
            steps.add_row(f"{number}.", Text.from_markup(step))
        goal = Group(Text.from_markup(self.steps.goal), steps)
        self.console.print(Panel(goal, title="Goal"))

        if self.scene.scene_id is not None:
            self.console.print(f"[dim]Scene:[/dim] {self.scene.scene_id}")
        else:
            self.console.print("[dim]Console only[/dim]")

        lessons = Table(title="Lessons", show_header=False)
        lessons.add_column(justify="right")
        lessons.add_column()
        for index, label in sorted(self.selector.entries.items()):
            marker = "▶" if index == current_index else ""
            lessons.add_row(f"{marker}{index + 1:02d}", escape(label))
        self.console.print(lessons)


__all__ = [
    "ConsoleBulletList",
    "ConsoleCodeField",
    "ConsoleEnvironment",
    "ConsoleLabel",
    "ConsoleModal",
    "ConsoleScene",
    "ConsoleScreen",
    "ConsoleSelector",
    "ConsoleStepTracker",
]
