"""Load reports and a JSONL event log for the lesson viewer."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, Field

Severity = Literal["warning", "error"]


class LoadIssue(BaseModel):
    """A single problem detected while materialising a view."""

    severity: Severity
    stage: str = Field(..., description="Load step that detected the problem, e.g. 'validator'.")
    message: str
    view_index: Optional[int] = None
    subject: Optional[str] = None


class LoadReport(BaseModel):
    """Issues collected over one load attempt; the load itself never raises."""

    view_index: Optional[int] = None
    issues: List[LoadIssue] = Field(default_factory=list)

    def add(self, severity: Severity, stage: str, message: str, *, subject: str | None = None) -> LoadIssue:
        issue = LoadIssue(
            severity=severity,
            stage=stage,
            message=message,
            view_index=self.view_index,
            subject=subject,
        )
        self.issues.append(issue)
        return issue

    @property
    def errors(self) -> List[LoadIssue]:
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> List[LoadIssue]:
        return [issue for issue in self.issues if issue.severity == "warning"]

    @property
    def ok(self) -> bool:
        return not self.issues


class ViewerEvent(BaseModel):
    """Structured record for viewer activity."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    stage: str = Field(..., description="Viewer stage, e.g. 'load_view' or 'show_solution'.")
    message: str
    payload: Dict[str, Any] = Field(default_factory=dict)


class ViewerEventLog:
    """Append-only JSONL log of viewer events."""

    def __init__(self, output_path: Path):
        self.output_path = output_path
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, event: ViewerEvent | Dict[str, Any]) -> ViewerEvent:
        """Write a single event to disk and return the normalized object."""
        if not isinstance(event, ViewerEvent):
            event = ViewerEvent(**event)
        line = event.model_dump_json()
        with self.output_path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
        return event

    def log_report(self, stage: str, message: str, report: LoadReport, **payload: Any) -> ViewerEvent:
        """Record one load report; its view index and issues travel in the payload."""
        payload = {"index": report.view_index, **payload}
        payload["issues"] = [issue.model_dump(mode="json") for issue in report.issues]
        return self.log(ViewerEvent(stage=stage, message=message, payload=payload))

    def extend(self, events: Iterable[ViewerEvent | Dict[str, Any]]) -> None:
        for event in events:
            self.log(event)


__all__ = ["LoadIssue", "LoadReport", "Severity", "ViewerEvent", "ViewerEventLog"]
