"""
Content model, configuration and reporting primitives for the viewer.

Nothing in here knows about widgets or validators, so front-ends and
tools can import it without pulling in the viewer stack.
"""

from .config import ViewerConfig, load_viewer_config, merge_viewer_config
from .content import Course, CourseView, load_course
from .events import LoadIssue, LoadReport, ViewerEvent, ViewerEventLog
from .formatting import CodeTagFormatter
from .store import CourseStore

__all__ = [
    "CodeTagFormatter",
    "Course",
    "CourseStore",
    "CourseView",
    "LoadIssue",
    "LoadReport",
    "ViewerConfig",
    "ViewerEvent",
    "ViewerEventLog",
    "load_course",
    "load_viewer_config",
    "merge_viewer_config",
]
