from pathlib import Path

from codium.core.config import load_viewer_config
from codium.core.content import load_course
from codium.validators.defaults import build_default_registry
from codium.validators.lint import validate_course

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_viewer_config_sample_loads() -> None:
    """Ensure the shipped viewer YAML matches the ViewerConfig schema."""

    config = load_viewer_config(REPO_ROOT / "config" / "viewer.yaml")

    assert config.caret_sentinel == "CARET"
    assert config.bullet_indent == "    "
    assert config.solution_prompt.endswith("This will overwrite your current code.")


def test_sample_course_loads_and_lints() -> None:
    course = load_course(REPO_ROOT / "data" / "courses" / "python_basics.yaml")

    assert course.title == "Python Basics"
    assert [view.subject for view in course.views] == ["Printing", "Variables", "Moving the robot"]
    assert course.views[0].code_bullet_points[1] == ""
    assert course.views[2].game_scene == "robot_yard"

    errors, warnings = validate_course(course, build_default_registry())
    assert errors == []
    assert len(warnings) == 1
