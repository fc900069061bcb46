import os
from pathlib import Path

import pytest

from codium.viewer.bootstrap import bootstrap_viewer


ENV_KEYS = ("CODIUM_CONFIG", "CODIUM_LOG_LEVEL", "CODIUM_EVENT_LOG")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for key in ENV_KEYS:
        os.environ.pop(key, None)


def test_defaults_when_no_config_exists(tmp_path: Path) -> None:
    ctx = bootstrap_viewer(repo_root=tmp_path)
    assert ctx.config_path is None
    assert ctx.config.caret_sentinel == "CARET"
    assert ctx.event_log is None
    assert "SolutionMatch" in ctx.registry


def test_repo_config_is_picked_up(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "viewer.yaml").write_text('caret_sentinel: "@@"\n', encoding="utf-8")

    ctx = bootstrap_viewer(repo_root=tmp_path)

    assert ctx.config_path == (config_dir / "viewer.yaml").resolve()
    assert ctx.config.caret_sentinel == "@@"


def test_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODIUM_LOG_LEVEL", "debug")
    monkeypatch.setenv("CODIUM_EVENT_LOG", str(tmp_path / "events.jsonl"))

    ctx = bootstrap_viewer(repo_root=tmp_path)

    assert ctx.config.log_level == "DEBUG"
    assert ctx.event_log is not None
    assert ctx.event_log.output_path == tmp_path / "events.jsonl"
    assert ctx.env["CODIUM_LOG_LEVEL"] == "debug"


def test_dotenv_file_is_loaded(tmp_path: Path) -> None:
    (tmp_path / "viewer.yaml").write_text("code_style: red\n", encoding="utf-8")
    (tmp_path / ".env").write_text("CODIUM_CONFIG=viewer.yaml\n", encoding="utf-8")

    ctx = bootstrap_viewer(repo_root=tmp_path)

    assert ctx.config.code_style == "red"


def test_explicit_arguments_win(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODIUM_LOG_LEVEL", "debug")
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("log_level: warning\n", encoding="utf-8")

    ctx = bootstrap_viewer(config_path, repo_root=tmp_path, log_level="error")

    assert ctx.config.log_level == "ERROR"
