"""Bootstrap helpers that assemble config, registry and event log for a viewer."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from codium.core.config import ViewerConfig, load_viewer_config, merge_viewer_config
from codium.core.events import ViewerEventLog
from codium.validators.defaults import build_default_registry
from codium.validators.registry import ValidatorRegistry

DEFAULT_CONFIG_PATH = Path("config/viewer.yaml")
LOGGER = logging.getLogger(__name__)


class ViewerContext(BaseModel):
    """Aggregated runtime context shared by the front-ends."""

    repo_root: Path
    config: ViewerConfig
    config_path: Optional[Path] = None
    registry: ValidatorRegistry
    event_log: Optional[ViewerEventLog] = None
    env: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(arbitrary_types_allowed=True)


def _capture_env(keys: tuple[str, ...]) -> Dict[str, str]:
    snapshot: Dict[str, str] = {}
    for key in keys:
        value = os.getenv(key)
        if value is not None:
            snapshot[key] = value
    return snapshot


def bootstrap_viewer(
    config_path: Path | None = None,
    *,
    repo_root: Path | None = None,
    log_level: str | None = None,
    event_log_path: Path | None = None,
    registry: ValidatorRegistry | None = None,
    env_keys: tuple[str, ...] = ("CODIUM_CONFIG", "CODIUM_LOG_LEVEL", "CODIUM_EVENT_LOG"),
) -> ViewerContext:
    """
    Load `.env`, the viewer config and the validator registry.

    Parameters
    ----------
    config_path:
        Viewer YAML. Falls back to ``$CODIUM_CONFIG`` and then
        ``<repo_root>/config/viewer.yaml`` when that file exists; otherwise
        the built-in defaults are used.
    log_level:
        Overrides ``config.log_level`` (``$CODIUM_LOG_LEVEL`` is honoured too).
    event_log_path:
        Enables the JSONL event log at this path (``$CODIUM_EVENT_LOG``).
    """

    repo_root = (repo_root or Path.cwd()).resolve()
    load_dotenv(repo_root / ".env")

    if config_path is None and os.getenv("CODIUM_CONFIG"):
        config_path = Path(os.environ["CODIUM_CONFIG"])
    if config_path is None:
        default_path = repo_root / DEFAULT_CONFIG_PATH
        config_path = default_path if default_path.exists() else None
    if config_path is not None and not config_path.is_absolute():
        config_path = (repo_root / config_path).resolve()

    config = load_viewer_config(config_path)
    env_event_log = os.getenv("CODIUM_EVENT_LOG")
    config = merge_viewer_config(
        config,
        {
            "log_level": log_level or os.getenv("CODIUM_LOG_LEVEL"),
            "event_log_path": event_log_path or (Path(env_event_log) if env_event_log else None),
        },
    )

    event_log = ViewerEventLog(config.event_log_path) if config.event_log_path is not None else None
    ctx = ViewerContext(
        repo_root=repo_root,
        config=config,
        config_path=config_path,
        registry=registry if registry is not None else build_default_registry(),
        event_log=event_log,
        env=_capture_env(env_keys),
    )
    LOGGER.debug("Viewer bootstrapped (config=%s, validators=%s)", config_path, ctx.registry.names())
    return ctx


__all__ = ["DEFAULT_CONFIG_PATH", "ViewerContext", "bootstrap_viewer"]
