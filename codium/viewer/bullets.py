"""Projection of bullet-point fragments into a display container."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from codium.core.config import DEFAULT_BULLET_INDENT

from .collaborators import BulletContainer

LOGGER = logging.getLogger(__name__)


class MissingDisplayPrimitive(RuntimeError):
    """Raised by a container that cannot produce a text item."""


@dataclass(slots=True)
class BulletProjection:
    rendered: int
    aborted: bool = False

    @property
    def hidden(self) -> bool:
        return self.rendered == 0


def project_bullets(
    fragments: Sequence[str],
    container: BulletContainer,
    formatter: Callable[[str], str],
    *,
    indent: str = DEFAULT_BULLET_INDENT,
    section: str = "bullets",
    context: str = "",
) -> BulletProjection:
    """Append one indented, formatted item per non-empty fragment.

    Empty fragments are placeholders and are skipped. When nothing was
    rendered the container is hidden. Existing items are left alone.
    If the container fails to produce an item the rest of the section
    is abandoned; the error is logged, not raised.
    """
    rendered = 0
    aborted = False
    for fragment in fragments:
        if not fragment:
            continue
        try:
            item = container.create_item()
        except MissingDisplayPrimitive as exc:
            LOGGER.error("No text item for %s %s: %s", section, context, exc)
            item = None
        if item is None:
            LOGGER.error("Aborting %s projection %s after %d item(s)", section, context, rendered)
            aborted = True
            break
        item.set_text(indent + formatter(fragment))
        rendered += 1

    if rendered == 0:
        container.hide()
    return BulletProjection(rendered=rendered, aborted=aborted)


__all__ = ["BulletProjection", "MissingDisplayPrimitive", "project_bullets"]
