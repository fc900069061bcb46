"""Yes/no gate in front of destructive editor actions.

The gate never blocks: it hands the prompt to the modal collaborator and
returns. Each request carries a ticket; a newer request invalidates the
older ticket so an answer from a stale modal does nothing.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .collaborators import Callback, ModalPanel

LOGGER = logging.getLogger(__name__)


class GateState(str, Enum):
    IDLE = "idle"
    AWAITING = "awaiting"


@dataclass(slots=True)
class PendingConfirmation:
    ticket: int
    message: str
    on_yes: Callback
    on_no: Optional[Callback]


class ConfirmationGate:
    def __init__(self, modal: ModalPanel | None) -> None:
        self.modal = modal
        self._pending: PendingConfirmation | None = None
        self._tickets = 0

    @property
    def state(self) -> GateState:
        return GateState.AWAITING if self._pending is not None else GateState.IDLE

    @property
    def pending(self) -> PendingConfirmation | None:
        return self._pending

    def request(self, message: str, on_yes: Callback, on_no: Callback | None = None) -> int | None:
        """Ask the modal to confirm ``message``; returns the ticket or ``None`` without a modal."""
        if self.modal is None:
            LOGGER.error("No modal panel; cannot ask %r", message)
            return None
        if self._pending is not None:
            LOGGER.debug("Superseding pending confirmation #%d", self._pending.ticket)
        self._tickets += 1
        ticket = self._tickets
        self._pending = PendingConfirmation(ticket=ticket, message=message, on_yes=on_yes, on_no=on_no)
        self.modal.request_confirmation(
            message,
            functools.partial(self._answer, ticket, True),
            functools.partial(self._answer, ticket, False),
        )
        return ticket

    def dismiss(self) -> None:
        """Treat a modal closed without a choice as a "no"."""
        if self._pending is not None:
            self._answer(self._pending.ticket, False)

    def cancel(self) -> None:
        """Drop the pending request without running either callback."""
        self._pending = None

    def _answer(self, ticket: int, accepted: bool) -> None:
        pending = self._pending
        if pending is None or pending.ticket != ticket:
            LOGGER.debug("Ignoring answer for stale confirmation #%d", ticket)
            return
        self._pending = None
        callback = pending.on_yes if accepted else pending.on_no
        if callback is not None:
            callback()


__all__ = ["ConfirmationGate", "GateState", "PendingConfirmation"]
