from codium.viewer.confirmation import ConfirmationGate, GateState
from tests.mocks.collaborators import FakeModal


class Recorder:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def yes(self) -> None:
        self.calls.append("yes")

    def no(self) -> None:
        self.calls.append("no")


def test_request_returns_immediately_and_awaits_answer() -> None:
    modal = FakeModal()
    gate = ConfirmationGate(modal)
    recorder = Recorder()

    ticket = gate.request("Sure?", recorder.yes, recorder.no)

    assert ticket == 1
    assert gate.state is GateState.AWAITING
    assert recorder.calls == []
    assert modal.last_message == "Sure?"


def test_exactly_one_callback_runs_at_most_once() -> None:
    modal = FakeModal()
    gate = ConfirmationGate(modal)
    recorder = Recorder()
    gate.request("Sure?", recorder.yes, recorder.no)

    modal.answer(True)
    modal.answer(True)
    modal.answer(False)

    assert recorder.calls == ["yes"]
    assert gate.state is GateState.IDLE


def test_no_answer_runs_on_no() -> None:
    modal = FakeModal()
    gate = ConfirmationGate(modal)
    recorder = Recorder()
    gate.request("Sure?", recorder.yes, recorder.no)

    modal.answer(False)

    assert recorder.calls == ["no"]


def test_missing_on_no_is_allowed() -> None:
    modal = FakeModal()
    gate = ConfirmationGate(modal)
    recorder = Recorder()
    gate.request("Sure?", recorder.yes)

    modal.answer(False)

    assert recorder.calls == []
    assert gate.state is GateState.IDLE


def test_new_request_invalidates_pending_one() -> None:
    modal = FakeModal()
    gate = ConfirmationGate(modal)
    first, second = Recorder(), Recorder()
    gate.request("First?", first.yes, first.no)
    gate.request("Second?", second.yes, second.no)

    modal.answer(True, request=0)
    modal.answer(False, request=0)
    assert first.calls == []
    assert gate.state is GateState.AWAITING

    modal.answer(True, request=1)
    assert second.calls == ["yes"]


def test_dismiss_counts_as_no() -> None:
    modal = FakeModal()
    gate = ConfirmationGate(modal)
    recorder = Recorder()
    gate.request("Sure?", recorder.yes, recorder.no)

    gate.dismiss()
    modal.answer(True)

    assert recorder.calls == ["no"]


def test_cancel_drops_pending_request() -> None:
    modal = FakeModal()
    gate = ConfirmationGate(modal)
    recorder = Recorder()
    gate.request("Sure?", recorder.yes, recorder.no)

    gate.cancel()
    modal.answer(True)

    assert recorder.calls == []
    assert gate.state is GateState.IDLE


def test_without_modal_nothing_is_requested(caplog) -> None:
    gate = ConfirmationGate(None)
    recorder = Recorder()

    assert gate.request("Sure?", recorder.yes, recorder.no) is None
    assert gate.state is GateState.IDLE
    assert "No modal panel" in caplog.text


def test_synchronous_modal_answer_is_honoured() -> None:
    class ImmediateModal:
        def request_confirmation(self, message, on_yes, on_no) -> None:
            on_yes()

    gate = ConfirmationGate(ImmediateModal())
    recorder = Recorder()
    gate.request("Sure?", recorder.yes, recorder.no)

    assert recorder.calls == ["yes"]
    assert gate.state is GateState.IDLE
