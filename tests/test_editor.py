import logging

from codium.viewer.editor import CodeEditor, strip_caret_sentinel
from tests.mocks.collaborators import FakeCodeField, make_view


def test_strip_caret_sentinel_reports_offset() -> None:
    assert strip_caret_sentinel("print(CARETx)") == ("print(x)", 6)


def test_strip_caret_sentinel_defaults_to_start() -> None:
    assert strip_caret_sentinel("print(x)") == ("print(x)", 0)
    assert strip_caret_sentinel("") == ("", 0)


def test_only_first_sentinel_is_treated_as_marker() -> None:
    text, caret = strip_caret_sentinel("aCARETb CARET c")
    assert text == "ab CARET c"
    assert caret == 1


def test_custom_sentinel() -> None:
    assert strip_caret_sentinel("x = @@", "@@") == ("x = ", 4)


def test_load_default_is_idempotent() -> None:
    field = FakeCodeField()
    editor = CodeEditor(field)
    view = make_view(default_code="def f():\n    CARET\n")

    editor.load_default(view)
    first = (editor.text, editor.caret)
    editor.load_default(view)

    assert (editor.text, editor.caret) == first == ("def f():\n    \n", 13)
    assert editor.focused
    assert field.shown == [first, first]
    assert field.focus_calls == 2


def test_load_solution_replaces_text_and_keeps_caret() -> None:
    editor = CodeEditor()
    view = make_view(solution_code="print(42)")
    editor.load_default(view)

    editor.load_solution(view)
    once = editor.text
    editor.load_solution(view)

    assert editor.text == once == "print(42)"
    assert editor.caret == 6


def test_load_solution_does_not_scan_for_sentinel() -> None:
    editor = CodeEditor()
    editor.load_solution(make_view(solution_code="CARET = 1"))
    assert editor.text == "CARET = 1"
    assert editor.caret == 0


def test_type_text_moves_caret_to_end_by_default() -> None:
    editor = CodeEditor()
    editor.type_text("abc")
    assert editor.snapshot().text == "abc"
    assert editor.snapshot().caret == 3
    editor.type_text("abc", caret=1)
    assert editor.caret == 1


def test_clear_resets_state() -> None:
    editor = CodeEditor()
    editor.load_default(make_view())
    editor.clear()
    assert (editor.text, editor.caret, editor.focused) == ("", 0, False)


def test_load_solution_clamps_caret_to_shorter_solution() -> None:
    field = FakeCodeField()
    editor = CodeEditor(field)
    view = make_view(default_code="# a long comment here\nCARET", solution_code="x=1")
    editor.load_default(view)
    assert editor.caret == 22

    editor.load_solution(view)

    assert editor.text == "x=1"
    assert editor.caret == 3
    assert field.shown[-1] == ("x=1", 3)
    assert editor.snapshot().caret == 3


def test_marker_formed_by_stripping_is_not_reported_as_repeat(caplog) -> None:
    editor = CodeEditor()
    with caplog.at_level(logging.WARNING, logger="codium"):
        editor.load_default(make_view(default_code="CACARETRET"))

    assert editor.text == "CARET"
    assert editor.caret == 2
    assert "more than one" not in caplog.text


def test_repeated_marker_is_reported(caplog) -> None:
    editor = CodeEditor()
    with caplog.at_level(logging.WARNING, logger="codium"):
        editor.load_default(make_view(default_code="aCARETb CARET"))

    assert "more than one CARET marker" in caplog.text
