"""Test pasting the clipboard back into the document."""

import pytest

from linemark.errors import CapacityError
from linemark.model import TextModel, Document, CursorPosition


def make_model(lines, max_lines=1000):
    return TextModel(Document(lines, max_lines=max_lines))


def test_paste_with_newline_splits_line():
    model = make_model(["ab"])
    model.clipboard.store("x\ny")
    model.cursor_position = CursorPosition(0, 2)

    pasted = model.paste()

    assert pasted == 3
    assert model.document.lines == ["abx", "y"]
    assert model.cursor_position == CursorPosition(1, 1)


def test_paste_in_middle_of_line():
    model = make_model(["The quick brown fox"])
    model.clipboard.store("fast")
    model.cursor_position = CursorPosition(0, 4)

    model.paste()

    assert model.document.lines[0] == "The fastquick brown fox"
    assert model.cursor_position.col == 8


def test_paste_multi_line_keeps_suffix_on_last_line():
    model = make_model(["start-end", "after"])
    model.clipboard.store("one\ntwo\nthree")
    model.cursor_position = CursorPosition(0, 6)

    model.paste()

    assert model.document.lines == ["start-one", "two", "threeend", "after"]
    assert model.cursor_position == CursorPosition(2, 5)


def test_paste_empty_clipboard_is_noop():
    model = make_model(["abc"])
    model.cursor_position = CursorPosition(0, 1)

    assert model.paste() == 0
    assert model.document.lines == ["abc"]
    assert model.cursor_position == CursorPosition(0, 1)


def test_paste_into_empty_document():
    model = make_model([])
    model.clipboard.store("a\nb")

    model.paste()

    assert model.document.lines == ["a", "b"]


def test_paste_does_not_consume_clipboard():
    model = make_model(["x"])
    model.clipboard.store("ab")
    model.paste()
    model.paste()
    assert model.document.lines == ["ababx"]
    assert model.clipboard.text == "ab"


@pytest.mark.parametrize("anchor,cursor", [
    ((0, 0), (1, 3)),
    ((1, 3), (0, 0)),
    ((0, 2), (0, 4)),
    ((1, 1), (3, 2)),
    ((0, 5), (3, 0)),
])
def test_cut_then_paste_restores_document(anchor, cursor):
    lines = ["hello", "world", "", "last line"]
    model = make_model(list(lines))
    model.cursor_position = CursorPosition(*anchor)
    model.enter_visual_mode()
    model.cursor_position = CursorPosition(*cursor)

    model.cut_selection()
    model.paste()

    assert model.document.lines == lines


def test_paste_over_capacity_is_rejected_without_changes():
    model = make_model(["a", "b"], max_lines=4)
    model.clipboard.store("1\n2\n3")
    model.cursor_position = CursorPosition(1, 1)

    with pytest.raises(CapacityError):
        model.paste()

    assert model.document.lines == ["a", "b"]
    assert model.cursor_position == CursorPosition(1, 1)


def test_paste_up_to_capacity():
    model = make_model(["a"], max_lines=4)
    model.clipboard.store("1\n2\n3")

    model.paste()

    assert model.document.lines == ["1", "2", "3a"]
