"""Test selection normalization and the copy/cut/delete operations."""

import unittest

from linemark.model import TextModel, Document, CursorPosition, Mode, Span, normalize_span


def make_model(lines):
    return TextModel(Document(lines))


def select(model, anchor, cursor):
    """Enter Visual mode at ``anchor`` and put the cursor at ``cursor``."""
    model.cursor_position = CursorPosition(*anchor)
    model.enter_visual_mode()
    model.cursor_position = CursorPosition(*cursor)


def flat_offset(lines, pos):
    """Offset of ``pos`` in the newline-joined document."""
    return sum(len(line) + 1 for line in lines[:pos.row]) + pos.col


class TestNormalizeSpan(unittest.TestCase):

    def test_orders_by_row_then_column(self):
        span = normalize_span(CursorPosition(2, 1), CursorPosition(0, 5))
        self.assertEqual(span.start, CursorPosition(0, 5))
        self.assertEqual(span.end, CursorPosition(2, 1))

    def test_same_row_orders_by_column(self):
        span = normalize_span(CursorPosition(1, 4), CursorPosition(1, 2))
        self.assertEqual(span, Span(CursorPosition(1, 2), CursorPosition(1, 4)))

    def test_symmetric(self):
        a, b = CursorPosition(0, 3), CursorPosition(1, 1)
        self.assertEqual(normalize_span(a, b), normalize_span(b, a))

    def test_empty(self):
        span = normalize_span(CursorPosition(1, 1), CursorPosition(1, 1))
        self.assertTrue(span.is_empty)

    def test_span_does_not_alias_cursor(self):
        cursor = CursorPosition(0, 1)
        span = normalize_span(CursorPosition(0, 0), cursor)
        cursor.col = 5
        self.assertEqual(span.end, CursorPosition(0, 1))

    def test_columns_three_cases(self):
        span = Span(CursorPosition(1, 2), CursorPosition(3, 4))
        self.assertEqual(span.columns(1, 10), (2, 10))
        self.assertEqual(span.columns(2, 7), (0, 7))
        self.assertEqual(span.columns(3, 9), (0, 4))
        single = Span(CursorPosition(0, 1), CursorPosition(0, 3))
        self.assertEqual(single.columns(0, 6), (1, 3))


class TestExtraction(unittest.TestCase):

    def setUp(self):
        self.lines = ["The quick brown fox", "jumps over", "", "the lazy dog"]
        self.doc = Document(self.lines)

    def test_single_row(self):
        span = Span(CursorPosition(0, 4), CursorPosition(0, 9))
        self.assertEqual(self.doc.extract(span), "quick")

    def test_multi_row(self):
        span = Span(CursorPosition(0, 16), CursorPosition(1, 5))
        self.assertEqual(self.doc.extract(span), "fox\njumps")

    def test_interior_rows_are_whole(self):
        span = Span(CursorPosition(0, 16), CursorPosition(3, 3))
        self.assertEqual(self.doc.extract(span), "fox\njumps over\n\nthe")

    def test_ends_at_start_of_row(self):
        span = Span(CursorPosition(0, 16), CursorPosition(1, 0))
        self.assertEqual(self.doc.extract(span), "fox\n")

    def test_length_matches_flat_offsets(self):
        points = [CursorPosition(0, 0), CursorPosition(0, 19), CursorPosition(1, 3),
                  CursorPosition(2, 0), CursorPosition(3, 12)]
        for i, start in enumerate(points):
            for end in points[i:]:
                extracted = self.doc.extract(Span(start, end))
                expected = flat_offset(self.lines, end) - flat_offset(self.lines, start)
                self.assertEqual(len(extracted), expected, (start, end))


class TestCopy(unittest.TestCase):

    def test_copy_scenario(self):
        model = make_model(["hello", "world"])
        select(model, (0, 0), (1, 3))
        self.assertEqual(model.get_selected_text(), "hello\nwor")

        copied = model.copy_selection()

        self.assertEqual(copied, 9)
        self.assertEqual(model.clipboard.text, "hello\nwor")
        self.assertEqual(model.clipboard.length, 9)
        self.assertEqual(model.document.lines, ["hello", "world"])
        self.assertIs(model.mode, Mode.NORMAL)
        self.assertIsNone(model.selection_anchor)

    def test_copy_keeps_cursor(self):
        model = make_model(["hello", "world"])
        select(model, (0, 0), (1, 3))
        model.copy_selection()
        self.assertEqual(model.cursor_position, CursorPosition(1, 3))

    def test_copy_empty_selection(self):
        model = make_model(["abc"])
        model.clipboard.store("previous")
        select(model, (0, 1), (0, 1))

        self.assertEqual(model.copy_selection(), 0)
        self.assertEqual(model.clipboard.text, "previous")
        self.assertIs(model.mode, Mode.NORMAL)

    def test_copy_outside_visual_mode(self):
        model = make_model(["abc"])
        self.assertEqual(model.copy_selection(), 0)
        self.assertEqual(model.clipboard.text, "")


class TestCut(unittest.TestCase):

    def test_cut_scenario(self):
        model = make_model(["hello", "world"])
        select(model, (0, 0), (1, 3))

        cut = model.cut_selection()

        self.assertEqual(cut, 9)
        self.assertEqual(model.document.lines, ["ld"])
        self.assertEqual(model.cursor_position, CursorPosition(0, 0))
        self.assertEqual(model.clipboard.text, "hello\nwor")
        self.assertIs(model.mode, Mode.NORMAL)

    def test_cut_single_row(self):
        model = make_model(["The quick brown fox"])
        select(model, (0, 4), (0, 9))
        model.cut_selection()
        self.assertEqual(model.document.lines, ["The  brown fox"])
        self.assertEqual(model.clipboard.text, "quick")
        self.assertEqual(model.cursor_position, CursorPosition(0, 4))

    def test_cut_drops_interior_rows_and_shifts_rest(self):
        model = make_model(["aaaa", "bbbb", "cccc", "dddd", "eeee"])
        select(model, (3, 2), (0, 1))

        model.cut_selection()

        self.assertEqual(model.document.lines, ["add", "eeee"])
        self.assertEqual(model.document.line_count(), 2)
        self.assertEqual(model.cursor_position, CursorPosition(0, 1))
        self.assertEqual(model.clipboard.text, "aaa\nbbbb\ncccc\ndd")

    def test_cut_empty_selection(self):
        model = make_model(["abc"])
        select(model, (0, 2), (0, 2))
        self.assertEqual(model.cut_selection(), 0)
        self.assertEqual(model.document.lines, ["abc"])
        self.assertEqual(model.clipboard.text, "")


class TestDelete(unittest.TestCase):

    def test_delete_scenario(self):
        model = make_model(["abcdef"])
        select(model, (0, 1), (0, 3))

        deleted = model.delete_selection()

        self.assertEqual(deleted, 2)
        self.assertEqual(model.document.lines, ["adef"])
        self.assertEqual(model.cursor_position, CursorPosition(0, 1))

    def test_delete_does_not_touch_clipboard(self):
        model = make_model(["hello", "world"])
        model.clipboard.store("keep me")
        select(model, (0, 2), (1, 2))

        deleted = model.delete_selection()

        self.assertEqual(deleted, 6)
        self.assertEqual(model.document.lines, ["herld"])
        self.assertEqual(model.clipboard.text, "keep me")

    def test_delete_entire_document(self):
        model = make_model(["one", "two", "three"])
        select(model, (0, 0), (2, 5))
        model.delete_selection()
        self.assertEqual(model.document.lines, [""])
        self.assertEqual(model.cursor_position, CursorPosition(0, 0))

    def test_delete_empty_selection(self):
        model = make_model(["abc", "def"])
        select(model, (1, 0), (1, 0))
        self.assertEqual(model.delete_selection(), 0)
        self.assertEqual(model.document.lines, ["abc", "def"])
        self.assertIs(model.mode, Mode.NORMAL)


class TestSymmetry(unittest.TestCase):

    def test_direction_of_selection_does_not_matter(self):
        lines = ["first line", "second line", "third line"]
        forward = make_model(list(lines))
        backward = make_model(list(lines))
        select(forward, (0, 6), (2, 5))
        select(backward, (2, 5), (0, 6))

        self.assertEqual(forward.get_selected_text(), backward.get_selected_text())

        forward.cut_selection()
        backward.cut_selection()
        self.assertEqual(forward.document.lines, backward.document.lines)
        self.assertEqual(forward.clipboard.text, backward.clipboard.text)
        self.assertEqual(forward.cursor_position, backward.cursor_position)


if __name__ == '__main__':
    unittest.main()
