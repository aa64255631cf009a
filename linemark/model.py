import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .clipboard import Clipboard
from .constants import EditorConstants
from .errors import CapacityError
from .viewport import Viewport

logger = logging.getLogger(__name__)


@dataclass
class CursorPosition:
    row: int = 0
    col: int = 0

    def __lt__(self, other):
        if self.row != other.row:
            return self.row < other.row
        return self.col < other.col

    def __ge__(self, other):
        return not self < other

    def copy(self) -> "CursorPosition":
        return CursorPosition(self.row, self.col)


@dataclass
class Span:
    """Ordered selection boundary; ``start`` never sorts after ``end``."""

    start: CursorPosition
    end: CursorPosition

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def contains_row(self, row: int) -> bool:
        return self.start.row <= row <= self.end.row

    def columns(self, row: int, line_length: int) -> tuple[int, int]:
        """Return the half-open column range covered on ``row``.

        The start row is covered from ``start.col``, the end row up to
        ``end.col``, and any row in between from 0 to ``line_length``.
        A single-row span covers ``[start.col, end.col)``.
        """
        start_col = self.start.col if row == self.start.row else 0
        end_col = self.end.col if row == self.end.row else line_length
        return start_col, end_col


def normalize_span(anchor: CursorPosition, cursor: CursorPosition) -> Span:
    """Order two selection points lexicographically by (row, col)."""
    if cursor < anchor:
        return Span(cursor.copy(), anchor.copy())
    return Span(anchor.copy(), cursor.copy())


class Document:
    """Ordered, capacity-bounded collection of text lines.

    An empty document holds no lines at all; the first edit
    materializes row 0.
    """

    def __init__(self, lines: Optional[list[str]] = None, max_lines: int = EditorConstants.MAX_LINES):
        lines = list(lines) if lines is not None else []
        if len(lines) > max_lines:
            raise CapacityError(
                max_lines, f"Document has {len(lines)} lines; limit is {max_lines}"
            )
        if any("\n" in line for line in lines):
            raise ValueError("Document lines must not contain newlines")
        self._lines = lines
        self.max_lines = max_lines

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def line_count(self) -> int:
        return len(self._lines)

    def line_text(self, row: int) -> str:
        return self._lines[row]

    def line_length(self, row: int) -> int:
        if 0 <= row < len(self._lines):
            return len(self._lines[row])
        return 0

    def _materialize(self, row: int):
        if row == 0 and not self._lines:
            self._lines.append("")

    def insert_char(self, row: int, col: int, ch: str) -> CursorPosition:
        """Insert ``ch`` before column ``col``; returns the position after it."""
        if len(ch) != 1 or ch == "\n":
            raise ValueError(f"insert_char takes a single non-newline character, got {ch!r}")
        if row >= self.max_lines:
            raise CapacityError(self.max_lines)
        self._materialize(row)
        line = self._lines[row]
        col = min(col, len(line))
        self._lines[row] = line[:col] + ch + line[col:]
        return CursorPosition(row, col + 1)

    def delete_char(self, row: int, col: int) -> CursorPosition:
        """Backspace at (row, col); returns the new cursor position."""
        if row >= len(self._lines):
            return CursorPosition(row, col)
        line = self._lines[row]
        col = min(col, len(line))
        if col > 0:
            self._lines[row] = line[:col - 1] + line[col:]
            return CursorPosition(row, col - 1)
        if row == 0:
            return CursorPosition(0, 0)
        prev_length = len(self._lines[row - 1])
        self.join(row - 1)
        return CursorPosition(row - 1, prev_length)

    def split_line(self, row: int, col: int) -> CursorPosition:
        """Break the line at ``col``; the tail becomes row + 1."""
        if len(self._lines) >= self.max_lines - 1:
            raise CapacityError(self.max_lines)
        self._materialize(row)
        line = self._lines[row]
        col = min(col, len(line))
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])
        return CursorPosition(row + 1, 0)

    def join(self, row: int):
        """Append line ``row + 1`` onto ``row`` and remove it."""
        if row + 1 >= len(self._lines):
            return
        self._lines[row] += self._lines.pop(row + 1)

    def insert_text(self, position: CursorPosition, text: str) -> CursorPosition:
        """Replay ``text`` at ``position``, splitting the line at each newline.

        Raises CapacityError before touching the document if the line
        breaks in ``text`` would not fit.
        """
        breaks = text.count("\n")
        if breaks and max(len(self._lines), 1) + breaks >= self.max_lines:
            raise CapacityError(self.max_lines)
        if text and position.row >= self.max_lines:
            raise CapacityError(self.max_lines)
        pos = position.copy()
        for ch in text:
            if ch == "\n":
                pos = self.split_line(pos.row, pos.col)
            else:
                pos = self.insert_char(pos.row, pos.col, ch)
        return pos

    def extract(self, span: Span) -> str:
        """Return the text covered by ``span``, rows joined with newlines."""
        parts = []
        for row in range(span.start.row, span.end.row + 1):
            line = self._lines[row]
            start_col, end_col = span.columns(row, len(line))
            parts.append(line[start_col:end_col])
        return "\n".join(parts)

    def remove(self, span: Span) -> CursorPosition:
        """Delete the text covered by ``span``; returns ``span.start``."""
        start, end = span.start, span.end
        if span.is_empty:
            return start.copy()
        head = self._lines[start.row][:start.col]
        tail = self._lines[end.row][end.col:]
        # Start and end rows merge into one; rows between them are dropped
        self._lines[start.row:end.row + 1] = [head + tail]
        return start.copy()


class Mode(Enum):
    NORMAL = "normal"
    VISUAL = "visual"


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class TextModel:
    """Editor state: document, cursor, viewport, mode, selection and clipboard."""

    document: Document
    cursor_position: CursorPosition
    viewport: Viewport
    clipboard: Clipboard
    mode: Mode
    selection_anchor: Optional[CursorPosition]

    def __init__(self, document: Optional[Document] = None, viewport: Optional[Viewport] = None,
                 clipboard: Optional[Clipboard] = None):
        self.document = document if document is not None else Document()
        self.viewport = viewport if viewport is not None else Viewport()
        self.clipboard = clipboard if clipboard is not None else Clipboard()
        self.cursor_position = CursorPosition()
        self.mode = Mode.NORMAL
        self.selection_anchor = None

    def replace_document(self, document: Document):
        """Swap in a freshly loaded document and reset position state."""
        self.document = document
        self.cursor_position = CursorPosition()
        self.viewport.row_offset = 0
        self.exit_visual_mode()

    def _scroll_to_cursor(self):
        self.viewport.scroll_to(self.cursor_position.row)

    def _clamp_column(self):
        length = self.document.line_length(self.cursor_position.row)
        if self.cursor_position.col > length:
            self.cursor_position.col = length

    def move(self, direction: Direction):
        """Move the cursor one step, clamped to the document and screen."""
        pos = self.cursor_position
        if direction is Direction.LEFT:
            if pos.col > 0:
                pos.col -= 1
        elif direction is Direction.RIGHT:
            if pos.col < self.viewport.visible_cols - 1:
                pos.col += 1
        elif direction is Direction.UP:
            if pos.row > 0:
                pos.row -= 1
        elif direction is Direction.DOWN:
            if pos.row < self.document.line_count() - 1:
                pos.row += 1
        self._scroll_to_cursor()
        self._clamp_column()

    # --- Plain editing (Normal mode) ---

    def insert_char(self, ch: str):
        pos = self.cursor_position
        self.cursor_position = self.document.insert_char(pos.row, pos.col, ch)
        self._scroll_to_cursor()

    def backspace(self):
        pos = self.cursor_position
        self.cursor_position = self.document.delete_char(pos.row, pos.col)
        self._scroll_to_cursor()

    def insert_newline(self):
        pos = self.cursor_position
        self.cursor_position = self.document.split_line(pos.row, pos.col)
        self._scroll_to_cursor()

    def paste(self) -> int:
        """Insert the clipboard at the cursor; returns the pasted length."""
        text = self.clipboard.text
        self.cursor_position = self.document.insert_text(self.cursor_position, text)
        self._scroll_to_cursor()
        return len(text)

    # --- Selection ---

    def enter_visual_mode(self):
        self.mode = Mode.VISUAL
        self.selection_anchor = self.cursor_position.copy()

    def exit_visual_mode(self):
        self.mode = Mode.NORMAL
        self.selection_anchor = None

    def selection_span(self) -> Optional[Span]:
        if self.mode is not Mode.VISUAL or self.selection_anchor is None:
            return None
        return normalize_span(self.selection_anchor, self.cursor_position)

    def get_selected_text(self) -> str:
        span = self.selection_span()
        if span is None:
            return ""
        return self.document.extract(span)

    def copy_selection(self) -> int:
        """Store the selection in the clipboard and leave Visual mode.

        Returns the number of characters copied. An empty selection
        leaves the clipboard as it was.
        """
        span = self.selection_span()
        self.exit_visual_mode()
        if span is None or span.is_empty:
            return 0
        text = self.document.extract(span)
        self.clipboard.store(text)
        return len(text)

    def cut_selection(self) -> int:
        span = self.selection_span()
        copied = self.copy_selection()
        if span is not None and not span.is_empty:
            self._remove_span(span)
        return copied

    def delete_selection(self) -> int:
        """Remove the selection without touching the clipboard."""
        span = self.selection_span()
        self.exit_visual_mode()
        if span is None or span.is_empty:
            return 0
        removed = len(self.document.extract(span))
        self._remove_span(span)
        return removed

    def _remove_span(self, span: Span):
        self.cursor_position = self.document.remove(span)
        self._scroll_to_cursor()
        logger.debug("Removed span %s..%s", span.start, span.end)
