"""Project the editor state into draw instructions for one frame."""

from dataclasses import dataclass, field
from typing import Optional

from .constants import EditorConstants
from .model import Span, TextModel


@dataclass
class Segment:
    """A run of text drawn either plain or highlighted."""
    text: str
    highlighted: bool = False


@dataclass
class RenderedRow:
    segments: list[Segment] = field(default_factory=list)
    placeholder: bool = False

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)


@dataclass
class Frame:
    rows: list[RenderedRow]
    status: str
    cursor_y: int
    cursor_x: int


def selection_range(span: Optional[Span], row: int, line_length: int) -> Optional[tuple[int, int]]:
    """Columns of ``row`` to highlight, or None if nothing is selected there."""
    if span is None or span.is_empty or not span.contains_row(row):
        return None
    start_col, end_col = span.columns(row, line_length)
    if start_col >= end_col:
        return None
    return start_col, end_col


def render_row(line: str, selection: Optional[tuple[int, int]], num_columns: int) -> RenderedRow:
    """Split a document line into plain/highlighted segments, clipped to the screen."""
    text = line[:num_columns]
    if selection is None:
        return RenderedRow([Segment(text)] if text else [])

    start_col = min(selection[0], len(text))
    end_col = min(selection[1], len(text))
    segments = []
    if start_col > 0:
        segments.append(Segment(text[:start_col]))
    if end_col > start_col:
        segments.append(Segment(text[start_col:end_col], highlighted=True))
    if end_col < len(text):
        segments.append(Segment(text[end_col:]))
    return RenderedRow(segments)


def get_selection_ranges(model: TextModel) -> list[Optional[tuple[int, int]]]:
    """Highlighted column range for every visible row (None where unselected)."""
    span = model.selection_span()
    document = model.document
    ranges = []
    for screen_row in range(model.viewport.visible_rows):
        row = model.viewport.document_row(screen_row)
        if row >= document.line_count():
            ranges.append(None)
        else:
            ranges.append(selection_range(span, row, document.line_length(row)))
    return ranges


def project_frame(model: TextModel, status: str = "") -> Frame:
    """Build the full frame: every visible row, the status line and the cursor.

    Rows past the end of the document show the placeholder glyph. The
    frame is derived entirely from ``model``; nothing is cached between
    calls.
    """
    viewport = model.viewport
    document = model.document
    ranges = get_selection_ranges(model)

    rows = []
    for screen_row in range(viewport.visible_rows):
        row = viewport.document_row(screen_row)
        if row >= document.line_count():
            rows.append(RenderedRow([Segment(EditorConstants.PLACEHOLDER_GLYPH)], placeholder=True))
            continue
        rows.append(render_row(document.line_text(row), ranges[screen_row], viewport.visible_cols))

    cursor = model.cursor_position
    cursor_y = cursor.row - viewport.row_offset
    cursor_x = min(cursor.col, viewport.visible_cols - 1)
    return Frame(rows=rows, status=status, cursor_y=cursor_y, cursor_x=cursor_x)
