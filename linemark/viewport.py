"""Visible window of rows onto the document."""

from dataclasses import dataclass

from .constants import EditorConstants


@dataclass
class Viewport:
    visible_rows: int = EditorConstants.DEFAULT_ROWS - EditorConstants.STATUS_LINES
    visible_cols: int = EditorConstants.DEFAULT_COLUMNS
    row_offset: int = 0

    def scroll_to(self, row: int):
        """Adjust row_offset just enough that ``row`` is visible.

        This clamps rather than recenters, so a long jump moves the
        offset by the full distance in one adjustment.
        """
        if row < self.row_offset:
            self.row_offset = row
        if row >= self.row_offset + self.visible_rows:
            self.row_offset = row - self.visible_rows + 1

    def resize(self, rows: int, cols: int) -> bool:
        """Update the visible size; returns True if it changed."""
        rows = max(1, rows)
        cols = max(1, cols)
        if (rows, cols) == (self.visible_rows, self.visible_cols):
            return False
        self.visible_rows = rows
        self.visible_cols = cols
        return True

    def document_row(self, screen_row: int) -> int:
        return screen_row + self.row_offset
