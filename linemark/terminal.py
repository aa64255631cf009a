"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import sys
import termios
from typing import Optional

import blessed
from curtsies import Input, events

from .constants import EditorConstants
from .view import Frame

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._input: Optional[Input] = None
        self._pending_keys: list[str] = []
        self._saved_termios = None

    def setup(self):
        """Enter fullscreen mode, start raw key input and free the control keys."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        self._input = Input(keynames='curtsies')
        self._input.__enter__()
        self._release_control_keys()

    def _release_control_keys(self):
        """Let Ctrl-S, Ctrl-Q, Ctrl-V and Ctrl-O reach the editor.

        Flow control (IXON/IXOFF) and the extended input processing
        that owns VLNEXT/VDISCARD are switched off for the session.
        """
        try:
            self._saved_termios = termios.tcgetattr(sys.stdin)
            new_settings = list(self._saved_termios)
            new_settings[0] &= ~(termios.IXON | termios.IXOFF)
            new_settings[3] &= ~termios.IEXTEN
            termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
        except (termios.error, OSError) as e:
            # Not a tty; the keys keep their default terminal meaning
            logger.info(f"Could not adjust terminal flags: {e}")
            self._saved_termios = None

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._saved_termios is not None:
            try:
                termios.tcsetattr(sys.stdin, termios.TCSANOW, self._saved_termios)
            except (termios.error, OSError) as e:
                logger.warning(f"Could not restore terminal flags: {e}")
            self._saved_termios = None
        if self._input is not None:
            self._input.__exit__(None, None, None)
            self._input = None
        if self.is_fullscreen:
            print(self.term.normal + self.term.exit_fullscreen, end='', flush=True)
            self.is_fullscreen = False

    def get_key(self, timeout: Optional[float] = EditorConstants.KEY_TIMEOUT) -> Optional[str]:
        """Get a single keypress, waiting at most ``timeout`` seconds.

        Returns the curtsies key name, or None if no key arrived in time.
        A pasted burst of keys is handed out one key per call.
        """
        if self._pending_keys:
            return self._pending_keys.pop(0)
        if self._input is None:
            return None
        evt = self._input.send(timeout)
        if evt is None:
            return None
        if isinstance(evt, events.PasteEvent):
            self._pending_keys.extend(str(e) for e in evt.events)
            return self._pending_keys.pop(0) if self._pending_keys else None
        return str(evt)

    # --- Draw commands ---

    def clear_screen(self):
        """Clear the entire screen."""
        print(self.term.home + self.term.clear, end='')

    def move_cursor(self, y: int, x: int):
        print(self.term.move(y, x), end='')

    def write_plain(self, text: str):
        print(text, end='')

    def write_highlighted(self, text: str):
        print(self.term.reverse + text + self.term.normal, end='')

    def draw_status(self, message: str):
        """Draw the status bar in reverse video across the bottom row."""
        width = self.width
        text = message[:width].ljust(width)
        print(self.term.move(self.height, 0) + self.term.reverse + text + self.term.normal, end='')

    def draw_frame(self, frame: Frame):
        """Redraw every row of ``frame``, the status bar and the cursor."""
        self.clear_screen()
        for y, row in enumerate(frame.rows):
            self.move_cursor(y, 0)
            for segment in row.segments:
                if segment.highlighted:
                    self.write_highlighted(segment.text)
                else:
                    self.write_plain(segment.text)
        self.draw_status(frame.status)
        print(self.term.move(frame.cursor_y, frame.cursor_x) + self.term.normal_cursor, end='', flush=True)

    @property
    def width(self) -> int:
        """Terminal width in columns."""
        return self.term.width or EditorConstants.DEFAULT_COLUMNS

    @property
    def height(self) -> int:
        """Terminal height in rows (excluding status line)."""
        height = self.term.height or EditorConstants.DEFAULT_ROWS
        return height - EditorConstants.STATUS_LINES
