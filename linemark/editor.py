"""Main editor controller for the line editor."""

import logging
from typing import Optional

from .clipboard import Clipboard
from .commands import CommandRegistry
from .constants import EditorConstants
from .errors import CapacityError, FileStoreError
from .filestore import load_lines, save_lines
from .keyboard import KeyboardHandler, KeyEvent
from .model import Document, TextModel
from .settings import EditorSettings
from .terminal import TerminalInterface
from .view import project_frame
from .viewport import Viewport

logger = logging.getLogger(__name__)


class Editor:
    """Owns the editor state and runs the key/redraw loop."""

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 settings: Optional[EditorSettings] = None):
        """Initialize the editor components."""
        self.settings = settings or EditorSettings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.model = TextModel(
            Document(max_lines=self.settings.max_lines),
            Viewport(),
            Clipboard(mirror_to_system=self.settings.system_clipboard),
        )
        self.command_registry = CommandRegistry()
        self.running = False
        self.filename: Optional[str] = None
        self.modified = False
        self.status_message = EditorConstants.NORMAL_MODE_MESSAGE

    def run(self):
        """Run the main editor loop until quit."""
        self.terminal.setup()
        self.running = True
        try:
            self._draw()
            while self.running:
                key_event = self.keyboard.get_key_event(timeout=EditorConstants.KEY_TIMEOUT)
                if key_event is None:
                    # Idle tick: only repaint if the terminal was resized
                    if self._sync_screen_size():
                        self._draw()
                    continue
                self._handle_key_event(key_event)
                if self.running:
                    self._draw()
        finally:
            self.terminal.cleanup()

    def _sync_screen_size(self) -> bool:
        """Match the viewport to the terminal; returns True if it changed."""
        changed = self.model.viewport.resize(self.terminal.height, self.terminal.width)
        if changed:
            self.model.viewport.scroll_to(self.model.cursor_position.row)
        return changed

    def _draw(self):
        """Draw the current editor state to terminal."""
        self._sync_screen_size()
        frame = project_frame(self.model, self.status_message)
        self.terminal.draw_frame(frame)

    def _handle_key_event(self, key_event: KeyEvent):
        """Dispatch a keyboard event to the command bound in the current mode."""
        logger.debug(f"Key {key_event.key_type.value}:{key_event.value!r} in {self.model.mode.value} mode")
        was_modified = self.command_registry.execute(self, key_event)
        if was_modified:
            self.modified = True

    def load_file(self, filename: str):
        """Load a file into the editor, creating it if it does not exist.

        Raises:
            FileStoreError: the file can neither be read nor created
            CapacityError: the file has more lines than the editor allows
        """
        lines = load_lines(filename)
        self.model.replace_document(Document(lines, max_lines=self.settings.max_lines))
        self.filename = filename
        self.modified = False

    def reload_file(self) -> bool:
        """Re-read the current file, discarding unsaved edits."""
        if not self.filename:
            return False
        try:
            self.load_file(self.filename)
        except (FileStoreError, CapacityError) as e:
            logger.warning(f"Reload of {self.filename} failed: {e}")
            self.status_message = EditorConstants.RELOAD_FAILED_MESSAGE.format(e)
            return False
        self.status_message = EditorConstants.RELOADED_MESSAGE.format(self.filename)
        return True

    def save_file(self, filename: Optional[str] = None) -> bool:
        """Save the document; failures are reported in the status line.

        Returns:
            True if save succeeded, False otherwise
        """
        filename = filename or self.filename
        if not filename:
            return False
        try:
            save_lines(filename, self.model.document.lines)
        except OSError as e:
            logger.warning(f"Save to {filename} failed: {e}")
            self.status_message = EditorConstants.SAVE_FAILED_MESSAGE.format(e.strerror or e)
            return False
        self.filename = filename
        self.modified = False
        self.status_message = EditorConstants.SAVED_MESSAGE.format(filename)
        return True
