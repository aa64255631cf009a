"""Clipboard holding the most recently copied or cut text."""

import logging

logger = logging.getLogger(__name__)


class Clipboard:
    """Single owned text blob; newlines inside it are line breaks.

    Optionally mirrors every stored blob to the system clipboard via
    pyperclip. Paste always reads the internal copy.
    """

    def __init__(self, mirror_to_system: bool = False):
        self._text = ""
        self.mirror_to_system = mirror_to_system

    @property
    def text(self) -> str:
        return self._text

    @property
    def length(self) -> int:
        return len(self._text)

    def __len__(self) -> int:
        return len(self._text)

    def is_empty(self) -> bool:
        return not self._text

    def store(self, text: str) -> None:
        """Replace the clipboard content with ``text``."""
        self._text = text
        if self.mirror_to_system:
            self._copy_to_system(text)

    @staticmethod
    def _copy_to_system(text: str) -> None:
        import pyperclip
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            # No clipboard mechanism on this system; the internal copy still holds
            logger.warning(f"Could not copy to system clipboard: {e}")
