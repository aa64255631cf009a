"""Command pattern implementation for editor actions.

Each key is bound per mode. In Normal mode unbound printable keys are
typed into the document; in Visual mode unbound keys do nothing.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING

from .constants import EditorConstants
from .errors import CapacityError
from .keyboard import KeyType
from .model import Direction, Mode

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent

logger = logging.getLogger(__name__)


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """
        pass


class MoveCommand(EditorCommand):
    """Step the cursor; in Visual mode this moves the selection's free end."""

    def __init__(self, direction: Direction):
        self.direction = direction

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        editor.model.move(self.direction)
        return False


class EditCommand(EditorCommand):
    """Base class for editing commands.

    An edit that would exceed the line capacity leaves the document
    unchanged and reports the limit in the status line.
    """

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        try:
            self._edit(editor, key_event)
        except CapacityError as e:
            logger.info(f"Edit rejected: {e}")
            editor.status_message = str(e)
            return False
        return True

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class InsertTextCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.insert_char(key_event.value)


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.backspace()


class InsertNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.insert_newline()


class PasteCommand(EditCommand):
    def _edit(self, editor, key_event):
        pasted = editor.model.paste()
        editor.status_message = EditorConstants.PASTED_MESSAGE.format(pasted)


class EnterVisualCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.model.enter_visual_mode()
        editor.status_message = EditorConstants.VISUAL_MODE_MESSAGE
        return False


class EscapeCommand(EditorCommand):
    """Drop any selection and return to Normal mode."""

    def execute(self, editor, key_event):
        editor.model.exit_visual_mode()
        editor.status_message = EditorConstants.NORMAL_MODE_MESSAGE
        return False


class CopyCommand(EditorCommand):
    def execute(self, editor, key_event):
        copied = editor.model.copy_selection()
        editor.status_message = EditorConstants.COPIED_MESSAGE.format(copied)
        return False


class CutCommand(EditorCommand):
    def execute(self, editor, key_event):
        cut = editor.model.cut_selection()
        editor.status_message = EditorConstants.CUT_MESSAGE.format(cut)
        return cut > 0


class DeleteSelectionCommand(EditorCommand):
    def execute(self, editor, key_event):
        deleted = editor.model.delete_selection()
        editor.status_message = EditorConstants.DELETED_MESSAGE.format(deleted)
        return deleted > 0


class SystemCommand(EditorCommand):
    """Base class for system commands like save and quit."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """System commands don't modify document content directly."""
        self._execute_system(editor, key_event)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the system action."""
        pass


class QuitCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        if editor.modified:
            logger.warning(f"Quitting with unsaved changes to {editor.filename}")
        editor.running = False


class SaveCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.save_file()


class ReloadCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.reload_file()


MOVEMENT_KEYS = {
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
}


class CommandRegistry:
    """Registry mapping (mode, key) to commands."""

    def __init__(self):
        self._commands: Dict[Mode, Dict[Tuple[KeyType, str], EditorCommand]] = {
            mode: {} for mode in Mode
        }
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Arrows navigate in Normal mode and extend the selection in Visual mode
        for name, direction in MOVEMENT_KEYS.items():
            self.register_all((KeyType.SPECIAL, name), MoveCommand(direction))

        self.register_all((KeyType.SPECIAL, 'escape'), EscapeCommand())
        self.register_all((KeyType.CTRL, 'q'), QuitCommand())

        # Normal mode
        self.register(Mode.NORMAL, (KeyType.REGULAR, 'v'), EnterVisualCommand())
        self.register(Mode.NORMAL, (KeyType.CTRL, 'v'), EnterVisualCommand())
        self.register(Mode.NORMAL, (KeyType.REGULAR, 'p'), PasteCommand())
        self.register(Mode.NORMAL, (KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register(Mode.NORMAL, (KeyType.SPECIAL, 'enter'), InsertNewlineCommand())
        self.register(Mode.NORMAL, (KeyType.CTRL, 's'), SaveCommand())
        self.register(Mode.NORMAL, (KeyType.CTRL, 'o'), ReloadCommand())

        # Visual mode commits
        self.register(Mode.VISUAL, (KeyType.REGULAR, 'y'), CopyCommand())
        self.register(Mode.VISUAL, (KeyType.REGULAR, 'c'), CutCommand())
        self.register(Mode.VISUAL, (KeyType.REGULAR, 'd'), DeleteSelectionCommand())

    def register(self, mode: Mode, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination in one mode."""
        self._commands[mode][key] = command

    def register_all(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination in every mode."""
        for mode in Mode:
            self.register(mode, key, command)

    def get_command(self, mode: Mode, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination in ``mode``."""
        return self._commands[mode].get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the document was modified
        """
        mode = editor.model.mode
        command = self.get_command(mode, key_event.key_type, key_event.value)
        if command:
            return command.execute(editor, key_event)

        # Printable characters are typed only in Normal mode
        if mode is Mode.NORMAL and key_event.key_type == KeyType.REGULAR and _is_printable(key_event.value):
            return InsertTextCommand().execute(editor, key_event)

        return False


def _is_printable(value: str) -> bool:
    return len(value) == 1 and 32 <= ord(value) <= 126
