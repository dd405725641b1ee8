"""Command pattern implementation for key bindings."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType

if TYPE_CHECKING:
    from .repl import Repl
    from .keyboard import KeyEvent

logger = logging.getLogger(__name__)


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Repl', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Session whose buffer the command acts on
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the buffer
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Repl', key_event: 'KeyEvent') -> bool:
        """Movement commands don't modify the buffer."""
        self._move(editor, key_event)
        return False

    @abstractmethod
    def _move(self, editor: 'Repl', key_event: 'KeyEvent'):
        """Perform the movement."""
        pass


class LeftCharCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.model.left_char()


class RightCharCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.model.right_char()


class UpLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.model.up_line()


class DownLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.model.down_line()


class LeftWordCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.model.left_word()


class RightWordCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.model.right_word()


class BeginningOfLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.model.move_beginning_of_line()


class EndOfLineCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.model.move_end_of_line()


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Repl', key_event: 'KeyEvent') -> bool:
        """Editing commands modify the buffer."""
        self._edit(editor, key_event)
        return True

    @abstractmethod
    def _edit(self, editor: 'Repl', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.delete_left()


class DeleteCharCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.delete_right()


class KillWordCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.delete_left_word()


class ForwardKillWordCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.delete_right_word()


class InsertNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.insert_newline()


class TabCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.insert_tab()


class ClearLineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.clear_line()


class InsertTextCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.model.type_char(key_event.char)


class EnterCommand(EditorCommand):
    """Finish the submission or open a continuation line."""

    def execute(self, editor: 'Repl', key_event: 'KeyEvent') -> bool:
        editor._handle_enter()
        return True


class HistoryCommand(EditorCommand):
    """Base class for history recall commands."""

    def execute(self, editor: 'Repl', key_event: 'KeyEvent') -> bool:
        entry = self._recall(editor)
        if entry is None:
            return False
        editor.model.load_text(entry)
        return True

    @abstractmethod
    def _recall(self, editor: 'Repl') -> Optional[str]:
        """Step the history cursor and return the selected entry."""
        pass


class PreviousHistoryCommand(HistoryCommand):
    def _recall(self, editor):
        return editor.history.previous()


class NextHistoryCommand(HistoryCommand):
    def _recall(self, editor):
        return editor.history.next()


class CommandRegistry:
    """Registry for mapping key combinations to commands.

    Named keys pressed with Ctrl are registered under ``KeyType.CTRL`` with
    the key's name, so ``(KeyType.CTRL, 'left')`` is Ctrl-Left.
    """

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'home'), BeginningOfLineCommand())
        self.register((KeyType.SPECIAL, 'end'), EndOfLineCommand())
        self.register((KeyType.SPECIAL, 'left'), LeftCharCommand())
        self.register((KeyType.SPECIAL, 'right'), RightCharCommand())
        self.register((KeyType.SPECIAL, 'up'), UpLineCommand())
        self.register((KeyType.SPECIAL, 'down'), DownLineCommand())
        self.register((KeyType.CTRL, 'left'), LeftWordCommand())
        self.register((KeyType.CTRL, 'right'), RightWordCommand())

        # Editing commands
        self.register((KeyType.SPECIAL, 'enter'), EnterCommand())
        self.register((KeyType.SPECIAL, 'escape'), ClearLineCommand())
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'delete'), DeleteCharCommand())
        self.register((KeyType.SPECIAL, 'tab'), TabCommand())
        self.register((KeyType.CTRL, 'enter'), InsertNewlineCommand())
        self.register((KeyType.CTRL, 'backspace'), KillWordCommand())
        self.register((KeyType.CTRL, 'delete'), ForwardKillWordCommand())

        # History
        self.register((KeyType.SPECIAL, 'page_up'), PreviousHistoryCommand())
        self.register((KeyType.SPECIAL, 'page_down'), NextHistoryCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Repl', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the buffer was modified
        """
        if key_event.key_type == KeyType.SPECIAL:
            key_type = KeyType.CTRL if key_event.is_ctrl else KeyType.SPECIAL
            command = self.get_command(key_type, key_event.value)
        else:
            command = self.get_command(key_event.key_type, key_event.value)

        if command:
            return command.execute(editor, key_event)

        # Anything else is typed if it carries a printable character
        char = key_event.char
        if char and ord(char) >= 32:
            return InsertTextCommand().execute(editor, key_event)

        logger.debug(f"Ignoring unmapped key {key_event.raw!r}")
        return False
