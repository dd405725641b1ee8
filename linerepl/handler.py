"""Collaborator interface plugged into the session loop."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, TYPE_CHECKING

from .constants import ReplConstants

if TYPE_CHECKING:
    from .repl import Repl
    from .terminal import TerminalInterface


@dataclass
class MetaCommand:
    """A named meta-command with its help line."""
    name: str
    handler: Callable[[], None]
    help: str


class ReplHandler(ABC):
    """Language-specific side of a REPL.

    Only ``evaluate_submission`` is required. The other hooks default to a
    single-line REPL with unstyled input and no meta-commands.
    """

    def __init__(self):
        self.repl: "Optional[Repl]" = None
        self._commands: List[MetaCommand] = []

    def attach(self, repl: 'Repl'):
        """Called by the session loop that will drive this handler."""
        self.repl = repl

    @property
    def commands(self) -> List[MetaCommand]:
        return list(self._commands)

    def register_command(self, name: str, handler: Callable[[], None], help: str):
        """Add a meta-command reachable as ``<prefix><name>``."""
        self._commands.append(MetaCommand(name, handler, help))

    def find_command(self, name: str) -> Optional[MetaCommand]:
        for command in self._commands:
            if command.name == name:
                return command
        return None

    @abstractmethod
    def evaluate_submission(self, text: str) -> None:
        """Evaluate one finished submission and print its outcome."""

    def evaluate_meta_command(self, command: str) -> None:
        """Run a meta-command given without its prefix character."""
        meta = self.find_command(command)
        if meta is not None:
            meta.handler()
            return
        print(ReplConstants.UNKNOWN_COMMAND_MESSAGE.format(self.command_prefix, command))

    def is_complete_submission(self, text: str) -> bool:
        """Whether Enter should finish ``text`` rather than open a new line."""
        return True

    def paint_line(self, terminal: 'TerminalInterface', text: str) -> None:
        """Write one logical line of input, optionally styled."""
        terminal.write(text)

    @property
    def command_prefix(self) -> str:
        if self.repl is not None:
            return self.repl.command_prefix
        return ReplConstants.COMMAND_PREFIX

    def format_help(self) -> List[str]:
        """Help lines for every registered meta-command."""
        if not self._commands:
            return []
        width = max(len(c.name) for c in self._commands) + 4
        lines = ["Available commands:", ""]
        for command in self._commands:
            name = f"{self.command_prefix}{command.name}"
            lines.append(f"    {name.ljust(width + len(self.command_prefix))}{command.help}")
        lines.append("")
        return lines
