"""Session loop: edit a submission, hand it to the handler, repeat."""

import logging
from typing import Optional

from .commands import CommandRegistry
from .constants import ReplConstants
from .handler import ReplHandler
from .history import SubmissionHistory
from .keyboard import KeyboardHandler, KeyEvent
from .model import SubmissionBuffer
from .terminal import TerminalInterface
from .view import TerminalReplView

logger = logging.getLogger(__name__)


class Repl:
    """Interactive read-eval-print loop driving a ReplHandler."""

    def __init__(self, handler: ReplHandler,
                 terminal: Optional[TerminalInterface] = None,
                 command_prefix: str = ReplConstants.COMMAND_PREFIX,
                 line_separator: str = ReplConstants.LINE_SEPARATOR):
        """Initialize the session components."""
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.handler = handler
        self.command_prefix = command_prefix
        self.view = TerminalReplView(self.terminal, handler)
        self.model = SubmissionBuffer(self.view, line_separator=line_separator)
        self.history = SubmissionHistory()
        self.command_registry = CommandRegistry()
        self.submission: Optional[str] = None
        self.running = False
        handler.attach(self)

    def run(self):
        """Run submissions until an empty one ends the session."""
        self.terminal.setup()
        self.running = True
        logger.info("Session started")

        try:
            while self.running:
                submission = self.edit_submission()
                if not submission:
                    break
                self.evaluate(submission)
        except KeyboardInterrupt:
            logger.info("Session interrupted")
        finally:
            self.running = False
            self.terminal.cleanup()
            logger.info("Session ended")

    def evaluate(self, submission: str):
        """Dispatch a finished submission, then record it in history."""
        if submission.startswith(self.command_prefix):
            self.handler.evaluate_meta_command(submission[len(self.command_prefix):])
        else:
            self.handler.evaluate_submission(submission)
        self.history.append(submission)

    def edit_submission(self) -> str:
        """Read keys until a submission is finished.

        Returns:
            The submission text, or '' when the session should end.
        """
        self.terminal.sync_position()
        self.model.reset()
        self.view.begin()
        self.submission = None
        self.view.render()
        self.view.update_cursor_position()

        while self.submission is None:
            key_event = self.keyboard.get_key_event(timeout=None)
            if key_event is None:
                # No input source left
                logger.info("Keyboard input exhausted")
                self.submission = ""
                break
            self._handle_key_event(key_event)

        return self.submission

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        self.command_registry.execute(self, key_event)

    def _handle_enter(self):
        """Handle Enter: end the session, finish the submission, or continue it."""
        model = self.model
        line = model.current_line

        if model.cursor_position.line_index == 0 and line == "":
            self.submission = ""
            self.terminal.newline()
            return

        text = model.text
        if line == "" or self.handler.is_complete_submission(text):
            model.move_to_end()
            self.submission = text
            self.terminal.newline()
            self.terminal.flush()
            return

        model.append_line()
