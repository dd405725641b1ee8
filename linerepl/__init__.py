"""linerepl - A line-editing engine for terminal read-eval-print loops."""

from .handler import ReplHandler, MetaCommand
from .history import SubmissionHistory
from .model import SubmissionBuffer, CursorPosition
from .repl import Repl
from .terminal import TerminalInterface
from .view import TerminalReplView
from .words import find_word_start, find_word_end

__all__ = [
    'ReplHandler',
    'MetaCommand',
    'SubmissionHistory',
    'SubmissionBuffer',
    'CursorPosition',
    'Repl',
    'TerminalInterface',
    'TerminalReplView',
    'find_word_start',
    'find_word_end',
]
