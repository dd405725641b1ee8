"""Test the submission loop end to end with scripted keys."""

import os
import pytest
from curtsies.events import PasteEvent
from linerepl.handler import ReplHandler
from linerepl.repl import Repl
from linerepl.model import CursorPosition
from conftest import ScreenTerminal

ENTER = '<Ctrl-j>'


class RecordingHandler(ReplHandler):
    """Records everything the session hands over."""

    def __init__(self, incomplete_suffix=None, fail=False):
        super().__init__()
        self.incomplete_suffix = incomplete_suffix
        self.fail = fail
        self.submissions = []
        self.meta_commands = []
        self.checked = []

    def evaluate_submission(self, text):
        self.submissions.append(text)
        if self.fail:
            print("error: bad input")

    def evaluate_meta_command(self, command):
        self.meta_commands.append(command)

    def is_complete_submission(self, text):
        self.checked.append(text)
        if self.incomplete_suffix is None:
            return True
        return not text.endswith(self.incomplete_suffix)


def keys_for(text):
    return list(text)


def create_repl(keys, handler=None, width=40):
    terminal = ScreenTerminal(width=width, keys=keys)
    handler = handler or RecordingHandler()
    return Repl(handler, terminal=terminal), handler, terminal


def test_single_line_submission_is_evaluated_and_recorded():
    repl, handler, terminal = create_repl(keys_for("1 + 2") + [ENTER, ENTER])
    repl.run()
    assert handler.submissions == ["1 + 2"]
    assert repl.history.entries == ["1 + 2"]
    assert terminal.setup_called and terminal.cleanup_called


def test_empty_first_line_ends_session():
    repl, handler, terminal = create_repl([ENTER, 'x', ENTER])
    repl.run()
    assert handler.submissions == []
    assert handler.checked == []
    assert len(repl.history) == 0
    # Remaining keys were never read
    assert terminal.keys == ['x', ENTER]


def test_sentinel_regardless_of_history():
    repl, handler, terminal = create_repl(keys_for("a") + [ENTER, '<PAGEUP>', '<ESC>', ENTER])
    repl.run()
    assert handler.submissions == ["a"]
    assert repl.history.entries == ["a"]


def test_incomplete_submission_continues_on_new_line():
    handler = RecordingHandler(incomplete_suffix="{")
    repl, _, terminal = create_repl(['{', ENTER], handler)
    assert repl.edit_submission() == ""  # keys run out
    assert repl.model.lines == ["{", ""]
    assert repl.model.cursor_position == CursorPosition(1, 0)
    assert terminal.screen_text() == ["» {", "·"]


def test_multi_line_scenario():
    handler = RecordingHandler(incomplete_suffix="{")
    repl, _, terminal = create_repl(['{', ENTER, '}', ENTER, ENTER], handler)
    repl.run()
    text = "{" + os.linesep + "}"
    assert handler.submissions == [text]
    assert repl.history.entries == [text]


def test_empty_continuation_line_finishes_submission():
    handler = RecordingHandler(incomplete_suffix="{")
    repl, _, _ = create_repl(['{', ENTER, ENTER, ENTER], handler)
    repl.run()
    assert handler.submissions == ["{" + os.linesep]


def test_completion_predicate_not_consulted_for_empty_line():
    handler = RecordingHandler(incomplete_suffix="{")
    repl, _, _ = create_repl(['{', ENTER, ENTER, ENTER], handler)
    repl.run()
    assert handler.checked == ["{"]


def test_finished_submission_moves_cursor_below_text():
    repl, handler, terminal = create_repl(['a', '<Esc+Ctrl-j>', 'b', '<UP>', ENTER])
    assert repl.edit_submission() == "a" + os.linesep + "b"
    assert repl.model.cursor_position == CursorPosition(1, 1)
    assert terminal.cursor_position == (2, 0)


def test_meta_command_dispatch_strips_prefix():
    repl, handler, terminal = create_repl(keys_for("#help") + [ENTER, ENTER])
    repl.run()
    assert handler.meta_commands == ["help"]
    assert handler.submissions == []
    assert repl.history.entries == ["#help"]


def test_custom_command_prefix():
    terminal = ScreenTerminal(keys=keys_for(":q") + [ENTER, ENTER])
    handler = RecordingHandler()
    repl = Repl(handler, terminal=terminal, command_prefix=":")
    repl.run()
    assert handler.meta_commands == ["q"]


def test_failed_evaluation_still_recorded(capsys):
    handler = RecordingHandler(fail=True)
    repl, _, _ = create_repl(keys_for("oops") + [ENTER, ENTER], handler)
    repl.run()
    assert "error: bad input" in capsys.readouterr().out
    assert repl.history.entries == ["oops"]


def test_history_recall_resubmits():
    keys = keys_for("x") + [ENTER, '<PAGEUP>', ENTER, ENTER]
    repl, handler, _ = create_repl(keys)
    repl.run()
    assert handler.submissions == ["x", "x"]
    assert repl.history.entries == ["x", "x"]


def test_history_recall_multi_line_entry():
    handler = RecordingHandler(incomplete_suffix="{")
    keys = ['{', ENTER, '}', ENTER, '<PAGEUP>']
    repl, _, terminal = create_repl(keys, handler)
    repl.run()
    assert repl.model.lines == ["{", "}"]
    assert repl.model.cursor_position == CursorPosition(1, 1)


def test_browse_index_resets_after_submission():
    keys = keys_for("a") + [ENTER] + keys_for("b") + [ENTER, '<PAGEUP>', '<PAGEUP>', ENTER]
    repl, handler, _ = create_repl(keys)
    repl.run()
    assert handler.submissions == ["a", "b", "a"]
    assert repl.history.index == 3


def test_keyboard_interrupt_ends_session():
    repl, handler, terminal = create_repl([])

    def interrupt(timeout=None):
        raise KeyboardInterrupt

    terminal.get_key = interrupt
    repl.run()
    assert terminal.cleanup_called
    assert repl.running is False


def test_unknown_command_message(capsys):
    class Minimal(ReplHandler):
        def evaluate_submission(self, text):
            pass

    repl, _, _ = create_repl(keys_for("#nope") + [ENTER, ENTER], Minimal())
    repl.run()
    assert "Unknown command: #nope" in capsys.readouterr().out


def test_default_handler_paints_unstyled():
    class Minimal(ReplHandler):
        def evaluate_submission(self, text):
            pass

    handler = Minimal()
    assert handler.is_complete_submission("{") is True
    terminal = ScreenTerminal()
    handler.paint_line(terminal, "abc")
    assert terminal.row_text(0) == "abc"


def pasted(text):
    paste = PasteEvent()
    paste.events.extend(text)
    return paste


def test_pasted_text_is_typed_into_buffer():
    repl, handler, terminal = create_repl([pasted("print 12345678"), ENTER, ENTER])
    repl.run()
    assert handler.submissions == ["print 12345678"]
    assert "» print 12345678" in terminal.screen_text()


def test_paste_mixes_with_typed_keys():
    repl, handler, _ = create_repl(keys_for("x = ") + [pasted("[1, 2]"), '<LEFT>', '3', ENTER, ENTER])
    repl.run()
    assert handler.submissions == ["x = [1, 23]"]
