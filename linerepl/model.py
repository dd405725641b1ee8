from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .constants import ReplConstants
from .words import find_word_start, find_word_end


@dataclass
class CursorPosition:
    line_index: int = 0
    column: int = 0


class BufferView(ABC):
    _model: "Optional[SubmissionBuffer]" = None

    @property
    def model(self):
        assert self._model
        return self._model

    @abstractmethod
    def render(self):
        """Repaint every logical line of the model.

        Whatever the previous paint left on screen beyond the new content
        must be blanked.
        """

    @abstractmethod
    def update_cursor_position(self):
        """Place the terminal cursor at the model's cursor position."""


class SubmissionBuffer:
    """The multi-line text of the submission being edited.

    Mutating operations repaint through the view and then reposition the
    cursor; pure motions only reposition the cursor.
    """

    lines: list[str]
    cursor_position: CursorPosition
    view: BufferView

    def __init__(self, view: BufferView, lines=None,
                 line_separator: str = ReplConstants.LINE_SEPARATOR,
                 tab_width: int = ReplConstants.TAB_WIDTH):
        self.view = view
        self.view._model = self
        self.lines = list(lines) if lines else [""]
        self.cursor_position = CursorPosition()
        self.line_separator = line_separator
        self.tab_width = tab_width

    # --- Accessors ---
    @property
    def current_line(self) -> str:
        return self.lines[self.cursor_position.line_index]

    @current_line.setter
    def current_line(self, value: str):
        self.lines[self.cursor_position.line_index] = value

    @property
    def text(self) -> str:
        """The logical lines joined into one submission."""
        return self.line_separator.join(self.lines)

    def _changed(self):
        self.view.render()
        self.view.update_cursor_position()

    def _moved(self):
        self.view.update_cursor_position()

    def reset(self):
        """Start a fresh, single empty line."""
        self.lines = [""]
        self.cursor_position = CursorPosition()

    def load_text(self, text: str):
        """Replace all lines with ``text``, cursor at the end of the last line."""
        self.lines = text.split(self.line_separator)
        self.move_to_end(update=False)
        self._changed()

    def move_to_end(self, update: bool = True):
        """Move the cursor past the last character of the last line."""
        self.cursor_position.line_index = len(self.lines) - 1
        self.cursor_position.column = len(self.lines[-1])
        if update:
            self._moved()

    # --- Editing ---
    def type_char(self, ch: str):
        """Insert a printable character at the cursor."""
        if not ch or ord(ch[0]) < 32:
            return
        col = self.cursor_position.column
        line = self.current_line
        self.current_line = line[:col] + ch + line[col:]
        self.cursor_position.column += len(ch)
        self._changed()

    def insert_newline(self):
        """Split the current line at the cursor."""
        col = self.cursor_position.column
        line = self.current_line
        self.current_line = line[:col]
        self.lines.insert(self.cursor_position.line_index + 1, line[col:])
        self.cursor_position.line_index += 1
        self.cursor_position.column = 0
        self._changed()

    def append_line(self):
        """Open an empty line after the current one and move onto it."""
        self.lines.insert(self.cursor_position.line_index + 1, "")
        self.cursor_position.line_index += 1
        self.cursor_position.column = 0
        self._changed()

    def insert_tab(self):
        """Insert spaces up to the next tabstop."""
        col = self.cursor_position.column
        count = self.tab_width - col % self.tab_width
        line = self.current_line
        self.current_line = line[:col] + " " * count + line[col:]
        self.cursor_position.column += count
        self._changed()

    def delete_left(self):
        """Backspace; at column 0 the line joins the one above it."""
        col = self.cursor_position.column
        idx = self.cursor_position.line_index
        if col == 0:
            if idx == 0:
                return
            previous = self.lines[idx - 1]
            self.lines[idx - 1] = previous + self.lines[idx]
            del self.lines[idx]
            self.cursor_position.line_index = idx - 1
            self.cursor_position.column = len(previous)
            self._changed()
            return
        line = self.current_line
        self.current_line = line[:col - 1] + line[col:]
        self.cursor_position.column -= 1
        self._changed()

    def delete_right(self):
        """Delete the character under the cursor. Never joins lines."""
        col = self.cursor_position.column
        line = self.current_line
        if col == len(line):
            return
        self.current_line = line[:col] + line[col + 1:]
        self._changed()

    def delete_left_word(self):
        col = self.cursor_position.column
        if col == 0:
            return
        line = self.current_line
        start = find_word_start(line, col)
        self.current_line = line[:start] + line[col:]
        self.cursor_position.column = start
        self._changed()

    def delete_right_word(self):
        col = self.cursor_position.column
        line = self.current_line
        if col == len(line):
            return
        end = find_word_end(line, col)
        self.current_line = line[:col] + line[end:]
        self._changed()

    def clear_line(self):
        """Empty the current line only; other lines are kept."""
        self.current_line = ""
        self.cursor_position.column = 0
        self._changed()

    # --- Motion ---
    def move_beginning_of_line(self):
        self.cursor_position.column = 0
        self._moved()

    def move_end_of_line(self):
        self.cursor_position.column = len(self.current_line)
        self._moved()

    def left_char(self):
        if self.cursor_position.column == 0:
            return
        self.cursor_position.column -= 1
        self._moved()

    def right_char(self):
        if self.cursor_position.column == len(self.current_line):
            return
        self.cursor_position.column += 1
        self._moved()

    def left_word(self):
        if self.cursor_position.column == 0:
            return
        self.cursor_position.column = find_word_start(
            self.current_line, self.cursor_position.column)
        self._moved()

    def right_word(self):
        self.cursor_position.column = find_word_end(
            self.current_line, self.cursor_position.column)
        self._moved()

    def up_line(self):
        if self.cursor_position.line_index == 0:
            return
        self.cursor_position.line_index -= 1
        self.cursor_position.column = min(len(self.current_line),
                                          self.cursor_position.column)
        self._moved()

    def down_line(self):
        if self.cursor_position.line_index == len(self.lines) - 1:
            return
        self.cursor_position.line_index += 1
        self.cursor_position.column = min(len(self.current_line),
                                          self.cursor_position.column)
        self._moved()
