"""Incremental repaint of the submission buffer."""

from typing import Tuple, TYPE_CHECKING

from .model import BufferView
from .constants import ReplConstants

if TYPE_CHECKING:
    from .handler import ReplHandler
    from .terminal import TerminalInterface


def rows_for_line(line: str, width: int) -> int:
    """Screen rows taken by a prompted logical line of ``line``."""
    total = ReplConstants.PROMPT_WIDTH + len(line)
    return -(-total // width)


class TerminalReplView(BufferView):
    """Paints the buffer below the point where the submission started.

    Every repaint overwrites each line padded to the full terminal width,
    then blanks whatever the previous paint left beyond the new end. The
    screen is never cleared as a whole.
    """

    def __init__(self, terminal: 'TerminalInterface', handler: 'ReplHandler'):
        self.terminal = terminal
        self.handler = handler
        self.start_row = 0
        self.start_col = 0
        self.end_row = 0
        self.end_col = 0

    def begin(self):
        """Anchor a new submission at the terminal's current cursor."""
        self.start_row, self.start_col = self.terminal.cursor_position
        self.end_row, self.end_col = self.start_row, self.start_col

    @property
    def end_position(self) -> Tuple[int, int]:
        return self.end_row, self.end_col

    def render(self):
        terminal = self.terminal
        terminal.hide_cursor()
        terminal.move(self.start_row, self.start_col)

        for i, line in enumerate(self.model.lines):
            prompt = ReplConstants.PROMPT if i == 0 else ReplConstants.CONTINUATION_PROMPT
            terminal.write(prompt, color='green')
            terminal.reset_style()
            self.handler.paint_line(terminal, line)
            terminal.reset_style()
            # A line that ends exactly on the edge has already wrapped
            if terminal.col != 0:
                terminal.write(' ' * (terminal.width - terminal.col))

        new_end_row, new_end_col = terminal.cursor_position
        self.fill_blanks(new_end_row, new_end_col, self.end_row, self.end_col)
        self.end_row, self.end_col = new_end_row, new_end_col

        terminal.show_cursor()
        terminal.flush()

    def fill_blanks(self, start_row: int, start_col: int, end_row: int, end_col: int):
        """Blank the screen from the new end of content to the old one."""
        terminal = self.terminal
        if start_row > end_row:
            return

        if start_row == end_row:
            delta = end_col - start_col
            if delta <= 0:
                return
            terminal.move(start_row, start_col)
            terminal.write(' ' * delta)
            return

        width = terminal.width
        terminal.move(start_row, start_col)
        terminal.write(' ' * (width - start_col))
        for row in range(start_row + 1, end_row):
            terminal.move(row, 0)
            terminal.write(' ' * width)
        terminal.move(end_row, 0)
        terminal.write(' ' * end_col)

    def visual_line_index(self) -> int:
        """Screen rows taken by the logical lines above the cursor's line."""
        width = self.terminal.width
        lines = self.model.lines
        index = self.model.cursor_position.line_index
        return sum(rows_for_line(lines[i], width) for i in range(index))

    def update_cursor_position(self):
        """Place the cursor, counting the wrapped rows of its own line too."""
        width = self.terminal.width
        offset = ReplConstants.PROMPT_WIDTH + self.model.cursor_position.column
        col = offset % width
        row = self.start_row + self.visual_line_index() + offset // width
        self.terminal.move(row, col)
        self.terminal.flush()
