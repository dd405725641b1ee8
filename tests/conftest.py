"""Shared fakes for the line editor tests."""


class PlainTerm:
    """Stands in for blessed.Terminal where handlers ask for colors."""

    def __getattr__(self, name):
        return lambda text: text


class ScreenTerminal:
    """In-memory terminal with a character grid.

    Follows the same cursor accounting as TerminalInterface: writing onto
    the last column wraps to column 0 of the next row.
    """

    def __init__(self, width=20, height=100, keys=(), start=(0, 0)):
        self.width = width
        self.height = height
        self.row, self.col = start
        self.grid = {}
        self.keys = list(keys)
        self.ops = []
        self.term = PlainTerm()
        self.setup_called = False
        self.cleanup_called = False

    @property
    def cursor_position(self):
        return self.row, self.col

    def setup(self):
        self.setup_called = True

    def cleanup(self):
        self.cleanup_called = True

    def sync_position(self):
        if self.col != 0:
            self.newline()
        return self.cursor_position

    def clear_screen(self):
        self.grid.clear()
        self.row = self.col = 0

    def move(self, row, col):
        self.ops.append(('move', row, col))
        self.row, self.col = row, col

    def write(self, text, color=None):
        if not text:
            return
        self.ops.append(('write', text))
        for ch in text:
            line = self.grid.setdefault(self.row, [' '] * self.width)
            line[self.col] = ch
            self.col += 1
            if self.col == self.width:
                self.row += 1
                self.col = 0

    def newline(self):
        self.ops.append(('newline',))
        self.row += 1
        self.col = 0

    def reset_style(self):
        pass

    def hide_cursor(self):
        pass

    def show_cursor(self):
        pass

    def flush(self):
        pass

    def get_key(self, timeout=None):
        if self.keys:
            return self.keys.pop(0)
        return None

    def row_text(self, row):
        return ''.join(self.grid.get(row, [])).rstrip()

    def screen_text(self):
        """Non-blank rows, trailing spaces stripped."""
        return [self.row_text(r) for r in sorted(self.grid) if self.row_text(r)]
