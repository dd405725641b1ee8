"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import select
import sys
from typing import Optional, Tuple

import blessed
from curtsies.events import PasteEvent

from .constants import ReplConstants

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    The cursor is tracked in buffer coordinates: rows keep counting past the
    bottom of the screen while the screen scrolls, the way a console screen
    buffer does. ``_top`` is the buffer row shown on the first screen row.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self._curtsies_input: Optional[object] = None
        self._curtsies_active: bool = False
        self.row = 0
        self.col = 0
        self._top = 0

    def setup(self):
        """Prepare the terminal for reading single key events."""
        if self._curtsies_input is None:
            try:
                from curtsies import Input  # type: ignore
                self._curtsies_input = Input(keynames='curtsies')  # type: ignore
                self._curtsies_input.__enter__()
                self._curtsies_active = True
            except Exception as e:
                # curtsies may fail to initialize without a tty (CI, pipes);
                # without input the session ends at the first key read.
                logger.warning(f"Keyboard input unavailable: {e}")
                self._curtsies_input = None
                self._curtsies_active = False

    def cleanup(self):
        """Restore the terminal."""
        self._emit(self.term.normal + self.term.normal_cursor)
        self.flush()
        if self._curtsies_input is not None:
            try:
                if self._curtsies_active:
                    self._curtsies_input.__exit__(None, None, None)  # type: ignore
            except Exception as e:
                # Teardown never crashes the app
                logger.warning(f"Could not restore terminal input mode: {e}")
            finally:
                self._curtsies_input = None
                self._curtsies_active = False

    def _emit(self, text: str):
        print(text, end='')

    def flush(self):
        print('', end='', flush=True)

    @property
    def width(self) -> int:
        """Terminal width in columns."""
        width = self.term.width
        return width if width and width > 0 else ReplConstants.DEFAULT_WIDTH

    @property
    def height(self) -> int:
        """Terminal height in rows."""
        height = self.term.height
        return height if height and height > 0 else 1

    @property
    def cursor_position(self) -> Tuple[int, int]:
        """Tracked (row, col) of the cursor in buffer coordinates."""
        return self.row, self.col

    def sync_position(self) -> Tuple[int, int]:
        """Re-read where the cursor really is and make it the tracked position.

        Output written by other code since the last sync (results printed
        by the evaluator, for instance) is accounted for here. The prompt
        always starts at column 0, so a partial row gets a line break first.
        """
        self.flush()
        row, col = self.term.get_location(timeout=ReplConstants.LOCATION_TIMEOUT)
        self._top = 0
        if row < 0 or col < 0:
            logger.warning("Cursor location unavailable; clearing screen")
            self.clear_screen()
            return self.cursor_position
        self.row, self.col = row, col
        if self.col != 0:
            self.newline()
        return self.cursor_position

    def clear_screen(self):
        """Clear the entire screen and home the cursor."""
        self._emit(self.term.home + self.term.clear)
        self.row = self.col = self._top = 0

    def move(self, row: int, col: int):
        """Move the cursor to a buffer position."""
        self.row, self.col = row, col
        screen_row = max(0, row - self._top)
        self._emit(self.term.move_yx(screen_row, col))

    def write(self, text: str, color: Optional[str] = None):
        """Write text at the cursor, optionally wrapped in a Blessed color.

        Args:
            text: Text to write; may already contain styling sequences
            color: Blessed formatting name such as 'green' or 'bold_blue'
        """
        if not text:
            return
        if color:
            text = getattr(self.term, color)(text)
        self._emit(text)
        self._advance(self.term.length(text))

    def newline(self):
        """Move to column 0 of the next row, scrolling if needed."""
        self._emit('\r\n')
        self.row += 1
        self.col = 0
        self._scroll_into_view()

    def reset_style(self):
        """Return to the terminal's default colors and attributes."""
        self._emit(self.term.normal)

    def hide_cursor(self):
        self._emit(self.term.hide_cursor)

    def show_cursor(self):
        self._emit(self.term.normal_cursor)

    def _advance(self, count: int):
        if count <= 0:
            return
        width = self.width
        pos = self.col + count
        self.row += pos // width
        self.col = pos % width
        if self.col == 0:
            # The terminal holds a pending wrap at the last column; commit it
            # so the real cursor matches the tracked one.
            self._emit('\r\n')
        self._scroll_into_view()

    def _scroll_into_view(self):
        bottom = self._top + self.height - 1
        if self.row > bottom:
            self._top += self.row - bottom

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key token as a string, a PasteEvent holding several
            tokens, or None.
        """
        if self._curtsies_input is not None:
            if timeout is None:
                evt = next(self._curtsies_input)  # blocks
                return evt if isinstance(evt, PasteEvent) else str(evt)
            else:
                t = 0.0 if timeout == 0 else float(timeout)
                r, _, _ = select.select([sys.stdin], [], [], t)
                if not r:
                    return None
                evt = next(self._curtsies_input)
                return evt if isinstance(evt, PasteEvent) else str(evt)
        return None
