#!/usr/bin/env python3
"""linerepl - A line editor for terminal REPLs.

Usage:
    python main.py

Controls:
    Enter: Submit (or continue an unfinished submission)
    Alt-Enter: Insert a line break
    Arrow keys: Move cursor; Ctrl/Alt + Left/Right move by word
    Backspace/Delete: Delete character; with Ctrl/Alt delete a word
    Tab: Indent to the next tabstop
    Esc: Clear the current line
    PageUp/PageDown: Recall previous/next submission
    Enter on an empty prompt: Quit
"""

from linerepl.echo import EchoHandler
from linerepl.repl import Repl


def main():
    """Entry point for the demo REPL."""
    Repl(EchoHandler()).run()

    print("Goodbye!")


if __name__ == "__main__":
    main()
