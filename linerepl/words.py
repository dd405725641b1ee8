"""Word boundary scanning within a single logical line."""


def find_word_start(line: str, column: int) -> int:
    """Return the column where the word left of ``column`` begins.

    Whitespace immediately before ``column`` is skipped first, then the run
    of non-whitespace before it.
    """
    pos = column
    while pos > 0 and line[pos - 1].isspace():
        pos -= 1
    while pos > 0 and not line[pos - 1].isspace():
        pos -= 1
    return pos


def find_word_end(line: str, column: int) -> int:
    """Return the column where the word right of ``column`` ends."""
    pos = column
    line_len = len(line)
    while pos < line_len and line[pos].isspace():
        pos += 1
    while pos < line_len and not line[pos].isspace():
        pos += 1
    return pos
