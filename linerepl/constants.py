"""Constants and configuration for the linerepl engine."""

import os


class ReplConstants:
    """Central configuration constants for the line editor."""

    # Prompt layout
    PROMPT = "» "  # Prefix of the first logical line
    CONTINUATION_PROMPT = "· "  # Prefix of every continuation line
    PROMPT_WIDTH = 2  # Screen columns taken by either prefix

    # Editing
    TAB_WIDTH = 4  # Soft tabstop used by the Tab key

    # Submissions
    COMMAND_PREFIX = "#"  # First character of a meta-command
    LINE_SEPARATOR = os.linesep  # Joins logical lines into a submission

    # Terminal
    LOCATION_TIMEOUT = 0.5  # Seconds to wait for a cursor location report
    DEFAULT_WIDTH = 80  # Width assumed when the terminal reports none

    # Messages
    UNKNOWN_COMMAND_MESSAGE = "Unknown command: {}{}"
