"""linerepl CLI entry point.

Allows running via `python -m linerepl` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from .version import get_version_string


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Show how each key would be dispatched. ESC ends the test."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyType

    print("Press keys to see how the line editor dispatches them (ESC ends).")
    term = TerminalInterface()
    term.setup()
    kb = KeyboardHandler(term)
    try:
        while True:
            ev = kb.get_key_event(timeout=None)
            if ev is None or (ev.key_type == KeyType.SPECIAL and ev.value == "escape"):
                break
            # Ctrl is the only modifier the dispatcher reads
            modifier = "ctrl" if ev.is_ctrl else "none"
            print(f"{ev.key_type.value} {ev.value!r} modifier={modifier} raw={_escape_bytes(ev.raw)}")
    finally:
        term.cleanup()


def main() -> None:
    # Very small arg parsing: version, keyboard test mode, and a log file
    args = sys.argv[1:]
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return
    if args and args[0] in ('--keytest', '--keyboard-test'):
        run_keyboard_test()
        return
    if len(args) >= 2 and args[0] == '--log':
        logging.basicConfig(
            filename=args[1],
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    # Lazy import to avoid importing UI deps for --version
    from .echo import EchoHandler
    from .repl import Repl
    Repl(EchoHandler()).run()


if __name__ == "__main__":  # pragma: no cover
    main()
