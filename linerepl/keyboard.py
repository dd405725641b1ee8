"""Keyboard input handling using curtsies-style tokens."""

import logging
from collections import deque
from typing import Optional
from dataclasses import dataclass
from enum import Enum

from curtsies.events import PasteEvent

logger = logging.getLogger(__name__)


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"
    SHIFT_SPECIAL = "shift_special"


# Named keys the dispatcher knows about
SPECIAL_KEYS = frozenset({
    'enter', 'escape', 'backspace', 'delete', 'home', 'end',
    'left', 'right', 'up', 'down', 'tab', 'page_up', 'page_down',
})


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event.

    Named keys are SPECIAL events; ``is_ctrl`` is the only modifier the
    dispatcher looks at for them. Alt on a named key is folded into
    ``is_ctrl`` since most terminals cannot report Ctrl on those keys.
    """
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw key string from curtsies
    is_alt: bool = False
    is_ctrl: bool = False
    is_shift: bool = False
    is_sequence: bool = False
    code: Optional[int] = None

    @property
    def char(self) -> str:
        """The single character carried by the event, or '' if none."""
        return self.raw if len(self.raw) == 1 else ''


class KeyboardHandler:
    """Handles keyboard input using curtsies-style key names."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface
        self._pending = deque()

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event and map curtsies-style names to KeyEvent.

        A paste arrives as one PasteEvent; its keys are handed out one at a
        time so each goes through the dispatcher like a typed key.
        """
        while not self._pending:
            key = self.terminal.get_key(timeout)
            if not key:
                return None
            if not isinstance(key, PasteEvent):
                return self.parse_key(key)
            logger.debug(f"Paste of {len(key.events)} keys")
            self._pending.extend(key.events)
        return self.parse_key(self._pending.popleft())

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Args:
            key: curtsies event or its string form

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # Curtsies-style key names like '<LEFT>', '<Ctrl-LEFT>', '<Esc+DELETE>'
        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            return self._parse_token(key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if key_str in ('\r', '\n'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if key_str == '\t':
                return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
            if key_str == '\x7f':
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if key_str == '\x08':
                # Ctrl-Backspace on most terminals
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str, is_ctrl=True)
            if key_str == '\x1b':
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
                ch = chr(ord('a') + o - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

        # Regular character
        return KeyEvent(
            key_type=KeyType.REGULAR,
            value=key_str,
            raw=key_str,
            is_sequence=False
        )

    def _parse_token(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1]
        # Support both '-' and '+' as modifier separators (e.g., '<Esc+LEFT>')
        lower = name.lower().replace('+', '-')
        parts = lower.split('-')
        base = parts[-1]
        mods = set(parts[:-1])
        # Normalize meta/esc prefixes to alt
        if 'meta' in mods or 'esc' in mods:
            mods.add('alt')
        is_alt = 'alt' in mods
        is_ctrl = 'ctrl' in mods

        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'
        elif base in ('esc', 'escape') and not mods:
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')
        elif base in ('space', 'spacebar', 'spc') and not mods:
            return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')

        if is_ctrl and len(base) == 1:
            if base in ('j', 'm'):
                # Ctrl-J/Ctrl-M are Enter; with Alt on top they insert a line
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str,
                                is_alt=is_alt, is_ctrl=is_alt, is_sequence=True)
            if base == 'h':
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str,
                                is_ctrl=True, is_sequence=True)
            if base == 'i':
                return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str, is_sequence=True)
            if not is_alt:
                return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)

        if base in SPECIAL_KEYS and 'shift' in mods:
            # Only plain and control-modified named keys are bound
            return KeyEvent(key_type=KeyType.SHIFT_SPECIAL, value=base, raw=key_str,
                            is_alt=is_alt, is_ctrl=is_ctrl, is_shift=True, is_sequence=True)
        if base in SPECIAL_KEYS:
            return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str,
                            is_alt=is_alt, is_ctrl=is_ctrl or is_alt, is_sequence=True)
        if is_alt:
            return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True)

        # Fallback: treat unknown token as special
        logger.debug(f"Unknown key token {key_str!r}")
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str, is_sequence=True)
