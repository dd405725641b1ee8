"""Submission history with a wraparound browse cursor."""

import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


class SubmissionHistory:
    """Append-only list of finalized submissions.

    ``index`` is the position last shown while browsing. It sits one past
    the newest entry after every append, so the first ``previous()`` call
    yields the most recent submission.
    """

    def __init__(self):
        self._entries: List[str] = []
        self.index = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    @property
    def entries(self) -> List[str]:
        """Copy of the stored submissions, oldest first."""
        return list(self._entries)

    def append(self, text: str) -> None:
        """Record a finalized submission and reset the browse cursor."""
        self._entries.append(text)
        self.index = len(self._entries)

    def previous(self) -> Optional[str]:
        """Step back one entry, wrapping to the newest past the oldest.

        Returns:
            The entry now selected, or None when history is empty.
        """
        if not self._entries:
            return None
        self.index -= 1
        if self.index < 0:
            self.index = len(self._entries) - 1
        logger.debug(f"History previous -> {self.index}")
        return self._entries[self.index]

    def next(self) -> Optional[str]:
        """Step forward one entry, wrapping to the oldest past the newest."""
        if not self._entries:
            return None
        self.index += 1
        if self.index > len(self._entries) - 1:
            self.index = 0
        logger.debug(f"History next -> {self.index}")
        return self._entries[self.index]

    def clear(self) -> None:
        """Forget every entry. Only collaborators call this."""
        self._entries.clear()
        self.index = 0
