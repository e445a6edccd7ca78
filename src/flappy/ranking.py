"""
ranking.py: The bounded top-N ranking table.
"""

from typing import Iterable, List, Optional, Tuple

from .config import BlankNamePolicy
from .constants import RANKING_SIZE, MAX_NAME_LENGTH, ANONYMOUS_NAME
from .data_models import RankingEntry


class RankingNameError(ValueError):
    """Raised when a ranking name is blank and the policy is to reject it."""


class Ranking:
    """
    Keeps at most `size` entries, highest score first.
    Equal scores keep the order they were submitted in.
    """

    def __init__(self, entries: Iterable[RankingEntry] = (), size: int = RANKING_SIZE,
                 blank_name_policy: BlankNamePolicy = BlankNamePolicy.REJECT):
        if size < 1:
            raise ValueError("ranking size must be at least 1")
        self.size = size
        self.blank_name_policy = blank_name_policy
        self._entries: List[RankingEntry] = self._ordered(list(entries))

    def _ordered(self, entries: List[RankingEntry]) -> List[RankingEntry]:
        # sorted() is stable, so ties stay in submission order
        return sorted(entries, key=lambda e: e.score, reverse=True)[:self.size]

    def clean_name(self, name: Optional[str]) -> str:
        """Trims and validates a name according to the blank-name policy."""
        cleaned = (name or "").strip()[:MAX_NAME_LENGTH]
        if cleaned:
            return cleaned
        if self.blank_name_policy is BlankNamePolicy.SUBSTITUTE:
            return ANONYMOUS_NAME
        raise RankingNameError("name must not be blank")

    def submit(self, name: Optional[str], score: int) -> Optional[RankingEntry]:
        """
        Adds an entry and returns it, or None if it fell off the table.
        The name is validated before anything is changed.
        """
        if score < 0:
            raise ValueError(f"score cannot be negative: {score}")

        entry = RankingEntry(name=self.clean_name(name), score=int(score))
        self._entries = self._ordered(self._entries + [entry])

        # identity check, an equal older entry is not the new one
        return entry if any(e is entry for e in self._entries) else None

    def entries(self) -> Tuple[RankingEntry, ...]:
        return tuple(self._entries)

    def __len__(self):
        return len(self._entries)
