from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from .fuzzy import Matcher


class PlateRanker:
    """Ranks the candidate word list against a plate, best match first."""

    def __init__(self, candidates: Sequence[str], matcher: Matcher):
        self._candidates: Tuple[str, ...] = tuple(candidates)
        self.matcher = matcher

    def rank_matches(self, plate: str, limit: Optional[int] = None) -> List[str]:
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        matches = [w for w in self._candidates if self.matcher.has_match(plate, w)]
        # sorted() is stable, so equal scores keep word-list order
        ranked = sorted(matches, key=lambda w: self.matcher.score(plate, w), reverse=True)
        if limit:
            return ranked[:limit]
        return ranked

    def __len__(self) -> int:
        return len(self._candidates)
