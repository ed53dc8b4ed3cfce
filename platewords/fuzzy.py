"""
Fuzzy-match engines for plate checks.

Every engine exposes the same two calls:
    has_match(query, candidate) -> bool     cheap filter
    score(query, candidate) -> float        higher is a better match

FzyMatcher is the fzy subsequence algorithm (the scoring the word-game
front end was built around). RapidFuzzMatcher trades subsequence semantics
for typo tolerance using rapidfuzz's ratio scorers.
"""

from __future__ import annotations
import math
from typing import List, Protocol

from rapidfuzz import fuzz
from rapidfuzz.utils import default_process

SCORE_MIN = -math.inf
SCORE_MAX = math.inf

SCORE_GAP_LEADING = -0.005
SCORE_GAP_TRAILING = -0.005
SCORE_GAP_INNER = -0.01
SCORE_MATCH_CONSECUTIVE = 1.0
SCORE_MATCH_SLASH = 0.9
SCORE_MATCH_WORD = 0.8
SCORE_MATCH_CAPITAL = 0.7
SCORE_MATCH_DOT = 0.6

MATCH_MAX_LEN = 1024


class Matcher(Protocol):
    def has_match(self, query: str, candidate: str) -> bool: ...

    def score(self, query: str, candidate: str) -> float: ...


def _is_lower(ch: str) -> bool:
    return ch.lower() == ch


def _is_upper(ch: str) -> bool:
    return ch.upper() == ch


def _match_bonus(candidate: str) -> List[float]:
    bonus: List[float] = []
    last = '/'
    for ch in candidate:
        if last == '/':
            bonus.append(SCORE_MATCH_SLASH)
        elif last in '-_ ':
            bonus.append(SCORE_MATCH_WORD)
        elif last == '.':
            bonus.append(SCORE_MATCH_DOT)
        elif _is_lower(last) and _is_upper(ch):
            bonus.append(SCORE_MATCH_CAPITAL)
        else:
            bonus.append(0.0)
        last = ch
    return bonus


class FzyMatcher:
    """Case-insensitive subsequence matching scored like fzy.

    An empty query matches every candidate with the lowest possible score,
    so ranking an empty plate returns the word list in its original order.
    """

    name = 'fzy'

    def has_match(self, query: str, candidate: str) -> bool:
        haystack = candidate.lower()
        pos = 0
        for ch in query.lower():
            pos = haystack.find(ch, pos) + 1
            if pos == 0:
                return False
        return True

    def score(self, query: str, candidate: str) -> float:
        n, m = len(query), len(candidate)
        if not n or not m:
            return SCORE_MIN
        if n == m:
            # same length and a subsequence: the strings are equal
            return SCORE_MAX
        if m > MATCH_MAX_LEN:
            return SCORE_MIN

        needle = query.lower()
        haystack = candidate.lower()
        bonus = _match_bonus(candidate)

        # D: best score ending with needle[i] matched at haystack[j]
        # M: best score for needle[:i+1] within haystack[:j+1]
        prev_d: List[float] = []
        prev_m: List[float] = []
        for i in range(n):
            d_row = [SCORE_MIN] * m
            m_row = [SCORE_MIN] * m
            prev_score = SCORE_MIN
            gap = SCORE_GAP_TRAILING if i == n - 1 else SCORE_GAP_INNER
            for j in range(m):
                if needle[i] == haystack[j]:
                    score = SCORE_MIN
                    if i == 0:
                        score = j * SCORE_GAP_LEADING + bonus[j]
                    elif j:
                        score = max(prev_m[j - 1] + bonus[j], prev_d[j - 1] + SCORE_MATCH_CONSECUTIVE)
                    d_row[j] = score
                    prev_score = max(score, prev_score + gap)
                else:
                    prev_score = prev_score + gap
                m_row[j] = prev_score
            prev_d, prev_m = d_row, m_row
        return prev_m[m - 1]


class RapidFuzzMatcher:
    """Typo-tolerant matching on rapidfuzz ratios (0-100).

    Strings are lowercased and stripped of non-alphanumerics before
    comparison. An empty query matches nothing.
    """

    name = 'rapidfuzz'

    def __init__(self, threshold: float = 80.0):
        self.threshold = threshold

    def has_match(self, query: str, candidate: str) -> bool:
        return fuzz.partial_ratio(query, candidate, processor=default_process) >= self.threshold

    def score(self, query: str, candidate: str) -> float:
        return fuzz.WRatio(query, candidate, processor=default_process)


ENGINES = ('fzy', 'rapidfuzz')


def create_matcher(name: str, threshold: float = 80.0) -> Matcher:
    if name == 'fzy':
        return FzyMatcher()
    if name == 'rapidfuzz':
        return RapidFuzzMatcher(threshold)
    raise ValueError(f"Unknown match engine {name!r}; expected one of {', '.join(ENGINES)}")
