from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, List, Tuple, Union

from .errors import WordListLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Lexicon:
    """Word data loaded once at startup and shared read-only by both checks."""
    words: FrozenSet[str]         # dictionary for word checks
    candidates: Tuple[str, ...]   # ordered word list for plate matching

    @classmethod
    def from_words(cls, words: Iterable[str], candidates: Iterable[str]) -> 'Lexicon':
        return cls(words=to_word_set(words), candidates=to_word_list(candidates))


def to_word_set(words: Iterable[str]) -> FrozenSet[str]:
    return frozenset(w.strip().upper() for w in words if w.strip())


def to_word_list(words: Iterable[str]) -> Tuple[str, ...]:
    # Keep source order and spelling; drop exact repeats after the first occurrence
    seen = set()
    ordered: List[str] = []
    for w in words:
        w = w.strip()
        if w and w not in seen:
            seen.add(w)
            ordered.append(w)
    return tuple(ordered)


def read_words(path: Union[Path, str]) -> List[str]:
    """
    Read raw words from a JSON array file or a one-word-per-line text file.
    Blank lines and '#' comments are skipped in text files.
    Raises WordListLoadError for anything that is not a usable word source.
    """
    p = Path(path)
    if not p.is_file():
        raise WordListLoadError(p, 'file not found')
    try:
        text = p.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise WordListLoadError(p, str(e)) from e

    if p.suffix.lower() == '.json':
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise WordListLoadError(p, f'invalid JSON ({e.msg})') from e
        if not isinstance(data, list) or not all(isinstance(w, str) for w in data):
            raise WordListLoadError(p, 'expected a JSON array of strings')
        return data

    lines = (ln.strip() for ln in text.splitlines())
    return [ln for ln in lines if ln and not ln.startswith('#')]


def load_word_set(path: Union[Path, str]) -> FrozenSet[str]:
    words = to_word_set(read_words(path))
    if not words:
        raise WordListLoadError(path, 'no words found')
    logger.info("Loaded %d dictionary words from %s", len(words), path)
    return words


def load_word_list(path: Union[Path, str]) -> Tuple[str, ...]:
    words = to_word_list(read_words(path))
    if not words:
        raise WordListLoadError(path, 'no words found')
    logger.info("Loaded %d candidate words from %s", len(words), path)
    return words


def load_lexicon(dictionary_path: Union[Path, str], wordlist_path: Union[Path, str]) -> Lexicon:
    return Lexicon(words=load_word_set(dictionary_path), candidates=load_word_list(wordlist_path))
