from __future__ import annotations
from pathlib import Path
from typing import Union


class PlatewordsError(Exception):
    """Base class for platewords errors."""


class WordListLoadError(PlatewordsError):
    """A dictionary or word list could not be loaded. Fatal at startup."""

    def __init__(self, path: Union[Path, str], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not load word data from {self.path}: {reason}")
