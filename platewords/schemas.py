from __future__ import annotations
from pydantic import BaseModel
from typing import List, Literal

Channel = Literal['word-check', 'plate-check']

class WordCheck(BaseModel):
    word: str

class WordCheckResult(BaseModel):
    word: str
    valid: bool

class PlateCheck(BaseModel):
    plate: str

class PlateCheckResult(BaseModel):
    plate: str
    matches: List[str] = []

class ChannelError(BaseModel):
    channel: str
    detail: str

class Health(BaseModel):
    ok: bool = True
    words: int
    candidates: int
    engine: str
