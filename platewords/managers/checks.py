from __future__ import annotations
import logging
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from ..dictionary import WordValidator
from ..ranker import PlateRanker
from ..schemas import ChannelError, PlateCheck, PlateCheckResult, WordCheck, WordCheckResult

logger = logging.getLogger(__name__)

WORD_CHECK = 'word-check'
PLATE_CHECK = 'plate-check'
RESULT_SUFFIX = ':result'
ERROR_EVENT = 'error'


def _parse(model: type[BaseModel], field: str, payload: Any) -> BaseModel:
    # Clients may send the bare string or an object wrapping it
    if isinstance(payload, str):
        payload = {field: payload}
    return model.model_validate(payload)


class CheckManager:
    """Answers word and plate checks. One inbound message, one reply to the sender."""

    def __init__(self, sio, validator: WordValidator, ranker: PlateRanker, max_matches: Optional[int] = None):
        self.sio = sio
        self.validator = validator
        self.ranker = ranker
        self.max_matches = max_matches

    def check_word(self, word: str) -> WordCheckResult:
        valid = self.validator.is_valid_word(word)
        logger.debug("word-check %r -> %s", word, valid)
        return WordCheckResult(word=word.upper(), valid=valid)

    def check_plate(self, plate: str) -> PlateCheckResult:
        matches = self.ranker.rank_matches(plate, limit=self.max_matches)
        logger.debug("plate-check %r -> %d matches", plate, len(matches))
        return PlateCheckResult(plate=plate, matches=matches)

    async def on_word_check(self, sid: str, payload: Any = None):
        try:
            req = _parse(WordCheck, 'word', payload)
        except ValidationError as e:
            await self._reject(sid, WORD_CHECK, e)
            return
        await self.sio.emit(WORD_CHECK + RESULT_SUFFIX, self.check_word(req.word).model_dump(), to=sid)

    async def on_plate_check(self, sid: str, payload: Any = None):
        try:
            req = _parse(PlateCheck, 'plate', payload)
        except ValidationError as e:
            await self._reject(sid, PLATE_CHECK, e)
            return
        await self.sio.emit(PLATE_CHECK + RESULT_SUFFIX, self.check_plate(req.plate).model_dump(), to=sid)

    async def _reject(self, sid: str, channel: str, exc: ValidationError):
        logger.warning("Rejected %s payload from %s: %s", channel, sid, exc.errors(include_url=False))
        err = ChannelError(channel=channel, detail=f"Invalid {channel} payload")
        await self.sio.emit(ERROR_EVENT, err.model_dump(), to=sid)
