from __future__ import annotations
import logging
from typing import Optional

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .dictionary import WordValidator
from .errors import WordListLoadError
from .fuzzy import create_matcher
from .managers.checks import CheckManager, PLATE_CHECK, WORD_CHECK
from .ranker import PlateRanker
from .routers import ws
from .schemas import Health, PlateCheckResult, WordCheckResult
from .wordlists import Lexicon, load_lexicon

logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO') -> None:
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def create_app(settings: Optional[Settings] = None, lexicon: Optional[Lexicon] = None) -> socketio.ASGIApp:
    """
    Build the ASGI application: FastAPI for REST and the /ws socket,
    with Socket.IO mounted in front of it.

    Word data is loaded here, before anything is served. A load failure
    is fatal and propagates to the caller.
    """
    settings = settings or Settings()
    configure_logging(settings.log_level)

    if lexicon is None:
        try:
            lexicon = load_lexicon(settings.dictionary_path, settings.wordlist_path)
        except WordListLoadError:
            logger.exception("Word data failed to load; refusing to start")
            raise

    matcher = create_matcher(settings.match_engine, settings.match_threshold)
    validator = WordValidator(lexicon.words)
    ranker = PlateRanker(lexicon.candidates, matcher)

    # Socket.IO server (ASGI)
    sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=settings.cors_allowed_origins)
    app = FastAPI(title="Platewords Server", version="0.1.0")

    # CORS for REST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    checks = CheckManager(sio, validator, ranker, max_matches=settings.max_matches)
    app.state.settings = settings
    app.state.lexicon = lexicon
    app.state.checks = checks
    app.include_router(ws.router)

    # REST Endpoints
    @app.get('/health')
    async def health() -> Health:
        return Health(words=len(validator), candidates=len(ranker), engine=settings.match_engine)

    @app.get('/dict/validate')
    async def validate_word(word: str) -> WordCheckResult:
        return checks.check_word(word)

    @app.get('/plates/matches')
    async def plate_matches(plate: str) -> PlateCheckResult:
        return checks.check_plate(plate)

    # Socket.IO Events
    @sio.event
    async def connect(sid, environ, auth=None):
        logger.debug("Client %s connected", sid)
        await sio.emit('pong', to=sid)

    @sio.on('ping')
    async def on_ping(sid):
        await sio.emit('pong', to=sid)

    sio.on(WORD_CHECK, checks.on_word_check)
    sio.on(PLATE_CHECK, checks.on_plate_check)

    logger.info(
        "Serving %d dictionary words and %d plate candidates with the %s engine",
        len(validator), len(ranker), settings.match_engine,
    )
    # Mount Socket.IO ASGI application
    return socketio.ASGIApp(sio, other_asgi_app=app)

# For local running: uvicorn platewords.main:create_app --factory --reload --host 0.0.0.0 --port 8000
