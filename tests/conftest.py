"""Pytest configuration and fixtures for all tests."""

import pytest
from fastapi.testclient import TestClient

from platewords.config import Settings
from platewords.dictionary import WordValidator
from platewords.fuzzy import FzyMatcher
from platewords.main import create_app
from platewords.ranker import PlateRanker
from platewords.wordlists import Lexicon

DICTIONARY = ["cat", "DOG", "Bird", "coat", "cart"]
CANDIDATES = ["CAT", "COAT", "CART", "DOG", "CHART", "SCAT"]


# ==================== Word Data Fixtures ====================


@pytest.fixture
def lexicon():
    """Small in-memory lexicon shared by component and app tests."""
    return Lexicon.from_words(DICTIONARY, CANDIDATES)


@pytest.fixture
def validator(lexicon):
    return WordValidator(lexicon.words)


@pytest.fixture
def ranker(lexicon):
    return PlateRanker(lexicon.candidates, FzyMatcher())


# ==================== App Fixtures ====================


@pytest.fixture
def settings():
    """Settings that ignore the environment and any .env file."""
    return Settings(_env_file=None, match_engine="fzy", log_level="WARNING")


@pytest.fixture
def asgi_app(settings, lexicon):
    return create_app(settings, lexicon=lexicon)


@pytest.fixture
def client(asgi_app):
    return TestClient(asgi_app)


# ==================== Mock Fixtures ====================


@pytest.fixture
def mock_sio():
    from tests.mocks import MockSocketIO

    return MockSocketIO()
