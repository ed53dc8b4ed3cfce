"""Configuration management for platewords."""

from __future__ import annotations
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent / 'data'


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix='PLATEWORDS_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    # Word data
    dictionary_path: Path = Field(default=DATA_DIR / 'dictionary.json', description='Dictionary used for word checks')
    wordlist_path: Path = Field(default=DATA_DIR / 'wordlist.json', description='Candidate words used for plate matching')

    # Fuzzy matching
    match_engine: Literal['fzy', 'rapidfuzz'] = Field(default='fzy', description='Fuzzy-match engine for plate checks')
    match_threshold: float = Field(default=80.0, ge=0, le=100, description='Minimum partial ratio (rapidfuzz engine only)')
    max_matches: Optional[int] = Field(default=None, ge=0, description='Truncate ranked matches (unset or 0 = unlimited)')

    # Server
    cors_allowed_origins: List[str] = Field(default=['*'], description='Origins allowed for REST and Socket.IO')
    log_level: str = Field(default='INFO', description='Root logging level')
