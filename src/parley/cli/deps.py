# src/parley/cli/deps.py
"""
Shared construction for commands.
"""

import redis

from parley.config import Settings
from parley.core.lexicon import KBHandle
from parley.core.pipeline import Pipeline
from parley.core.store import PhraseStore


def get_settings(args) -> Settings:
    settings = Settings.from_env()
    if getattr(args, "wordnet_dir", None):
        settings.wordnet_dir = args.wordnet_dir
    if getattr(args, "timeout", None) is not None:
        settings.kb_timeout = args.timeout
    if getattr(args, "workers", None) is not None:
        settings.workers = args.workers
    if getattr(args, "db", None) is not None:
        settings.redis_db = args.db
    return settings


def get_kb(settings: Settings) -> KBHandle:
    return KBHandle.wordnet(settings.wordnet_dir, timeout=settings.kb_timeout)


def get_pipeline(settings: Settings) -> Pipeline:
    return Pipeline(get_kb(settings), max_workers=settings.workers)


def get_store(settings: Settings) -> PhraseStore:
    client = redis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
    )
    return PhraseStore(client)
