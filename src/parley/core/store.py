# src/parley/core/store.py
"""
Phrase storage in Redis.

Keeps the raw text of each input under a short id, plus the phrases the
pipeline produced for it, so a run can be inspected later.
"""

import json
import uuid
from datetime import datetime, timezone

import redis

from parley.core.model import Phrase
from parley.core.pipeline import Pipeline


def generate_id() -> str:
    return uuid.uuid4().hex[:12]


class PhraseStore:
    def __init__(self, client: redis.Redis, prefix: str = "parley"):
        self.client = client
        self.prefix = prefix

    def _text_key(self, text_id: str) -> str:
        return f"{self.prefix}:text:{text_id}"

    def _phrases_key(self, text_id: str) -> str:
        return f"{self.prefix}:text:{text_id}:phrases"

    def _index_key(self) -> str:
        return f"{self.prefix}:text_index"

    def add(self, text: str) -> str:
        text_id = generate_id()
        doc = {
            "id": text_id,
            "text": text,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        self.client.set(self._text_key(text_id), json.dumps(doc))
        self.client.rpush(self._index_key(), text_id)
        return text_id

    def get_text(self, text_id: str) -> str | None:
        data = self.client.get(self._text_key(text_id))
        if data is None:
            return None
        return json.loads(data)["text"]

    def run(self, text_id: str, pipeline: Pipeline) -> list[Phrase]:
        text = self.get_text(text_id)
        if text is None:
            raise ValueError(f"Text {text_id} not found")

        phrases = pipeline.run(text)
        self.client.set(
            self._phrases_key(text_id),
            json.dumps([p.to_dict() for p in phrases]),
        )
        return phrases

    def get_phrases(self, text_id: str) -> list[Phrase] | None:
        data = self.client.get(self._phrases_key(text_id))
        if data is None:
            return None
        return [Phrase.from_dict(d) for d in json.loads(data)]

    def list_ids(self) -> list[str]:
        return [i.decode() if isinstance(i, bytes) else i
                for i in self.client.lrange(self._index_key(), 0, -1)]

    def delete(self, text_id: str) -> bool:
        if not self.client.exists(self._text_key(text_id)):
            return False
        self.client.delete(self._text_key(text_id), self._phrases_key(text_id))
        self.client.lrem(self._index_key(), 0, text_id)
        return True
