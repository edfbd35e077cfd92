from __future__ import annotations
import json
import logging
from typing import List, Optional, Protocol

from .settings import settings


logger = logging.getLogger(__name__)


class Store(Protocol):
	def get(self, key: str) -> Optional[str]: ...
	def set(self, key: str, value: str) -> None: ...
	def remove(self, key: str) -> None: ...


class TopicHistory:
	"""Recently used fact topics, newest first.

	Topics are unique ignoring case and the list never grows past `limit`.
	Updates are a plain read-modify-write with no locking.
	"""

	def __init__(self, store: Store, *, key: Optional[str] = None, limit: Optional[int] = None) -> None:
		self.store = store
		self.key = key or settings.history_key
		self.limit = limit if limit is not None else settings.history_limit

	def load(self) -> List[str]:
		raw = self.store.get(self.key)
		if raw is None:
			return []
		try:
			data = json.loads(raw)
		except ValueError:
			logger.warning("Ignoring malformed topic history under %r", self.key)
			return []
		if not isinstance(data, list):
			logger.warning("Ignoring non-list topic history under %r", self.key)
			return []
		return [item for item in data if isinstance(item, str)][: self.limit]

	def add(self, topic: str) -> List[str]:
		current = self.load()
		updated = [topic] + [h for h in current if h.lower() != topic.lower()]
		updated = updated[: self.limit]
		self.store.set(self.key, json.dumps(updated, ensure_ascii=False))
		return updated

	def clear(self) -> None:
		self.store.remove(self.key)
