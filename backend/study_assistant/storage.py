from __future__ import annotations
from typing import Callable, Dict, Optional

from sqlalchemy.orm import Session

from .models import KeyValueEntry


class KeyValueStore:
	"""String key/value storage on the kv_entries table."""

	def __init__(self, session_factory: Callable[[], Session]) -> None:
		self._session_factory = session_factory

	def get(self, key: str) -> Optional[str]:
		with self._session_factory() as db:
			row = db.get(KeyValueEntry, key)
			return row.value if row is not None else None

	def set(self, key: str, value: str) -> None:
		with self._session_factory() as db:
			row = db.get(KeyValueEntry, key)
			if row is None:
				row = KeyValueEntry(key=key, value=value)
			else:
				row.value = value
			db.add(row)
			db.commit()

	def remove(self, key: str) -> None:
		with self._session_factory() as db:
			row = db.get(KeyValueEntry, key)
			if row is not None:
				db.delete(row)
				db.commit()


class MemoryStore:
	def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
		self.data: Dict[str, str] = dict(initial or {})

	def get(self, key: str) -> Optional[str]:
		return self.data.get(key)

	def set(self, key: str, value: str) -> None:
		self.data[key] = value

	def remove(self, key: str) -> None:
		self.data.pop(key, None)
