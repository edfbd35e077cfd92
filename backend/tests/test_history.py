import json
import unittest

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from study_assistant.db import Base
from study_assistant.history import TopicHistory
from study_assistant.storage import KeyValueStore, MemoryStore


class TestTopicHistory(unittest.TestCase):
	def setUp(self):
		self.store = MemoryStore()
		self.history = TopicHistory(self.store, key="factHistory", limit=10)

	def test_newest_first(self):
		self.history.add("Tides")
		self.history.add("Volcanoes")
		self.assertEqual(self.history.load(), ["Volcanoes", "Tides"])

	def test_reinsert_moves_to_front_ignoring_case(self):
		for topic in ("Tides", "Volcanoes", "Mughal Empire"):
			self.history.add(topic)
		updated = self.history.add("tides")
		self.assertEqual(updated, ["tides", "Mughal Empire", "Volcanoes"])
		self.assertEqual(len(updated), 3)

	def test_capped_at_limit(self):
		for i in range(25):
			self.history.add(f"Topic {i}")
			self.assertLessEqual(len(self.history.load()), 10)
		self.assertEqual(self.history.load()[0], "Topic 24")
		self.assertEqual(self.history.load()[-1], "Topic 15")

	def test_stored_as_json_list(self):
		self.history.add("Tides")
		self.assertEqual(json.loads(self.store.data["factHistory"]), ["Tides"])

	def test_absent_is_empty(self):
		self.assertEqual(self.history.load(), [])

	def test_malformed_is_empty(self):
		for raw in ("not json", '{"a": 1}', "42"):
			self.store.data["factHistory"] = raw
			with self.assertLogs("study_assistant.history", level="WARNING"):
				self.assertEqual(self.history.load(), [])

	def test_non_string_items_dropped(self):
		self.store.data["factHistory"] = json.dumps(["Tides", 3, None, "Rivers"])
		self.assertEqual(self.history.load(), ["Tides", "Rivers"])

	def test_add_over_malformed_data(self):
		self.store.data["factHistory"] = "[broken"
		with self.assertLogs("study_assistant.history", level="WARNING"):
			self.assertEqual(self.history.add("Tides"), ["Tides"])

	def test_clear(self):
		self.history.add("Tides")
		self.history.clear()
		self.assertNotIn("factHistory", self.store.data)
		self.assertEqual(self.history.load(), [])


class TestKeyValueStore(unittest.TestCase):
	def setUp(self):
		engine = create_engine(
			"sqlite://",
			connect_args={"check_same_thread": False},
			poolclass=StaticPool,
			future=True,
		)
		Base.metadata.create_all(bind=engine)
		self.store = KeyValueStore(sessionmaker(bind=engine, future=True))

	def test_set_get_overwrite_remove(self):
		self.assertIsNone(self.store.get("factHistory"))
		self.store.set("factHistory", '["Tides"]')
		self.assertEqual(self.store.get("factHistory"), '["Tides"]')
		self.store.set("factHistory", '["Rivers"]')
		self.assertEqual(self.store.get("factHistory"), '["Rivers"]')
		self.store.remove("factHistory")
		self.assertIsNone(self.store.get("factHistory"))
		self.store.remove("factHistory")

	def test_history_survives_new_instance(self):
		TopicHistory(self.store, key="factHistory").add("भारतीय संविधान")
		self.assertEqual(TopicHistory(self.store, key="factHistory").load(), ["भारतीय संविधान"])


if __name__ == "__main__":
	unittest.main()
