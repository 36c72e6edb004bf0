"""
Unit tests for the file-backed todo store.

Run (with venv activated):
  python -m unittest tests.todos.test_store -v
  pytest tests/todos/ -v
"""
import json
import os
import tempfile
import threading
import unittest

from app.projects.todos.models import make_todo, new_todo_id
from app.projects.todos.store import TodoStore


class StoreTestCase(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, 'db', 'data.json')
        self.store = TodoStore(self.path)

    def tearDown(self):
        self.tmpdir.cleanup()

    def write_raw(self, text):
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(text)


class TestLoadAll(StoreTestCase):
    """Reads fall back to an empty collection instead of raising."""

    def test_missing_file_returns_empty(self):
        self.assertEqual(self.store.load_all(), [])

    def test_malformed_json_returns_empty(self):
        self.write_raw('[{"id": "1", "text": ')
        self.assertEqual(self.store.load_all(), [])

    def test_non_array_returns_empty(self):
        self.write_raw('{"todos": []}')
        self.assertEqual(self.store.load_all(), [])

    def test_records_are_not_validated(self):
        self.write_raw('[{"id": "a"}, {"text": "no id"}]')
        self.assertEqual(self.store.load_all(), [{"id": "a"}, {"text": "no id"}])


class TestSaveAll(StoreTestCase):

    def test_round_trip_keeps_content_and_order(self):
        todos = [
            make_todo('b', '2026-01-01T00:00:00.000002Z', True),
            make_todo('a', '2026-01-01T00:00:00.000001Z'),
            make_todo('café ✓', '2026-01-01T00:00:00.000003Z'),
        ]
        self.store.save_all(todos)
        self.assertEqual(self.store.load_all(), todos)

    def test_file_is_pretty_printed_utf8(self):
        self.store.save_all([make_todo('café', 'x')])
        with open(self.path, encoding='utf-8') as f:
            raw = f.read()
        self.assertIn('\n  {\n    "id": "x",', raw)
        self.assertIn('café', raw)
        self.assertEqual(json.loads(raw), [{'id': 'x', 'text': 'café', 'isCompleted': False}])

    def test_save_overwrites_corrupt_file(self):
        self.write_raw('not json')
        self.store.save_all([])
        self.assertEqual(self.store.load_all(), [])

    def test_write_failure_propagates(self):
        # A directory where the file should be makes open() fail
        os.makedirs(self.path)
        with self.assertRaises(OSError):
            self.store.save_all([])


class TestTransact(StoreTestCase):

    def test_returning_list_saves_it(self):
        todos, saved = self.store.transact(lambda todos: todos + [make_todo('a', '1')])
        self.assertTrue(saved)
        self.assertEqual(todos, [make_todo('a', '1')])
        self.assertEqual(self.store.load_all(), todos)

    def test_returning_none_leaves_file_untouched(self):
        self.store.save_all([make_todo('a', '1')])
        mtime = os.path.getmtime(self.path)
        todos, saved = self.store.transact(lambda todos: None)
        self.assertFalse(saved)
        self.assertEqual(todos, [make_todo('a', '1')])
        self.assertEqual(os.path.getmtime(self.path), mtime)

    def test_stores_for_same_path_share_a_lock(self):
        other = TodoStore(os.path.join(self.tmpdir.name, 'db', '..', 'db', 'data.json'))
        self.assertIs(self.store._lock, other._lock)

    def test_concurrent_appends_are_not_lost(self):
        """Interleaved read-modify-write cycles would drop entries without the lock."""
        barrier = threading.Barrier(8)

        def worker(n):
            barrier.wait()
            for i in range(10):
                store = TodoStore(self.path)
                store.transact(
                    lambda todos: todos + [make_todo(f'{n}-{i}', new_todo_id(t['id'] for t in todos))]
                )

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        todos = self.store.load_all()
        self.assertEqual(len(todos), 80)
        self.assertEqual(len({t['id'] for t in todos}), 80)


if __name__ == '__main__':
    unittest.main()
