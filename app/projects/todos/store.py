"""
File-backed storage for the todo collection.

The whole collection is read and written as one JSON array. Every mutation
goes through TodoStore.transact, which serializes read-modify-write cycles
against the same file inside this process.
"""

import json
import logging
import os
import threading

from flask import current_app

logger = logging.getLogger(__name__)

_locks = {}
_locks_guard = threading.Lock()


def _lock_for(path):
    """One lock per resolved file path, shared by every store instance."""
    key = os.path.realpath(path)
    with _locks_guard:
        lock = _locks.get(key)
        if lock is None:
            lock = _locks[key] = threading.Lock()
        return lock


class TodoStore:
    """
    Loads and saves the full todo collection.

    Reads never fail: a missing, unreadable or malformed file is treated as an
    empty collection. Writes overwrite the file in place and let OSError
    propagate to the caller.
    """

    def __init__(self, path):
        self.path = path
        self._lock = _lock_for(path)

    @classmethod
    def from_app(cls, app=None):
        app = app or current_app
        return cls(app.config['TODOS_DATA_FILE'])

    def load_all(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug(f"Todo file {self.path} does not exist yet, starting empty")
            return []
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read todo file {self.path}, treating as empty: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Todo file {self.path} does not hold a JSON array, treating as empty")
            return []
        return data

    def save_all(self, todos):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(json.dumps(todos, indent=2, ensure_ascii=False))
        logger.debug(f"Wrote {len(todos)} todo(s) to {self.path}")

    def transact(self, change):
        """
        Apply ``change`` to the stored collection while holding the file lock.

        ``change`` receives the loaded list and returns the list to persist, or
        None to leave the file untouched. Returns ``(todos, saved)`` where todos
        is whatever collection is now current.
        """
        with self._lock:
            todos = self.load_all()
            updated = change(todos)
            if updated is None:
                return todos, False
            self.save_all(updated)
            return updated, True
