"""
Todo records are kept as plain dicts, exactly as they sit in the JSON file.
These helpers only build new records; nothing here validates stored ones.
"""

from datetime import datetime, timedelta, timezone

ID_FORMAT = '%Y-%m-%dT%H:%M:%S.%fZ'


def format_todo_id(moment):
    """Render a UTC datetime as a lexically sortable identifier."""
    return moment.astimezone(timezone.utc).strftime(ID_FORMAT)


def new_todo_id(existing_ids=(), now=None):
    """
    Mint an id from the current UTC time.

    Two creations inside the same clock tick would collide, so the timestamp
    is pushed forward one microsecond at a time until it is not in existing_ids.
    """
    moment = now or datetime.now(timezone.utc)
    taken = set(existing_ids)
    todo_id = format_todo_id(moment)
    while todo_id in taken:
        moment += timedelta(microseconds=1)
        todo_id = format_todo_id(moment)
    return todo_id


def make_todo(text, todo_id, is_completed=False):
    return {
        'id': todo_id,
        'text': text,
        'isCompleted': is_completed,
    }


def todo_field(todo, name):
    """Read a field from a stored record that may not even be an object."""
    if isinstance(todo, dict):
        return todo.get(name)
    return None


def find_todo(todos, todo_id):
    """Linear scan; returns the first record with a matching id or None."""
    for todo in todos:
        if todo_field(todo, 'id') == todo_id:
            return todo
    return None


def find_todo_index(todos, todo_id):
    for index, todo in enumerate(todos):
        if todo_field(todo, 'id') == todo_id:
            return index
    return -1
