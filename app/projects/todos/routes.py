"""
Todos - JSON API over a todo collection stored in a single file.
Every request reloads the collection; mutating requests rewrite all of it.
"""

from flask import Blueprint, jsonify, request

from app.projects.todos.models import (
    find_todo,
    find_todo_index,
    make_todo,
    new_todo_id,
    todo_field,
)
from app.projects.todos.store import TodoStore
from app.utils.logging import log_todo_action

todos_bp = Blueprint('todos', __name__)


# --- Helper Functions ---

def _request_body():
    """JSON body as a dict; anything else (no body, bad JSON, a list) counts as empty."""
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        return body
    return {}


def filter_todos(todos, search_term=None, is_completed=None):
    """
    Apply the list filters. Empty values are ignored; both filters compose.
    is_completed is the raw query string, compared case-insensitively to 'true'.
    """
    if search_term:
        todos = [
            t for t in todos
            if isinstance(todo_field(t, 'text'), str) and search_term in todo_field(t, 'text')
        ]

    if is_completed:
        wanted = is_completed.lower() == 'true'
        todos = [t for t in todos if todo_field(t, 'isCompleted') is wanted]

    return todos


# --- Routes ---

@todos_bp.route('/todos', methods=['GET'])
def list_todos():
    """List todos, optionally filtered by searchTerm and isCompleted."""
    todos = TodoStore.from_app().load_all()
    todos = filter_todos(
        todos,
        search_term=request.args.get('searchTerm'),
        is_completed=request.args.get('isCompleted'),
    )
    return jsonify({'todos': todos}), 200


@todos_bp.route('/users', methods=['GET'])
def users():
    return jsonify({'name': 'michel', 'age': 1231243}), 200


@todos_bp.route('/todos/', defaults={'todo_id': ''}, methods=['GET'])
@todos_bp.route('/todos/<todo_id>', methods=['GET'])
def get_todo(todo_id):
    """Fetch one todo by id."""
    if not todo_id:
        return jsonify({
            'code': 'INVALID_REQUEST',
            'message': 'The todoId field is required.',
        }), 404

    todo = find_todo(TodoStore.from_app().load_all(), todo_id)
    if todo is None:
        return jsonify({
            'code': 'TODO_NOT_FOUND',
            'message': 'The requested todo was not found.',
        }), 404

    return jsonify({'todo': todo}), 200


@todos_bp.route('/todos', methods=['POST'])
def create_todo():
    """Append a new todo and return it along with the whole collection."""
    text = _request_body().get('text')
    created = {}

    def append(todos):
        todo_id = new_todo_id(todo_field(t, 'id') for t in todos)
        created.update(make_todo(text, todo_id))
        return todos + [created]

    todos, _ = TodoStore.from_app().transact(append)
    log_todo_action('Add', created['id'], text)

    return jsonify({'message': 'Added Todo', 'todo': created, 'todos': todos}), 201


@todos_bp.route('/todos/<todo_id>', methods=['PUT'])
def update_todo(todo_id):
    """Replace a todo's text. Completion is always reset to false."""
    text = _request_body().get('text')

    def replace(todos):
        index = find_todo_index(todos, todo_id)
        if index < 0:
            return None
        updated = list(todos)
        updated[index] = make_todo(text, todos[index]['id'])
        return updated

    todos, saved = TodoStore.from_app().transact(replace)
    if not saved:
        return jsonify({'message': 'Could not find todo for this id.'}), 404

    log_todo_action('Update', todo_id, text)
    return jsonify({'message': 'Updated todo', 'todos': todos}), 200


@todos_bp.route('/todos/<todo_id>', methods=['DELETE'])
def delete_todo(todo_id):
    """Remove every todo with this id. Succeeds even when nothing matched."""

    def remove(todos):
        return [t for t in todos if todo_field(t, 'id') != todo_id]

    todos, _ = TodoStore.from_app().transact(remove)
    log_todo_action('Delete', todo_id)

    return jsonify({'message': 'Deleted todo', 'todos': todos}), 200
