import click
from flask.cli import with_appcontext
from app.projects.todos.models import make_todo, new_todo_id, todo_field
from app.projects.todos.store import TodoStore
from app.utils.logging import log_todo_action
import logging

logger = logging.getLogger(__name__)

@click.group(name='todos')
def todos_cli():
    """Inspect and maintain the stored todo collection."""
    pass

@todos_cli.command('list')
@with_appcontext
def list_command():
    """Print every stored todo."""
    todos = TodoStore.from_app().load_all()

    if not todos:
        click.echo("No todos stored.")
        return

    for todo in todos:
        mark = 'x' if todo_field(todo, 'isCompleted') is True else ' '
        click.echo(f"[{mark}] {todo_field(todo, 'id')}  {todo_field(todo, 'text')}")

@todos_cli.command('add')
@click.argument('text')
@with_appcontext
def add_command(text):
    """Add a todo with the given TEXT."""
    created = {}

    def append(todos):
        created.update(make_todo(text, new_todo_id(todo_field(t, 'id') for t in todos)))
        return todos + [created]

    TodoStore.from_app().transact(append)
    log_todo_action('Add', created['id'], text)
    click.echo(f"Added todo {created['id']}")

@todos_cli.command('clear')
@click.option('--yes', is_flag=True, help='Skip the confirmation prompt.')
@with_appcontext
def clear_command(yes):
    """Remove every stored todo."""
    store = TodoStore.from_app()
    if not yes:
        click.confirm(f"Delete all todos in {store.path}?", abort=True)

    removed = []

    def empty(todos):
        removed.extend(todos)
        return []

    store.transact(empty)
    logger.info(f"Cleared {len(removed)} todo(s) from {store.path}")
    click.echo(f"Removed {len(removed)} todo(s).")
