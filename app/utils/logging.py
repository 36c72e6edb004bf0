"""
Logging utilities for tracking activity on the todo collection.
"""

import logging

activity_logger = logging.getLogger('app.todos')


def log_todo_action(action, todo_id=None, detail=None):
    """
    Record a mutating action on the todo collection.

    Args:
        action (str): What happened (e.g., 'Add', 'Update', 'Delete')
        todo_id (str, optional): Identifier of the affected todo.
        detail (str, optional): Extra context, usually the todo text.
    """
    description = f"{action} todo"
    if todo_id:
        description += f" {todo_id}"
    if detail is not None:
        description += f": '{detail}'"
    activity_logger.info(description)
