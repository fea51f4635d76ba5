"""Task management for Bobby.

Provides the Task record and the TaskList that owns the active and
archived tasks.

Example:
    >>> tasks = TaskList()
    >>> tasks.add(Task("write code"))
    >>> tasks.find_matching("code")
    [Task(description='write code', completed=False)]
"""

from bobby.tasks.models import Task
from bobby.tasks.store import TaskList

__all__ = ["Task", "TaskList"]
