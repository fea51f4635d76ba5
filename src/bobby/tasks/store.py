"""In-memory task list.

TaskList owns two ordered sequences: the active tasks, whose order defines
the numbers shown to the user, and the archived tasks. All mutation goes
through the methods below; the list accessors hand out copies.

Index conventions:
    get() takes a 0-based position.
    mark(), unmark() and delete() take the 1-based number the user sees.
"""

from typing import Iterable

from bobby.errors import InvalidIndexError
from bobby.logging import Loggers
from bobby.tasks.models import Task

logger = Loggers.tasks()


class TaskList:
    """Ordered collection of active tasks plus an archive.

    Example:
        >>> tasks = TaskList()
        >>> tasks.add(Task("read book"))
        >>> tasks.mark(1)
        >>> tasks.get(0).completed
        True
    """

    def __init__(
        self,
        active: Iterable[Task] | None = None,
        archived: Iterable[Task] | None = None,
    ) -> None:
        self._active: list[Task] = list(active) if active is not None else []
        self._archived: list[Task] = list(archived) if archived is not None else []

    def count(self) -> int:
        """Return the number of active tasks."""
        return len(self._active)

    def __len__(self) -> int:
        return len(self._active)

    def get(self, index: int) -> Task:
        """Return the active task at a 0-based position.

        Raises:
            InvalidIndexError: If the position is out of range.
        """
        if index < 0 or index >= len(self._active):
            raise InvalidIndexError()
        return self._active[index]

    def list_active(self) -> list[Task]:
        """Return a copy of the active tasks in display order."""
        return list(self._active)

    def list_archived(self) -> list[Task]:
        """Return a copy of the archived tasks."""
        return list(self._archived)

    def add(self, task: Task) -> None:
        """Append a task to the active list."""
        self._active.append(task)
        logger.debug("task_added", description=task.description, count=len(self._active))

    def archive(self, task: Task) -> None:
        """Append a task to the archive.

        The task is not removed from the active list. Callers that want
        move semantics delete it first.
        """
        self._archived.append(task)
        logger.debug("task_archived", description=task.description)

    def mark(self, number: int) -> None:
        """Mark the task shown as ``number`` as completed.

        Raises:
            InvalidIndexError: If ``number`` is not in 1..count().
        """
        self._check_number(number)
        self._active[number - 1].mark_done()

    def unmark(self, number: int) -> None:
        """Mark the task shown as ``number`` as not completed.

        Raises:
            InvalidIndexError: If ``number`` is not in 1..count().
        """
        self._check_number(number)
        self._active[number - 1].mark_undone()

    def delete(self, number: int) -> Task:
        """Remove the task shown as ``number`` and return it.

        Later tasks move down by one position.

        Raises:
            InvalidIndexError: If ``number`` is not in 1..count().
        """
        self._check_number(number)
        task = self._active.pop(number - 1)
        logger.debug("task_deleted", number=number, count=len(self._active))
        return task

    def find_matching(self, keyword: str) -> list[Task]:
        """Return active tasks whose description contains ``keyword``.

        Matching is a case-sensitive substring test, so an empty keyword
        matches every task.
        """
        return [task for task in self._active if keyword in task.description]

    def _check_number(self, number: int) -> None:
        if number <= 0 or number > len(self._active):
            raise InvalidIndexError()
