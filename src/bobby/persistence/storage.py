"""JSON file storage for the task list.

File layout:
    {
      "tasks":    [{"description": "...", "completed": false}, ...],
      "archived": [{"description": "...", "completed": true}, ...]
    }

A missing file is a fresh start. An unreadable file is logged and also
treated as a fresh start, so a damaged file never stops the REPL.
"""

import json
from pathlib import Path
from typing import Any

from bobby.errors import StorageError
from bobby.logging import Loggers
from bobby.persistence._utils import atomic_write_json
from bobby.tasks.models import Task
from bobby.tasks.store import TaskList

logger = Loggers.persistence()


class TaskStorage:
    """Loads and saves a TaskList to a JSON file.

    Example:
        >>> storage = TaskStorage(settings.data_path)
        >>> tasks = storage.load()
        >>> tasks.add(Task("write code"))
        >>> storage.save(tasks)
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskList:
        """Read the task file.

        Returns:
            A TaskList holding the stored active and archived tasks, or an
            empty TaskList when the file is missing or cannot be parsed.
        """
        if not self._path.exists():
            logger.debug("task_file_missing", path=str(self._path))
            return TaskList()

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("task_file_unreadable", path=str(self._path), error=str(e))
            return TaskList()

        if not isinstance(data, dict):
            logger.warning("task_file_malformed", path=str(self._path))
            return TaskList()

        active = self._parse_tasks(data.get("tasks", []))
        archived = self._parse_tasks(data.get("archived", []))
        logger.info(
            "tasks_loaded",
            path=str(self._path),
            active=len(active),
            archived=len(archived),
        )
        return TaskList(active, archived)

    def save(self, task_list: TaskList) -> None:
        """Write the task file atomically.

        Raises:
            StorageError: If the file cannot be written.
        """
        data = {
            "tasks": [task.to_dict() for task in task_list.list_active()],
            "archived": [task.to_dict() for task in task_list.list_archived()],
        }
        try:
            atomic_write_json(self._path, data)
        except OSError as e:
            logger.error("task_file_save_failed", path=str(self._path), error=str(e))
            raise StorageError(f"Could not save tasks to {self._path}: {e}") from e
        logger.debug("tasks_saved", path=str(self._path), active=len(data["tasks"]))

    def _parse_tasks(self, raw_tasks: Any) -> list[Task]:
        if not isinstance(raw_tasks, list):
            return []
        tasks: list[Task] = []
        for raw in raw_tasks:
            # Entries without a description cannot be shown; skip them.
            if not isinstance(raw, dict) or raw.get("description") is None:
                continue
            tasks.append(Task.from_dict(raw))
        return tasks
