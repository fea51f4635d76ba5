"""Bobby - a command-line task tracker.

Bobby reads one command per line, keeps an ordered list of tasks and
echoes a short confirmation for every change:

- TaskList: the task collection (add, mark, unmark, delete, archive, find)
- TaskStorage: JSON persistence of the active and archived tasks
- BobbyApp: the REPL that turns typed lines into TaskList calls
"""

from bobby.cli.app import BobbyApp
from bobby.config import BobbySettings, SettingsContext, get_settings, set_settings
from bobby.errors import BobbyError, CommandError, InvalidIndexError, StorageError
from bobby.persistence.storage import TaskStorage
from bobby.tasks import Task, TaskList

__all__ = [
    "BobbyApp",
    "BobbyError",
    "BobbySettings",
    "CommandError",
    "InvalidIndexError",
    "SettingsContext",
    "StorageError",
    "Task",
    "TaskList",
    "TaskStorage",
    "get_settings",
    "set_settings",
]

__version__ = "0.1.0"
