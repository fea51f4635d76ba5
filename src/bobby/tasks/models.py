"""Task record."""

from typing import Any


class Task:
    """A single to-do item.

    The description is fixed at creation; only the completion flag changes.
    """

    __slots__ = ("_description", "completed")

    def __init__(self, description: str, completed: bool = False) -> None:
        if description is None:
            raise TypeError("Task description must not be None")
        self._description = str(description)
        self.completed = bool(completed)

    @property
    def description(self) -> str:
        return self._description

    @property
    def status_icon(self) -> str:
        return "X" if self.completed else " "

    def mark_done(self) -> None:
        self.completed = True

    def mark_undone(self) -> None:
        self.completed = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self._description,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        return cls(
            description=data["description"],
            # Only a JSON true counts; strings such as "false" load as not done.
            completed=data.get("completed") is True,
        )

    def __str__(self) -> str:
        return f"[{self.status_icon}] {self._description}"

    def __repr__(self) -> str:
        return f"Task(description={self._description!r}, completed={self.completed!r})"
