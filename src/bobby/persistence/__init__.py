"""Persistence module for Bobby."""

from bobby.persistence.storage import TaskStorage

__all__ = ["TaskStorage"]
