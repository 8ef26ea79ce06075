"""Command module initialization."""

from .base import PlaylistCommand
from .add import AddCommand, CreateCommand  # noqa: F401
from .listing import ListCommand  # noqa: F401
from .remove import RemoveCommand  # noqa: F401
from .show import ByIds, ByTitle, PrintCommand  # noqa: F401

__all__ = [
    "PlaylistCommand",
    "AddCommand",
    "CreateCommand",
    "RemoveCommand",
    "PrintCommand",
    "ByTitle",
    "ByIds",
    "ListCommand",
]
