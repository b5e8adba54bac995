"""Remote collection stores."""

from deskdash.stores.base import InvalidLaunchItemError, InvalidNoteError, ValidationFailure
from deskdash.stores.launch_items import LaunchItemStore
from deskdash.stores.notes import NoteStore

__all__ = [
    "InvalidLaunchItemError",
    "InvalidNoteError",
    "LaunchItemStore",
    "NoteStore",
    "ValidationFailure",
]
