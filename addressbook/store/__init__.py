"""
Contact persistence: the in-memory store, its file codec and background writer.

File: store/__init__.py
Created: 2026-10-14
Last Modified: 2026-10-19
"""

from .codec import read_contacts, write_contacts
from .contact_store import ContactStore
from .errors import StoreClosedError, StoreError
from .results import LoadResult, SaveResult
from .writer import SnapshotWriter

__all__ = [
    "ContactStore",
    "LoadResult",
    "SaveResult",
    "SnapshotWriter",
    "StoreClosedError",
    "StoreError",
    "read_contacts",
    "write_contacts",
]
