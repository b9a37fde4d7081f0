"""
Address book core: contact records and their file-backed store.

File: addressbook/__init__.py
Created: 2026-10-12
Last Modified: 2026-10-19
"""

from .config import StoreConfig
from .models import Contact
from .store import (
    ContactStore,
    LoadResult,
    SaveResult,
    StoreClosedError,
    StoreError,
)

__all__ = [
    "Contact",
    "ContactStore",
    "LoadResult",
    "SaveResult",
    "StoreClosedError",
    "StoreConfig",
    "StoreError",
]
