"""
Exceptions raised by the contact store.

File: store/errors.py
Created: 2026-10-14
Last Modified: 2026-10-14
"""


class StoreError(Exception):
    """Base class for contact store errors."""


class StoreClosedError(StoreError):
    """Raised when a closed store or writer is asked to persist a change."""
