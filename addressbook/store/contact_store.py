"""
In-memory contact collection mirrored to a backing file.

File: store/contact_store.py
Created: 2026-10-15
Last Modified: 2026-10-19
"""

import dataclasses
import logging
import threading
import weakref
from concurrent.futures import Future
from pathlib import Path
from typing import Iterator, List, Optional, Union

from ..config import StoreConfig
from ..models import Contact
from .codec import read_contacts
from .errors import StoreClosedError
from .results import LoadResult, SaveResult
from .writer import SnapshotWriter

log = logging.getLogger(__name__)


class ContactStore:
    """
    Ordered list of contacts kept in sync with a text file.

    Every add, delete and successful update queues a snapshot of the whole
    list for the background writer and returns its Future without waiting.
    Callers that need durability can ``.result()`` the future or call
    ``flush()``.

    Lookups for delete and update match on the contact's ``id`` first, so a
    contact taken from ``list()`` always hits its own entry even when
    duplicates exist. If no entry carries that id, the first entry with the
    same five fields is used instead.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        *,
        config: Optional[StoreConfig] = None,
    ):
        self.config = config or StoreConfig()
        if path is not None:
            self.config = dataclasses.replace(self.config, data_path=Path(path))
        self.path = self.config.data_path

        self._contacts: List[Contact] = []
        self._lock = threading.RLock()

        # Load before starting the writer so a failed read leaves no thread behind
        self.last_load: LoadResult = self.load()

        self._writer = SnapshotWriter(
            self.path,
            encoding=self.config.encoding,
            atomic=self.config.atomic_writes,
            queue_size=self.config.queue_size,
        )

        # Flush pending writes at interpreter exit if close() was never called
        self._finalizer = weakref.finalize(self, self._writer.close)

    def load(self) -> LoadResult:
        """
        Replace the in-memory list with the contents of the backing file.

        Returns:
            LoadResult; on a read failure the list is left empty
        """
        result = read_contacts(self.path, encoding=self.config.encoding)
        with self._lock:
            self._contacts = list(result.contacts)
        self.last_load = result
        return result

    def add(self, contact: Contact) -> "Future[SaveResult]":
        """
        Append a contact and persist.

        A contact whose id is already in the store is appended under a fresh id.
        """
        self._check_contact(contact)
        with self._lock:
            self._ensure_open()
            contact = self._unique(contact)
            self._contacts.append(contact)
            log.debug(f"Added contact {contact.name!r}")
            return self._persist()

    def delete(self, contact: Contact) -> "Future[SaveResult]":
        """
        Remove the first entry matching ``contact`` and persist.

        Removing a contact that is not present changes nothing, but the file
        is still rewritten.
        """
        with self._lock:
            self._ensure_open()
            index = self._index_of(contact)
            if index is None:
                log.debug(f"Delete found no match for {contact.name!r}")
            else:
                del self._contacts[index]
                log.debug(f"Deleted contact {contact.name!r} at position {index}")
            return self._persist()

    def update(self, old: Contact, new: Contact) -> "Optional[Future[SaveResult]]":
        """
        Replace the first entry matching ``old`` with ``new``, keeping its position.

        If ``new`` shares its id with another entry (for instance it was taken
        from ``list()``), it is stored under a fresh id so ids stay unique.

        Returns:
            Future for the save, or None if ``old`` was not found and nothing
            changed
        """
        self._check_contact(new)
        with self._lock:
            self._ensure_open()
            index = self._index_of(old)
            if index is None:
                log.debug(f"Update found no match for {old.name!r}")
                return None
            new = self._unique(new, skip=index)
            self._contacts[index] = new
            log.debug(f"Updated contact at position {index}: {old.name!r} -> {new.name!r}")
            return self._persist()

    def list(self) -> List[Contact]:
        """Copy of the current contacts, in order."""
        with self._lock:
            return list(self._contacts)

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for pending writes. Returns False if the timeout expired."""
        return self._writer.flush(timeout)

    def close(self, timeout: Optional[float] = None) -> None:
        """Write anything pending and stop the background writer."""
        self._finalizer.detach()
        with self._lock:
            self._writer.close(timeout)

    @property
    def closed(self) -> bool:
        return self._writer.closed

    def _index_of(self, target: Contact) -> Optional[int]:
        for i, contact in enumerate(self._contacts):
            if contact.id == target.id:
                return i
        for i, contact in enumerate(self._contacts):
            if contact.same_fields(target):
                return i
        return None

    def _unique(self, contact: Contact, skip: Optional[int] = None) -> Contact:
        """Give ``contact`` a fresh id if another entry already carries its id."""
        for i, existing in enumerate(self._contacts):
            if i != skip and existing.id == contact.id:
                return contact.with_new_id()
        return contact

    def _persist(self) -> "Future[SaveResult]":
        return self._writer.submit(tuple(self._contacts))

    def _ensure_open(self) -> None:
        if self._writer.closed:
            raise StoreClosedError(f"Contact store for {self.path} is closed")

    @staticmethod
    def _check_contact(contact: object) -> None:
        if not isinstance(contact, Contact):
            raise TypeError(f"Expected Contact, got {type(contact).__name__}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.list())

    def __enter__(self) -> "ContactStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ContactStore(path={str(self.path)!r}, contacts={len(self)})"
