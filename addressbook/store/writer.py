"""
Single background writer for the contacts backing file.

Every save goes through one thread that owns the file. Callers hand over an
immutable snapshot of the collection and get a Future back; the thread writes
snapshots in the order they were submitted. When several are waiting it writes
only the newest one and resolves all of their futures with that result.

File: store/writer.py
Created: 2026-10-15
Last Modified: 2026-10-19
"""

import logging
import queue
import threading
from concurrent.futures import Future
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..models import Contact
from .codec import write_contacts
from .errors import StoreClosedError
from .results import SaveResult

log = logging.getLogger(__name__)

_STOP = object()

Snapshot = Tuple[Contact, ...]


class SnapshotWriter:
    """
    Owns the backing file and serializes every write to it.

    The queue is bounded: ``submit`` blocks once ``queue_size`` snapshots are
    waiting, until the writer catches up.
    """

    def __init__(
        self,
        path: Path,
        *,
        encoding: str = "utf-8",
        atomic: bool = True,
        queue_size: int = 16,
    ):
        self.path = Path(path)
        self.encoding = encoding
        self.atomic = atomic

        self._queue: "queue.Queue" = queue.Queue(maxsize=queue_size)
        self._lock = threading.Lock()
        self._closed = False
        # Snapshots submitted and snapshots whose write has finished
        self._submitted = 0
        self._completed = 0
        self._progress = threading.Condition()
        self._writes = 0

        self._thread = threading.Thread(
            target=self._run,
            name=f"contacts-writer:{self.path.name}",
            daemon=True,
        )
        self._thread.start()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def writes(self) -> int:
        """Number of times the file has actually been written."""
        return self._writes

    def submit(self, snapshot: Sequence[Contact]) -> "Future[SaveResult]":
        """
        Queue a snapshot to be written.

        Args:
            snapshot: Full contents the file should hold, in order

        Returns:
            Future resolving to the SaveResult of the write that covered it

        Raises:
            StoreClosedError: If the writer has been closed
        """
        future: "Future[SaveResult]" = Future()
        with self._lock:
            if self._closed:
                raise StoreClosedError(f"Writer for {self.path} is closed")
            self._queue.put((tuple(snapshot), future))
            self._submitted += 1
        return future

    def flush(self, timeout: Optional[float] = None) -> bool:
        """
        Wait until every snapshot submitted so far has been written.

        Returns:
            True if the queue drained, False if the timeout expired first
        """
        target = self._submitted
        with self._progress:
            return self._progress.wait_for(
                lambda: self._completed >= target, timeout=timeout
            )

    def close(self, timeout: Optional[float] = None) -> None:
        """Write whatever is pending, then stop the writer thread."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_STOP)
        self._thread.join(timeout)
        if self._thread.is_alive():
            log.warning(f"Writer for {self.path} still busy after {timeout}s")

    def _drain(self) -> List[object]:
        batch = [self._queue.get()]
        while True:
            try:
                batch.append(self._queue.get_nowait())
            except queue.Empty:
                return batch

    def _run(self) -> None:
        while True:
            batch = self._drain()
            pending = [item for item in batch if item is not _STOP]

            if pending:
                snapshot = pending[-1][0]
                try:
                    result = write_contacts(
                        self.path, snapshot, encoding=self.encoding, atomic=self.atomic
                    )
                except Exception as e:
                    log.exception(f"Unexpected error writing {self.path}")
                    result = SaveResult(path=self.path, error=str(e))
                self._writes += 1

                if len(pending) > 1:
                    log.debug(f"Coalesced {len(pending)} snapshots into one write")

                for _, future in pending:
                    if future.set_running_or_notify_cancel():
                        future.set_result(result)

                with self._progress:
                    self._completed += len(pending)
                    self._progress.notify_all()

            for _ in batch:
                self._queue.task_done()

            if len(pending) < len(batch):
                return
