"""
Reading and writing the contacts backing file.

One contact per row, five comma-separated columns in the order name, phone,
email, address, birthday. No header. Rows are written with minimal CSV quoting,
so plain values come out exactly as ``Ann,555-1000,a@x.com,1 Main St,01/01``
while values holding commas, quotes or newlines are quoted and survive a
reload.

File: store/codec.py
Created: 2026-10-14
Last Modified: 2026-10-19
"""

import contextlib
import csv
import io
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Tuple

from ..models import CONTACT_FIELDS, Contact
from .results import LoadResult, SaveResult

log = logging.getLogger(__name__)

LINE_TERMINATOR = "\n"


def _strict_rows(text: str) -> List[List[str]]:
    return list(csv.reader(io.StringIO(text), strict=True))


def _split_record(lines: List[str], start: int) -> Tuple[Optional[List[str]], int]:
    """
    Split the record that begins at ``lines[start]``.

    A line is taken as CSV only when it parses cleanly under strict quoting.
    A line with an unbalanced quote may open a quoted field that runs onto
    the following lines; those lines are joined only if together they form
    exactly one clean row. Anything else falls back to a plain comma split of
    that single line, so a bad line never swallows the lines after it.

    Returns:
        (fields, lines consumed); fields is None for a blank line
    """
    line = lines[start]
    if not line.strip("\r\n"):
        return None, 1

    try:
        rows = _strict_rows(line)
    except csv.Error:
        rows = None
        if line.count('"') % 2:
            chunk = [line]
            quotes = line.count('"')
            for end in range(start + 1, len(lines)):
                chunk.append(lines[end])
                quotes += lines[end].count('"')
                if quotes % 2:
                    continue
                try:
                    joined = _strict_rows("".join(chunk))
                except csv.Error:
                    break
                if len(joined) == 1 and len(joined[0]) == len(CONTACT_FIELDS):
                    return joined[0], len(chunk)
                break

    if rows is not None and len(rows) == 1 and len(rows[0]) == len(CONTACT_FIELDS):
        return rows[0], 1
    return line.rstrip("\r\n").split(","), 1


def read_contacts(path: Path, encoding: str = "utf-8") -> LoadResult:
    """
    Load every well-formed contact from the backing file.

    A missing file is an empty address book, not an error. Each line that
    does not yield exactly five fields is dropped and counted on its own.
    Any other failure leaves the result empty with ``error`` set.

    Args:
        path: Backing file to read
        encoding: Text encoding of the file

    Returns:
        LoadResult with the parsed contacts, skipped line count, and error
    """
    path = Path(path)
    if not path.exists():
        log.info(f"No contacts file at {path}, starting empty")
        return LoadResult(path=path)

    try:
        with path.open("r", encoding=encoding, newline="") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        log.error(f"Error loading contacts from {path}: {e}")
        return LoadResult(path=path, error=str(e))

    contacts: List[Contact] = []
    skipped = 0

    i = 0
    while i < len(lines):
        fields, consumed = _split_record(lines, i)
        if fields is not None:
            try:
                contacts.append(Contact.from_row(fields))
            except ValueError as e:
                skipped += 1
                log.debug(f"Skipping line {i + 1} of {path}: {e}")
        i += consumed

    if skipped:
        log.warning(f"Skipped {skipped} malformed line(s) in {path}")
    log.info(f"Loaded {len(contacts)} contacts from {path}")

    return LoadResult(path=path, contacts=contacts, skipped=skipped)


def _write_rows(f: TextIO, contacts: Iterable[Contact]) -> int:
    writer = csv.writer(f, lineterminator=LINE_TERMINATOR)
    count = 0
    for contact in contacts:
        writer.writerow(contact.to_row())
        count += 1
    return count


def _write_atomic(path: Path, contacts: Iterable[Contact], encoding: str) -> int:
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            count = _write_rows(f, contacts)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise
    return count


def write_contacts(
    path: Path,
    contacts: Iterable[Contact],
    encoding: str = "utf-8",
    atomic: bool = True,
) -> SaveResult:
    """
    Rewrite the backing file with the given contacts.

    Args:
        path: Backing file to write
        contacts: Contacts in the order they should appear
        encoding: Text encoding of the file
        atomic: Write to a temp file and rename it over ``path`` so an
            interrupted write never leaves a truncated file

    Returns:
        SaveResult with the number written, or the error on failure
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if atomic:
            count = _write_atomic(path, contacts, encoding)
        else:
            with path.open("w", encoding=encoding, newline="") as f:
                count = _write_rows(f, contacts)
    except (OSError, UnicodeEncodeError, LookupError) as e:
        log.error(f"Error saving contacts to {path}: {e}")
        return SaveResult(path=path, error=str(e))

    log.debug(f"Wrote {count} contacts to {path}")
    return SaveResult(path=path, written=count)
