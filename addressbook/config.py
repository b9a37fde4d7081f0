"""
Store configuration for the address book.

File: addressbook/config.py
Created: 2026-10-12
Last Modified: 2026-10-19
"""

import codecs
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_DATA_PATH = Path("contacts.txt")
DEFAULT_ENCODING = "utf-8"

log = logging.getLogger(__name__)


def _env_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _known_encoding(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


def _env_encoding(value: Optional[str]) -> str:
    if not value:
        return DEFAULT_ENCODING
    if not _known_encoding(value):
        log.warning(f"Unknown ADDRESSBOOK_ENCODING {value!r}, using {DEFAULT_ENCODING}")
        return DEFAULT_ENCODING
    return value


def _env_int(value: Optional[str], default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass
class StoreConfig:
    """Settings for a ContactStore and its background writer."""

    # Backing file
    data_path: Path = field(default_factory=lambda: DEFAULT_DATA_PATH)
    encoding: str = DEFAULT_ENCODING

    # Write to a temp file and rename over the target
    atomic_writes: bool = True

    # Pending snapshots before add/delete/update block
    queue_size: int = 16

    def __post_init__(self):
        if isinstance(self.data_path, str):
            self.data_path = Path(self.data_path)
        if self.queue_size < 1:
            raise ValueError(f"queue_size must be at least 1, got {self.queue_size}")
        if not _known_encoding(self.encoding):
            raise ValueError(f"Unknown encoding: {self.encoding!r}")

    @classmethod
    def from_env(cls, **overrides) -> "StoreConfig":
        """
        Build a config from ADDRESSBOOK_* environment variables.

        Unset or unparseable variables fall back to the defaults. Keyword
        arguments take precedence over the environment.
        """
        values = {
            "data_path": Path(os.environ.get("ADDRESSBOOK_FILE", str(DEFAULT_DATA_PATH))),
            "encoding": _env_encoding(os.environ.get("ADDRESSBOOK_ENCODING")),
            "atomic_writes": _env_bool(os.environ.get("ADDRESSBOOK_ATOMIC_WRITES"), True),
            "queue_size": _env_int(os.environ.get("ADDRESSBOOK_QUEUE_SIZE"), 16),
        }
        values.update(overrides)
        return cls(**values)
