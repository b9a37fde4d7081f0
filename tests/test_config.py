from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the addressbook package importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from addressbook.config import StoreConfig  # noqa: E402

ENV_VARS = (
    "ADDRESSBOOK_FILE",
    "ADDRESSBOOK_ENCODING",
    "ADDRESSBOOK_ATOMIC_WRITES",
    "ADDRESSBOOK_QUEUE_SIZE",
)


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    config = StoreConfig.from_env()
    assert config.data_path == Path("contacts.txt")
    assert config.encoding == "utf-8"
    assert config.atomic_writes is True
    assert config.queue_size == 16


def test_environment_overrides(clean_env, tmp_path):
    clean_env.setenv("ADDRESSBOOK_FILE", str(tmp_path / "book.txt"))
    clean_env.setenv("ADDRESSBOOK_ATOMIC_WRITES", "no")
    clean_env.setenv("ADDRESSBOOK_QUEUE_SIZE", "4")

    config = StoreConfig.from_env()
    assert config.data_path == tmp_path / "book.txt"
    assert config.atomic_writes is False
    assert config.queue_size == 4


def test_bad_queue_size_in_env_falls_back(clean_env):
    clean_env.setenv("ADDRESSBOOK_QUEUE_SIZE", "lots")
    assert StoreConfig.from_env().queue_size == 16


def test_keyword_overrides_win(clean_env, tmp_path):
    clean_env.setenv("ADDRESSBOOK_FILE", "ignored.txt")
    config = StoreConfig.from_env(data_path=tmp_path / "chosen.txt")
    assert config.data_path == tmp_path / "chosen.txt"


def test_string_path_is_coerced():
    assert StoreConfig(data_path="people.txt").data_path == Path("people.txt")


def test_queue_size_must_be_positive():
    with pytest.raises(ValueError):
        StoreConfig(queue_size=0)


def test_unknown_encoding_is_rejected():
    with pytest.raises(ValueError):
        StoreConfig(encoding="bogus")


def test_unknown_encoding_in_env_falls_back(clean_env):
    clean_env.setenv("ADDRESSBOOK_ENCODING", "bogus")
    assert StoreConfig.from_env().encoding == "utf-8"


def test_known_encoding_in_env_is_used(clean_env):
    clean_env.setenv("ADDRESSBOOK_ENCODING", "latin-1")
    assert StoreConfig.from_env().encoding == "latin-1"
