from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

# Make the addressbook package importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from addressbook.models import CONTACT_FIELDS, Contact  # noqa: E402


def test_str_matches_list_rendering():
    ann = Contact(name="Ann", phone="555-1000", email="a@x.com", address="1 Main St", birthday="01/01")
    assert str(ann) == "Ann  555-1000   a@x.com   1 Main St   01/01"


def test_each_contact_gets_its_own_id():
    a = Contact(name="Ann")
    b = Contact(name="Ann")
    assert a.id != b.id
    assert a != b
    assert a.same_fields(b)


def test_contacts_are_immutable():
    ann = Contact(name="Ann")
    with pytest.raises(ValidationError):
        ann.phone = "555-0000"


def test_row_conversion_keeps_field_order():
    row = ["Bo", "555-2000", "b@x.com", "2 Oak Ave", "02/02"]
    bo = Contact.from_row(row)
    assert bo.to_row() == row
    assert bo.fields() == tuple(row)
    assert len(CONTACT_FIELDS) == 5


def test_from_row_accepts_empty_and_comma_values():
    bo = Contact.from_row(["Bo, Jr.", "", "", "", ""])
    assert bo.name == "Bo, Jr."
    assert bo.birthday == ""


@pytest.mark.parametrize("row", [[], ["Ann"], ["a", "b", "c", "d"], ["a", "b", "c", "d", "e", "f"]])
def test_from_row_rejects_wrong_field_count(row):
    with pytest.raises(ValueError):
        Contact.from_row(row)
