"""
Contact record model.

File: models/contact.py
Created: 2026-10-12
Last Modified: 2026-10-19
"""

import uuid
from typing import List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

# Column order in the backing file
CONTACT_FIELDS = ("name", "phone", "email", "address", "birthday")


def _new_contact_id() -> str:
    return uuid.uuid4().hex


class Contact(BaseModel):
    """
    One address book entry.

    The five data fields are free-form text with no validation. ``id`` is a
    per-process identity key assigned at creation; it is never written to disk,
    so a contact read back from the backing file gets a fresh one.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name")
    phone: str = Field("", description="Phone number, any format")
    email: str = Field("", description="Email address")
    address: str = Field("", description="Postal address")
    birthday: str = Field("", description="Birthday, free-form text")
    id: str = Field(default_factory=_new_contact_id, description="Identity key, not persisted")

    def fields(self) -> Tuple[str, str, str, str, str]:
        """The five data fields in file column order."""
        return (self.name, self.phone, self.email, self.address, self.birthday)

    def same_fields(self, other: "Contact") -> bool:
        """True if both contacts hold the same data, whatever their ids."""
        return self.fields() == other.fields()

    def with_new_id(self) -> "Contact":
        """Same data under a freshly generated id."""
        return self.model_copy(update={"id": _new_contact_id()})

    def to_row(self) -> List[str]:
        return list(self.fields())

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "Contact":
        """
        Build a contact from one backing-file row.

        Args:
            row: Exactly five strings in ``CONTACT_FIELDS`` order

        Raises:
            ValueError: If the row does not have exactly five fields
        """
        if len(row) != len(CONTACT_FIELDS):
            raise ValueError(
                f"Expected {len(CONTACT_FIELDS)} fields, got {len(row)}"
            )
        return cls(**dict(zip(CONTACT_FIELDS, row)))

    def __str__(self) -> str:
        return (
            f"{self.name}  {self.phone}   {self.email}   "
            f"{self.address}   {self.birthday}"
        )
