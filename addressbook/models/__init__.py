"""
Shared data models for the address book.
"""

from .contact import CONTACT_FIELDS, Contact

__all__ = [
    "CONTACT_FIELDS",
    "Contact",
]
