"""
Structured outcomes of loading and saving the backing file.

File: store/results.py
Created: 2026-10-14
Last Modified: 2026-10-17
"""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import Contact


class LoadResult(BaseModel):
    """What a read of the backing file produced."""

    path: Path = Field(..., description="Backing file that was read")
    contacts: List[Contact] = Field(default_factory=list, description="Contacts parsed, in file order")
    skipped: int = Field(0, description="Non-blank rows dropped for having the wrong field count", ge=0)
    error: Optional[str] = Field(None, description="Read failure message; contacts is empty when set")

    @property
    def ok(self) -> bool:
        return self.error is None


class SaveResult(BaseModel):
    """What a write of the backing file produced."""

    path: Path = Field(..., description="Backing file that was written")
    written: int = Field(0, description="Number of contacts written", ge=0)
    error: Optional[str] = Field(None, description="Write failure message")

    @property
    def ok(self) -> bool:
        return self.error is None
