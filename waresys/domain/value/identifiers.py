"""Strongly typed identifiers for warehouse entities.

Using NewType keeps tag and item identifiers from being mixed up
while still being plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

TagId = NewType("TagId", UUID)
ItemId = NewType("ItemId", UUID)
