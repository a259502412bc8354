"""Domain value objects for the warehouse tag registry.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from uuid import UUID

from pydantic import ConfigDict, Field, field_validator

from waresys.domain.error import ValidationError
from waresys.domain.value.common import RootValueObject, ValueObject
from waresys.domain.value.identifiers import ItemId


class TagType(str, Enum):
    """What a physical tag is attached to."""

    UNKNOWN = "unknown"  # Freshly provisioned, not yet assigned
    ITEM = "item"  # Identifies a stock item
    MODE = "mode"  # Switches the reader into a mode (e.g. stock-take)


class TagUid(RootValueObject[str]):
    """Externally assigned tag identifier, e.g. the NFC chip serial.

    Must be 1-255 characters with no surrounding whitespace.
    """

    @field_validator("root")
    @classmethod
    def validate_uid(cls, v: str) -> str:
        """Validate uid length and whitespace."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Tag uid must be 1-255 characters")
        if v != v.strip():
            raise ValueError("Tag uid must not have surrounding whitespace")
        return v


class ExpandedItemReference(ValueObject):
    """Item reference submitted as an object.

    Clients that previously fetched a populated tag send the item back as
    an object. Either ``id`` or ``_id`` carries the identifier; any other
    fields are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str | None = None
    underscore_id: str | None = Field(default=None, alias="_id")


# Bare identifier or expanded object
ItemReference = str | ExpandedItemReference


def resolve_item_reference(reference: ItemReference | None) -> ItemId | None:
    """Resolve an item reference to a canonical item id.

    A bare string is taken as the id. An object yields ``id`` when set,
    otherwise ``_id``. A missing reference clears the item.

    Args:
        reference: Item reference in either shape, or None

    Returns:
        Item id, or None when the reference is empty

    Raises:
        ValidationError: If the identifier is not a valid item id
    """
    if reference is None:
        return None

    if isinstance(reference, str):
        raw = reference
    else:
        raw = reference.id if reference.id else reference.underscore_id

    if raw is None:
        return None

    try:
        return ItemId(UUID(raw))
    except ValueError:
        raise ValidationError(f"Invalid item id: {raw}")
