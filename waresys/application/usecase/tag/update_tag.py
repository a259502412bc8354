"""Update tag use case."""

import logfire
from pydantic import BaseModel

from waresys.domain.service import TagService
from waresys.domain.value import ItemReference, resolve_item_reference

from .common import PopulatedTagInfo, parse_tag_id, to_populated_tag_info


class UpdateTagRequest(BaseModel):
    """Update tag request."""

    tag_id: str  # UUID string from the path
    type: str  # Checked against TagType by the service
    item: ItemReference | None = None  # Bare id or expanded item object


class UpdateTagUseCase:
    """Use case for setting a tag's type and item."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize update tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: UpdateTagRequest) -> PopulatedTagInfo:
        """Execute update tag flow.

        Steps:
        1. Resolve the item reference to an item id
        2. Update type and item via the service
        3. Return the tag with the item populated

        Raises:
            ValidationError: If the id, type or item reference is malformed
            NotFoundError: If the tag doesn't exist
            StoreError: If saving or populating fails
        """
        tag_id = parse_tag_id(request.tag_id)
        item_id = resolve_item_reference(request.item)

        with logfire.span("update_tag.execute", tag_id=str(tag_id)):
            populated = await self.tag_service.update_tag(
                tag_id, type=request.type, item_id=item_id
            )
            return to_populated_tag_info(populated)
