"""List tags use case."""

import logfire

from waresys.domain.service import TagService

from .common import TagInfo, to_tag_info
from .query import ListTagsRequest


class ListTagsUseCase:
    """Use case for listing tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> list[TagInfo]:
        """Execute list tags flow.

        Args:
            request: Validated list request

        Returns:
            Tags in store order, or in the requested sort order
        """
        with logfire.span(
            "list_tags.execute",
            skip=request.skip,
            limit=request.limit,
        ):
            tags = await self.tag_service.list_tags(request.to_query())
            return [to_tag_info(tag) for tag in tags]
