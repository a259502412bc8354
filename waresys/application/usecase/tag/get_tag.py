"""Get tag use case."""

from pydantic import BaseModel

from waresys.domain.service import TagService

from .common import TagInfo, parse_tag_id, to_tag_info


class GetTagRequest(BaseModel):
    """Get tag request."""

    tag_id: str  # UUID string from the path


class GetTagUseCase:
    """Use case for retrieving a tag by ID."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize get tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: GetTagRequest) -> TagInfo:
        """Execute get tag flow.

        Raises:
            ValidationError: If the tag id is malformed
            NotFoundError: If the tag doesn't exist
        """
        tag = await self.tag_service.get_tag(parse_tag_id(request.tag_id))
        return to_tag_info(tag)
