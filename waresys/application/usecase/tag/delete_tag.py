"""Delete tag use case."""

from pydantic import BaseModel

from waresys.domain.service import TagService

from .common import parse_tag_id


class DeleteTagRequest(BaseModel):
    """Delete tag request."""

    tag_id: str  # UUID string from the path


class DeleteTagUseCase:
    """Use case for deleting a tag."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize delete tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: DeleteTagRequest) -> None:
        """Execute delete tag flow.

        Raises:
            ValidationError: If the tag id is malformed
            NotFoundError: If the tag doesn't exist
            RemovalError: If the store failed to remove an existing tag
        """
        await self.tag_service.delete_tag(parse_tag_id(request.tag_id))
