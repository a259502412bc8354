"""Get-or-create tag by uid use case."""

import logfire
from pydantic import BaseModel

from waresys.domain.error import ValidationError
from waresys.domain.service import TagService
from waresys.domain.value import TagUid

from .common import TagInfo, to_tag_info


class GetOrCreateTagRequest(BaseModel):
    """Get-or-create tag request."""

    uid: str


class GetOrCreateTagResponse(BaseModel):
    """Get-or-create tag response."""

    tag: TagInfo
    created: bool  # True when this call provisioned the tag


class GetOrCreateTagUseCase:
    """Use case for looking up a tag by uid, provisioning unknown uids.

    This is a read that may write: the first lookup of a uid creates the tag.
    """

    def __init__(self, tag_service: TagService) -> None:
        """Initialize get-or-create tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: GetOrCreateTagRequest) -> GetOrCreateTagResponse:
        """Execute get-or-create flow.

        Raises:
            ValidationError: If the uid is malformed
            ConflictError: If a concurrent request created the same uid
        """
        try:
            uid = TagUid(request.uid)
        except ValueError as e:
            raise ValidationError(f"Invalid tag uid: {e}")

        with logfire.span("get_or_create_tag.execute", uid=uid.root):
            tag, created = await self.tag_service.get_or_create_by_uid(uid)
            return GetOrCreateTagResponse(tag=to_tag_info(tag), created=created)
