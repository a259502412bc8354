"""Tag use cases."""

from .common import ItemInfo, PopulatedTagInfo, TagInfo
from .delete_tag import DeleteTagRequest, DeleteTagUseCase
from .get_or_create_tag import (
    GetOrCreateTagRequest,
    GetOrCreateTagResponse,
    GetOrCreateTagUseCase,
)
from .get_tag import GetTagRequest, GetTagUseCase
from .list_tags import ListTagsUseCase
from .query import ListTagsRequest
from .update_tag import UpdateTagRequest, UpdateTagUseCase

__all__ = [
    "DeleteTagRequest",
    "DeleteTagUseCase",
    "GetOrCreateTagRequest",
    "GetOrCreateTagResponse",
    "GetOrCreateTagUseCase",
    "GetTagRequest",
    "GetTagUseCase",
    "ItemInfo",
    "ListTagsRequest",
    "ListTagsUseCase",
    "PopulatedTagInfo",
    "TagInfo",
    "UpdateTagRequest",
    "UpdateTagUseCase",
]
