"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from waresys.application.usecase.tag import (
    DeleteTagRequest,
    DeleteTagUseCase,
    GetOrCreateTagRequest,
    GetOrCreateTagUseCase,
    GetTagRequest,
    GetTagUseCase,
    ListTagsRequest,
    ListTagsUseCase,
    PopulatedTagInfo,
    TagInfo,
    UpdateTagRequest,
    UpdateTagUseCase,
)
from waresys.domain.error import (
    ConflictError,
    NotFoundError,
    RemovalError,
    StoreError,
    ValidationError,
)
from waresys.domain.value import ItemReference
from waresys.interface.api.auth import require_client

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
    dependencies=[Depends(require_client)],
)


def _bad_request(message: str, error: Exception) -> HTTPException:
    logfire.warn(message, error=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def _not_found(error: NotFoundError) -> HTTPException:
    logfire.warn("Tag not found", tag_id=error.identifier)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tag not found")


@router.get(
    "",
    response_model=list[TagInfo],
    summary="List tags",
    description="Get tags with skip/limit pagination, optional sort and type filter.",
)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    skip: int | None = None,
    limit: int | None = None,
    sort: str | None = None,
    type: str | None = None,
) -> list[TagInfo]:
    """List tags.

    Args:
        use_case: List tags use case (injected)
        skip: Number of tags to skip (>= 0, default 0)
        limit: Maximum number of tags to return (1-100, default 30)
        sort: Comma separated sort fields, ``-`` prefix for descending
        type: Only return tags of this type

    Returns:
        Array of tags

    Example:
        GET /tags?skip=30&limit=30&sort=-updated_at
    """
    params = {"skip": skip, "limit": limit, "sort": sort, "type": type}
    try:
        request = ListTagsRequest.model_validate(
            {k: v for k, v in params.items() if v is not None}
        )
    except PydanticValidationError as e:
        raise _bad_request("List tags validation error", e)

    try:
        return await use_case.execute(request)
    except StoreError as e:
        raise _bad_request("List tags store error", e)
    except Exception as e:
        logfire.error("Unexpected error listing tags", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list tags",
        )


@router.get(
    "/uid/{uid}",
    response_model=TagInfo,
    responses={201: {"model": TagInfo, "description": "Successfully created"}},
    summary="Get or create a tag by uid",
)
async def get_or_create_tag_by_uid(
    uid: str,
    response: Response,
    use_case: FromDishka[GetOrCreateTagUseCase],
) -> TagInfo:
    """Get a tag by its external uid, creating it on first lookup.

    Returns 200 with the existing tag, or 201 with a newly provisioned tag
    of type ``unknown``.

    Args:
        uid: External tag uid
        response: Outgoing response, used to set the status code
        use_case: Get-or-create tag use case (injected)

    Returns:
        The tag
    """
    try:
        result = await use_case.execute(GetOrCreateTagRequest(uid=uid))
    except ConflictError as e:
        logfire.warn("Tag uid conflict", uid=uid, error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except (ValidationError, StoreError) as e:
        raise _bad_request("Get-or-create tag error", e)
    except Exception as e:
        logfire.error("Unexpected error fetching tag by uid", uid=uid, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch tag",
        )

    if result.created:
        response.status_code = status.HTTP_201_CREATED
    return result.tag


@router.get("/{tag_id}", response_model=TagInfo, summary="Get a tag")
async def get_tag(
    tag_id: str,
    use_case: FromDishka[GetTagUseCase],
) -> TagInfo:
    """Get a tag by ID.

    Args:
        tag_id: Tag UUID
        use_case: Get tag use case (injected)

    Returns:
        The tag
    """
    try:
        return await use_case.execute(GetTagRequest(tag_id=tag_id))
    except NotFoundError as e:
        raise _not_found(e)
    except (ValidationError, StoreError) as e:
        raise _bad_request("Get tag error", e)
    except Exception as e:
        logfire.error("Unexpected error fetching tag", tag_id=tag_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch tag",
        )


class UpdateTagAPIRequest(BaseModel):
    """API request for updating a tag."""

    type: str  # unknown, item or mode
    item: ItemReference | None = None  # Item id, or item object with id/_id


@router.put("/{tag_id}", response_model=PopulatedTagInfo, summary="Update a tag")
async def update_tag(
    tag_id: str,
    request: UpdateTagAPIRequest,
    use_case: FromDishka[UpdateTagUseCase],
) -> PopulatedTagInfo:
    """Update a tag's type and item.

    ``item`` may be sent as a bare id or as the item object returned by
    earlier responses. The response has the item expanded.

    Args:
        tag_id: Tag UUID
        request: New type and item
        use_case: Update tag use case (injected)

    Returns:
        Updated tag with item populated
    """
    try:
        return await use_case.execute(
            UpdateTagRequest(tag_id=tag_id, type=request.type, item=request.item)
        )
    except NotFoundError as e:
        raise _not_found(e)
    except (ValidationError, StoreError) as e:
        raise _bad_request("Update tag error", e)
    except Exception as e:
        logfire.error("Unexpected error updating tag", tag_id=tag_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update tag",
        )


@router.delete(
    "/{tag_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a tag",
)
async def delete_tag(
    tag_id: str,
    use_case: FromDishka[DeleteTagUseCase],
) -> Response:
    """Delete a tag.

    Args:
        tag_id: Tag UUID
        use_case: Delete tag use case (injected)

    Returns:
        Empty 204 response
    """
    try:
        await use_case.execute(DeleteTagRequest(tag_id=tag_id))
    except NotFoundError as e:
        raise _not_found(e)
    except RemovalError as e:
        logfire.error("Tag removal failed", tag_id=tag_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error removing tag",
        )
    except (ValidationError, StoreError) as e:
        raise _bad_request("Delete tag error", e)
    except Exception as e:
        logfire.error("Unexpected error deleting tag", tag_id=tag_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete tag",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
