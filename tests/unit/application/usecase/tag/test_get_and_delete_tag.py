"""Unit tests for the get, list and delete tag use cases."""

import pytest

from waresys.application.usecase.tag import (
    DeleteTagRequest,
    DeleteTagUseCase,
    GetTagRequest,
    GetTagUseCase,
    ListTagsRequest,
    ListTagsUseCase,
)
from waresys.domain.error import NotFoundError, ValidationError
from waresys.domain.repository import ItemRepository, TagRepository
from waresys.domain.value import TagType
from tests.factories import make_item, make_tag
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetTag:
    """Tests for GetTagUseCase."""

    @pytest.mark.asyncio
    async def test_returns_item_as_bare_id(self, unit_env):
        item = await (await unit_env.get(ItemRepository)).save(make_item())
        tag = await (await unit_env.get(TagRepository)).create(
            make_tag(uid="ABC123", type=TagType.ITEM, item_id=item.id)
        )
        use_case = await unit_env.get(GetTagUseCase)

        result = await use_case.execute(GetTagRequest(tag_id=str(tag.id)))

        assert result.id == str(tag.id)
        assert result.item == str(item.id)

    @pytest.mark.asyncio
    async def test_malformed_id(self, unit_env):
        use_case = await unit_env.get(GetTagUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(GetTagRequest(tag_id="abc"))


class TestListTags:
    """Tests for ListTagsUseCase."""

    @pytest.mark.asyncio
    async def test_default_request_lists_everything_in_insertion_order(self, unit_env):
        tag_repo = await unit_env.get(TagRepository)
        tags = [await tag_repo.create(make_tag(uid=uid)) for uid in ["B", "A"]]
        use_case = await unit_env.get(ListTagsUseCase)

        result = await use_case.execute(ListTagsRequest())

        assert [t.id for t in result] == [str(t.id) for t in tags]

    @pytest.mark.asyncio
    async def test_sort_and_limit(self, unit_env):
        tag_repo = await unit_env.get(TagRepository)
        for uid in ["B", "C", "A"]:
            await tag_repo.create(make_tag(uid=uid))
        use_case = await unit_env.get(ListTagsUseCase)

        result = await use_case.execute(
            ListTagsRequest.model_validate({"sort": "uid", "limit": 2})
        )

        assert [t.uid for t in result] == ["A", "B"]


class TestDeleteTag:
    """Tests for DeleteTagUseCase."""

    @pytest.mark.asyncio
    async def test_deletes_tag(self, unit_env):
        tag = await (await unit_env.get(TagRepository)).create(make_tag(uid="X"))
        use_case = await unit_env.get(DeleteTagUseCase)

        await use_case.execute(DeleteTagRequest(tag_id=str(tag.id)))

        get_tag = await unit_env.get(GetTagUseCase)
        with pytest.raises(NotFoundError):
            await get_tag.execute(GetTagRequest(tag_id=str(tag.id)))
