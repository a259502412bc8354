"""Application layer DI providers."""

from dishka import Scope, provide

from waresys.application.usecase.tag import (
    DeleteTagUseCase,
    GetOrCreateTagUseCase,
    GetTagUseCase,
    ListTagsUseCase,
    UpdateTagUseCase,
)
from waresys.domain.service import TagService
from waresys.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_get_tag_use_case(self, tag_service: TagService) -> GetTagUseCase:
        """Provide get tag use case."""
        return GetTagUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_get_or_create_tag_use_case(
        self, tag_service: TagService
    ) -> GetOrCreateTagUseCase:
        """Provide get-or-create tag use case."""
        return GetOrCreateTagUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_update_tag_use_case(self, tag_service: TagService) -> UpdateTagUseCase:
        """Provide update tag use case."""
        return UpdateTagUseCase(tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_tag_use_case(self, tag_service: TagService) -> DeleteTagUseCase:
        """Provide delete tag use case."""
        return DeleteTagUseCase(tag_service=tag_service)
