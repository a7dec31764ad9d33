"""Comment store infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
import logfire
from dishka import Scope, provide

from remarks.adapter.pocketbase import PocketBaseCommentStore
from remarks.config import StoreSettings
from remarks.domain.repository import CommentStore
from remarks.util.di.base import ProviderBase
from remarks.util.error import ConfigurationError


class StoreProvider(ProviderBase):
    """Comment store component base."""

    __mock_component__ = "store"


class ProdStoreProvider(StoreProvider):
    """Production comment store provider using PocketBase."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, store_settings: StoreSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the HTTP client, closed when the container closes."""
        async with httpx.AsyncClient(
            timeout=store_settings.timeout_seconds,
            headers={"User-Agent": store_settings.user_agent},
        ) as client:
            yield client
        logfire.info("Comment store HTTP client closed")

    @provide(scope=Scope.APP)
    def get_comment_store(
        self, client: httpx.AsyncClient, store_settings: StoreSettings
    ) -> CommentStore:
        """Provide PocketBase comment store.

        Raises:
            ConfigurationError: If the store URL or collection is not configured
        """
        if not store_settings.base_url:
            raise ConfigurationError("Comment store base URL must be configured")
        if not store_settings.collection:
            raise ConfigurationError("Comment collection must be configured")

        return PocketBaseCommentStore(
            client=client,
            records_url=store_settings.records_url,
            page_size=store_settings.page_size,
        )
