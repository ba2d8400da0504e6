from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

from spaces_provider.core.config import settings
from spaces_provider.provider import SpacesProvider, init
from spaces_provider.storage.base import ObjectStoreClient


def create_provider(
    config: Mapping[str, Any] | None = None,
    client: ObjectStoreClient | None = None,
) -> SpacesProvider:
    return init(config if config is not None else settings.provider_config(), client=client)


@lru_cache(maxsize=1)
def get_provider() -> SpacesProvider:
    return create_provider()
