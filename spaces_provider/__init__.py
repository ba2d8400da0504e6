from spaces_provider.exceptions import (
    ConfigurationError,
    ContentReadError,
    MissingContentError,
    ObjectStoreError,
    ProviderError,
)
from spaces_provider.models import StoredFile
from spaces_provider.provider import SpacesProvider, init
from spaces_provider.schemas import ProviderOptions

__all__ = [
    "ConfigurationError",
    "ContentReadError",
    "MissingContentError",
    "ObjectStoreError",
    "ProviderError",
    "ProviderOptions",
    "SpacesProvider",
    "StoredFile",
    "init",
]
