from __future__ import annotations

from spaces_provider.storage.base import ObjectStoreClient
from spaces_provider.storage.s3 import S3ObjectStoreClient


def create_provider(*args, **kwargs):
    from spaces_provider.storage.factory import create_provider as _create_provider

    return _create_provider(*args, **kwargs)


def get_provider():
    from spaces_provider.storage.factory import get_provider as _get_provider

    return _get_provider()


__all__ = ["ObjectStoreClient", "S3ObjectStoreClient", "create_provider", "get_provider"]
