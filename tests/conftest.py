from __future__ import annotations

from typing import Mapping

import pytest

from spaces_provider.models import StoredFile
from spaces_provider.storage.base import ObjectStoreClient


class RecordingObjectStore(ObjectStoreClient):
    """In-memory object store that records every call."""

    def __init__(self) -> None:
        self.objects: dict[str, bytes] = {}
        self.puts: list[dict] = []
        self.deletes: list[str] = []
        self.checks: list[str] = []
        self.error: Exception | None = None

    def put_object(
        self,
        key: str,
        content: bytes,
        content_type: str,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        if self.error is not None:
            raise self.error
        self.puts.append(
            {
                "key": key,
                "content": content,
                "content_type": content_type,
                "headers": dict(headers or {}),
            }
        )
        self.objects[key] = content

    def delete_object(self, key: str) -> bool:
        self.deletes.append(key)
        if self.error is not None:
            raise self.error
        return self.objects.pop(key, None) is not None

    def object_exists(self, key: str) -> bool:
        self.checks.append(key)
        if self.error is not None:
            raise self.error
        return key in self.objects


@pytest.fixture
def store() -> RecordingObjectStore:
    return RecordingObjectStore()


@pytest.fixture
def base_config() -> dict:
    return {
        "key": "test-key",
        "secret": "test-secret",
        "endpoint": "https://nyc3.digitaloceanspaces.com",
        "region": "nyc3",
        "bucket": "test-space",
    }


@pytest.fixture
def make_file():
    def _make_file(**overrides) -> StoredFile:
        fields = {
            "hash": "test-hash",
            "ext": ".png",
            "mime": "image/png",
            "buffer": b"test-content",
        }
        fields.update(overrides)
        return StoredFile(**fields)

    return _make_file
