from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping


class ObjectStoreClient(ABC):
    @abstractmethod
    def put_object(
        self,
        key: str,
        content: bytes,
        content_type: str,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Write content under key, replacing any existing object."""

    @abstractmethod
    def delete_object(self, key: str) -> bool:
        """Delete key. Return False when the object did not exist."""

    @abstractmethod
    def object_exists(self, key: str) -> bool:
        """Return whether key exists."""
