from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass
class StoredFile:
    """File metadata handed over by the host runtime.

    Exactly one of ``buffer``, ``stream`` or ``get_stream`` is expected to
    carry the content. The provider only ever writes ``url``.
    """

    hash: str
    ext: str
    mime: str = "application/octet-stream"
    name: str | None = None
    size: float | None = None
    path: str | None = None
    url: str = ""
    buffer: bytes | None = None
    stream: Any = None
    get_stream: Callable[[], Any] | None = None
    alternative_text: str | None = None
    caption: str | None = None
    width: int | None = None
    height: int | None = None
    formats: dict[str, Any] = field(default_factory=dict)
    preview_url: str | None = None


def file_attr(file: Any, name: str, default: Any = None) -> Any:
    """Read a field from a file object or a plain mapping."""
    if isinstance(file, dict):
        return file.get(name, default)
    return getattr(file, name, default)


def set_file_url(file: Any, url: str) -> None:
    if isinstance(file, dict):
        file["url"] = url
    else:
        file.url = url
