from __future__ import annotations

from typing import Any

from spaces_provider.models.file import file_attr


def _segment(value: str | None) -> str:
    if not value:
        return ""
    return f"{value.rstrip('/')}/"


def key_prefix(directory: str | None) -> str:
    return _segment(directory)


def file_key(file: Any, directory: str | None = None) -> str:
    """Build the object key: directory, then file path, then hash + extension."""
    return (
        f"{key_prefix(directory)}"
        f"{_segment(file_attr(file, 'path'))}"
        f"{file_attr(file, 'hash')}{file_attr(file, 'ext') or ''}"
    )
