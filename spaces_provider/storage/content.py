from __future__ import annotations

import asyncio
import inspect
from typing import Any

from spaces_provider.exceptions import ContentReadError, MissingContentError, ProviderError
from spaces_provider.models.file import file_attr

CHUNK_SIZE = 1024 * 1024


def _as_bytes(chunk: Any) -> bytes:
    if isinstance(chunk, (bytes, bytearray, memoryview)):
        return bytes(chunk)
    raise ContentReadError(f"stream produced a non-bytes chunk: {type(chunk).__name__}")


def _drain(stream: Any) -> list[bytes]:
    chunks: list[bytes] = []
    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(_as_bytes(chunk))
    return chunks


async def read_stream(stream: Any) -> bytes:
    """Read a byte stream to the end and return the concatenated chunks.

    Accepts async iterables, objects with an async or blocking ``read`` and
    plain iterables of chunks. Blocking reads run in a worker thread.
    """
    chunks: list[bytes] = []
    try:
        if hasattr(stream, "__aiter__"):
            async for chunk in stream:
                chunks.append(_as_bytes(chunk))
        elif hasattr(stream, "read"):
            if inspect.iscoroutinefunction(stream.read):
                while True:
                    chunk = await stream.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    chunks.append(_as_bytes(chunk))
            else:
                chunks = await asyncio.to_thread(_drain, stream)
        else:
            chunks = await asyncio.to_thread(lambda: [_as_bytes(chunk) for chunk in stream])
    except ProviderError:
        raise
    except Exception as exc:
        raise ContentReadError(f"failed to read file stream: {exc}") from exc
    return b"".join(chunks)


async def read_content(file: Any) -> bytes:
    """Return the full content of file.

    The in-memory buffer wins over an open stream, which wins over the stream
    factory.
    """
    buffer = file_attr(file, "buffer")
    if buffer is not None:
        return bytes(buffer)

    stream = file_attr(file, "stream")
    if stream is not None:
        return await read_stream(stream)

    get_stream = file_attr(file, "get_stream")
    if get_stream is None:
        raise MissingContentError()

    try:
        stream = get_stream()
    except Exception as exc:
        raise ContentReadError(f"failed to open file stream: {exc}") from exc
    try:
        return await read_stream(stream)
    finally:
        # streams produced by the factory are owned here
        close = getattr(stream, "close", None)
        if callable(close) and not inspect.iscoroutinefunction(close):
            close()
