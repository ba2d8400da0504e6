from __future__ import annotations

import asyncio
import io

import pytest

from spaces_provider.exceptions import ContentReadError, MissingContentError
from spaces_provider.storage import content
from spaces_provider.storage.content import read_content


class ExplodingStream:
    def read(self, size=-1):
        raise OSError("connection reset")


class AsyncReader:
    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(data)

    async def read(self, size: int = -1) -> bytes:
        return self._buffer.read(size)


async def _chunks(*parts: bytes):
    for part in parts:
        await asyncio.sleep(0)
        yield part


def test_buffer_wins_over_streams(make_file):
    file = make_file(buffer=b"from-buffer", stream=ExplodingStream(), get_stream=lambda: ExplodingStream())
    assert asyncio.run(read_content(file)) == b"from-buffer"


def test_empty_buffer_still_counts_as_content(make_file):
    file = make_file(buffer=b"", stream=io.BytesIO(b"stream"))
    assert asyncio.run(read_content(file)) == b""


def test_stream_wins_over_factory(make_file):
    file = make_file(buffer=None, stream=io.BytesIO(b"from-stream"), get_stream=lambda: ExplodingStream())
    assert asyncio.run(read_content(file)) == b"from-stream"


def test_file_like_stream_is_read_in_order(make_file, monkeypatch):
    monkeypatch.setattr(content, "CHUNK_SIZE", 3)
    file = make_file(buffer=None, stream=io.BytesIO(b"abcdefghij"))
    assert asyncio.run(read_content(file)) == b"abcdefghij"


def test_async_iterable_stream(make_file):
    file = make_file(buffer=None, stream=_chunks(b"one-", b"two-", b"three"))
    assert asyncio.run(read_content(file)) == b"one-two-three"


def test_async_reader_stream(make_file, monkeypatch):
    monkeypatch.setattr(content, "CHUNK_SIZE", 4)
    file = make_file(buffer=None, stream=AsyncReader(b"async-content"))
    assert asyncio.run(read_content(file)) == b"async-content"


def test_iterable_of_chunks(make_file):
    file = make_file(buffer=None, stream=[b"a", bytearray(b"b"), memoryview(b"c")])
    assert asyncio.run(read_content(file)) == b"abc"


def test_factory_stream_is_read_and_closed(make_file):
    opened = []

    def get_stream():
        stream = io.BytesIO(b"from-factory")
        opened.append(stream)
        return stream

    file = make_file(buffer=None, get_stream=get_stream)
    assert asyncio.run(read_content(file)) == b"from-factory"
    assert len(opened) == 1
    assert opened[0].closed


def test_missing_content_source(make_file):
    file = make_file(buffer=None)
    with pytest.raises(MissingContentError) as exc_info:
        asyncio.run(read_content(file))
    assert exc_info.value.code == "FILE_CONTENT_MISSING"


def test_stream_error_becomes_content_read_error(make_file):
    file = make_file(buffer=None, stream=ExplodingStream())
    with pytest.raises(ContentReadError) as exc_info:
        asyncio.run(read_content(file))
    assert isinstance(exc_info.value.__cause__, OSError)


def test_factory_error_becomes_content_read_error(make_file):
    def get_stream():
        raise FileNotFoundError("tmp file vanished")

    file = make_file(buffer=None, get_stream=get_stream)
    with pytest.raises(ContentReadError):
        asyncio.run(read_content(file))


def test_text_chunks_are_rejected(make_file):
    file = make_file(buffer=None, stream=["not", "bytes"])
    with pytest.raises(ContentReadError):
        asyncio.run(read_content(file))


def test_mapping_file_with_buffer():
    assert asyncio.run(read_content({"hash": "h", "ext": ".txt", "buffer": b"hi"})) == b"hi"
