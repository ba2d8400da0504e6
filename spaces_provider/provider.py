from __future__ import annotations

import asyncio
from typing import Any, Mapping

import structlog
from pydantic import ValidationError

from spaces_provider.exceptions import ConfigurationError
from spaces_provider.models.file import file_attr, set_file_url
from spaces_provider.schemas import ProviderOptions
from spaces_provider.storage.addressing import normalize_endpoint, public_url
from spaces_provider.storage.base import ObjectStoreClient
from spaces_provider.storage.content import read_content
from spaces_provider.storage.keys import file_key
from spaces_provider.storage.s3 import S3ObjectStoreClient

logger = structlog.get_logger()

DEFAULT_CONTENT_TYPE = "application/octet-stream"
PUBLIC_READ_HEADERS = {"x-amz-acl": "public-read"}


class SpacesProvider:
    """Upload provider backed by an S3-compatible bucket.

    Holds only immutable state, so one instance serves any number of
    concurrent operations. ``upload`` failures propagate; ``delete`` and
    ``check`` are best-effort and never raise.
    """

    def __init__(self, options: ProviderOptions, client: ObjectStoreClient | None = None) -> None:
        self._options = options
        self._endpoint = normalize_endpoint(options.endpoint, options.bucket)
        self._client = client or S3ObjectStoreClient(
            access_key=options.access_key,
            secret_key=options.secret_key,
            endpoint=self._endpoint,
            region=options.region,
            timeout=options.request_timeout,
        )

    @property
    def options(self) -> ProviderOptions:
        return self._options

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def client(self) -> ObjectStoreClient:
        return self._client

    def file_key(self, file: Any) -> str:
        return file_key(file, self._options.directory)

    def public_url(self, key: str) -> str:
        return public_url(
            key,
            endpoint=self._options.endpoint,
            bucket=self._options.bucket,
            cdn_endpoint=self._options.cdn_endpoint,
        )

    async def upload(self, file: Any) -> None:
        key = self.file_key(file)
        try:
            content = await read_content(file)
            await asyncio.to_thread(
                self._client.put_object,
                key,
                content,
                file_attr(file, "mime") or DEFAULT_CONTENT_TYPE,
                headers=PUBLIC_READ_HEADERS,
            )
        except Exception:
            logger.exception("upload_failed", key=key)
            raise

        url = self.public_url(key)
        set_file_url(file, url)
        logger.info("upload_completed", key=key, size=len(content), url=url)

    async def upload_stream(self, file: Any) -> None:
        await self.upload(file)

    async def delete(self, file: Any) -> None:
        key = self.file_key(file)
        try:
            await asyncio.to_thread(self._client.delete_object, key)
        except Exception as exc:
            # the object may already be gone; callers treat delete as cleanup
            logger.warning("delete_failed", key=key, error=str(exc))

    async def check(self, file: Any) -> bool:
        key = self.file_key(file)
        try:
            return bool(await asyncio.to_thread(self._client.object_exists, key))
        except Exception as exc:
            logger.warning("check_failed", key=key, error=str(exc))
            return False


def init(
    config: Mapping[str, Any] | ProviderOptions,
    *,
    client: ObjectStoreClient | None = None,
) -> SpacesProvider:
    """Validate the host config and return a ready provider."""
    if isinstance(config, ProviderOptions):
        options = config
    else:
        try:
            options = ProviderOptions.model_validate(dict(config))
        except ValidationError as exc:
            raise ConfigurationError("INVALID_CONFIG", str(exc)) from exc

    if not options.bucket:
        logger.warning("bucket_not_configured", endpoint=options.endpoint)

    provider = SpacesProvider(options, client=client)
    logger.info(
        "provider_initialized",
        endpoint=provider.endpoint,
        bucket=options.bucket,
        directory=options.directory,
        cdn_endpoint=options.cdn_endpoint,
    )
    return provider
