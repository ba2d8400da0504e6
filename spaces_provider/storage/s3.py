from __future__ import annotations

from typing import Mapping
from urllib.parse import quote

import requests
import structlog
from botocore.auth import S3SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials

from spaces_provider.exceptions import ObjectStoreError
from spaces_provider.storage.base import ObjectStoreClient

logger = structlog.get_logger()


class S3ObjectStoreClient(ObjectStoreClient):
    """Object store client for a bucket exposed at its own base URL.

    ``endpoint`` is the virtual-hosted bucket URL (``https://{bucket}.{host}``);
    keys are appended to it directly. Requests are signed with SigV4.
    """

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        endpoint: str,
        region: str,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._timeout = timeout
        self._signer = S3SigV4Auth(Credentials(access_key, secret_key), "s3", region)
        self._session = session or requests.Session()

    def object_url(self, key: str) -> str:
        return f"{self._endpoint}/{quote(key)}"

    def _send(
        self,
        method: str,
        key: str,
        body: bytes = b"",
        headers: Mapping[str, str] | None = None,
    ) -> requests.Response:
        url = self.object_url(key)
        request = AWSRequest(method=method, url=url, data=body, headers=dict(headers or {}))
        self._signer.add_auth(request)

        logger.debug("object_store_request", method=method, key=key)
        try:
            return self._session.request(
                method,
                url,
                data=body,
                headers=dict(request.headers.items()),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise ObjectStoreError(
                "OBJECT_STORE_UNAVAILABLE",
                f"{method} {key} failed: {exc}",
            ) from exc

    @staticmethod
    def _failed(method: str, key: str, response: requests.Response) -> ObjectStoreError:
        message = f"{method} {key} returned {response.status_code}"
        detail = (response.text or "")[:200]
        if detail:
            message = f"{message}: {detail}"
        return ObjectStoreError(
            "OBJECT_STORE_REQUEST_FAILED",
            message,
            status_code=response.status_code,
        )

    def put_object(
        self,
        key: str,
        content: bytes,
        content_type: str,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        request_headers = {"Content-Type": content_type, **(headers or {})}
        response = self._send("PUT", key, body=content, headers=request_headers)
        if not 200 <= response.status_code < 300:
            raise self._failed("PUT", key, response)

    def delete_object(self, key: str) -> bool:
        response = self._send("DELETE", key)
        if response.status_code == 404:
            return False
        if not 200 <= response.status_code < 300:
            raise self._failed("DELETE", key, response)
        return True

    def object_exists(self, key: str) -> bool:
        response = self._send("HEAD", key)
        if response.status_code == 404:
            return False
        if not 200 <= response.status_code < 300:
            raise self._failed("HEAD", key, response)
        return True
