"""Endpoint and public URL construction for virtual-hosted buckets.

Virtual-hosted addressing puts the bucket in front of the storage host
(``https://{bucket}.{host}/{key}``). Callers may configure either the bare
regional endpoint or one that is already bucket-qualified.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit, urlunsplit

_SCHEME_RE = re.compile(r"^https?://")


def normalize_endpoint(endpoint: str, bucket: str | None) -> str:
    """Return the endpoint used to address the bucket.

    The bucket is prepended to the host unless it already appears anywhere in
    the endpoint. Anything that cannot be parsed as an absolute URL is
    returned unchanged; this function never raises.
    """
    try:
        if not bucket or bucket in endpoint:
            return endpoint

        parts = urlsplit(endpoint)
        parts.port  # raises ValueError for a malformed port
        host = parts.netloc.rpartition("@")[2]
        if not parts.scheme or not host:
            return endpoint
        if host.startswith(f"{bucket}."):
            return endpoint

        return urlunsplit((parts.scheme, f"{bucket}.{host}", parts.path or "/", "", ""))
    except (TypeError, ValueError):
        return endpoint


def public_url(
    key: str,
    endpoint: str,
    bucket: str | None,
    cdn_endpoint: str | None = None,
) -> str:
    """Return the URL clients use to fetch key.

    ``endpoint`` must be the endpoint as configured, not the normalized one.
    """
    if cdn_endpoint:
        base = cdn_endpoint[:-1] if cdn_endpoint.endswith("/") else cdn_endpoint
        return f"{base}/{key}"

    host = _SCHEME_RE.sub("", endpoint).rstrip("/")
    return f"https://{bucket}.{host}/{key}"
