import os
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "y", "on"}


def _float(val: str | None, default: float) -> float:
    if not val:
        return default
    try:
        return float(val)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    # Credentials / backend
    access_key: str | None = os.getenv("SPACES_ACCESS_KEY") or None
    secret_key: str | None = os.getenv("SPACES_SECRET_KEY") or None
    endpoint: str | None = os.getenv("SPACES_ENDPOINT") or None
    region: str = os.getenv("SPACES_REGION", "us-east-1")
    bucket: str | None = os.getenv("SPACES_BUCKET") or None

    # Addressing
    directory: str | None = os.getenv("SPACES_DIRECTORY") or None
    cdn_endpoint: str | None = os.getenv("SPACES_CDN_ENDPOINT") or None

    request_timeout: float = _float(os.getenv("SPACES_REQUEST_TIMEOUT"), 30.0)

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_json: bool = _bool(os.getenv("LOG_JSON"), default=True)

    def provider_config(self) -> dict[str, Any]:
        """Return the host-style config mapping accepted by ``init``."""
        config: dict[str, Any] = {
            "key": self.access_key,
            "secret": self.secret_key,
            "endpoint": self.endpoint,
            "region": self.region,
            "bucket": self.bucket,
            "directory": self.directory,
            "cdnEndpoint": self.cdn_endpoint,
            "requestTimeout": self.request_timeout,
        }
        return {name: value for name, value in config.items() if value is not None}


settings = Settings()
