from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class ProviderOptions(BaseModel):
    """Validated provider configuration as supplied by the host runtime.

    Field names follow Python conventions; the camelCase keys used by host
    configs (``key``, ``secret``, ``cdnEndpoint``) are accepted as aliases.
    Unknown keys such as ``s3Options`` are kept untouched in ``extras``.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    access_key: str = Field(validation_alias=AliasChoices("key", "accessKey", "access_key"))
    secret_key: str = Field(validation_alias=AliasChoices("secret", "secretKey", "secret_key"))
    endpoint: str
    region: str = "us-east-1"
    bucket: str | None = None
    directory: str | None = None
    cdn_endpoint: str | None = Field(
        default=None,
        validation_alias=AliasChoices("cdnEndpoint", "cdn_endpoint"),
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        validation_alias=AliasChoices("requestTimeout", "request_timeout"),
    )

    @model_validator(mode="before")
    @classmethod
    def _legacy_bucket(cls, data: Any) -> Any:
        # older configs name the bucket "space"
        if isinstance(data, dict) and not data.get("bucket") and data.get("space"):
            data = {**data, "bucket": data["space"]}
        return data

    @property
    def extras(self) -> dict[str, Any]:
        return dict(self.model_extra or {})
