class ProviderError(Exception):
    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        self.message = message or code
        super().__init__(self.message)


class ConfigurationError(ProviderError):
    pass


class MissingContentError(ProviderError):
    def __init__(self, message: str = "File buffer or stream is missing") -> None:
        super().__init__("FILE_CONTENT_MISSING", message)


class ContentReadError(ProviderError):
    def __init__(self, message: str) -> None:
        super().__init__("FILE_CONTENT_UNREADABLE", message)


class ObjectStoreError(ProviderError):
    def __init__(
        self,
        code: str,
        message: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(code, message)
