"""Failures raised by the CloudCube provider."""

from typing import Optional


class CubeError(Exception):
    """Base class for every provider failure."""


class ConfigurationError(CubeError):
    """Provider configuration is missing or malformed. Raised by ``init``."""


class OperationError(CubeError):
    """A storage operation failed for the object stored under ``key``."""

    def __init__(self, message: str, key: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.key = key
        self.cause = cause


class UploadError(OperationError):
    """The backend rejected an upload."""


class DeleteError(OperationError):
    """The backend rejected a delete."""


class MismatchedURLError(OperationError):
    """A file URL does not belong to the configured bucket and cube prefix."""

    def __init__(self, url: Optional[str], cube_prefix: str):
        super().__init__(
            f"file url {url!r} does not match configured cube prefix {cube_prefix!r}"
        )
        self.url = url
        self.cube_prefix = cube_prefix
