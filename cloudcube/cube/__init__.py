"""CloudCube storage provider for S3-backed media uploads."""

from .client import AUTH, NAME, PROVIDER, CubeStorage, init
from .errors import (
    ConfigurationError,
    CubeError,
    DeleteError,
    MismatchedURLError,
    OperationError,
    UploadError,
)
from .resolver import region_for_bucket, resolve_config
from .schemas import ConnectionParams, DeleteStrategy, FileRecord, ProviderConfig

__all__ = [
    "AUTH",
    "NAME",
    "PROVIDER",
    "CubeStorage",
    "init",
    "ConfigurationError",
    "CubeError",
    "DeleteError",
    "MismatchedURLError",
    "OperationError",
    "UploadError",
    "region_for_bucket",
    "resolve_config",
    "ConnectionParams",
    "DeleteStrategy",
    "FileRecord",
    "ProviderConfig",
]
