"""Models exchanged between the host framework and the CloudCube provider."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DeleteStrategy(str, Enum):
    """How ``delete`` recovers the object key of a file record."""
    # Parse the key back out of the stored public URL
    URL = "url"
    # Re-derive the key from hash/ext/path, the same way upload builds it
    DERIVE = "derive"


class ProviderConfig(BaseModel):
    """Raw provider configuration as the host supplies it.

    Field aliases follow the host's camelCase names (``cubeUrl``,
    ``basePath``...), snake_case names are accepted as well.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    public: Optional[str] = None
    private: Optional[str] = None
    cube_url: Optional[str] = Field(default=None, alias="cubeUrl")
    bucket_url: Optional[str] = Field(default=None, alias="bucketUrl")
    base_path: Optional[str] = Field(default=None, alias="basePath")
    use_env: Optional[bool] = Field(default=None, alias="useEnv")
    delete_strategy: DeleteStrategy = Field(default=DeleteStrategy.URL, alias="deleteStrategy")


class ConnectionParams(BaseModel):
    """Resolved, immutable connection parameters of one provider instance."""
    model_config = ConfigDict(frozen=True)

    access_key_id: Optional[str] = Field(default=None, repr=False)
    secret_access_key: Optional[str] = Field(default=None, repr=False)
    bucket: str
    cube_prefix: str
    region: Optional[str] = None
    base_path: Optional[str] = None
    delete_strategy: DeleteStrategy = DeleteStrategy.URL


class FileRecord(BaseModel):
    """A file as the host framework describes it.

    ``url`` is filled in by a successful upload. Hosts may attach any other
    fields (name, size...), they are kept but ignored by the provider.
    """
    model_config = ConfigDict(extra="allow")

    hash: str
    ext: Optional[str] = ""
    path: Optional[str] = None
    buffer: Optional[bytes] = Field(default=None, repr=False)
    mime: Optional[str] = None
    url: Optional[str] = None
