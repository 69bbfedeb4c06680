"""CloudCube storage provider: upload and delete media files on S3."""

import logging
from typing import Any, Mapping, Optional, Union

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool

from .errors import ConfigurationError, DeleteError, MismatchedURLError, UploadError
from .keys import CACHE_CONTROL, key_from_url, object_key, public_url
from .resolver import resolve_config
from .schemas import ConnectionParams, DeleteStrategy, FileRecord, ProviderConfig

logger = logging.getLogger(__name__)

PROVIDER = "aws-s3-cloudcubed"
NAME = "CloudCube/AWS-S3"
AUTH = {
    "public": {"label": "Access API Token", "type": "text"},
    "private": {"label": "Secret Access Token", "type": "text"},
    "cubeUrl": {"label": "Cube URL", "type": "text"},
    "basePath": {"label": "Base Path", "type": "text"},
}

PUBLIC_READ = "public-read"


class CubeStorage:
    """
    Storage provider bound to one CloudCube bucket and cube prefix.

    Holds no mutable state besides the boto3 client, which is thread-safe,
    so ``upload`` and ``delete`` may run concurrently for different files.
    """

    def __init__(self, params: ConnectionParams, client: Optional[Any] = None):
        self.params = params
        # Own session per provider: credentials never leak into boto3 defaults
        self.client = client or boto3.session.Session(
            aws_access_key_id=params.access_key_id,
            aws_secret_access_key=params.secret_access_key,
            region_name=params.region,
        ).client(
            "s3",
            config=Config(
                signature_version="s3v4",
                s3={"addressing_style": "virtual"},
            ),
        )
        logger.info(
            f"CloudCube storage initialized for bucket: {params.bucket}, "
            f"cube: {params.cube_prefix}, region: {params.region or 'default'}"
        )

    @property
    def bucket(self) -> str:
        return self.params.bucket

    def object_key(self, file: FileRecord) -> str:
        return object_key(self.params, file)

    def delete_key(self, file: FileRecord) -> str:
        """
        Resolve the object key to delete for a file record.

        Raises:
            MismatchedURLError: If the record's URL belongs to another bucket
                or cube prefix (or, in URL mode, is missing)
        """
        url_key = key_from_url(self.params, file.url)
        derive = self.params.delete_strategy == DeleteStrategy.DERIVE
        if url_key is None and (file.url or not derive):
            logger.error(f"Refusing to delete {file.url!r}: outside cube {self.params.cube_prefix}")
            raise MismatchedURLError(file.url, self.params.cube_prefix)
        return self.object_key(file) if derive else url_key

    async def upload(self, file: FileRecord) -> None:
        """
        Upload a file and store its public URL in ``file.url``.

        Raises:
            UploadError: If the record has no content or S3 rejects the upload
        """
        key = self.object_key(file)
        if file.buffer is None:
            logger.error(f"Refusing to upload {key}: file has no content")
            raise UploadError(f"file {file.hash}{file.ext or ''} has no content to upload", key=key)

        await run_in_threadpool(self._put_object, key, file.buffer, file.mime)
        file.url = public_url(self.params, key)

    async def delete(self, file: FileRecord) -> None:
        """
        Delete the object a file record points to.

        Raises:
            MismatchedURLError: If the record does not belong to this cube;
                nothing is sent to S3 in that case
            DeleteError: If S3 rejects the delete
        """
        await self.delete_object(self.delete_key(file))

    async def delete_object(self, key: str) -> None:
        """Delete an object by key already resolved with ``delete_key``."""
        await run_in_threadpool(self._delete_object, key)

    def _put_object(self, key: str, data: bytes, content_type: Optional[str]) -> None:
        logger.info(f"Uploading CloudCube object: {key}, size: {len(data)} bytes")

        kwargs = {
            "Bucket": self.bucket,
            "Key": key,
            "Body": data,
            "ACL": PUBLIC_READ,
            "CacheControl": CACHE_CONTROL,
        }
        if content_type:
            kwargs["ContentType"] = content_type

        try:
            self.client.put_object(**kwargs)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error uploading {key}: {str(e)}")
            raise UploadError(str(e), key=key, cause=e) from e
        logger.info(f"Successfully uploaded {key}")

    def _delete_object(self, key: str) -> None:
        logger.info(f"Deleting CloudCube object: {key}")
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error deleting {key}: {str(e)}")
            raise DeleteError(str(e), key=key, cause=e) from e
        logger.info(f"Successfully deleted {key}")


def init(config: Union[ProviderConfig, Mapping[str, Any]], client: Optional[Any] = None) -> CubeStorage:
    """
    Build a storage provider from host configuration.

    Args:
        config: ProviderConfig or a mapping with the host's keys
            (public, private, cubeUrl/bucketUrl, basePath, useEnv)
        client: Optional preconfigured boto3 S3 client

    Raises:
        ConfigurationError: Synchronously, before any client is created
    """
    try:
        params = resolve_config(config)
    except ConfigurationError as e:
        logger.error(f"Invalid CloudCube configuration: {str(e)}")
        raise
    return CubeStorage(params, client=client)
