"""Turn raw provider configuration into connection parameters."""

import logging
import os
import re
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from .errors import ConfigurationError
from .schemas import ConnectionParams, ProviderConfig

logger = logging.getLogger(__name__)

CUBE_URL_RE = re.compile(r"^https://(.+)\.s3\.amazonaws\.com/(.+)$")

BUCKET_REGIONS = {
    "cloud-cube": "us-east-1",
    "cloud-cube-eu": "eu-west-1",
    "cloud-cube-jp": "ap-northeast-1",
}


def region_for_bucket(bucket: str) -> Optional[str]:
    """Return the AWS region of a known CloudCube bucket, or None."""
    return BUCKET_REGIONS.get(bucket)


def trim_param(value: Any) -> Optional[str]:
    return value.strip() if isinstance(value, str) else None


def parse_cube_url(cube_url: str) -> tuple[str, str]:
    """
    Split a cube URL into bucket name and cube prefix.

    Args:
        cube_url: URL of the form https://<bucket>.s3.amazonaws.com/<cube prefix>

    Returns:
        (bucket, cube_prefix) exactly as captured from the URL

    Raises:
        ConfigurationError: If the URL does not have the expected shape
    """
    match = CUBE_URL_RE.match(cube_url)
    if match is None:
        raise ConfigurationError(
            f"cube url {cube_url!r} does not match https://<bucket>.s3.amazonaws.com/<cube>"
        )
    return match.group(1), match.group(2)


def _lookup(value: Optional[str], use_env: Optional[bool], field: str) -> Optional[str]:
    if value is None:
        return None
    from_env = (os.environ.get(value) or "").strip()
    if use_env is None:
        # Lenient mode: prefer a non-blank env variable of that name
        return from_env or value
    if not use_env:
        return value
    if not from_env:
        raise ConfigurationError(f"environment variable {value!r} for {field} is not set")
    return from_env


def resolve_config(config: Union[ProviderConfig, Mapping[str, Any]]) -> ConnectionParams:
    """
    Resolve credentials, bucket and cube prefix from provider configuration.

    Reads the process environment when ``use_env`` asks for it, nothing else.

    Raises:
        ConfigurationError: On invalid fields, missing env variables or a
            malformed cube URL
    """
    if not isinstance(config, ProviderConfig):
        try:
            config = ProviderConfig.model_validate(dict(config))
        except ValidationError as e:
            raise ConfigurationError(f"invalid provider configuration: {e}") from e

    cube_url = _lookup(config.cube_url or config.bucket_url, config.use_env, "cubeUrl")
    if not cube_url:
        raise ConfigurationError("cubeUrl (or bucketUrl) is required")
    public_key = _lookup(config.public, config.use_env, "public")
    private_key = _lookup(config.private, config.use_env, "private")

    bucket, cube_prefix = parse_cube_url(cube_url.strip())
    bucket = trim_param(bucket)
    region = region_for_bucket(bucket)
    if region is None:
        logger.warning(f"No known region for bucket '{bucket}', using client default")

    return ConnectionParams(
        access_key_id=trim_param(public_key),
        secret_access_key=trim_param(private_key),
        bucket=bucket,
        cube_prefix=cube_prefix,
        region=region,
        base_path=config.base_path or None,
        delete_strategy=config.delete_strategy,
    )
