"""Object keys and public URLs of stored files."""

import re
from typing import Optional
from urllib.parse import quote, unquote

from .schemas import ConnectionParams, FileRecord

CACHE_CONTROL = f"max-age={31536000}"
GLOBAL_REGION = "us-east-1"


def object_key(params: ConnectionParams, file: FileRecord) -> str:
    """Build ``cube_prefix/[base_path/][path/]hash+ext`` for a file."""
    base = f"{params.base_path}/" if params.base_path else ""
    path = f"{file.path}/" if file.path else ""
    return f"{params.cube_prefix}/{base}{path}{file.hash}{file.ext or ''}"


def public_url(params: ConnectionParams, key: str) -> str:
    quoted = quote(key, safe="/")
    if params.region and params.region != GLOBAL_REGION:
        return f"https://{params.bucket}.s3.{params.region}.amazonaws.com/{quoted}"
    return f"https://{params.bucket}.s3.amazonaws.com/{quoted}"


def file_url_pattern(cube_prefix: str) -> re.Pattern:
    prefix = re.escape(quote(cube_prefix, safe="/"))
    return re.compile(rf"^https://[^/%]+/({prefix}/.*)$")


def key_from_url(params: ConnectionParams, url: Optional[str]) -> Optional[str]:
    """
    Return the object key a public URL points to, or None if it is foreign.

    The URL is matched while still percent-encoded; only the captured key is
    decoded, and keys with ``.`` or ``..`` segments are rejected.
    """
    if not url:
        return None
    match = file_url_pattern(params.cube_prefix).match(url)
    if match is None:
        return None
    key = unquote(match.group(1))
    if any(segment in (".", "..") for segment in key.split("/")):
        return None
    return key
