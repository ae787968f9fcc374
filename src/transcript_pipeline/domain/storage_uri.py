"""Parsing and formatting of object storage URIs."""

import re

from pydantic import ValidationError

from transcript_pipeline.exceptions import InvalidUriFormat

from .models import StorageRef

SCHEME = "s3"

# Scheme form first; the two alternatives never overlap.
_PREFIX_PATTERN = re.compile(rf"^(?:{SCHEME}://|https://[^/]+/)")


def parse_storage_uri(uri: str) -> StorageRef:
    """
    Parses a storage URI into a StorageRef.

    Accepts ``s3://bucket/key`` and the HTTPS path form
    ``https://host/bucket/key``. At most one prefix is stripped, then the
    remainder is split on the first '/'.

    Raises:
        InvalidUriFormat: If no bucket/key split is possible.
    """
    remainder = _PREFIX_PATTERN.sub("", uri, count=1)
    if uri.startswith("https://"):
        remainder = remainder.split("?", 1)[0]

    bucket, sep, key = remainder.partition("/")
    if not sep:
        raise InvalidUriFormat(uri)

    try:
        return StorageRef(bucket=bucket, key=key)
    except ValidationError as e:
        raise InvalidUriFormat(uri) from e


def format_storage_uri(ref: StorageRef) -> str:
    """Formats a StorageRef in the scheme form."""
    return f"{SCHEME}://{ref.bucket}/{ref.key}"
