"""
Input sources - Resolve what the encoder should read for a thumbnail.

A Thumbnail holds one source. LocalSource hands back the path or URL it
was given; S3Source signs a fresh download URL every time it is asked.
"""

import posixpath

from .errors import ThumbnailConfigError
from .s3_client import S3Client
from .s3_config import DEFAULT_URL_EXPIRY


class LocalSource:
    """Source backed by a filesystem path or URL."""

    bucket = None
    key = None

    def __init__(self, reference: str = ""):
        self.reference = reference

    def resolve(self) -> str:
        return self.reference


class S3Source:
    """
    Source backed by an object in S3.

    Nothing is cached; each resolve() signs a new URL so callers always
    get one with a full lifetime.
    """

    def __init__(
        self,
        bucket: str,
        key: str,
        s3_client: S3Client,
        expires_in: int = DEFAULT_URL_EXPIRY
    ):
        """
        Args:
            bucket: Bucket holding the object
            key: Object key
            s3_client: Client used for signing
            expires_in: Signed URL lifetime in seconds

        Raises:
            ThumbnailConfigError: If expires_in is not a positive number of seconds
        """
        if not isinstance(expires_in, int) or isinstance(expires_in, bool) or expires_in <= 0:
            raise ThumbnailConfigError(f"Signed URL lifetime must be positive, got {expires_in!r}")
        self.bucket = bucket
        self.key = key
        self.s3 = s3_client
        self.expires_in = expires_in

    def get_bucket(self) -> str:
        return self.bucket

    def get_key(self) -> str:
        return self.key

    def get_s3_url(self) -> str:
        """Sign a temporary GET URL for the object."""
        return self.s3.generate_signed_url(self.bucket, self.key, self.expires_in)

    def resolve(self) -> str:
        return self.get_s3_url()


def derive_path(key: str, thumbnail_type: str) -> str:
    """
    Default output directory for a stored object.

    Thumbnails sit next to their source object, so this is the key's
    directory ('' for keys at the bucket root). The type is part of the
    resolver signature for layouts that split outputs by format.
    """
    return posixpath.dirname(key)
