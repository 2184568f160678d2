"""
Thumbnail - Derives the output name and encoder settings for a thumbnail.
"""

import logging
import os
import posixpath
import re
from dataclasses import replace
from typing import Callable, Optional, Union
from urllib.parse import urlparse

from .errors import ThumbnailConfigError
from .ffmpeg_config import (
    DEFAULT_CODEC,
    DEFAULT_FILTER,
    DEFAULT_TIMESTAMP,
    PNG_CODEC,
    WEBP_CODEC,
    FFmpegConfig,
    webp_quality,
)
from .input_source import LocalSource, S3Source, derive_path
from .s3_client import S3Client
from .s3_config import S3Config
from .thumbnail_config import (
    DEFAULT_TYPE,
    ThumbnailConfig,
    merge_config,
    validate_time,
    validate_type,
)


DEFAULT_FILE_NAME = "thumbnail"
FALLBACK_TIME = "00:00:10"

URL_PATTERN = re.compile(r'(https?:)?//', re.IGNORECASE)

EXTENSIONS = {
    'jpg': '.jpg',
    'jpeg': '.jpg',
    'png': '.png',
    'webp': '.webp',
}

CONTENT_TYPES = {
    'jpg': 'image/jpeg',
    'jpeg': 'image/jpeg',
    'png': 'image/png',
    'webp': 'image/webp',
}


class Thumbnail:
    """
    Thumbnail specification for a video or image.

    Holds the merged configuration and an input source. Nothing is
    encoded here; get_output() and get_ffmpeg_config() describe what the
    external encoder should produce.
    """

    def __init__(
        self,
        input_ref: str = "",
        config: Union[ThumbnailConfig, dict, None] = None,
        source=None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize thumbnail.

        Args:
            input_ref: Local path or URL of the source media, may be empty
            config: Partial options merged over the defaults
            source: Input source, defaults to a LocalSource for input_ref
            logger: Optional logger instance

        Raises:
            InvalidType: If the configured type is not supported
        """
        self.logger = logger or logging.getLogger(__name__)
        self.input = input_ref
        self.source = source or LocalSource(input_ref)
        self.generated = False
        self.config = merge_config(config)
        self.type = self.config.type
        self.file_name = DEFAULT_FILE_NAME

        if input_ref:
            self._parse_input(input_ref)

    @classmethod
    def from_s3(
        cls,
        bucket: str,
        key: str,
        config: Union[ThumbnailConfig, dict, None] = None,
        s3_client: Optional[S3Client] = None,
        path_resolver: Callable[[str, str], str] = derive_path,
        logger: Optional[logging.Logger] = None
    ) -> 'Thumbnail':
        """
        Build a thumbnail whose input is an object in S3.

        The input is resolved to a signed URL on every get_input() call.

        Args:
            bucket: Bucket holding the source object
            key: Source object key
            config: Partial options merged over the defaults
            s3_client: Client used for signing, built from the environment if None
            path_resolver: Maps (key, type) to an output directory when no path is configured
            logger: Optional logger instance

        Raises:
            InvalidType: If the configured type is not supported
            ThumbnailConfigError: If the S3 environment settings are invalid
        """
        thumb = cls("", config, logger=logger)
        if s3_client is None:
            s3_client = S3Client(_s3_config_from_env(), logger)

        # output_bucket wins and is also the bucket that gets signed
        effective_bucket = thumb.config.output_bucket or bucket
        thumb.source = S3Source(
            effective_bucket,
            key,
            s3_client,
            expires_in=s3_client.config.url_expiry
        )

        if not thumb.config.path:
            thumb.config = replace(thumb.config, path=path_resolver(key, thumb.get_type()))

        stem = os.path.splitext(posixpath.basename(key))[0]
        if stem:
            thumb.file_name = stem

        thumb.logger.debug(f"S3 thumbnail for s3://{effective_bucket}/{key} -> {thumb.config.path}")
        return thumb

    def _parse_input(self, input_ref: str) -> None:
        """Derive the file name, and path for local inputs."""
        if URL_PATTERN.match(input_ref):
            url_path = urlparse(input_ref).path or ""
            self.file_name = os.path.splitext(posixpath.basename(url_path))[0]
            return

        directory, base = os.path.split(input_ref)
        if self.config.path is None:
            self.config = replace(self.config, path=directory)
        self.file_name = os.path.splitext(base)[0]

    def get_output(self) -> str:
        """
        Build the output path for the thumbnail.

        Returns:
            "{path}/{prefix}{file_name}{suffix}{ext}"

        Raises:
            ThumbnailConfigError: If no output path is configured or derivable
        """
        if self.config.path is None:
            raise ThumbnailConfigError(
                f"No output path for {self.input or self.file_name!r}; "
                "set 'path' when the input is a URL"
            )

        output = (
            f"{self.config.path}/{self.config.prefix}"
            f"{self.file_name}{self.config.suffix or ''}"
        )
        return output + EXTENSIONS[self.get_type().lower()]

    def is_generated(self) -> bool:
        return self.generated

    def set_time(self, time: str) -> None:
        """
        Set the sample time.

        Raises:
            InvalidTimeFormat: If time is not HH:MM:SS
        """
        self.config = replace(self.config, time=validate_time(time))

    def get_time(self) -> str:
        return self.config.time or FALLBACK_TIME

    def set_type(self, thumbnail_type: str) -> None:
        """
        Set the output type.

        Raises:
            InvalidType: If the type is not jpg, jpeg, png or webp
        """
        self.type = validate_type(thumbnail_type)
        self.config = replace(self.config, type=self.type)

    def get_type(self) -> str:
        return self.type or DEFAULT_TYPE

    def get_input(self) -> str:
        """Return what the encoder should read (path, URL or signed URL)."""
        return self.source.resolve()

    def get_bucket(self) -> Optional[str]:
        return self.source.bucket

    def get_key(self) -> Optional[str]:
        return self.source.key

    def get_file_name(self) -> str:
        return self.file_name

    def get_content_type(self) -> str:
        """MIME type of the generated thumbnail."""
        return CONTENT_TYPES[self.get_type().lower()]

    def get_ffmpeg_config(self) -> FFmpegConfig:
        """
        Build encoder settings for this thumbnail.

        The timestamp is always DEFAULT_TIMESTAMP, not get_time().
        For webp the quality is inverted onto libwebp's 10-100 scale.
        """
        codec = DEFAULT_CODEC
        quality = self.config.quality
        thumbnail_type = self.get_type().lower()

        if thumbnail_type == 'png':
            codec = PNG_CODEC
        elif thumbnail_type == 'webp':
            codec = WEBP_CODEC
            quality = webp_quality(quality)

        return FFmpegConfig(
            quality=quality,
            codec=codec,
            filter=DEFAULT_FILTER,
            timestamp=DEFAULT_TIMESTAMP,
            width=self.config.width,
            height=self.config.height,
        )

    def get_config(self) -> ThumbnailConfig:
        return self.config

    def to_dict(self, include_input: bool = True) -> dict:
        """
        Describe the thumbnail for JSON output.

        Args:
            include_input: Resolve the input; False skips signing for S3 sources
        """
        data = {
            'output': self.get_output(),
            'content_type': self.get_content_type(),
            'time': self.get_time(),
            'ffmpeg': self.get_ffmpeg_config().to_dict(),
        }
        if self.get_bucket() is not None:
            data['bucket'] = self.get_bucket()
            data['key'] = self.get_key()
        if include_input:
            data['input'] = self.get_input()
        return data


def _s3_config_from_env() -> S3Config:
    """Read and check S3 settings from the environment."""
    try:
        config = S3Config.from_env()
    except ValueError as e:
        raise ThumbnailConfigError(f"Invalid S3 environment settings: {e}") from e

    errors = config.validate()
    if errors:
        raise ThumbnailConfigError("Invalid S3 environment settings: " + "; ".join(errors))
    return config
