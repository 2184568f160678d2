"""
Thumbnail specification builder.

Derives the output path and ffmpeg settings for a video or image
thumbnail. Inputs can be local paths, URLs, or objects in S3 (resolved
to signed URLs on demand). The encoding itself is left to ffmpeg.
"""

__version__ = "1.0.0"

from .errors import ThumbnailError, InvalidTimeFormat, InvalidType, ThumbnailConfigError
from .thumbnail_config import ThumbnailConfig, merge_config
from .ffmpeg_config import FFmpegConfig
from .s3_config import S3Config
from .s3_client import S3Client
from .input_source import LocalSource, S3Source, derive_path
from .thumbnail import Thumbnail

__all__ = [
    "ThumbnailError",
    "InvalidTimeFormat",
    "InvalidType",
    "ThumbnailConfigError",
    "ThumbnailConfig",
    "merge_config",
    "FFmpegConfig",
    "S3Config",
    "S3Client",
    "LocalSource",
    "S3Source",
    "derive_path",
    "Thumbnail",
]
