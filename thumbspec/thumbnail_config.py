"""
ThumbnailConfig - Options controlling thumbnail naming and encoding.
"""

import re
from dataclasses import dataclass, asdict, fields, replace
from typing import Optional, Union

from .errors import InvalidTimeFormat, InvalidType, ThumbnailConfigError


DEFAULT_PREFIX = "thumbnails/"
DEFAULT_SIZE = 180
DEFAULT_TIME = "00:00:05"
DEFAULT_TYPE = "jpg"
DEFAULT_QUALITY = 2

MIN_QUALITY = 1
MAX_QUALITY = 10

VALID_TYPES = ('jpg', 'jpeg', 'png', 'webp')

TIME_PATTERN = re.compile(r'\d\d:\d\d:\d\d')

# camelCase spellings accepted from JSON-ish callers
_ALIASES = {
    'outputBucket': 'output_bucket',
}


@dataclass(frozen=True)
class ThumbnailConfig:
    """
    Immutable thumbnail options.

    Attributes:
        output_bucket: Bucket for the output, None to reuse the input bucket
        path: Output directory, None to derive it from the input
        width: Thumbnail width in pixels
        height: Thumbnail height in pixels
        time: Position in the video to sample (HH:MM:SS)
        prefix: Prepended to the output file name
        suffix: Appended to the base file name before the extension
        type: Output image type (jpg, jpeg, png or webp)
        quality: 1 (best) to 10 (worst)
    """
    output_bucket: Optional[str] = None
    path: Optional[str] = None
    width: int = DEFAULT_SIZE
    height: int = DEFAULT_SIZE
    time: str = DEFAULT_TIME
    prefix: str = DEFAULT_PREFIX
    suffix: Optional[str] = None
    type: str = DEFAULT_TYPE
    quality: int = DEFAULT_QUALITY

    def to_dict(self) -> dict:
        return asdict(self)


def validate_type(thumbnail_type: str) -> str:
    """
    Check an output type.

    Returns:
        The type, lower-cased

    Raises:
        InvalidType: If the type is not jpg, jpeg, png or webp
    """
    if not isinstance(thumbnail_type, str) or thumbnail_type.lower() not in VALID_TYPES:
        raise InvalidType("Invalid type given. Valid types are jpg, png or webp")
    return thumbnail_type.lower()


def validate_time(time: str) -> str:
    """Check a sample time is in HH:MM:SS form."""
    if not time or not TIME_PATTERN.fullmatch(time):
        raise InvalidTimeFormat("Invalid time format must match format 00:00:00")
    return time


def validate_dimension(name: str, value: int) -> int:
    """Check a pixel dimension is a positive integer."""
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ThumbnailConfigError(f"{name} must be a positive integer, got {value!r}")
    return value


def clamp_quality(quality: int) -> int:
    """Clamp quality into the 1-10 range."""
    return max(MIN_QUALITY, min(MAX_QUALITY, int(quality)))


def merge_config(
    overrides: Union[ThumbnailConfig, dict, None] = None
) -> ThumbnailConfig:
    """
    Merge caller options over the defaults.

    Fields are merged one by one; anything the caller supplies wins.
    The type is validated and the quality clamped. Time is left alone
    until set_time is called.

    Args:
        overrides: Partial options as a dict, a full ThumbnailConfig, or None

    Returns:
        A new ThumbnailConfig

    Raises:
        InvalidType: If the merged type is not supported
        ThumbnailConfigError: If an unknown option is given or a dimension is not positive
    """
    if overrides is None:
        values = {}
    elif isinstance(overrides, ThumbnailConfig):
        values = overrides.to_dict()
    else:
        values = {_ALIASES.get(k, k): v for k, v in overrides.items()}

    known = {f.name for f in fields(ThumbnailConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ThumbnailConfigError(f"Unknown thumbnail option(s): {', '.join(unknown)}")

    # None means "not supplied" so it never masks a default
    values = {k: v for k, v in values.items() if v is not None}
    config = replace(ThumbnailConfig(), **values)

    return replace(
        config,
        type=validate_type(config.type or DEFAULT_TYPE),
        quality=clamp_quality(config.quality),
        width=validate_dimension('width', config.width),
        height=validate_dimension('height', config.height),
    )
