"""
FFmpegConfig - Encoder settings handed to the external ffmpeg invocation.
"""

from dataclasses import dataclass, asdict


DEFAULT_CODEC = "mjpeg"
DEFAULT_FILTER = "image2"
DEFAULT_TIMESTAMP = "00:00:10"
PNG_CODEC = ""  # ffmpeg picks png itself
WEBP_CODEC = "libwebp"


@dataclass(frozen=True)
class FFmpegConfig:
    """
    Encoder configuration for a single thumbnail frame.
    
    Attributes:
        quality: Codec quality value (1-10 for mjpeg, 10-100 for libwebp)
        codec: Video codec name, empty to let ffmpeg choose
        filter: Output muxer
        timestamp: Seek position in HH:MM:SS
        width: Output width in pixels
        height: Output height in pixels
    """
    quality: int
    codec: str
    filter: str
    timestamp: str
    width: int
    height: int
    
    def to_dict(self) -> dict:
        return asdict(self)


def webp_quality(quality: int) -> int:
    """Map the 1 (best) - 10 (worst) scale onto libwebp's 10-100 scale."""
    return (11 - quality) * 10
