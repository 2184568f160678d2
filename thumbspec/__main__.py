"""
Main entry point for running the package as a module.

Usage:
    python -m thumbspec describe /videos/clip.mp4
    python -m thumbspec s3 media-bucket uploads/clip.mp4 --sign
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
