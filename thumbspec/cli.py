"""
Command Line Interface for thumbnail specifications.
"""

import argparse
import json
import logging
import sys
import urllib3
from typing import List, Optional

from .errors import ThumbnailError
from .s3_client import S3Client
from .s3_config import S3Config
from .thumbnail import Thumbnail


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('boto3').setLevel(logging.WARNING)
    logging.getLogger('botocore').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    return logging.getLogger('thumbspec')


def get_s3_config(args: argparse.Namespace) -> S3Config:
    """Get S3 configuration from environment and CLI overrides."""
    config = S3Config.from_env()

    if getattr(args, 's3_endpoint', None):
        config.endpoint = args.s3_endpoint
    if getattr(args, 's3_access_key', None):
        config.access_key = args.s3_access_key
    if getattr(args, 's3_secret_key', None):
        config.secret_key = args.s3_secret_key
    if getattr(args, 's3_region', None):
        config.region = args.s3_region
    if getattr(args, 'expires', None):
        config.url_expiry = args.expires

    return config


def get_thumbnail_options(args: argparse.Namespace) -> dict:
    """Collect thumbnail options given on the command line."""
    options = {
        'output_bucket': getattr(args, 'output_bucket', None),
        'path': args.path,
        'prefix': args.prefix,
        'suffix': args.suffix,
        'type': args.type,
        'quality': args.quality,
        'width': args.width,
        'height': args.height,
    }
    return {k: v for k, v in options.items() if v is not None}


def print_json(data: dict) -> None:
    json.dump(data, sys.stdout, indent=2)
    print()


def cmd_describe(args: argparse.Namespace) -> int:
    """Execute describe command for a local path or URL."""
    logger = setup_logging(args.verbose)

    try:
        thumb = Thumbnail(args.input, get_thumbnail_options(args), logger=logger)
        if args.time:
            thumb.set_time(args.time)
        print_json(thumb.to_dict())
    except ThumbnailError as e:
        logger.error(str(e))
        return 1

    return 0


def cmd_s3(args: argparse.Namespace) -> int:
    """Execute s3 command for an object in a bucket."""
    logger = setup_logging(args.verbose)

    config = get_s3_config(args)
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    if not config.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    try:
        client = S3Client(config, logger)

        if args.check and not client.object_exists(args.bucket, args.key):
            logger.error(f"Object not found: s3://{args.bucket}/{args.key}")
            return 1

        thumb = Thumbnail.from_s3(
            args.bucket,
            args.key,
            get_thumbnail_options(args),
            s3_client=client,
            logger=logger
        )
        if args.time:
            thumb.set_time(args.time)
        print_json(thumb.to_dict(include_input=args.sign))
    except ThumbnailError as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.exception(f"S3 request failed: {e}")
        return 1

    return 0


def add_thumbnail_arguments(parser: argparse.ArgumentParser) -> None:
    """Add thumbnail option arguments to a parser."""
    group = parser.add_argument_group('Thumbnail')
    group.add_argument('--path', help='Output directory (default: input directory)')
    group.add_argument('--prefix', help='Output file name prefix (default: thumbnails/)')
    group.add_argument('--suffix', help='Appended to the file name before the extension')
    group.add_argument('-t', '--type', help='jpg, jpeg, png or webp (default: jpg)')
    group.add_argument('-q', '--quality', type=int, help='1 (best) to 10 (worst) (default: 2)')
    group.add_argument('--width', type=int, help='Width in pixels (default: 180)')
    group.add_argument('--height', type=int, help='Height in pixels (default: 180)')
    group.add_argument('--time', help='Sample time as HH:MM:SS')
    group.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')


def add_storage_arguments(parser: argparse.ArgumentParser) -> None:
    """Add storage configuration arguments to a parser."""
    s3_group = parser.add_argument_group('S3 Storage')
    s3_group.add_argument('--output-bucket', help='Bucket for the thumbnail (default: BUCKET)')
    s3_group.add_argument('--s3-endpoint', help='Override S3_ENDPOINT')
    s3_group.add_argument('--s3-access-key', help='Override S3_ACCESS_KEY')
    s3_group.add_argument('--s3-secret-key', help='Override S3_SECRET_KEY')
    s3_group.add_argument('--s3-region', help='Override S3_REGION')
    s3_group.add_argument('--expires', type=int, metavar='SECONDS',
                          help='Signed URL lifetime (default: S3_URL_EXPIRY or 1100)')
    s3_group.add_argument('--sign', action='store_true', help='Include a signed input URL')
    s3_group.add_argument('--check', action='store_true', help='Fail if the object does not exist')


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='thumbspec',
        description='Derive thumbnail output paths and ffmpeg settings',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m thumbspec describe /videos/clip.mp4 --type webp
  python -m thumbspec describe https://cdn.example.com/clip.mov --path /out
  python -m thumbspec s3 media-bucket uploads/clip.mp4 --sign
"""
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    describe_parser = subparsers.add_parser('describe', help='Describe a thumbnail for a path or URL')
    describe_parser.add_argument('input', help='Local path or URL of the source media')
    add_thumbnail_arguments(describe_parser)

    s3_parser = subparsers.add_parser('s3', help='Describe a thumbnail for an S3 object')
    s3_parser.add_argument('bucket', help='Bucket holding the source media')
    s3_parser.add_argument('key', help='Key of the source media')
    add_thumbnail_arguments(s3_parser)
    add_storage_arguments(s3_parser)

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'describe':
        return cmd_describe(parsed_args)
    elif parsed_args.command == 's3':
        return cmd_s3(parsed_args)

    return 1
