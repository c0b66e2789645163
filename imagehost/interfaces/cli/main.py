"""Command line interface - apply a transformation chain to an image file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ...adapters.backends.pillow_backend import PillowBackend
from ...application.services.chain_parser import parse_chain
from ...application.services.dispatcher import TransformationDispatcher, TransformationRequest
from ...application.services.loader import load_image
from ...domain.value_objects.config import PipelineConfig
from ...exceptions import ConfigurationError, ImageHostError
from ...infrastructure.plugin_registry import PluginRegistry
from ...utils.env import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_CLIENT_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="imagehost-transform",
        description="Apply a chain of image transformations",
        epilog="Example: imagehost-transform in.png -o out.png "
               "-t canvas:width=200,height=200,mode=center -t rotate:angle=90"
    )

    parser.add_argument("input", nargs="?", help="Input image")
    parser.add_argument("-o", "--output", help="Output image")

    parser.add_argument(
        "-t", "--transformation",
        action="append",
        default=[],
        dest="transformations",
        metavar="SPEC",
        help="Transformation as name:key=value,... (repeatable, applied in order)"
    )

    parser.add_argument(
        "-f", "--format",
        help="Output format, applied as a final convert (default: keep the input format)"
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List available transformations and exit"
    )

    parser.add_argument(
        "--log-file",
        help="Also write logs to this file"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    return parser


def run(args: argparse.Namespace, config: PipelineConfig) -> int:
    """Run the CLI with parsed arguments. Returns the exit code."""
    table = PluginRegistry.build_table()
    backend = PillowBackend()
    dispatcher = TransformationDispatcher(table, backend, config=config)

    if args.list:
        for name in dispatcher.names:
            print(name)
        return EXIT_OK

    if not args.input or not args.output:
        logger.error("Both input and --output are required")
        return EXIT_CLIENT_ERROR

    input_path = Path(args.input)
    output_path = Path(args.output)

    if not input_path.is_file():
        logger.error(f"Input not found: {input_path}")
        return EXIT_CLIENT_ERROR

    try:
        chain = parse_chain(args.transformations)
        if args.format:
            chain.append(TransformationRequest("convert", {"type": args.format}))
        image = load_image(input_path.read_bytes(), backend)
        result = dispatcher.run_chain(image, chain)
    except ConfigurationError as e:
        logger.error(str(e))
        return EXIT_CONFIG_ERROR
    except ImageHostError as e:
        logger.error(str(e))
        return EXIT_CLIENT_ERROR

    if not result.success:
        logger.error(f"Failed after {len(result.applied)} transformation(s): {result.error}")
        if result.error is not None and not result.error.is_client_error:
            return EXIT_CONFIG_ERROR
        return EXIT_CLIENT_ERROR

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(image.blob)

    logger.info(
        f"Wrote {output_path} ({image.width}x{image.height} {image.extension}, "
        f"{image.filesize} bytes, "
        f"{len(result.applied)} transformation(s) in {result.processing_time_ms:.1f}ms)"
    )
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = PipelineConfig.from_env()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    level = logging.DEBUG if args.verbose else config.log_level_number
    setup_logging(level, log_file=args.log_file)

    return run(args, config)


if __name__ == "__main__":
    sys.exit(main())
