"""Command-line interface for world generation."""

import argparse
import json
import logging
import sys
from pathlib import Path

import structlog


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a procedural biome map from seeded noise"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="TOML file with a [world] table; flags override its values",
    )
    parser.add_argument(
        "--type",
        choices=["archipelago", "orbedArchipelago", "default"],
        default=None,
        help="Landmass preset (default: archipelago)",
    )
    parser.add_argument("--width", type=int, default=None, help="Map width (default: 10)")
    parser.add_argument("--height", type=int, default=None, help="Map height (default: 10)")
    parser.add_argument(
        "--elevation-seed", type=str, default=None, help="Elevation seed (default: random)"
    )
    parser.add_argument(
        "--moisture-seed", type=str, default=None, help="Moisture seed (default: random)"
    )
    parser.add_argument(
        "--chunk",
        type=int,
        nargs=4,
        metavar=("X1", "Y1", "X2", "Y2"),
        default=None,
        help="Generate only the inclusive chunk from (X1, Y1) to (X2, Y2)",
    )
    parser.add_argument(
        "--format",
        choices=["collection", "image", "png"],
        default=None,
        help="Output format (default: collection)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file; JSON or data URL on stdout when omitted",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for world generation."""
    args = build_parser().parse_args(argv)

    # Logs go to stderr so stdout stays clean for output
    level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    from .config import resolve_options
    from .exceptions import WorldgenError
    from .render import to_data_url
    from .terrain.generator import generate

    try:
        options = _collect_options(args)
        config, region = resolve_options(**options)
    except (FileNotFoundError, WorldgenError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    logger.info(
        "world_seeds",
        elevation_seed=config.elevation_seed,
        moisture_seed=config.moisture_seed,
    )

    try:
        result = generate(config, region)
    except WorldgenError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    output_path = Path(args.output) if args.output else None

    if isinstance(result, bytes):
        if output_path is None:
            print(to_data_url(result))
        else:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(result)
            logger.info("map_image_saved", path=str(output_path))
        return

    payload = json.dumps([block.to_dict() for block in result])
    if output_path is None:
        print(payload)
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload)
        logger.info("block_collection_saved", path=str(output_path), blocks=len(result))


def _collect_options(args: argparse.Namespace) -> dict:
    """Merge config file options with command-line overrides."""
    from .config import load_config

    options: dict = {}
    if args.config:
        options = load_config(Path(args.config)).to_options()

    if args.type is not None:
        options["type"] = args.type
    if args.format is not None:
        options["format"] = args.format

    size = options.setdefault("size", {})
    if args.width is not None:
        size["width"] = args.width
    if args.height is not None:
        size["height"] = args.height

    seed = options.setdefault("seed", {})
    if args.elevation_seed is not None:
        seed["elevation"] = args.elevation_seed
    if args.moisture_seed is not None:
        seed["moisture"] = args.moisture_seed

    if args.chunk is not None:
        x1, y1, x2, y2 = args.chunk
        options["chunk"] = {
            "start": {"width": x1, "height": y1},
            "end": {"width": x2, "height": y2},
        }

    return options
