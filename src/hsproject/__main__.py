"""
Command line entry point for hsproject.
Usage: python -m hsproject INPUT [-o OUTPUT] [--remap FROM:TO ...]

Loads a project, rewrites block types, and writes the result to OUTPUT or
standard output.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence

from . import __version__
from .api import load_project, serialize
from .errors import HSProjectError
from .project.rewrite import remap_block_types
from .settings import AppSettings, ConfigError, parse_block_type_map
from .utils.logging_config import setup_logging


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hsproject",
        description="Rewrite block types in a Hopscotch project file",
    )
    parser.add_argument("input", type=Path, help="Project JSON file to read")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the result here instead of standard output",
    )
    parser.add_argument(
        "--remap",
        action="append",
        default=None,
        metavar="FROM:TO",
        help="Rewrite blocks of type FROM to TO (repeatable, overrides settings)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="INI settings file to use instead of the native settings store",
    )
    parser.add_argument("--profile", default="default", help="Settings profile name")
    parser.add_argument("--pretty", action="store_true", help="Indent the output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _block_type_map(args: argparse.Namespace, settings: AppSettings) -> Dict[float, float]:
    if args.remap:
        return parse_block_type_map(",".join(args.remap))
    return settings.block_type_map


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point."""
    args = _parse_args(argv)

    settings = AppSettings(profile=args.profile, settings_file=args.config)
    setup_logging(settings, verbose=args.verbose)
    logger = logging.getLogger(f"{__name__}.main")

    validation = settings.validate()
    for warning in validation.warnings:
        logger.warning(f"Configuration warning: {warning}")
    if not validation.is_valid:
        for error in validation.errors:
            logger.error(f"Configuration error: {error}")
        return 1

    try:
        mapping = _block_type_map(args, settings)
        project = load_project(args.input)
        rewritten = remap_block_types(project, mapping)
        logger.info(f"Rewrote {rewritten} block(s) in {args.input}")

        output = serialize(project, indent=args.pretty or settings.pretty_output)
        if args.output is not None:
            args.output.write_text(output, encoding="utf-8")
            logger.info(f"Wrote project to {args.output}")
        else:
            print(output)
    except ConfigError as e:
        logger.error(f"Invalid --remap value: {e}")
        return 1
    except HSProjectError as e:
        logger.error(f"Could not process {args.input}: {e}")
        return 1
    except OSError as e:
        logger.error(f"File error: {e}")
        return 1

    return 0


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
