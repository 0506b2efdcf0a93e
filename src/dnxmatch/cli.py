"""CLI argument parsing for dnxmatch.

This module provides the MatchArgs dataclass, parser construction, and the
conversion of parsed arguments into a MatchQuery, including the chroma
normalization every query must go through.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable
from dataclasses import dataclass, fields, MISSING
from pathlib import Path

from .constants import (
    DEFAULT_BIT_DEPTH,
    DEFAULT_CHROMA,
    DEFAULT_FRAMERATE,
    DEFAULT_RESOLUTION,
    PREFERENCE_SKIP,
    UNSUPPORTED_CHROMA,
    UNSUPPORTED_CHROMA_REPLACEMENT,
)
from .matcher import MatchQuery
from .profiles import PreferenceClass
from .version import __version__

logger = logging.getLogger(__name__)

PREFERENCE_CHOICES: list[str] = [p.value for p in PreferenceClass] + [PREFERENCE_SKIP]


@dataclass
class MatchArgs:
    framerate: str = DEFAULT_FRAMERATE
    resolution: str = DEFAULT_RESOLUTION
    chroma: str = DEFAULT_CHROMA
    bit_depth: str = DEFAULT_BIT_DEPTH
    preference: str = PREFERENCE_SKIP

    catalog_file: Path | None = None
    list_profiles: bool = False

    log_file: str | Path | None = None
    quiet: bool = False
    verbose: bool = False


def get_default(field_name: str) -> object:
    """Get default value from MatchArgs dataclass field."""
    for field in fields(MatchArgs):
        if field.name == field_name:
            return field.default if field.default is not MISSING else None
    raise ValueError(f"Field {field_name} not found in MatchArgs")


def normalize_chroma(chroma: str) -> str:
    """Map chroma subsampling DNxHD/DNxHR cannot produce onto the nearest one it can.

    4:2:0 sources are recommended 4:2:2 profiles; every other value passes
    through untouched.
    """
    if chroma == UNSUPPORTED_CHROMA:
        logger.info("Chroma %s is not supported, using %s", chroma, UNSUPPORTED_CHROMA_REPLACEMENT)
        return UNSUPPORTED_CHROMA_REPLACEMENT
    return chroma


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dnxmatch",
        description="Recommend Avid DNxHD/DNxHR profiles for a set of media parameters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _ = p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # -------------------------------------------------------------------------
    # Media Parameters
    # -------------------------------------------------------------------------
    media_group = p.add_argument_group("Media Parameters")
    _ = media_group.add_argument(
        "--framerate",
        type=str,
        metavar="RATE",
        default=get_default("framerate"),
        help=f"Frame rate in frames per 1000 seconds, e.g. 29970 (default: {get_default('framerate')})",
    )
    _ = media_group.add_argument(
        "--resolution",
        type=str,
        metavar="WxH",
        default=get_default("resolution"),
        help=f"Frame size (default: {get_default('resolution')})",
    )
    _ = media_group.add_argument(
        "--chroma",
        type=str,
        metavar="J:A:B",
        default=get_default("chroma"),
        help=f"Chroma subsampling; 4:2:0 is treated as 4:2:2 (default: {get_default('chroma')})",
    )
    _ = media_group.add_argument(
        "--bit-depth",
        type=str,
        metavar="DEPTH",
        default=get_default("bit_depth"),
        help=f"Bit depth, e.g. 10-bit (default: {get_default('bit_depth')})",
    )
    _ = media_group.add_argument(
        "--preference",
        type=str,
        default=get_default("preference"),
        help=f"Size/quality trade-off: {', '.join(PREFERENCE_CHOICES)}; Skip accepts any profile (default: {get_default('preference')})",
    )

    # -------------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------------
    catalog_group = p.add_argument_group("Catalog")
    _ = catalog_group.add_argument(
        "--catalog-file",
        type=Path,
        metavar="PATH",
        default=get_default("catalog_file"),
        help="YAML catalog to use instead of the built-in Avid profiles",
    )
    _ = catalog_group.add_argument(
        "--list-profiles",
        action="store_true",
        help="List catalog profiles and exit",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_group = p.add_argument_group("Logging")
    _ = log_group.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        default=get_default("log_file"),
        help="Write a log file",
    )
    verbosity = log_group.add_mutually_exclusive_group()
    _ = verbosity.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    _ = verbosity.add_argument("--verbose", action="store_true", help="Enable debug logging")

    return p


def parse_cli(argv: Iterable[str] | None = None) -> MatchArgs:
    parser = build_arg_parser()
    argv_list: list[str] | None = list(argv) if argv is not None else None
    parsed = parser.parse_args(argv_list)
    return MatchArgs(**vars(parsed))


def build_query(args: MatchArgs) -> MatchQuery:
    """Build the matcher query from parsed arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        MatchQuery with chroma normalized
    """
    return MatchQuery(
        framerate=args.framerate,
        resolution=args.resolution,
        chroma=normalize_chroma(args.chroma),
        bit_depth=args.bit_depth,
        preference=args.preference,
    )
