from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from rich.console import Console

from .catalog_data import BUILTIN_CATALOG
from .cli import MatchArgs, build_query, parse_cli
from .display import display_catalog, display_match_results
from .matcher import MatchTier, match_outcome
from .profiles import CatalogError, ProfileCatalog, list_catalog, load_catalog
from .utils import ensure_dir, log_section

EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def _configure_logging(args: MatchArgs) -> logging.Logger:
    # File-only logging; console output is driven by Rich
    level = logging.INFO
    if args.quiet:
        level = logging.WARNING
    elif args.verbose:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.NullHandler()],
        force=True,
    )
    log = logging.getLogger(__name__)

    if args.log_file is not None:
        log_file = Path(args.log_file)
        try:
            _ = ensure_dir(log_file.parent)
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
            logging.getLogger().addHandler(fh)
        except OSError as e:
            log.warning("Could not attach file logger at %s: %s", log_file, e)

    return log


def resolve_catalog(catalog_file: Path | None) -> ProfileCatalog:
    """Return the catalog to match against.

    Args:
        catalog_file: YAML catalog override, or None for the built-in catalog

    Raises:
        CatalogError: If the override cannot be loaded
    """
    if catalog_file is None:
        return BUILTIN_CATALOG
    return load_catalog(catalog_file)


def run_advisor(args: MatchArgs, console: Console | None = None) -> int:
    console = console or Console()
    log = _configure_logging(args)

    log_section(log, "Catalog")
    try:
        catalog = resolve_catalog(args.catalog_file)
    except CatalogError as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}\n")
        log.error("Invalid catalog: %s", e)
        return EXIT_ERROR
    log.info("Using %s (%d profiles)", args.catalog_file or "built-in catalog", len(catalog))

    if args.list_profiles:
        log.debug("%s", list_catalog(catalog))
        display_catalog(console, catalog)
        return EXIT_MATCH

    log_section(log, "Match")
    query = build_query(args)
    log.info("Query: %s", query)

    outcome = match_outcome(catalog, query)
    display_match_results(console, query, outcome)

    if outcome.tier == MatchTier.NONE:
        log.warning("No matching profile found")
        return EXIT_NO_MATCH

    log.info(
        "%s match: %s",
        outcome.tier.value.capitalize(),
        ", ".join(p.label for p in outcome.profiles),
    )
    return EXIT_MATCH


def main(argv: Iterable[str] | None = None) -> int:
    """CLI wrapper for entry points."""
    return run_advisor(parse_cli(argv))


if __name__ == "__main__":
    raise SystemExit(main())
