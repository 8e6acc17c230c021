"""Command catalog entry point."""
import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from command_catalog.commands.artifact import write_catalog
from command_catalog.commands.builder import build_catalog
from command_catalog.commands.registry import CommandCatalog
from command_catalog.config.settings import Config, apply_env_overrides, load_config
from command_catalog.exceptions import ArtifactError, BuildError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="command-catalog",
        description="Build and search a catalog of AI command definitions.",
    )
    parser.add_argument("--config", help="Path to config.yaml")
    parser.add_argument("--source", help="Directory of .toml definition files")
    parser.add_argument("--output", help="Catalog artifact path (JSON)")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("build", help="Parse definitions and write the catalog")

    search = sub.add_parser("search", help="Search the built catalog")
    search.add_argument("term", nargs="?", default="", help="Text to search for")
    search.add_argument(
        "--label",
        action="append",
        default=[],
        dest="labels",
        help="Require this label (repeatable)",
    )

    sub.add_parser("labels", help="List all labels in the catalog")
    return parser


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )


def run_build(config: Config) -> int:
    """Build the catalog and write the artifact."""
    try:
        catalog = build_catalog(config.source_dir, sort_files=config.sort_files)
    except BuildError as e:
        logger.error(f"Build failed, catalog not written: {e}")
        return 1

    try:
        output = write_catalog(catalog, config.output_path)
    except ArtifactError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Parsed {len(catalog)} commands and wrote {output}")
    return 0


def run_search(config: Config, term: str, labels: list[str]) -> int:
    """Print records matching the search term and labels."""
    try:
        catalog = CommandCatalog.from_artifact(config.output_path)
    except ArtifactError as e:
        logger.error(str(e))
        return 1

    for record in catalog.search(term, labels):
        print(f"{record.id}\t{record.name}\t{', '.join(record.labels)}")
    return 0


def run_labels(config: Config) -> int:
    """Print the catalog's label vocabulary."""
    try:
        catalog = CommandCatalog.from_artifact(config.output_path)
    except ArtifactError as e:
        logger.error(str(e))
        return 1

    for label in catalog.labels:
        print(label)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()
    args = _build_parser().parse_args(argv)

    config = apply_env_overrides(load_config(args.config), os.environ)
    if args.source:
        config.source_dir = args.source
    if args.output:
        config.output_path = args.output

    _setup_logging(config.logging.level)

    if args.command == "search":
        return run_search(config, args.term, args.labels)
    if args.command == "labels":
        return run_labels(config)
    return run_build(config)


if __name__ == "__main__":
    sys.exit(main())
