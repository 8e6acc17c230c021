"""Build a catalog from a directory of definition files."""
import logging
from pathlib import Path

from ..exceptions import BuildError, DirectoryUnavailable
from .models import Catalog
from .parser import DEFINITION_SUFFIX, parse_definition_file

logger = logging.getLogger(__name__)


def scan_definitions(source_dir: Path | str, sort_files: bool = True) -> list[Path]:
    """List the .toml definition files directly inside source_dir.

    Subdirectories and files with other extensions are ignored.

    Args:
        source_dir: Directory holding definition files.
        sort_files: Sort by file name for a reproducible catalog order.
            When False, the platform's directory order is kept.

    Raises:
        DirectoryUnavailable: If source_dir is missing or unreadable.
    """
    source_dir = Path(source_dir)
    if not source_dir.exists():
        raise DirectoryUnavailable(source_dir, "not found")
    if not source_dir.is_dir():
        raise DirectoryUnavailable(source_dir, "not a directory")

    try:
        entries = list(source_dir.iterdir())
    except OSError as e:
        raise DirectoryUnavailable(source_dir, e.strerror or str(e)) from e

    definitions = [
        entry
        for entry in entries
        if entry.suffix == DEFINITION_SUFFIX and entry.is_file()
    ]
    if sort_files:
        definitions.sort(key=lambda p: p.name)
    return definitions


def build_catalog(source_dir: Path | str, sort_files: bool = True) -> Catalog:
    """Parse every definition file in source_dir into a Catalog.

    The build is all-or-nothing: the first file that fails to parse aborts
    it and no partial catalog is returned.

    Args:
        source_dir: Directory holding definition files.
        sort_files: See scan_definitions.

    Returns:
        Records in enumeration order.

    Raises:
        DirectoryUnavailable: If source_dir cannot be enumerated.
        MalformedDefinition: If any file's body cannot be parsed.
        BuildError: If a definition file cannot be read.
    """
    records = []
    for path in scan_definitions(source_dir, sort_files=sort_files):
        try:
            record = parse_definition_file(path)
        except OSError as e:
            raise BuildError(
                f"{path.name}: cannot read file: {e.strerror or e}",
                file_name=path.name,
            ) from e
        records.append(record)

    logger.info(f"Parsed {len(records)} commands from {source_dir}")
    return tuple(records)
