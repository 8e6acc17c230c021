"""Command catalog holder handed to the presentation layer."""
import logging
from collections.abc import Iterable
from pathlib import Path

from .artifact import load_catalog
from .builder import build_catalog
from .models import Catalog, CommandRecord
from .query import label_vocabulary, query_catalog

logger = logging.getLogger(__name__)


class CommandCatalog:
    """Read-only view over a built catalog with search and label filters."""

    def __init__(self, records: Iterable[CommandRecord] = ()):
        self._records: Catalog = tuple(records)
        self._by_id = {record.id: record for record in self._records}
        self._labels = label_vocabulary(self._records)
        self._last_query: tuple[str, frozenset[str]] | None = None
        self._last_result: list[CommandRecord] = []

    @classmethod
    def from_artifact(cls, path: Path | str) -> "CommandCatalog":
        """Load a catalog from a written artifact."""
        catalog = cls(load_catalog(path))
        logger.debug(f"Loaded {len(catalog)} commands from {path}")
        return catalog

    @classmethod
    def build(cls, source_dir: Path | str, sort_files: bool = True) -> "CommandCatalog":
        """Build a catalog straight from definition files."""
        return cls(build_catalog(source_dir, sort_files=sort_files))

    @property
    def commands(self) -> list[CommandRecord]:
        """Get all records in catalog order."""
        return list(self._records)

    @property
    def labels(self) -> list[str]:
        """Get the label vocabulary for the filter control."""
        return list(self._labels)

    def __len__(self) -> int:
        return len(self._records)

    def get(self, command_id: str) -> CommandRecord | None:
        """Get record by id."""
        return self._by_id.get(command_id)

    def search(
        self, search_term: str = "", selected_labels: Iterable[str] = ()
    ) -> list[CommandRecord]:
        """Filter records by text and labels.

        Only the most recent result is cached, keyed on the exact inputs.
        """
        key = (search_term, frozenset(selected_labels))
        if key != self._last_query:
            self._last_result = query_catalog(self._records, key[0], key[1])
            self._last_query = key
        return list(self._last_result)
