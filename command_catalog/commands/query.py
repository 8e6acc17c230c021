"""Label vocabulary and search/filter over a catalog."""
from collections.abc import Iterable

from .models import Catalog, CommandRecord


def label_vocabulary(catalog: Catalog) -> list[str]:
    """Distinct labels across the catalog, in first-seen order."""
    seen: dict[str, None] = {}
    for record in catalog:
        for label in record.labels:
            seen.setdefault(label, None)
    return list(seen)


def matches_search(record: CommandRecord, search_term: str) -> bool:
    """Case-insensitive substring match on name, description or prompt."""
    if search_term == "":
        return True
    term = search_term.lower()
    return (
        term in record.name.lower()
        or term in record.description.lower()
        or term in record.prompt.lower()
    )


def matches_labels(record: CommandRecord, selected_labels: Iterable[str]) -> bool:
    """True if the record carries every selected label (exact match)."""
    return set(selected_labels).issubset(record.labels)


def query_catalog(
    catalog: Catalog,
    search_term: str = "",
    selected_labels: Iterable[str] = (),
) -> list[CommandRecord]:
    """Filter the catalog by search text and selected labels.

    Both conditions must hold. An empty search term or an empty label set
    matches everything. Catalog order is preserved.
    """
    selected = frozenset(selected_labels)
    return [
        record
        for record in catalog
        if matches_search(record, search_term) and matches_labels(record, selected)
    ]
