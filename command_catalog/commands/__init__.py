"""Command definition ingestion and querying."""
from .models import Catalog, CommandRecord
from .parser import parse_definition, parse_definition_file, parse_header
from .builder import build_catalog, scan_definitions
from .artifact import dump_catalog, load_catalog, write_catalog
from .query import label_vocabulary, matches_labels, matches_search, query_catalog
from .registry import CommandCatalog

__all__ = [
    "Catalog",
    "CommandRecord",
    "parse_definition",
    "parse_definition_file",
    "parse_header",
    "build_catalog",
    "scan_definitions",
    "dump_catalog",
    "load_catalog",
    "write_catalog",
    "label_vocabulary",
    "matches_labels",
    "matches_search",
    "query_catalog",
    "CommandCatalog",
]
