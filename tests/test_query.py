"""Test label vocabulary, query filtering and CommandCatalog."""
import pytest

from command_catalog.commands.artifact import write_catalog
from command_catalog.commands.models import CommandRecord
from command_catalog.commands.query import (
    label_vocabulary,
    matches_labels,
    matches_search,
    query_catalog,
)
from command_catalog.commands.registry import CommandCatalog
from command_catalog.exceptions import ArtifactError


@pytest.fixture
def catalog():
    """Small catalog with overlapping labels."""
    return (
        CommandRecord(
            id="git-squash",
            name="Squash",
            usage="/git-squash",
            labels=("git", "review"),
            description="combine commits",
            prompt="Please squash the commits.",
        ),
        CommandRecord(
            id="git-log",
            name="Log",
            example="/git-log squash",
            labels=("git",),
            description="Show history",
        ),
        CommandRecord(
            id="docs",
            name="Write Docs",
            labels=("docs", "Review"),
            prompt="Write documentation.",
        ),
    )


def test_label_vocabulary_first_seen_order(catalog):
    """Vocabulary lists each label once in first-seen order."""
    assert label_vocabulary(catalog) == ["git", "review", "docs", "Review"]


def test_label_vocabulary_empty():
    """An empty catalog has no labels."""
    assert label_vocabulary(()) == []


def test_query_empty_inputs_returns_all(catalog):
    """Empty search and no labels return the full catalog in order."""
    assert query_catalog(catalog, "", set()) == list(catalog)


def test_query_empty_catalog():
    """Querying an empty catalog returns an empty list."""
    assert query_catalog((), "anything", {"git"}) == []


def test_query_labels_and_semantics(catalog):
    """All selected labels must be present on a record."""
    result = query_catalog(catalog, "", {"git", "review"})

    assert [r.id for r in result] == ["git-squash"]


def test_query_single_label(catalog):
    """A single label matches every record carrying it."""
    result = query_catalog(catalog, "", {"git"})

    assert [r.id for r in result] == ["git-squash", "git-log"]


def test_query_labels_case_sensitive(catalog):
    """Label matching uses exact string equality."""
    result = query_catalog(catalog, "", {"Review"})

    assert [r.id for r in result] == ["docs"]


@pytest.mark.parametrize("term", ["squash", "SQUASH", "Squash"])
def test_query_text_case_insensitive(catalog, term):
    """Search text ignores case."""
    result = query_catalog(catalog, term)

    assert [r.id for r in result] == ["git-squash"]


def test_matches_search_any_field():
    """Text may match name, description or prompt."""
    assert matches_search(CommandRecord(id="a", name="Squash"), "squash")
    assert matches_search(CommandRecord(id="b", description="squash it"), "squash")
    assert matches_search(CommandRecord(id="c", prompt="...squash..."), "squash")


def test_matches_search_ignores_other_fields():
    """id, usage, example and labels are not searched."""
    record = CommandRecord(
        id="squash",
        usage="/squash",
        example="squash 3",
        labels=("squash",),
    )

    assert not matches_search(record, "squash")


def test_matches_search_empty_term():
    """An empty search term matches any record."""
    assert matches_search(CommandRecord(id="a"), "")


def test_matches_labels_empty_selection():
    """No selected labels matches any record."""
    assert matches_labels(CommandRecord(id="a"), [])


def test_query_text_and_labels_combined(catalog):
    """Text and label conditions must both hold."""
    assert query_catalog(catalog, "docs", {"git"}) == []
    assert [r.id for r in query_catalog(catalog, "history", {"git"})] == ["git-log"]


def test_query_no_match_returns_empty(catalog):
    """A query matching nothing returns an empty list."""
    assert query_catalog(catalog, "zzz") == []


def test_query_does_not_mutate_catalog(catalog):
    """Querying leaves the catalog unchanged."""
    before = tuple(catalog)

    query_catalog(catalog, "squash", {"git"})

    assert catalog == before


def test_command_catalog_properties(catalog):
    """CommandCatalog exposes records, labels and lookup by id."""
    registry = CommandCatalog(catalog)

    assert len(registry) == 3
    assert registry.commands == list(catalog)
    assert registry.labels == ["git", "review", "docs", "Review"]
    assert registry.get("git-log") is catalog[1]
    assert registry.get("unknown") is None


def test_command_catalog_search(catalog):
    """CommandCatalog.search applies text and label filters."""
    registry = CommandCatalog(catalog)

    result = registry.search("squash", ["git"])

    assert [r.id for r in result] == ["git-squash"]


def test_command_catalog_caches_last_query(catalog, monkeypatch):
    """Repeating the same inputs reuses the previous result."""
    calls = []

    def counting_query(records, term, labels):
        calls.append((term, labels))
        return list(records)

    monkeypatch.setattr(
        "command_catalog.commands.registry.query_catalog", counting_query
    )
    registry = CommandCatalog(catalog)

    registry.search("git", ["a", "b"])
    registry.search("git", ["b", "a"])
    assert len(calls) == 1

    registry.search("log", ["a", "b"])
    assert len(calls) == 2


def test_command_catalog_search_returns_copy(catalog):
    """Mutating a search result does not affect later results."""
    registry = CommandCatalog(catalog)

    first = registry.search()
    first.clear()

    assert registry.search() == list(catalog)


def test_command_catalog_from_artifact(catalog, tmp_path):
    """CommandCatalog loads from a written artifact."""
    path = write_catalog(catalog, tmp_path / "commands.json")

    registry = CommandCatalog.from_artifact(path)

    assert registry.commands == list(catalog)


def test_command_catalog_from_missing_artifact(tmp_path):
    """A missing artifact raises ArtifactError."""
    with pytest.raises(ArtifactError):
        CommandCatalog.from_artifact(tmp_path / "missing.json")


def test_command_catalog_build(tmp_path):
    """CommandCatalog.build reads definitions from a directory."""
    (tmp_path / "one.toml").write_text('# Command: One\nlabel = "x"\n')

    registry = CommandCatalog.build(tmp_path)

    assert registry.get("one").name == "One"
    assert registry.labels == ["x"]
