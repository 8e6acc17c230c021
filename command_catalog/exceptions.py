"""Custom exceptions for the command catalog."""
from pathlib import Path


class CommandCatalogError(Exception):
    """Base exception for the command catalog."""

    pass


class BuildError(CommandCatalogError):
    """Catalog build failed; nothing was produced."""

    def __init__(self, message: str, file_name: str | None = None):
        super().__init__(message)
        self.file_name = file_name


class DirectoryUnavailable(BuildError):
    """Source directory is missing or cannot be read."""

    def __init__(self, path: Path | str, reason: str = "not found"):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Source directory {self.path} unavailable: {reason}")


class MalformedDefinition(BuildError):
    """A definition file's body is not a valid structured document."""

    def __init__(
        self,
        file_name: str,
        reason: str,
        line: int | None = None,
        column: int | None = None,
    ):
        self.reason = reason
        self.line = line
        self.column = column
        location = file_name
        if line is not None:
            location = f"{location}:{line}"
            if column is not None:
                location = f"{location}:{column}"
        super().__init__(f"{location}: {reason}", file_name=file_name)


class ArtifactError(CommandCatalogError):
    """Catalog artifact could not be written or read."""

    pass
