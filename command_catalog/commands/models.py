"""Data models for catalog commands."""
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CommandRecord:
    """One command definition, normalized from a .toml file."""

    id: str
    name: str = ""
    usage: str = ""
    example: str = ""
    labels: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""
    prompt: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to the artifact's JSON object."""
        return {
            "id": self.id,
            "name": self.name,
            "usage": self.usage,
            "example": self.example,
            "labels": list(self.labels),
            "description": self.description,
            "prompt": self.prompt,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CommandRecord":
        """Build a record from an artifact object, defaulting missing keys."""
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            usage=data.get("usage", ""),
            example=data.get("example", ""),
            labels=tuple(data.get("labels") or ()),
            description=data.get("description", ""),
            prompt=data.get("prompt", ""),
        )


Catalog = tuple[CommandRecord, ...]
