"""Parse command definition files into CommandRecords."""
import logging
import re
import tomllib
from pathlib import Path
from typing import Any

from ..exceptions import MalformedDefinition
from .models import CommandRecord

logger = logging.getLogger(__name__)

DEFINITION_SUFFIX = ".toml"

# Header annotation keyword -> record field
HEADER_FIELDS = {
    "Command": "name",
    "Usage": "usage",
    "Example": "example",
}

_HEADER_PATTERNS = {
    keyword: re.compile(rf"#[ \t]*{keyword}:[ \t]*(.*)")
    for keyword in HEADER_FIELDS
}

_TOML_POSITION = re.compile(
    r"\s*\(at (?:line (\d+), column (\d+)|end of document)\)"
)


def record_id(file_name: str) -> str:
    """Return the file's base name without its extension."""
    return Path(file_name).stem


def parse_header(raw_text: str) -> dict[str, str]:
    """Extract the Command/Usage/Example comment annotations.

    Each annotation is independent and optional. Only the first occurrence
    of each keyword counts; missing ones come back as empty strings.
    """
    header = {field_name: "" for field_name in HEADER_FIELDS.values()}
    for keyword, pattern in _HEADER_PATTERNS.items():
        match = pattern.search(raw_text)
        if match:
            header[HEADER_FIELDS[keyword]] = match.group(1).strip()
    return header


def _decode_error(file_name: str, err: tomllib.TOMLDecodeError) -> MalformedDefinition:
    line = getattr(err, "lineno", None)
    column = getattr(err, "colno", None)
    reason = getattr(err, "msg", None)

    message = str(err)
    match = _TOML_POSITION.search(message)
    if line is None and match and match.group(1):
        line, column = int(match.group(1)), int(match.group(2))
    if not reason:
        reason = _TOML_POSITION.sub("", message).strip() or "invalid TOML"

    return MalformedDefinition(file_name, reason, line=line, column=column)


def _parse_labels(file_name: str, value: Any) -> tuple[str, ...]:
    if value is None or value == "":
        return ()
    if not isinstance(value, str):
        raise MalformedDefinition(
            file_name, f"'label' must be a string, got {type(value).__name__}"
        )
    return tuple(piece.strip() for piece in value.split(","))


def _string_field(file_name: str, body: dict[str, Any], key: str) -> str:
    value = body.get(key, "")
    if not isinstance(value, str):
        raise MalformedDefinition(
            file_name, f"'{key}' must be a string, got {type(value).__name__}"
        )
    return value


def parse_definition(raw_text: str, file_name: str) -> CommandRecord:
    """Parse one definition file's text into a CommandRecord.

    Header annotations are matched line by line; the TOML parser sees them
    as comments. The two passes are independent and never reconciled.

    Args:
        raw_text: Full file content.
        file_name: Base name of the source file, e.g. "git-squash.toml".

    Returns:
        Parsed CommandRecord with every field populated.

    Raises:
        MalformedDefinition: If the body is not valid TOML or a known
            field has the wrong type.
    """
    header = parse_header(raw_text)

    try:
        body = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as e:
        raise _decode_error(file_name, e) from e

    return CommandRecord(
        id=record_id(file_name),
        name=header["name"],
        usage=header["usage"],
        example=header["example"],
        labels=_parse_labels(file_name, body.get("label")),
        description=_string_field(file_name, body, "description"),
        prompt=_string_field(file_name, body, "prompt"),
    )


def parse_definition_file(path: Path) -> CommandRecord:
    """Read a .toml definition file and parse it."""
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedDefinition(path.name, f"not valid UTF-8: {e.reason}") from e

    record = parse_definition(content, path.name)
    logger.debug(f"Parsed {path.name} as '{record.id}'")
    return record
