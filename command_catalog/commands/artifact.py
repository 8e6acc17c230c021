"""Read and write the catalog artifact (a JSON array of records)."""
import json
import logging
import os
import tempfile
from pathlib import Path

from ..exceptions import ArtifactError
from .models import Catalog, CommandRecord

logger = logging.getLogger(__name__)


def dump_catalog(catalog: Catalog) -> str:
    """Serialize a catalog to the artifact's JSON text."""
    return json.dumps(
        [record.to_dict() for record in catalog], indent=2, ensure_ascii=False
    ) + "\n"


def write_catalog(catalog: Catalog, output_path: Path | str) -> Path:
    """Write the catalog artifact atomically.

    The JSON goes to a temp file next to output_path and is then moved into
    place, so an existing artifact is replaced whole or not at all.

    Returns:
        The path written.

    Raises:
        ArtifactError: If the artifact cannot be written.
    """
    output_path = Path(output_path)
    content = dump_catalog(catalog)

    tmp_name = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        os.replace(tmp_name, output_path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ArtifactError(f"Cannot write catalog to {output_path}: {e}") from e

    logger.info(f"Wrote {len(catalog)} commands to {output_path}")
    return output_path


def load_catalog(path: Path | str) -> Catalog:
    """Load a catalog artifact written by write_catalog.

    Raises:
        ArtifactError: If the file is missing or not a JSON array of objects.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ArtifactError(f"Catalog artifact {path} not found; run build first") from e
    except json.JSONDecodeError as e:
        raise ArtifactError(f"Catalog artifact {path} is not valid JSON: {e}") from e
    except OSError as e:
        raise ArtifactError(f"Cannot read catalog artifact {path}: {e}") from e

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ArtifactError(f"Catalog artifact {path} must be a JSON array of objects")

    return tuple(CommandRecord.from_dict(item) for item in data)
