"""Load the version table used to tag records."""

from __future__ import annotations

import json
from pathlib import Path

from docs2index.exceptions import ConfigError


def load_versions(path: Path) -> dict[str, str]:
    """Read a version table from JSON.

    A list of version names (the shape of a Docusaurus ``versions.json``) maps
    each name to itself. An object maps ``docsearch:version`` values to the
    version stored on records.

    Raises:
        ConfigError: If the file cannot be read or has another shape.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Unable to load versions from {path}: {exc}") from exc

    if isinstance(data, list) and all(isinstance(item, str) for item in data):
        return {item: item for item in data}
    if isinstance(data, dict):
        return {str(key): str(value) for key, value in data.items()}
    raise ConfigError(
        f"Versions file {path} must hold a list of names or an object of names"
    )
