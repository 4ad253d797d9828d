"""Static database label table.

The table maps provider database codes (``asn``, ``nlebk``, ...) to display
labels. It is a YAML file with a single top-level ``databases`` mapping; the
package ships one and ``Config.databases_file`` may point at another.
"""

from __future__ import annotations

from functools import cache
from importlib.resources import files
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError, field_validator
import yaml

from edsapi.errors import ConfigurationError

if TYPE_CHECKING:
    from edsapi.config import Config

log = logging.getLogger(__name__)

PACKAGED_TABLE = "databases.yml"


class DatabaseLabels(BaseModel):
    """Validated code -> label table with upper-cased codes."""

    databases: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("databases")
    @classmethod
    def normalize_codes(cls, v: dict[str, str]) -> dict[str, str]:
        """Upper-case codes and reject blank codes or labels."""
        normalized: dict[str, str] = {}
        for code, label in v.items():
            key = code.strip().upper()
            text = label.strip()
            if not key:
                raise ValueError("database code cannot be empty")
            if not text:
                raise ValueError(f"label for {key} cannot be empty")
            normalized[key] = text
        return normalized

    def lookup(self, code: str | None) -> str | None:
        """Return the label for ``code`` (case-insensitive) or None."""
        if not isinstance(code, str):
            return None
        return self.databases.get(code.strip().upper())

    def __len__(self) -> int:
        return len(self.databases)


def _read_yaml(text: str, origin: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Database label table {origin} is not valid YAML: {e}",
        ) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Database label table {origin} must be a mapping",
            hint="Expected a top-level 'databases:' mapping of code to label.",
        )
    return data


@cache
def load_labels(path: Path | None = None) -> DatabaseLabels:
    """Load and validate a label table, memoized per path.

    Args:
        path: YAML file to read. ``None`` reads the packaged table.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    if path is None:
        origin = f"<edsapi>/{PACKAGED_TABLE}"
        text = files("edsapi").joinpath("data", PACKAGED_TABLE).read_text("utf-8")
    else:
        origin = str(path)
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read database label table {origin}: {e}",
                hint="Check EDSAPI_DATABASES_FILE or Config(databases_file=...).",
            ) from e

    try:
        labels = DatabaseLabels.model_validate(_read_yaml(text, origin))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid database label table {origin}: {e}",
        ) from e

    log.debug("Loaded %d database labels from %s", len(labels), origin)
    return labels


def labels_for(config: Config) -> DatabaseLabels:
    """Return the label table selected by ``config``."""
    path = config.databases_file
    return load_labels(Path(path) if path is not None else None)


def lookup_label(code: str, labels: DatabaseLabels | None = None) -> str | None:
    """Look up ``code`` in ``labels`` (default: the packaged table)."""
    table = labels if labels is not None else load_labels()
    return table.lookup(code)
