"""Configuration: frozen adapter settings with env auto-resolution."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv

from edsapi.errors import ConfigurationError

load_dotenv()

DATABASES_FILE_ENV_VAR = "EDSAPI_DATABASES_FILE"

RESEARCH_STARTER_TYPE = "rs"
PUBLICATION_MATCH_TYPE = "emp"


@dataclass(frozen=True)
class Config:
    """Immutable configuration for result set adaptation.

    The related-content markers match what the provider sends today; they are
    configurable only so profiles with custom related-content types can be
    adapted without subclassing.

    Example:
        config = Config(databases_file="labels.yml")
        results = ResultSet(raw, config=config)
    """

    research_starter_type: str = RESEARCH_STARTER_TYPE
    publication_match_type: str = PUBLICATION_MATCH_TYPE
    #: Auto-resolved from ``EDSAPI_DATABASES_FILE`` when *None*. Still *None*
    #: afterwards means the table packaged with edsapi.
    databases_file: Path | str | None = None

    def __post_init__(self) -> None:
        """Auto-resolve the label table path and validate markers."""
        for name in ("research_starter_type", "publication_match_type"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(
                    f"{name} must be a non-empty string, got {value!r}",
                    hint="Related-content entries are matched on their 'Type' field.",
                )

        if self.research_starter_type == self.publication_match_type:
            raise ConfigurationError(
                "research_starter_type and publication_match_type must differ",
                hint=f"Defaults are {RESEARCH_STARTER_TYPE!r} and {PUBLICATION_MATCH_TYPE!r}.",
            )

        path = self.databases_file
        if path is None:
            env_path = os.environ.get(DATABASES_FILE_ENV_VAR)
            path = env_path or None
        if path is not None:
            path = Path(path).expanduser()
            if not path.is_file():
                raise ConfigurationError(
                    f"Database label table not found: {path}",
                    hint=f"Check {DATABASES_FILE_ENV_VAR} or pass Config(databases_file=...).",
                )
        object.__setattr__(self, "databases_file", path)

    def __str__(self) -> str:
        """Return a compact, developer-friendly representation."""
        table = str(self.databases_file) if self.databases_file else "<packaged>"
        return (
            f"Config(research_starter_type={self.research_starter_type!r}, "
            f"publication_match_type={self.publication_match_type!r}, "
            f"databases_file={table!r})"
        )

    __repr__ = __str__
