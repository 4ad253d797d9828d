"""Default record collaborator.

``ResultSet`` treats records as opaque values produced by a factory. This
minimal wrapper keeps the raw item and exposes the handful of header fields
every item carries; richer record models can be passed as ``record_factory``.
"""

from __future__ import annotations

from collections.abc import Mapping  # noqa: TC003 - used at runtime in dataclass
from dataclasses import dataclass
from typing import Any

from edsapi._lookup import get_list, get_or_default


@dataclass(frozen=True, slots=True)
class Record:
    """A single raw result item, read-only."""

    raw: Mapping[str, Any]

    @property
    def result_id(self) -> int | None:
        return get_or_default(self.raw, "ResultId", default=None)

    @property
    def database_id(self) -> str | None:
        return get_or_default(self.raw, "Header", "DbId", default=None)

    @property
    def accession_number(self) -> str | None:
        return get_or_default(self.raw, "Header", "An", default=None)

    @property
    def publication_type(self) -> str | None:
        return get_or_default(self.raw, "Header", "PubType", default=None)

    @property
    def title(self) -> str | None:
        """First full title from the bibliographic entity, if any."""
        titles = get_list(
            self.raw, "RecordInfo", "BibRecord", "BibEntity", "Titles"
        )
        for entry in titles:
            text = get_or_default(entry, "TitleFull", default=None)
            if text:
                return text
        return None
