"""Test helpers (small, reusable doubles and document builders)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class RecordSpy:
    """Record factory that remembers every raw item it was given."""

    calls: list[Mapping[str, Any]] = field(default_factory=list)

    def __call__(self, raw: Mapping[str, Any]) -> tuple[str, Any]:
        self.calls.append(raw)
        return ("record", raw.get("id", raw))


def make_response(
    *,
    total_hits: Any = None,
    records: list[Any] | None = None,
    related_records: list[Any] | None = None,
    related_publications: list[Any] | None = None,
) -> dict[str, Any]:
    """Build a minimal response containing only the given sections."""
    result: dict[str, Any] = {}
    if total_hits is not None:
        result["Statistics"] = {"TotalHits": total_hits}
    if records is not None:
        result["Data"] = {"Records": records}
    related: dict[str, Any] = {}
    if related_records is not None:
        related["RelatedRecords"] = related_records
    if related_publications is not None:
        related["RelatedPublications"] = related_publications
    if related:
        result["RelatedContent"] = related
    return {"SearchResult": result}


def items(*ids: str) -> list[dict[str, str]]:
    return [{"id": i} for i in ids]
