"""Value types returned by ``ResultSet`` accessors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DatabaseStat:
    """Hits found in one searched database."""

    id: str
    hits: int
    label: str | None


@dataclass(frozen=True, slots=True)
class FacetValue:
    """One selectable value of a facet.

    Attributes:
        value: Display value, e.g. ``"Academic Journals"``.
        hit_count: Results that would remain with this value applied.
        action: Provider action string that applies the value.
    """

    value: str
    hit_count: int
    action: str


@dataclass(frozen=True, slots=True)
class Facet:
    """An available facet and its values, in provider order."""

    id: str
    label: str
    values: tuple[FacetValue, ...] = ()


@dataclass(frozen=True, slots=True)
class DateRange:
    """Publication date bounds available for the search.

    Dates are kept as sent (``YYYY-MM``); years are their first four
    characters.
    """

    min_date: str
    max_date: str
    min_year: str
    max_year: str
