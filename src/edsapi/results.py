"""Result set adaptation: raw search response to structured views.

``ResultSet`` wraps one raw response document. Record lists are built once at
construction; every accessor afterwards is a pure projection of the raw
document, so calling one never changes what another returns.

Accessors follow one of two lookup policies (see ``edsapi._lookup``):
optional, request-dependent sections default to empty values, while fields
the provider always sends on a completed search raise ``MissingFieldError``
when absent.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
import json
import logging
from typing import Any, Generic, TypeVar

from edsapi._lookup import get_list, get_or_default, get_required
from edsapi.config import Config
from edsapi.errors import MalformedResponseError
from edsapi.labels import labels_for
from edsapi.models import DatabaseStat, DateRange, Facet, FacetValue
from edsapi.record import Record

log = logging.getLogger(__name__)

R = TypeVar("R")

ALL_FACETS = "all"

# Section paths
_STATISTICS = ("SearchResult", "Statistics")
_RECORDS = ("SearchResult", "Data", "Records")
_RELATED_RECORDS = ("SearchResult", "RelatedContent", "RelatedRecords")
_RELATED_PUBLICATIONS = ("SearchResult", "RelatedContent", "RelatedPublications")
_AVAILABLE_FACETS = ("SearchResult", "AvailableFacets")
_DATE_RANGE = ("SearchResult", "AvailableCriteria", "DateRange")
_SUGGESTIONS = ("SearchResult", "AutoSuggestedTerms")
_CRITERIA = ("SearchRequest", "SearchCriteria")
_CRITERIA_WITH_ACTIONS = ("SearchRequest", "SearchCriteriaWithActions")
_RETRIEVAL = ("SearchRequest", "RetrievalCriteria")


class ResultSet(Generic[R]):
    """Structured, read-only view over one search response.

    Attributes:
        records: Primary result records, empty when the search had no hits.
        research_starters: Records from research-starter related content.
        publication_match: Records from exact-publication-match related content.

    Example:
        results = ResultSet(response_json)
        results.total_hits()
        [f.label for f in results.facets()]
        results.did_you_mean()
    """

    __slots__ = (
        "_config",
        "_labels",
        "_publication_match",
        "_raw",
        "_records",
        "_research_starters",
    )

    def __init__(
        self,
        raw: Mapping[str, Any],
        *,
        record_factory: Callable[[Mapping[str, Any]], R] = Record,  # type: ignore[assignment]
        config: Config | None = None,
    ) -> None:
        """Adapt ``raw`` and build the record lists.

        Args:
            raw: Decoded search response. Stored as is and never modified.
            record_factory: Builds one record from one raw item. Its errors
                propagate unchanged.
            config: Markers and label table selection. Defaults to ``Config()``.

        Raises:
            MalformedResponseError: If ``raw`` is not a mapping.
            ConfigurationError: If the configured label table is not valid.
        """
        if not isinstance(raw, Mapping):
            raise MalformedResponseError(
                f"Search response must be a mapping, got {type(raw).__name__}",
                hint="Decode the response body first or use ResultSet.from_json().",
            )
        self._raw = raw
        self._config = config if config is not None else Config()
        self._labels = labels_for(self._config)

        records: list[R] = []
        if self.total_hits() > 0:
            records = [record_factory(item) for item in get_list(raw, *_RECORDS)]
        self._records: tuple[R, ...] = tuple(records)

        self._research_starters: tuple[R, ...] = self._related(
            _RELATED_RECORDS,
            self._config.research_starter_type,
            "Records",
            record_factory,
        )
        self._publication_match: tuple[R, ...] = self._related(
            _RELATED_PUBLICATIONS,
            self._config.publication_match_type,
            "PublicationRecords",
            record_factory,
        )

        log.debug(
            "Adapted search response: hits=%d records=%d research_starters=%d "
            "publication_match=%d",
            self.total_hits(),
            len(self.records),
            len(self.research_starters),
            len(self.publication_match),
        )

    @classmethod
    def from_json(cls, text: str | bytes, **kwargs: Any) -> ResultSet[Any]:
        """Decode a JSON response body and adapt it.

        Keyword arguments are passed to the constructor.

        Raises:
            MalformedResponseError: If ``text`` is not valid JSON or does not
                decode to an object.
        """
        try:
            raw = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedResponseError(
                f"Search response is not valid JSON: {e}"
            ) from e
        return cls(raw, **kwargs)

    def _related(
        self,
        section: tuple[str, ...],
        marker: str,
        items_key: str,
        record_factory: Callable[[Mapping[str, Any]], R],
    ) -> tuple[R, ...]:
        out: list[R] = []
        for entry in get_list(self._raw, *section):
            if get_or_default(entry, "Type", default=None) != marker:
                continue
            out.extend(record_factory(item) for item in get_list(entry, items_key))
        return tuple(out)

    @property
    def raw(self) -> Mapping[str, Any]:
        """The response document exactly as supplied."""
        return self._raw

    @property
    def config(self) -> Config:
        return self._config

    @property
    def records(self) -> tuple[R, ...]:
        return self._records

    @property
    def research_starters(self) -> tuple[R, ...]:
        return self._research_starters

    @property
    def publication_match(self) -> tuple[R, ...]:
        return self._publication_match

    # --- Statistics ---

    def total_hits(self) -> int:
        """Total number of results found; ``0`` when not reported."""
        hits = get_or_default(self._raw, *_STATISTICS, "TotalHits", default=0)
        try:
            return int(hits)
        except (TypeError, ValueError):
            return 0

    def total_search_time_ms(self) -> int:
        """Time the provider spent on the search, in milliseconds."""
        return get_required(self._raw, *_STATISTICS, "TotalSearchTime")

    def database_stats(self) -> list[DatabaseStat]:
        """Databases searched and the hits found in each, in provider order.

        Labels come from the static label table when it knows the database
        code, otherwise from the label the provider sent.

        Example:
            [DatabaseStat(id="asn", hits=136406, label="Academic Search Ultimate"),
             DatabaseStat(id="ers", hits=1329, label="Research Starters")]
        """
        stats: list[DatabaseStat] = []
        for database in get_required(self._raw, *_STATISTICS, "Databases"):
            db_id = get_or_default(database, "Id", default="")
            label = self._labels.lookup(db_id)
            if label is None:
                label = get_or_default(database, "Label", default=None)
            stats.append(
                DatabaseStat(
                    id=db_id,
                    hits=get_or_default(database, "Hits", default=0),
                    label=label,
                )
            )
        return stats

    # --- Criteria echoes ---

    def search_criteria(self) -> Mapping[str, Any]:
        """Search criteria echoed back by the provider.

        Example:
            {"Queries": [{"BooleanOperator": "AND", "Term": "earthquakes"}],
             "SearchMode": "all", "IncludeFacets": "y", "Sort": "relevance"}
        """
        return get_required(self._raw, *_CRITERIA)

    def search_criteria_with_actions(self) -> Mapping[str, Any]:
        """Applied criteria, each paired with the action that removes it."""
        return get_required(self._raw, *_CRITERIA_WITH_ACTIONS)

    def retrieval_criteria(self) -> Mapping[str, Any]:
        """Retrieval settings, e.g. ``{"View": "brief", "PageNumber": 1}``."""
        return get_required(self._raw, *_RETRIEVAL)

    def search_queries(self) -> list[Mapping[str, Any]]:
        """Queries that produced the results, as sent back."""
        return get_required(self._raw, *_CRITERIA, "Queries")

    def page_number(self) -> int:
        """Current page number, ``1`` when the provider omits it."""
        retrieval = get_required(self._raw, *_RETRIEVAL)
        return get_or_default(retrieval, "PageNumber", default=1)

    # --- Applied refinements ---

    def applied_facets(self) -> list[Mapping[str, Any]]:
        """Facet values applied to the search, flattened across facet filters.

        Example:
            [{"FacetValue": {"Id": "SubjectGeographic", "Value": "massachusetts"},
              "RemoveAction": "removefacetfiltervalue(1,SubjectGeographic:massachusetts)"}]
        """
        applied: list[Mapping[str, Any]] = []
        for facet_filter in get_list(
            self._raw, *_CRITERIA_WITH_ACTIONS, "FacetFiltersWithAction"
        ):
            applied.extend(get_list(facet_filter, "FacetValuesWithAction"))
        return applied

    def applied_limiters(self) -> list[Mapping[str, Any]]:
        """Limiters applied to the search."""
        return get_list(self._raw, *_CRITERIA_WITH_ACTIONS, "LimitersWithAction")

    def applied_expanders(self) -> list[Mapping[str, Any]]:
        """Expanders applied to the search."""
        return get_list(self._raw, *_CRITERIA_WITH_ACTIONS, "ExpandersWithAction")

    def applied_publications(self) -> list[Mapping[str, Any]]:
        """Publications the search was limited to."""
        return get_list(
            self._raw, *_CRITERIA_WITH_ACTIONS, "PublicationWithAction"
        )

    # --- Available criteria ---

    def facets(self, facet_id: str = ALL_FACETS) -> list[Facet]:
        """Available facets with their values.

        Args:
            facet_id: Only return the facet with this id. ``"all"`` returns
                every facet.

        Returns:
            Facets in provider order; empty when none match. A specific id
            yields at most one facet, the first one sent with that id.
        """
        out: list[Facet] = []
        for available in get_list(self._raw, *_AVAILABLE_FACETS):
            current_id = get_or_default(available, "Id", default=None)
            if facet_id != ALL_FACETS and current_id != facet_id:
                continue
            values = tuple(
                FacetValue(
                    value=get_or_default(v, "Value", default=""),
                    hit_count=get_or_default(v, "Count", default=0),
                    action=get_or_default(v, "AddAction", default=""),
                )
                for v in get_list(available, "AvailableFacetValues")
            )
            out.append(
                Facet(
                    id=current_id,
                    label=get_or_default(available, "Label", default=""),
                    values=values,
                )
            )
            if facet_id != ALL_FACETS:
                break
        return out

    def date_range(self) -> DateRange:
        """Publication date range available for the search."""
        min_date = get_required(self._raw, *_DATE_RANGE, "MinDate")
        max_date = get_required(self._raw, *_DATE_RANGE, "MaxDate")
        return DateRange(
            min_date=min_date,
            max_date=max_date,
            min_year=min_date[:4],
            max_year=max_date[:4],
        )

    # --- Query helpers ---

    def did_you_mean(self) -> str | None:
        """First spelling suggestion for the query, if any.

        Example:
            ResultSet(response_for("earthquak")).did_you_mean()  # "earthquake"
        """
        suggestions = get_list(self._raw, *_SUGGESTIONS)
        return suggestions[0] if suggestions else None

    def search_terms(self) -> list[str]:
        """Words of the applied queries, split on whitespace.

        Boolean operators inside a term are kept as words.

        Example:
            ["earthquakes", "california"]
        """
        terms: list[str] = []
        for query in get_list(
            self._raw, *_CRITERIA_WITH_ACTIONS, "QueriesWithAction"
        ):
            term = get_or_default(query, "Query", "Term", default="")
            if isinstance(term, str):
                terms.extend(term.split())
        return terms

    # --- Container protocol ---

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[R]:
        return iter(self.records)

    def __repr__(self) -> str:
        return (
            f"ResultSet(total_hits={self.total_hits()}, records={len(self.records)}, "
            f"research_starters={len(self.research_starters)}, "
            f"publication_match={len(self.publication_match)})"
        )
