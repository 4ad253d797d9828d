"""Pytest configuration and fixtures.

Provides environment isolation, label cache resets and a realistic
search response document. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

import copy
import os
from typing import Any

import pytest

from edsapi.labels import load_labels

# =============================================================================
# Sample Documents
# =============================================================================

SEARCH_RESPONSE: dict[str, Any] = {
    "SearchRequest": {
        "SearchCriteria": {
            "Queries": [{"BooleanOperator": "AND", "Term": "earthquakes california"}],
            "SearchMode": "all",
            "IncludeFacets": "y",
            "Expanders": ["fulltext", "thesaurus"],
            "Sort": "relevance",
            "RelatedContent": ["rs", "emp"],
            "AutoSuggest": "y",
        },
        "SearchCriteriaWithActions": {
            "QueriesWithAction": [
                {
                    "Query": {"BooleanOperator": "AND", "Term": "earthquakes california"},
                    "RemoveAction": "removequery(1)",
                }
            ],
            "FacetFiltersWithAction": [
                {
                    "FilterId": 1,
                    "FacetValuesWithAction": [
                        {
                            "FacetValue": {"Id": "SubjectGeographic", "Value": "california"},
                            "RemoveAction": "removefacetfiltervalue(1,SubjectGeographic:california)",
                        },
                        {
                            "FacetValue": {"Id": "SubjectGeographic", "Value": "nevada"},
                            "RemoveAction": "removefacetfiltervalue(1,SubjectGeographic:nevada)",
                        },
                    ],
                    "RemoveAction": "removefacetfilter(1)",
                },
                {
                    "FilterId": 2,
                    "FacetValuesWithAction": [
                        {
                            "FacetValue": {"Id": "SourceType", "Value": "News"},
                            "RemoveAction": "removefacetfiltervalue(2,SourceType:News)",
                        }
                    ],
                    "RemoveAction": "removefacetfilter(2)",
                },
            ],
            "LimitersWithAction": [
                {
                    "Id": "LA99",
                    "LimiterValuesWithAction": [
                        {"Value": "French", "RemoveAction": "removelimitervalue(LA99:French)"}
                    ],
                    "RemoveAction": "removelimiter(LA99)",
                }
            ],
            "ExpandersWithAction": [
                {"Id": "fulltext", "RemoveAction": "removeexpander(fulltext)"},
                {"Id": "thesaurus", "RemoveAction": "removeexpander(thesaurus)"},
            ],
            "PublicationWithAction": [
                {"Id": "eric", "RemoveAction": "removepublication(eric)"}
            ],
        },
        "RetrievalCriteria": {
            "View": "brief",
            "ResultsPerPage": 20,
            "PageNumber": 3,
            "Highlight": "y",
        },
    },
    "SearchResult": {
        "Statistics": {
            "TotalHits": 2,
            "TotalSearchTime": 154,
            "Databases": [
                {"Id": "nlebk", "Label": "eBook Collection", "Status": "0", "Hits": 12},
                {"Id": "zzlocal", "Label": "Local Catalog", "Status": "0", "Hits": 7},
                {"Id": "asn", "Label": "Academic Search", "Status": "0", "Hits": 301},
            ],
        },
        "Data": {
            "RecordFormat": "EP Display",
            "Records": [
                {
                    "ResultId": 1,
                    "Header": {"DbId": "asn", "An": "100001", "PubType": "Academic Journal"},
                    "RecordInfo": {
                        "BibRecord": {
                            "BibEntity": {
                                "Titles": [{"TitleFull": "Faults of the West", "Type": "main"}]
                            }
                        }
                    },
                },
                {
                    "ResultId": 2,
                    "Header": {"DbId": "nlebk", "An": "200002", "PubType": "eBook"},
                },
            ],
        },
        "AvailableFacets": [
            {
                "Id": "SourceType",
                "Label": "Source Type",
                "AvailableFacetValues": [
                    {"Value": "Academic Journals", "Count": 147, "AddAction": "addfacetfilter(SourceType:Academic Journals)"},
                    {"Value": "News", "Count": 111, "AddAction": "addfacetfilter(SourceType:News)"},
                ],
            },
            {
                "Id": "SubjectEDS",
                "Label": "Subject",
                "AvailableFacetValues": [
                    {"Value": "seismology", "Count": 40, "AddAction": "addfacetfilter(SubjectEDS:seismology)"}
                ],
            },
        ],
        "AvailableCriteria": {"DateRange": {"MinDate": "1501-01", "MaxDate": "2018-04"}},
        "RelatedContent": {
            "RelatedRecords": [
                {
                    "Type": "rs",
                    "Label": "Research Starters",
                    "Records": [
                        {"ResultId": 1, "Header": {"DbId": "ers", "An": "rs-1"}},
                    ],
                }
            ],
            "RelatedPublications": [
                {
                    "Type": "emp",
                    "Label": "Exact Match Publication",
                    "PublicationRecords": [
                        {"ResultId": 1, "Header": {"DbId": "edspub", "An": "pub-1"}},
                    ],
                }
            ],
        },
        "AutoSuggestedTerms": ["earthquake", "earthquakes"],
    },
}


@pytest.fixture
def search_response() -> dict[str, Any]:
    """Return a fresh copy of a complete search response (not autouse)."""
    return copy.deepcopy(SEARCH_RESPONSE)


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_edsapi_env(monkeypatch):
    """Ensure a clean EDSAPI_* environment for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("EDSAPI_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fresh_label_cache():
    """Drop memoized label tables so file-based tests see their own files."""
    load_labels.cache_clear()
    yield
    load_labels.cache_clear()
