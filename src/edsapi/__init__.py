"""edsapi: structured views over discovery-service search responses.

Public API:
    - ResultSet: Adapter over one raw search response
    - Record: Default record wrapper for result items
    - Config: Related-content markers and label table selection
"""

from __future__ import annotations

import logging

from edsapi.config import Config
from edsapi.errors import (
    ConfigurationError,
    EdsError,
    MalformedResponseError,
    MissingFieldError,
)
from edsapi.labels import DatabaseLabels, load_labels, lookup_label
from edsapi.models import DatabaseStat, DateRange, Facet, FacetValue
from edsapi.record import Record
from edsapi.results import ALL_FACETS, ResultSet

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("edsapi")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("edsapi").addHandler(logging.NullHandler())

__all__ = [
    "ALL_FACETS",
    "Config",
    "ConfigurationError",
    "DatabaseLabels",
    "DatabaseStat",
    "DateRange",
    "EdsError",
    "Facet",
    "FacetValue",
    "MalformedResponseError",
    "MissingFieldError",
    "Record",
    "ResultSet",
    "load_labels",
    "lookup_label",
]
