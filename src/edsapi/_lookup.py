"""Nested-path lookups over raw response documents.

Two policies live here and nowhere else:

- ``get_or_default`` for optional, request-dependent sections. Missing keys,
  ``None`` values and non-mapping intermediates all collapse to the default.
- ``get_required`` for fields the provider always sends once a search ran.
  Any of the same conditions raises ``MissingFieldError`` naming the path.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from edsapi.errors import MissingFieldError

T = TypeVar("T")

_HINT = "Strict fields are only guaranteed on a complete search response."


def get_or_default(doc: Any, *path: str, default: T) -> Any | T:
    """Return the value at ``path`` inside ``doc`` or ``default``.

    Never raises. A present-but-null leaf is treated as absent.
    """
    current = doc
    for key in path:
        if not isinstance(current, Mapping):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


def get_list(doc: Any, *path: str) -> list[Any]:
    """Return the sequence at ``path`` as a list, or ``[]``.

    Strings and mappings are not treated as sequences of entries.
    """
    value = get_or_default(doc, *path, default=())
    if isinstance(value, (str, bytes, Mapping)):
        return []
    try:
        return list(value)
    except TypeError:
        return []


def get_required(doc: Any, *path: str) -> Any:
    """Return the value at ``path`` inside ``doc``.

    Raises:
        MissingFieldError: If any segment is absent, null, or its parent is
            not a mapping.
    """
    current = doc
    for key in path:
        if not isinstance(current, Mapping) or current.get(key) is None:
            raise MissingFieldError(path, missing=key, hint=_HINT)
        current = current[key]
    return current
