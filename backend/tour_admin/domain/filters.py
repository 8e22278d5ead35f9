"""Filter Set handling: turns a page's filter state into query parameters."""

from collections.abc import Mapping
from typing import Any

# Select boxes use "all" to mean "no constraint".
ANY_VALUE = "all"


def is_blank_filter(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        stripped = value.strip()
        return not stripped or stripped == ANY_VALUE
    if isinstance(value, (list, tuple, set, frozenset)):
        return not any(not is_blank_filter(item) for item in value)
    return False


def _as_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [_as_param(item) for item in value if not is_blank_filter(item)]
        return ",".join(sorted(items) if isinstance(value, (set, frozenset)) else items)
    if isinstance(value, str):
        return value.strip()
    return str(value)


def clean_filters(filters: Mapping[str, Any] | None) -> dict[str, str]:
    """Drop blank entries and render the rest as query-string values.

    ``None``, empty or whitespace-only strings, the ``"all"`` sentinel and
    empty lists are omitted instead of being sent as empty constraints.
    """
    if not filters:
        return {}
    return {
        key: _as_param(value)
        for key, value in filters.items()
        if not is_blank_filter(value)
    }
