"""
Directory entry attribute sets.

An :data:`AttributeSet` is the ordered ``(name, values)`` view of a single
directory entry that the principal resolver consumes.  Names are compared
case-sensitively and, when a name repeats, the first occurrence wins.

Helpers here build attribute sets from plain mappings (e.g. JSON fixtures or
collector output) and from ``ldap3`` search result entries.  Nothing in this
module talks to a directory server.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ldap3 import Entry

AttributeSet = list[tuple[str, list[str]]]


def attribute_values(attrs: AttributeSet, name: str) -> list[str]:
    """Return the values of the first attribute called *name* (or ``[]``)."""
    for attr_name, values in attrs:
        if attr_name == name:
            return values
    return []


def first_value(attrs: AttributeSet, name: str) -> str:
    """Return the first value of attribute *name*, or ``""`` when absent."""
    values = attribute_values(attrs, name)
    if not values:
        return ""
    return values[0]


def _to_text(value: Any) -> str:
    """Render one raw attribute value as text.

    Binary values are decoded as UTF-8 (undecodable bytes are replaced) and
    datetime values are ISO-formatted.
    """
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def attributes_from_mapping(mapping: Mapping[str, Any]) -> AttributeSet:
    """Build an :data:`AttributeSet` from a name -> value(s) mapping.

    Parameters
    ----------
    mapping:
        Attribute names mapped to a single value, a list/tuple of values, or
        ``None``.  Mapping order is preserved.

    Returns
    -------
    AttributeSet
        One ``(name, values)`` pair per key.  Scalars are wrapped in a
        one-element list and ``None`` becomes an empty list.
    """
    attrs: AttributeSet = []
    for name, raw in mapping.items():
        if raw is None:
            values: list[str] = []
        elif isinstance(raw, (list, tuple)):
            values = [_to_text(v) for v in raw]
        else:
            values = [_to_text(raw)]
        attrs.append((name, values))
    return attrs


def attributes_from_ldap3_entry(entry: Entry) -> AttributeSet:
    """Convert an ``ldap3`` search result entry into an :data:`AttributeSet`.

    Uses ``entry.entry_attributes_as_dict`` so the attribute order of the
    search response is kept.  The entry's DN is not part of the attribute
    set; callers read it from ``entry.entry_dn``.
    """
    return attributes_from_mapping(entry.entry_attributes_as_dict)
