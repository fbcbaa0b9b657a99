"""
Attribute-name hygiene for generated LDAP search filters.

Two pure helpers are provided:

- :func:`sanitize_attribute` strips characters that cannot appear in an
  attribute description and that would otherwise break (or inject into) a
  filter expression such as ``(<attr>=<value>)``.
- :func:`is_valid_attribute` classifies a string as either a short
  attribute name (``cn``, ``sAMAccountName``) or a numeric OID
  (``2.5.4.3``).
"""

from __future__ import annotations

import re

# Characters removed by sanitize_attribute (whitespace is removed as well)
ILLEGAL_ATTRIBUTE_CHARS: frozenset[str] = frozenset("#$'()+,;<=>\\_{}")

# ASCII letter followed by letters, digits or hyphens
SHORT_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9-]*", re.ASCII)

# Dot-separated numbers; no leading zeros except the single digit "0"
NUMERIC_OID_PATTERN = re.compile(r"(?:0|[1-9][0-9]*)(?:\.(?:0|[1-9][0-9]*))*", re.ASCII)


def sanitize_attribute(attr: str) -> str:
    """Remove whitespace and filter-significant characters from *attr*.

    The relative order of the remaining characters is preserved.  The result
    is not guaranteed to be a valid attribute (``"1ab"`` survives unchanged);
    use :func:`is_valid_attribute` for that.
    """
    return "".join(
        ch for ch in attr if not ch.isspace() and ch not in ILLEGAL_ATTRIBUTE_CHARS
    )


def is_valid_attribute(attr: str) -> bool:
    """Return ``True`` when *attr* is a short attribute name or numeric OID."""
    return bool(
        SHORT_NAME_PATTERN.fullmatch(attr) or NUMERIC_OID_PATTERN.fullmatch(attr)
    )
