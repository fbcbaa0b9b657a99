"""
RFC 4515 search filters for principal lookups.

Attribute names are passed through :func:`sanitize_attribute` and must then
satisfy :func:`is_valid_attribute`; assertion values are escaped with
``ldap3``'s ``escape_filter_chars``.
"""

from __future__ import annotations

from ldap3.utils.conv import escape_filter_chars

from dirprincipal.ldap.attributes import is_valid_attribute, sanitize_attribute
from dirprincipal.principals.models import SchemaConfig
from dirprincipal.principals.resolver import OBJECT_CLASS_ATTRIBUTE


def filter_attribute(attr: str) -> str:
    """Return the sanitized form of *attr* for use in a filter.

    Raises
    ------
    ValueError
        If nothing resembling a short name or numeric OID is left after
        sanitizing.
    """
    clean = sanitize_attribute(attr)
    if not is_valid_attribute(clean):
        raise ValueError(f"Invalid LDAP attribute name: {attr!r}")
    return clean


def equality_filter(attr: str, value: str) -> str:
    """Return ``(<attr>=<value>)`` with the value escaped."""
    return f"({filter_attribute(attr)}={escape_filter_chars(value)})"


def user_search_filter(schema: SchemaConfig, login: str) -> str:
    """Filter matching the user entry whose login attribute equals *login*."""
    return (
        "(&"
        + equality_filter(OBJECT_CLASS_ATTRIBUTE, schema.user_object_class)
        + equality_filter(schema.user_login_attribute, login)
        + ")"
    )


def group_search_filter(schema: SchemaConfig, name: str | None = None) -> str:
    """Filter matching group entries, optionally by group name."""
    object_class = equality_filter(OBJECT_CLASS_ATTRIBUTE, schema.group_object_class)
    if name is None:
        return object_class
    return "(&" + object_class + equality_filter(schema.group_name_attribute, name) + ")"
