"""
Principal resolution: directory entry (raw) -> Principal (normalized).

Identifier rules (``principal_name = <scope>://<identifier>``):
- user: login attribute value, else name attribute value, else the DN
- group: always the DN

A user's DN encodes its position in the directory tree and changes when the
entry is moved between organizational units.  Preferring the login attribute
keeps the principal name stable across such moves; the DN is only used when
the entry exposes no usable naming attribute.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dirprincipal.ldap.entries import (
    AttributeSet,
    attribute_values,
    attributes_from_ldap3_entry,
    first_value,
)
from dirprincipal.principals.models import Principal, PrincipalType, SchemaConfig

if TYPE_CHECKING:
    from ldap3 import Entry

logger = logging.getLogger(__name__)

OBJECT_CLASS_ATTRIBUTE = "objectClass"


class UnknownEntryTypeError(ValueError):
    """The entry is neither a user nor a group under the configured schema.

    This is a classification failure for that specific entry and is not
    worth retrying until the schema configuration or the entry changes.
    """

    def __init__(self, dn: str, object_classes: list[str]) -> None:
        self.dn = dn
        self.object_classes = list(object_classes)
        super().__init__(
            f"Entry '{dn}' is neither a user nor a group "
            f"(objectClass={self.object_classes})"
        )


def classify_entry(attrs: AttributeSet, dn: str, schema: SchemaConfig) -> PrincipalType:
    """Return the principal type of an entry from its ``objectClass`` values.

    The user object class is checked first, so an entry matching both
    classes resolves as a user.

    Raises
    ------
    UnknownEntryTypeError
        If neither configured object class is present.
    """
    object_classes = attribute_values(attrs, OBJECT_CLASS_ATTRIBUTE)
    if schema.user_object_class in object_classes:
        return PrincipalType.USER
    if schema.group_object_class in object_classes:
        return PrincipalType.GROUP
    raise UnknownEntryTypeError(dn, object_classes)


def resolve_principal(
    attrs: AttributeSet,
    dn: str,
    scope: str,
    provider_name: str,
    schema: SchemaConfig,
) -> Principal:
    """Build a :class:`Principal` from a directory entry.

    Parameters
    ----------
    attrs:
        The entry's attributes, in search-response order.
    dn:
        The entry's distinguished name.
    scope:
        Namespace prefix for the principal name (e.g. ``"openldap_user"``).
    provider_name:
        Name of the identity provider issuing the principal.
    schema:
        Object classes and naming attributes for users and groups.

    Returns
    -------
    Principal
        A freshly built principal with ``is_self`` set.

    Raises
    ------
    UnknownEntryTypeError
        If the entry's object classes match neither the user nor the group
        object class.
    """
    principal_type = classify_entry(attrs, dn, schema)

    if principal_type is PrincipalType.USER:
        account_name = first_value(attrs, schema.user_name_attribute)
        login_value = first_value(attrs, schema.user_login_attribute)
        login_name = login_value or account_name

        if login_value:
            identifier = login_value
            logger.debug("resolve_principal: %s identified by login attribute", scope)
        elif account_name:
            identifier = account_name
            logger.debug("resolve_principal: %s identified by name attribute", scope)
        else:
            identifier = dn
            logger.warning(
                "resolve_principal: no '%s' or '%s' value on %s; "
                "falling back to DN, which changes if the entry moves",
                schema.user_login_attribute,
                schema.user_name_attribute,
                dn,
            )
    else:
        account_name = first_value(attrs, schema.group_name_attribute)
        login_name = account_name
        identifier = dn

    return Principal(
        principal_name=f"{scope}://{identifier}",
        display_name=account_name,
        login_name=login_name,
        principal_type=principal_type,
        provider=provider_name,
        is_self=True,
    )


def resolve_ldap3_entry(
    entry: Entry,
    scope: str,
    provider_name: str,
    schema: SchemaConfig,
) -> Principal:
    """Resolve an ``ldap3`` search result entry; see :func:`resolve_principal`."""
    return resolve_principal(
        attributes_from_ldap3_entry(entry),
        entry.entry_dn,
        scope,
        provider_name,
        schema,
    )
