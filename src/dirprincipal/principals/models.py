"""Pydantic v2 models for directory schemas and resolved principals."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PrincipalType(str, enum.Enum):
    USER = "user"
    GROUP = "group"


class SchemaConfig(BaseModel):
    """How to interpret the attributes of a directory entry.

    Accepts either snake_case field names or the camelCase option names used
    by directory provider configuration documents (``userObjectClass`` ...).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    user_object_class: str
    user_name_attribute: str
    user_login_attribute: str
    group_object_class: str
    group_name_attribute: str


class Principal(BaseModel):
    """An authenticated user, or a group that user belongs to.

    ``principal_name`` has the form ``<scope>://<identifier>``.  Dump with
    ``model_dump(mode="json", by_alias=True)`` to get the camelCase wire form
    (``principalName``, ``displayName`` ...).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    principal_name: str
    display_name: str
    login_name: str
    principal_type: PrincipalType
    provider: str
    is_self: bool = True


OPENLDAP_SCHEMA = SchemaConfig(
    user_object_class="inetOrgPerson",
    user_name_attribute="cn",
    user_login_attribute="uid",
    group_object_class="groupOfNames",
    group_name_attribute="cn",
)

ACTIVE_DIRECTORY_SCHEMA = SchemaConfig(
    user_object_class="person",
    user_name_attribute="name",
    user_login_attribute="sAMAccountName",
    group_object_class="group",
    group_name_attribute="name",
)

_SCHEMA_PRESETS: dict[str, SchemaConfig] = {
    "openldap": OPENLDAP_SCHEMA,
    "activedirectory": ACTIVE_DIRECTORY_SCHEMA,
}


def schema_preset(provider: str) -> SchemaConfig:
    """Return the default schema for *provider*.

    Raises
    ------
    KeyError
        If no preset exists for the provider name.
    """
    try:
        return _SCHEMA_PRESETS[provider.lower()]
    except KeyError:
        raise KeyError(
            f"No schema preset for provider '{provider}' "
            f"(known: {', '.join(sorted(_SCHEMA_PRESETS))})"
        ) from None
