"""Shared pytest fixtures for dirprincipal tests.

Directory entries are plain attribute sets built in memory; ``ldap3``
entries are simulated with a namespace object exposing ``entry_dn`` and
``entry_attributes_as_dict`` so no directory server is needed.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from dirprincipal.ldap.entries import AttributeSet
from dirprincipal.principals.models import SchemaConfig


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

@pytest.fixture()
def openldap_schema() -> SchemaConfig:
    """inetOrgPerson users named by ``cn`` and logging in with ``uid``."""
    return SchemaConfig(
        user_object_class="inetOrgPerson",
        user_name_attribute="cn",
        user_login_attribute="uid",
        group_object_class="groupOfNames",
        group_name_attribute="cn",
    )


@pytest.fixture()
def person_schema() -> SchemaConfig:
    """Like ``openldap_schema`` but matching the generic ``person`` class."""
    return SchemaConfig(
        user_object_class="person",
        user_name_attribute="cn",
        user_login_attribute="uid",
        group_object_class="groupOfNames",
        group_name_attribute="cn",
    )


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

@pytest.fixture()
def wanglei_attrs() -> AttributeSet:
    return [
        ("objectClass", ["inetOrgPerson", "person"]),
        ("cn", ["王磊"]),
        ("uid", ["wanglei"]),
    ]


@pytest.fixture()
def make_ldap3_entry():
    """Factory for stand-ins of ``ldap3.abstract.entry.Entry``."""

    def _make(dn: str, attributes: dict) -> SimpleNamespace:
        return SimpleNamespace(entry_dn=dn, entry_attributes_as_dict=attributes)

    return _make
