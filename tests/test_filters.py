"""Tests for search filter construction."""

from __future__ import annotations

import pytest

from dirprincipal.ldap.filters import (
    equality_filter,
    filter_attribute,
    group_search_filter,
    user_search_filter,
)
from dirprincipal.principals.models import ACTIVE_DIRECTORY_SCHEMA, SchemaConfig


class TestFilterAttribute:
    """filter_attribute sanitizes then validates."""

    @pytest.mark.parametrize(
        "attr, expected",
        [("uid", "uid"), (" sAMAccount_Name ", "sAMAccountName"), ("2.5.4.3", "2.5.4.3")],
    )
    def test_accepts(self, attr, expected):
        assert filter_attribute(attr) == expected

    @pytest.mark.parametrize("attr", ["", "()", "1ab", "a.b", "-uid"])
    def test_rejects(self, attr):
        with pytest.raises(ValueError):
            filter_attribute(attr)


class TestFilters:
    """equality / user / group filters."""

    def test_equality_escapes_value(self):
        assert equality_filter("cn", "a*(b)\\") == "(cn=a\\2a\\28b\\29\\5c)"

    def test_injection_in_attribute_is_rejected(self):
        """Parentheses are stripped and the leftover ``*`` fails validation."""
        with pytest.raises(ValueError):
            equality_filter("uid)(objectClass=*", "x")

    def test_oid_attribute(self):
        assert equality_filter("2.5.4.3", "Jane") == "(2.5.4.3=Jane)"

    def test_user_filter(self, openldap_schema):
        assert user_search_filter(openldap_schema, "wanglei") == (
            "(&(objectClass=inetOrgPerson)(uid=wanglei))"
        )

    def test_user_filter_active_directory(self):
        assert user_search_filter(ACTIVE_DIRECTORY_SCHEMA, "jdoe*") == (
            "(&(objectClass=person)(sAMAccountName=jdoe\\2a))"
        )

    def test_group_filters(self, openldap_schema):
        assert group_search_filter(openldap_schema) == "(objectClass=groupOfNames)"
        assert group_search_filter(openldap_schema, "devs") == (
            "(&(objectClass=groupOfNames)(cn=devs))"
        )

    def test_invalid_configured_attribute(self):
        schema = SchemaConfig(
            user_object_class="person",
            user_name_attribute="cn",
            user_login_attribute="1bad",
            group_object_class="group",
            group_name_attribute="cn",
        )
        with pytest.raises(ValueError, match="1bad"):
            user_search_filter(schema, "jdoe")
