"""
Directory identity provider facade.

Binds one provider's settings (name, login domain, scopes, schema) to the
pure helpers so an authentication flow can go from a typed username to a
bind name, and from search results to principals, without passing the
schema around.
"""

from __future__ import annotations

import logging

from dirprincipal.ldap.entries import AttributeSet
from dirprincipal.ldap.external_id import compose_external_id
from dirprincipal.ldap.filters import group_search_filter, user_search_filter
from dirprincipal.principals.models import Principal, PrincipalType, SchemaConfig
from dirprincipal.principals.resolver import UnknownEntryTypeError, resolve_principal
from dirprincipal.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class DirectoryProvider:
    """Principal resolution for a single configured directory."""

    def __init__(
        self,
        name: str,
        schema: SchemaConfig,
        login_domain: str = "",
        user_scope: str | None = None,
        group_scope: str | None = None,
    ) -> None:
        self.name = name
        self.schema = schema
        self.login_domain = login_domain
        self.user_scope = user_scope or f"{name}_user"
        self.group_scope = group_scope or f"{name}_group"

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> DirectoryProvider:
        """Create a provider from *config*, or from :func:`get_settings`."""
        if config is None:
            config = get_settings()
        return cls(
            name=config.PROVIDER,
            schema=config.schema_config(),
            login_domain=config.LOGIN_DOMAIN,
            user_scope=config.user_scope_or_default(),
            group_scope=config.group_scope_or_default(),
        )

    def external_id(self, username: str) -> str:
        """Return the bind name for *username* (domain-qualified if configured)."""
        return compose_external_id(username, self.login_domain)

    def user_filter(self, login: str) -> str:
        return user_search_filter(self.schema, login)

    def group_filter(self, name: str | None = None) -> str:
        return group_search_filter(self.schema, name)

    def resolve_user(self, attrs: AttributeSet, dn: str) -> Principal:
        """Resolve the authenticating user's entry.

        Raises
        ------
        UnknownEntryTypeError
            If the entry is neither a user nor a group.
        ValueError
            If the entry classifies as a group instead of a user.
        """
        principal = resolve_principal(attrs, dn, self.user_scope, self.name, self.schema)
        if principal.principal_type != PrincipalType.USER:
            raise ValueError(f"Entry '{dn}' is a group, expected a user")
        logger.info(
            "resolve_user: %s resolved as %s", dn, principal.principal_name
        )
        return principal

    def resolve_groups(
        self, entries: list[tuple[str, AttributeSet]]
    ) -> list[Principal]:
        """Resolve group entries found for the authenticating user.

        *entries* is a list of ``(dn, attrs)`` pairs.  Entries that are not
        groups under the schema (users, or unknown object classes) are
        skipped with a warning.
        """
        groups: list[Principal] = []
        for dn, attrs in entries:
            try:
                principal = resolve_principal(
                    attrs, dn, self.group_scope, self.name, self.schema
                )
            except UnknownEntryTypeError as exc:
                logger.warning("resolve_groups: %s", exc)
                continue
            if principal.principal_type != PrincipalType.GROUP:
                logger.warning("resolve_groups: skipping non-group entry %s", dn)
                continue
            groups.append(principal)
        logger.info("resolve_groups: resolved %d of %d entries", len(groups), len(entries))
        return groups
