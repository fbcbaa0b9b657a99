"""Down-level logon name (``DOMAIN\\user``) composition."""

from __future__ import annotations

DOMAIN_SEPARATOR = "\\"


def compose_external_id(username: str, login_domain: str) -> str:
    """Qualify *username* with *login_domain* for a directory bind.

    Usernames that already carry a domain (``OTHER\\jdoe``) are returned
    as-is, as are all usernames when no login domain is configured.
    """
    if not login_domain or DOMAIN_SEPARATOR in username:
        return username
    return f"{login_domain}{DOMAIN_SEPARATOR}{username}"
