"""
dirprincipal - Settings

Settings are loaded from environment variables with the DIRPRINCIPAL_
prefix, or from a .env file in the working directory.  Schema attributes
left empty take the value of the selected provider's preset.
"""

import logging
from functools import lru_cache

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dirprincipal.ldap.attributes import is_valid_attribute, sanitize_attribute
from dirprincipal.principals.models import SchemaConfig, schema_preset
from dirprincipal.util.logging import resolve_level, setup_logging

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Resolver configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DIRPRINCIPAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Provider preset ("openldap" or "activedirectory")
    PROVIDER: str = "openldap"

    # Down-level logon domain prepended to bind usernames (empty = none)
    LOGIN_DOMAIN: str = ""

    # Principal name scopes; empty means "<provider>_user" / "<provider>_group"
    USER_SCOPE: str = ""
    GROUP_SCOPE: str = ""

    # Schema overrides
    USER_OBJECT_CLASS: str = ""
    USER_NAME_ATTRIBUTE: str = ""
    USER_LOGIN_ATTRIBUTE: str = ""
    GROUP_OBJECT_CLASS: str = ""
    GROUP_NAME_ATTRIBUTE: str = ""

    # Logging level applied by configure_logging()
    LOG_LEVEL: str = "INFO"

    @field_validator("PROVIDER")
    @classmethod
    def _known_provider(cls, value: str) -> str:
        value = value.strip().lower()
        try:
            schema_preset(value)
        except KeyError as exc:
            raise ValueError(exc.args[0]) from None
        return value

    @field_validator(
        "USER_NAME_ATTRIBUTE",
        "USER_LOGIN_ATTRIBUTE",
        "GROUP_NAME_ATTRIBUTE",
    )
    @classmethod
    def _clean_attribute(cls, value: str, info: ValidationInfo) -> str:
        if not value:
            return value
        clean = sanitize_attribute(value)
        if not is_valid_attribute(clean):
            raise ValueError(f"invalid LDAP attribute name: {value!r}")
        if clean != value:
            logger.warning(
                "Settings: %s%s=%r sanitized to %r",
                cls.model_config["env_prefix"],
                info.field_name,
                value,
                clean,
            )
        return clean

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        resolve_level(value)
        return value.strip().upper()

    def schema_config(self) -> SchemaConfig:
        """Return the preset schema with any configured overrides applied."""
        preset = schema_preset(self.PROVIDER)
        return SchemaConfig(
            user_object_class=self.USER_OBJECT_CLASS or preset.user_object_class,
            user_name_attribute=self.USER_NAME_ATTRIBUTE or preset.user_name_attribute,
            user_login_attribute=self.USER_LOGIN_ATTRIBUTE or preset.user_login_attribute,
            group_object_class=self.GROUP_OBJECT_CLASS or preset.group_object_class,
            group_name_attribute=self.GROUP_NAME_ATTRIBUTE or preset.group_name_attribute,
        )

    def user_scope_or_default(self) -> str:
        return self.USER_SCOPE or f"{self.PROVIDER}_user"

    def group_scope_or_default(self) -> str:
        return self.GROUP_SCOPE or f"{self.PROVIDER}_group"

    def configure_logging(self) -> int:
        """Apply ``LOG_LEVEL`` to the root logger; returns the numeric level."""
        return setup_logging(self.LOG_LEVEL)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use.

    Call ``get_settings.cache_clear()`` to reload after the environment
    changes.
    """
    return Settings()
