"""Pydantic models for stored preferences and collected answers."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RecommendedPlugin(BaseModel):
    """Plugin offered in the installer's checkbox list.

    Attributes:
        name: Display name shown to the operator.
        slug: wordpress.org plugin slug written into the site config.
        enabled: Whether the plugin is pre-checked.

    Example:
        >>> RecommendedPlugin(name="Jetpack", slug="jetpack").enabled
        False
    """

    model_config = ConfigDict(extra="allow")

    name: str
    slug: str
    enabled: bool = False


def default_recommended_plugins() -> list[RecommendedPlugin]:
    return [
        RecommendedPlugin(name="Yoast SEO", slug="wordpress-seo", enabled=True),
        RecommendedPlugin(name="Jetpack", slug="jetpack", enabled=False),
        RecommendedPlugin(name="WooCommerce", slug="woocommerce", enabled=False),
    ]


class StoredPreferences(BaseModel):
    """Defaults remembered between scaffold runs.

    Serialized with camelCase keys (``dbUser``, ``recommendedPlugins``, ...).
    Keys this version does not know about are kept and written back.

    Example:
        >>> prefs = StoredPreferences.model_validate({"dbUser": "root"})
        >>> prefs.db_user
        'root'
        >>> [plugin.slug for plugin in prefs.recommended_plugins]
        ['wordpress-seo', 'jetpack', 'woocommerce']
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    db_user: str = ""
    db_pass: str = ""
    db_host: str = ""
    admin_user: str = ""
    admin_password: str = ""
    admin_email: str = ""
    recommended_plugins: list[RecommendedPlugin] = Field(
        default_factory=default_recommended_plugins
    )

    @field_validator(
        "db_user",
        "db_pass",
        "db_host",
        "admin_user",
        "admin_password",
        "admin_email",
        mode="before",
    )
    @classmethod
    def normalize_credential(cls, value: object) -> object:
        if value is None:
            return ""
        return value

    def to_payload(self) -> dict:
        """Return the on-disk representation."""
        return self.model_dump(by_alias=True)

    def slugs_for(self, names: Iterable[str]) -> list[str]:
        """Map selected display names to slugs, in catalog order.

        Example:
            >>> StoredPreferences().slugs_for(["WooCommerce", "Yoast SEO"])
            ['wordpress-seo', 'woocommerce']
        """
        selected = set(names)
        return [
            plugin.slug for plugin in self.recommended_plugins if plugin.name in selected
        ]


class AnswerSet(BaseModel):
    """Values collected from the operator for a single run."""

    site_title: str = ""
    blog_description: str = ""
    theme_name: str = ""
    db_name: str = ""
    db_user: str = ""
    db_pass: str = ""
    db_host: str = ""
    admin_user: str = ""
    admin_password: str = ""
    admin_email: str = ""
    plugins: list[str] = Field(default_factory=list)
    save_config: bool = False

    @field_validator("plugins", mode="before")
    @classmethod
    def normalize_plugins(cls, value: object) -> object:
        if value is None:
            return []
        return value
