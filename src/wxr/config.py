"""wxr configuration.

SiteConfig describes the exported site and RenderConfig controls how the
document is serialized.  Both are frozen after creation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from wxr._errors import ConfigError


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site-level metadata written to the export channel.

    Attributes:
        name: Site title.
        url: Site URL, written as the channel link.
        description: Site tagline.
        language: Site language code.
        base_site_url: WordPress site URL.  Defaults to ``url``.
        base_blog_url: WordPress blog URL.  Defaults to ``url``.

    Raises:
        ConfigError: If a base URL is left unset and ``url`` is missing.

    """

    name: str = ""
    url: str | None = None
    description: str = ""
    language: str = "en-US"
    base_site_url: str | None = None
    base_blog_url: str | None = None

    def __post_init__(self) -> None:
        if not self.base_site_url:
            object.__setattr__(self, "base_site_url", self.url)
        if not self.base_blog_url:
            object.__setattr__(self, "base_blog_url", self.url)

        for name in ("base_site_url", "base_blog_url"):
            if not getattr(self, name):
                msg = f"SiteConfig.{name} is required when url is not set"
                raise ConfigError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SiteConfig:
        """Build a SiteConfig from a plain mapping.  Unrecognized keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Serialization options for :meth:`WxrGenerator.stringify`.

    Attributes:
        pretty: Put every element on its own line.
        indent: Indentation unit used when ``pretty`` is set.
        newline: Line separator used when ``pretty`` is set.

    """

    pretty: bool = False
    indent: str = "    "
    newline: str = "\n"

    def merged(
        self, overrides: RenderConfig | Mapping[str, Any] | None = None, **extra: Any
    ) -> RenderConfig:
        """Return a copy with ``overrides`` and ``extra`` applied on top.

        Unrecognized option names are ignored.
        """
        values: dict[str, Any] = {}
        if isinstance(overrides, RenderConfig):
            values.update({f.name: getattr(overrides, f.name) for f in fields(overrides)})
        elif overrides:
            values.update(overrides)
        values.update(extra)
        known = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in values.items() if k in known})
