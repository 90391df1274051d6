"""Load an export manifest from YAML, TOML, or JSON.

A manifest describes a whole site export::

    site:
      name: My Blog
      url: https://example.com
    users:
      - {username: alice, email: alice@example.com}
    categories:
      - {slug: js, name: JS}
    posts:
      - title: Hello
        slug: hello
        author: alice
        date: 2024-01-02 10:30:00
        categories: [{slug: js, name: JS}]

Each list entry holds the keyword arguments of the matching ``add_*`` call.
YAML and TOML timestamps arrive as ``datetime`` values and are formatted;
JSON dates stay strings and pass through unchanged.
"""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from wxr._errors import ConfigError
from wxr.config import SiteConfig

if TYPE_CHECKING:
    from wxr.generator import WxrGenerator

# Entity sections in the order they are added to the document
SECTIONS = ("users", "categories", "tags", "posts", "pages", "attachments")

_ADDERS = {
    "users": "add_user",
    "categories": "add_category",
    "tags": "add_tag",
    "posts": "add_post",
    "pages": "add_page",
    "attachments": "add_attachment",
}


@dataclass(frozen=True, slots=True)
class Manifest:
    """A parsed export manifest.

    Attributes:
        site: Site configuration for the channel header.
        users: ``add_user`` records.
        categories: ``add_category`` records.
        tags: ``add_tag`` records.
        posts: ``add_post`` records.
        pages: ``add_page`` records.
        attachments: ``add_attachment`` records.

    """

    site: SiteConfig
    users: tuple[dict[str, Any], ...] = ()
    categories: tuple[dict[str, Any], ...] = ()
    tags: tuple[dict[str, Any], ...] = ()
    posts: tuple[dict[str, Any], ...] = ()
    pages: tuple[dict[str, Any], ...] = ()
    attachments: tuple[dict[str, Any], ...] = ()

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> Manifest:
        """Validate the top-level shape of a manifest mapping.

        Raises:
            ConfigError: On a missing ``site`` table, an unknown section, or a
                section that is not a list of tables.

        """
        unknown = sorted(set(data) - {"site", *SECTIONS})
        if unknown:
            msg = f"Unknown manifest section(s): {', '.join(unknown)}"
            raise ConfigError(msg)

        site = data.get("site")
        if not isinstance(site, dict):
            msg = "Manifest needs a 'site' table"
            raise ConfigError(msg)

        sections: dict[str, tuple[dict[str, Any], ...]] = {}
        for name in SECTIONS:
            records = data.get(name) or []
            if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
                msg = f"Manifest section '{name}' must be a list of tables"
                raise ConfigError(msg)
            sections[name] = tuple(records)

        return cls(site=SiteConfig.from_mapping(site), **sections)

    def __len__(self) -> int:
        return sum(len(getattr(self, name)) for name in SECTIONS)


def load_manifest(path: Path | str) -> Manifest:
    """Read a manifest file, choosing the parser by suffix.

    ``.yaml``/``.yml`` use PyYAML, ``.toml`` uses tomllib and ``.json``
    uses json.

    Raises:
        ConfigError: If the file is missing, unreadable, malformed, or has an
            unsupported suffix.

    """
    path = Path(path)
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        msg = f"Unsupported manifest type '{path.suffix}' (expected .yaml, .yml, .toml or .json)"
        raise ConfigError(msg)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read manifest {path}: {exc}"
        raise ConfigError(msg) from exc

    try:
        data = parser(text)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        msg = f"Malformed manifest {path}: {exc}"
        raise ConfigError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Manifest {path} must contain a table at the top level"
        raise ConfigError(msg)
    return Manifest.from_mapping(data)


def build_from_manifest(manifest: Manifest, **kwargs: Any) -> WxrGenerator:
    """Create a generator for ``manifest`` and add every record to it.

    Sections are added in :data:`SECTIONS` order, records in file order.
    ``kwargs`` (``ids``, ``clock``, ``collector``) go to the generator.

    Raises:
        ConfigError: If a record has fields its ``add_*`` call does not take.

    """
    from wxr.generator import WxrGenerator

    generator = WxrGenerator(manifest.site, **kwargs)
    for name in SECTIONS:
        add = getattr(generator, _ADDERS[name])
        for index, record in enumerate(getattr(manifest, name)):
            try:
                add(**record)
            except TypeError as exc:
                msg = f"Invalid record {name}[{index}]: {exc}"
                raise ConfigError(msg) from exc
    return generator


def _parse_yaml(text: str) -> object:
    return yaml.safe_load(text) or {}


_PARSERS = {
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
    ".toml": tomllib.loads,
    ".json": json.loads,
}
