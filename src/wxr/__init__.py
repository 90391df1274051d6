"""wxr — WordPress eXtended RSS export generator.

Assemble a WordPress export in memory, then render it as WXR 1.2 XML.

Quick start::

    from wxr import WxrGenerator

    gen = WxrGenerator(name="My Blog", url="https://example.com")
    gen.add_user(username="alice", email="alice@example.com")
    gen.add_post(title="Hello", slug="hello", author="alice", content="<p>Hi</p>")
    xml = gen.stringify(pretty=True)

From a manifest file::

    from wxr import build_from_manifest, load_manifest

    xml = build_from_manifest(load_manifest("export.yaml")).stringify()

"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigError",
    "ExportError",
    "MetaField",
    "RenderConfig",
    "SiteConfig",
    "TermRef",
    "WxrError",
    "WxrGenerator",
    "__version__",
    "build_from_manifest",
    "load_manifest",
]

_LAZY = {
    "WxrGenerator": "wxr.generator",
    "SiteConfig": "wxr.config",
    "RenderConfig": "wxr.config",
    "TermRef": "wxr.records",
    "MetaField": "wxr.records",
    "load_manifest": "wxr.config_loader",
    "build_from_manifest": "wxr.config_loader",
    "WxrError": "wxr._errors",
    "ConfigError": "wxr._errors",
    "ExportError": "wxr._errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import wxr`` fast (lxml and PyYAML load on first use).
    """
    module_name = _LAZY.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
