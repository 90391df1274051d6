"""Tests for wxr._errors."""

from wxr._errors import ConfigError, ExportError, WxrError


class TestErrorHierarchy:
    """All wxr errors inherit from WxrError."""

    def test_wxr_error_is_exception(self) -> None:
        assert issubclass(WxrError, Exception)

    def test_config_error_inherits(self) -> None:
        assert issubclass(ConfigError, WxrError)

    def test_export_error_inherits(self) -> None:
        assert issubclass(ExportError, WxrError)

    def test_catch_all_wxr_errors(self) -> None:
        """All specific errors are catchable via WxrError."""
        for error_cls in (ConfigError, ExportError):
            try:
                raise error_cls("test")
            except WxrError:
                pass  # Expected — all caught by base class
