"""Tests for _types.py: exception classes."""

from configmap import ConfigError, ConversionError


class TestConfigError:
    def test_is_exception(self):
        assert issubclass(ConfigError, Exception)


class TestConversionError:
    def test_inherits_config_error_and_value_error(self):
        assert issubclass(ConversionError, ConfigError)
        assert issubclass(ConversionError, ValueError)

    def test_message_includes_path(self):
        err = ConversionError("servers/0/host", "null values are not enabled")
        assert "servers/0/host" in str(err)
        assert err.path == "servers/0/host"
        assert err.reason == "null values are not enabled"

    def test_root_path(self):
        assert "document root" in str(ConversionError("", "bad"))
