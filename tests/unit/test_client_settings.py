"""
Tests for resolving per-client settings.
"""

import pytest

from vcutils.config.settings import HTTPClientConfig, VCUtilsConfig, set_config
from vcutils.exceptions import (
    AdapterError,
    InvalidConfigurationError,
    SerializerError,
    TelemetryListenerError,
)
from vcutils.http_client import (
    AsyncMockAdapter,
    CallableListener,
    HTTPClient,
    HttpxAdapter,
    JSONSerializer,
    MockAdapter,
    RequestsAdapter,
)
from vcutils.http_client.settings import ClientSettings, resolve_settings


def on_event(event):
    pass


class ReportsClient(HTTPClient):
    pass


@pytest.fixture
def layered_config():
    return VCUtilsConfig(
        http_client=HTTPClientConfig(
            defaults={"adapter": "mock", "log_level": "info"},
            targets={
                f"{__name__}.ReportsClient": {
                    "adapter": "requests",
                    "log_level": False,
                    "telemetry_listener": f"{__name__}:on_event",
                },
            },
        )
    )


class TestResolveSettings:
    def test_builtin_defaults(self):
        settings = resolve_settings()
        assert isinstance(settings.adapter, HttpxAdapter)
        assert isinstance(settings.serializer, JSONSerializer)
        assert settings.log_level == "debug"
        assert settings.telemetry_listener is None
        assert settings.keys == "atoms"

    def test_process_defaults(self, layered_config):
        settings = resolve_settings("unconfigured.Client", config=layered_config)
        assert isinstance(settings.adapter, MockAdapter)
        assert settings.log_level == "info"

    def test_target_section(self, layered_config):
        settings = resolve_settings(f"{__name__}.ReportsClient", config=layered_config)
        assert isinstance(settings.adapter, RequestsAdapter)
        assert settings.log_level == "none"
        assert settings.logging_enabled is False
        assert isinstance(settings.telemetry_listener, CallableListener)
        assert settings.telemetry_listener.func is on_event

    def test_overrides_win(self, layered_config):
        settings = resolve_settings(
            f"{__name__}.ReportsClient",
            config=layered_config,
            overrides={"adapter": "mock", "log_level": "warn"},
        )
        assert isinstance(settings.adapter, MockAdapter)
        assert settings.log_level == "warning"

    def test_process_wide_config_is_used(self, layered_config):
        set_config(layered_config)
        client = ReportsClient()
        assert isinstance(client.settings.adapter, RequestsAdapter)

    def test_asynchronous_registry(self, layered_config):
        settings = resolve_settings("x", config=layered_config, asynchronous=True)
        assert isinstance(settings.adapter, AsyncMockAdapter)

    def test_unknown_override(self):
        with pytest.raises(InvalidConfigurationError, match="Unknown client settings"):
            resolve_settings(overrides={"base_url": "https://api.test"})

    def test_bad_keys_mode(self):
        with pytest.raises(InvalidConfigurationError, match="keys"):
            resolve_settings(overrides={"keys": "symbols"})

    @pytest.mark.parametrize(
        "overrides, error",
        [
            ({"adapter": "pkg.missing:Adapter"}, AdapterError),
            ({"serializer": "xml"}, SerializerError),
            ({"telemetry_listener": "pkg.missing:listener"}, TelemetryListenerError),
        ],
    )
    def test_unresolvable_handles(self, overrides, error):
        with pytest.raises(error):
            resolve_settings(overrides=overrides)

    def test_prebuilt_settings_skip_configuration(self):
        settings = ClientSettings(adapter=MockAdapter(), serializer=JSONSerializer(), log_level="none")
        client = HTTPClient(settings=settings, adapter="not-even-checked")
        assert client.settings is settings


class TestClientSettings:
    def test_describe(self):
        settings = ClientSettings(
            adapter=MockAdapter(), serializer=JSONSerializer(), log_level="info"
        )
        assert settings.describe() == {
            "adapter": "MockAdapter",
            "serializer": "json",
            "log_level": "info",
            "telemetry_listener": None,
            "keys": "atoms",
        }

    def test_is_frozen(self):
        settings = ClientSettings(adapter=MockAdapter(), serializer=JSONSerializer())
        with pytest.raises(AttributeError):
            settings.log_level = "error"
