"""Unit tests for dynaconf-backed engine settings."""

import pytest
from dynaconf import Dynaconf

from kitchen_oci.config.settings import get_logging_config, get_polling_config


@pytest.mark.unit
class TestPollingSettings:
    """Per-kind polling ceilings."""

    def test_defaults(self):
        polling = get_polling_config({})

        assert (polling.compute.max_interval_seconds, polling.compute.max_wait_seconds) == (30, 1200)
        assert (polling.dbaas.max_interval_seconds, polling.dbaas.max_wait_seconds) == (900, 21_600)
        assert polling.volume.max_wait_seconds == 1200
        assert polling.attachment.max_wait_seconds == 1200

    def test_partial_override_keeps_kind_defaults(self):
        polling = get_polling_config({"polling": {"dbaas": {"max_wait_seconds": 28_800}}})

        assert polling.dbaas.max_wait_seconds == 28_800
        assert polling.dbaas.max_interval_seconds == 900
        assert polling.compute.max_wait_seconds == 1200

    def test_upper_case_keys(self):
        polling = get_polling_config({"POLLING": {"COMPUTE": {"MAX_INTERVAL_SECONDS": 10}}})

        assert polling.compute.max_interval_seconds == 10

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("KITCHEN_OCI_POLLING__COMPUTE__MAX_WAIT_SECONDS", "600")
        source = Dynaconf(envvar_prefix="KITCHEN_OCI", environments=False)

        polling = get_polling_config(source)

        assert polling.compute.max_wait_seconds == 600

    def test_invalid_value_rejected(self):
        with pytest.raises(ValueError):
            get_polling_config({"polling": {"compute": {"max_wait_seconds": 0}}})


@pytest.mark.unit
class TestLoggingSettings:
    def test_defaults(self):
        config = get_logging_config({})

        assert config.level == "INFO"
        assert config.format == "console"

    def test_overrides(self):
        config = get_logging_config({"log_level": "DEBUG", "LOG_FORMAT": "json"})

        assert config.level == "DEBUG"
        assert config.format == "json"
