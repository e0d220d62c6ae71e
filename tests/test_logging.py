"""Tests for the logging configuration model.

LoggingConfigModel validation and the RuntimeConfig mapping are tested
here. init_logging itself is exercised through the CLI tests.
"""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from buildshim import __init__conf__
from buildshim.adapters.logging.setup import LoggingConfigModel, _build_runtime_config


@pytest.mark.os_agnostic
def test_logging_config_model_allows_extra_fields() -> None:
    """Extra fields pass through for lib_log_rich RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "test", "environment": "dev", "custom_field": "value"})

    assert parsed.service == "test"
    assert parsed.environment == "dev"
    extra = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    assert extra == {"custom_field": "value"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    """Empty input produces sensible defaults."""
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_falls_back_to_package_name() -> None:
    runtime_config = _build_runtime_config(Config({}, {}))

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_uses_configured_service_and_environment() -> None:
    config = Config({"lib_log_rich": {"service": "ci-builds", "environment": "ci"}}, {})

    runtime_config = _build_runtime_config(config)

    assert runtime_config.service == "ci-builds"
    assert runtime_config.environment == "ci"
