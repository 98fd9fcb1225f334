"""Shared pytest fixtures for CLI and module-entry tests."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from pipeline_demo.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(item.name for item in fields(type(lib_cli_exit_tools.config)))


@dataclass
class ServiceCalls:
    """What the root group asked of its services during one invocation."""

    configs_loaded: int = 0
    logging_started_with: list[Config] = field(default_factory=list)


@pytest.fixture(autouse=True)
def shutdown_logging_runtime() -> Iterator[None]:
    """CliRunner never reaches main()'s cleanup; stop lib_log_rich after each test."""
    yield
    from pipeline_demo.adapters.logging.setup import stop_logging

    stop_logging()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when asserting exact output so log records on
    stderr never leak into the comparison.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    from pipeline_demo.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    from pipeline_demo.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}
    try:
        yield
    finally:
        for name, value in snapshot.items():
            setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Drop the cached layered configuration before and after the test."""
    from pipeline_demo.adapters.config.loader import load_config

    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def recording_services() -> Callable[[dict[str, Any]], tuple[Callable[[], AppServices], ServiceCalls]]:
    """Return a function turning a config dict into a services factory that records its use.

    Example:
        def test_something(cli_runner, recording_services) -> None:
            factory, calls = recording_services({"lib_log_rich": {"console_level": "DEBUG"}})
            cli_runner.invoke(cli, ["info"], obj=factory)
            assert calls.configs_loaded == 1
    """
    from pipeline_demo.composition import AppServices

    def _create(config_data: dict[str, Any]) -> tuple[Callable[[], AppServices], ServiceCalls]:
        calls = ServiceCalls()
        config = Config(config_data, {})

        def _load() -> Config:
            calls.configs_loaded += 1
            return config

        services = AppServices(load_config=_load, start_logging=calls.logging_started_with.append)
        return (lambda: services), calls

    return _create
