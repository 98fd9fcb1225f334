"""Composition root: the adapters a subcommand needs before it runs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from lib_layered_config import Config

from ..adapters.config.loader import load_config
from ..adapters.logging.setup import start_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Configuration source and logging starter used by the root command."""

    load_config: Callable[[], Config]
    start_logging: Callable[[Config], None]


def build_production() -> AppServices:
    """Read real configuration files and start lib_log_rich."""
    return AppServices(load_config=load_config, start_logging=start_logging)


def _empty_config() -> Config:
    return Config({}, {})


def _no_logging(config: Config) -> None:
    del config


def build_testing() -> AppServices:
    """Empty configuration, no logging runtime."""
    return AppServices(load_config=_empty_config, start_logging=_no_logging)


__all__ = ["AppServices", "build_production", "build_testing"]
