"""Read-only layered configuration feeding the logging runtime.

Subcommands read the merged configuration once per process, before logging
starts; only the ``[lib_log_rich]`` table is consumed. The banner path never
comes here.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, cast

from lib_layered_config import Config, read_config

from pipeline_demo import __init__conf__

_DEFAULT_FILE = Path(__file__).with_name("defaultconfig.toml")
LOGGING_SECTION = "lib_log_rich"


@lru_cache(maxsize=1)
def load_config() -> Config:
    """Merge defaults -> app -> host -> user -> dotenv -> env into one Config.

    Cached for the lifetime of the process; ``load_config.cache_clear()``
    forces a re-read.

    Raises:
        lib_layered_config errors when a discovered file is not valid TOML.

    Example:
        >>> load_config().get("missing", default="fallback")
        'fallback'
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=_DEFAULT_FILE,
    )


def logging_settings(config: Config) -> dict[str, Any]:
    """Return the ``[lib_log_rich]`` table as a plain dict (empty when absent)."""
    section = config.get(LOGGING_SECTION, default=None)
    return dict(cast("dict[str, Any]", section)) if section else {}


__all__ = ["LOGGING_SECTION", "load_config", "logging_settings"]
