"""Start and stop the lib_log_rich runtime for subcommands.

Log records travel through stdlib ``logging`` into lib_log_rich, which
renders them on stderr; stdout stays reserved for command output.
"""

from __future__ import annotations

import threading

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field

from pipeline_demo import __init__conf__
from pipeline_demo.adapters.config.loader import logging_settings


class LoggingSettings(BaseModel):
    """Validated ``[lib_log_rich]`` table.

    ``service`` and ``environment`` get package defaults; any other key is
    forwarded to ``RuntimeConfig`` unchanged.

    Example:
        >>> LoggingSettings().service
        'pipeline_demo'
        >>> LoggingSettings(console_level="DEBUG").model_dump()["console_level"]
        'DEBUG'
    """

    model_config = ConfigDict(extra="allow")

    service: str = Field(default=__init__conf__.name, min_length=1)
    environment: str = "prod"


def start_logging(config: Config) -> None:
    """Initialise lib_log_rich from ``config`` unless it is already running.

    ``LOG_*`` variables from the environment or a ``.env`` file take
    precedence over the configuration table.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    settings = LoggingSettings.model_validate(logging_settings(config))
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(lib_log_rich.runtime.RuntimeConfig(**settings.model_dump()))
    lib_log_rich.runtime.attach_std_logging()


def stop_logging() -> None:
    """Flush and shut down the runtime; only the main thread may do so."""
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


__all__ = ["LoggingSettings", "start_logging", "stop_logging"]
