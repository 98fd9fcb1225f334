"""Welcome formatting, 32-bit addition and the pipeline banner."""

from __future__ import annotations

from .__init__conf__ import print_info
from .domain.behaviors import (
    ANONYMOUS_GREETING,
    add,
    build_banner,
    format_welcome,
)

__all__ = [
    "ANONYMOUS_GREETING",
    "add",
    "build_banner",
    "format_welcome",
    "print_info",
]
