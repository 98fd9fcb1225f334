"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Welcome formatting, 32-bit addition, banner lines
"""

from __future__ import annotations

from .behaviors import (
    ANONYMOUS_GREETING,
    DEMO_NAME,
    INT32_MAX,
    INT32_MIN,
    PIPELINE_DESCRIPTION,
    PIPELINE_GREETING,
    add,
    build_banner,
    format_welcome,
    is_blank,
)

__all__ = [
    "ANONYMOUS_GREETING",
    "DEMO_NAME",
    "INT32_MAX",
    "INT32_MIN",
    "PIPELINE_DESCRIPTION",
    "PIPELINE_GREETING",
    "add",
    "build_banner",
    "format_welcome",
    "is_blank",
]
