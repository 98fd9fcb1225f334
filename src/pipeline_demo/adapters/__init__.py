"""Adapters layer - configuration, logging and the rich-click CLI."""

from __future__ import annotations

__all__: list[str] = []
