"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` so the CLI can report metadata without
querying the installed distribution.

Contents:
    * Module-level metadata constants (name, title, version, ...).
    * ``LAYEREDCONF_*`` identifiers used for configuration path discovery.
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

name = "pipeline_demo"
title = "Scripted pipeline demo application: greeting banner, welcome formatter and 32-bit adder"
version = "1.0.0"
homepage = "https://example.com/pipeline-demo"
author = "Pipeline Demo Maintainers"
author_email = "maintainers@example.com"
shell_command = "pipeline-demo"

# Identifiers for lib_layered_config path discovery:
#   Linux:   ~/.config/<slug>/
#   macOS:   ~/Library/Application Support/<vendor>/<app>/
#   Windows: %APPDATA%\<vendor>\<app>\
LAYEREDCONF_VENDOR: str = "pipeline-demo"
LAYEREDCONF_APP: str = "Pipeline Demo"
LAYEREDCONF_SLUG: str = "pipeline-demo"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for pipeline_demo:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
