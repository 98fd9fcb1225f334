"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

ANONYMOUS_GREETING: Final[str] = "Hello, Anonymous!"
PIPELINE_GREETING: Final[str] = "Hello World from Jenkins Pipeline!"
PIPELINE_DESCRIPTION: Final[str] = "This is a scripted pipeline demo application."
DEMO_NAME: Final[str] = "Jenkins"

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
_INT32_SPAN: Final[int] = 2**32


def is_blank(name: str | None) -> bool:
    """Return True for ``None`` or text made only of control characters and spaces.

    Every code point up to U+0020 counts as padding; Unicode spaces above
    that range (NBSP, em space, ...) are content.

    Example:
        >>> is_blank(" \\t\\x01")
        True
        >>> is_blank("\\u00a0")
        False
    """
    return name is None or all(ch <= " " for ch in name)


def format_welcome(name: str | None) -> str:
    r"""Return a personalised welcome message for ``name``.

    Blank input falls back to the anonymous greeting. Non-blank names are
    inserted as given, surrounding whitespace included.

    Args:
        name: Optional display name.

    Returns:
        The formatted welcome message.

    Example:
        >>> format_welcome("Jenkins")
        'Hello, Jenkins! Welcome to our application.'
        >>> format_welcome("   ")
        'Hello, Anonymous!'
        >>> format_welcome(None)
        'Hello, Anonymous!'
    """
    if is_blank(name):
        return ANONYMOUS_GREETING
    return f"Hello, {name}! Welcome to our application."


def add(a: int, b: int) -> int:
    """Return ``a + b`` wrapped into the signed 32-bit range.

    Overflow wraps around two's-complement style instead of raising or
    saturating.

    Example:
        >>> add(2, 3)
        5
        >>> add(INT32_MAX, 1) == INT32_MIN
        True
    """
    return (a + b - INT32_MIN) % _INT32_SPAN + INT32_MIN


def build_banner() -> tuple[str, str, str]:
    """Return the three lines printed by the program entry point.

    Example:
        >>> build_banner()[2]
        'Hello, Jenkins! Welcome to our application.'
    """
    return (PIPELINE_GREETING, PIPELINE_DESCRIPTION, format_welcome(DEMO_NAME))


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
