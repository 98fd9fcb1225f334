"""Behaviour-layer stories: pure domain function tests."""

from __future__ import annotations

import pytest

from pipeline_demo.domain import behaviors
from pipeline_demo.domain.behaviors import INT32_MAX, INT32_MIN

# ======================== format_welcome ========================


@pytest.mark.os_agnostic
def test_format_welcome_with_name_returns_full_message() -> None:
    """A real name yields the full welcome sentence."""
    assert behaviors.format_welcome("Jenkins") == "Hello, Jenkins! Welcome to our application."


@pytest.mark.os_agnostic
@pytest.mark.parametrize("blank", [None, "", "   ", "\t\n", " \r\n ", "\x01", " \x00\x1f "])
def test_format_welcome_with_blank_name_returns_anonymous(blank: str | None) -> None:
    """None, empty, and names made only of spaces or control characters are blank."""
    assert behaviors.format_welcome(blank) == "Hello, Anonymous!"


@pytest.mark.os_agnostic
def test_format_welcome_keeps_surrounding_whitespace() -> None:
    """The untrimmed name is inserted into the message."""
    assert behaviors.format_welcome("  Jenkins ") == "Hello,   Jenkins ! Welcome to our application."


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", ["\u00a0", "\u2003", "\u3000"])
def test_format_welcome_greets_unicode_spaces_by_name(name: str) -> None:
    """Spaces above U+0020 are not padding, so a lone NBSP is a name."""
    assert behaviors.format_welcome(name) == f"Hello, {name}! Welcome to our application."


@pytest.mark.os_agnostic
def test_is_blank_covers_every_code_point_up_to_space() -> None:
    """All of U+0000..U+0020 count as padding, U+0021 does not."""
    assert behaviors.is_blank("".join(chr(cp) for cp in range(0x21)))
    assert not behaviors.is_blank("!")


# ======================== add ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (2, 3, 5),
        (-5, 5, 0),
        (-5, -5, -10),
        (1_000_000_000, 1_000_000_000, 2_000_000_000),
    ],
)
def test_add_returns_sum(a: int, b: int, expected: int) -> None:
    """Sums inside the 32-bit range are plain arithmetic."""
    assert behaviors.add(a, b) == expected


@pytest.mark.os_agnostic
def test_add_wraps_past_the_upper_bound() -> None:
    """INT32_MAX + 1 wraps to INT32_MIN."""
    assert behaviors.add(INT32_MAX, 1) == INT32_MIN


@pytest.mark.os_agnostic
def test_add_wraps_past_the_lower_bound() -> None:
    """INT32_MIN - 1 wraps to INT32_MAX."""
    assert behaviors.add(INT32_MIN, -1) == INT32_MAX


@pytest.mark.os_agnostic
def test_add_wraps_large_positive_sums_to_negative() -> None:
    """2_000_000_000 + 2_000_000_000 overflows the way a 32-bit int does."""
    assert behaviors.add(2_000_000_000, 2_000_000_000) == -294_967_296


# ======================== build_banner ========================


@pytest.mark.os_agnostic
def test_build_banner_returns_three_lines_in_order() -> None:
    """The banner is the pipeline greeting, the description, then the Jenkins welcome."""
    assert behaviors.build_banner() == (
        "Hello World from Jenkins Pipeline!",
        "This is a scripted pipeline demo application.",
        "Hello, Jenkins! Welcome to our application.",
    )
