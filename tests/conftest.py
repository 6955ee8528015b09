"""Shared pytest fixtures."""

from __future__ import annotations

from typing import Callable

import pytest


def _zenkaku_to_ascii(flags: str, text: str) -> str:
    spaces = 2 if "-Z2" in flags.split() else 1
    out = []
    for ch in text:
        code = ord(ch)
        if 0xFF01 <= code <= 0xFF5E:
            out.append(chr(code - 0xFEE0))
        elif ch == "　":
            out.append(" " * spaces)
        else:
            out.append(ch)
    return "".join(out)


@pytest.fixture
def zenkaku_engine() -> Callable[[str, str], str]:
    """Engine stand-in converting full-width ASCII and JIS spaces per the -Z flag."""
    return _zenkaku_to_ascii
