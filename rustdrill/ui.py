"""Terminal styling and the warning and success status lines."""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"


def _colors_enabled() -> bool:
    if os.environ.get("CLICOLOR_FORCE", "0") != "0":
        return True
    if os.environ.get("CLICOLOR", "1") == "0":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: object, code: str) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Return ``text`` in bold when the terminal takes colours."""
    return _paint(text, "1")


def blue(text: object) -> str:
    """Return ``text`` in blue when the terminal takes colours."""
    return _paint(text, "34")


def _red(text: object) -> str:
    return _paint(text, "31")


def _green(text: object) -> str:
    return _paint(text, "32")


def emoji_enabled() -> bool:
    """Emoji are shown unless the NO_EMOJI variable is set."""
    return "NO_EMOJI" not in os.environ


def warn(message: object) -> None:
    """Print ``message`` as a red warning line."""
    symbol = "⚠️ " if emoji_enabled() else "!"
    print(f"{_red(symbol)} {_red(message)}")


def success(message: object) -> None:
    """Print ``message`` as a green success line."""
    symbol = "✅" if emoji_enabled() else "✓"
    print(f"{_green(symbol)} {_green(message)}")