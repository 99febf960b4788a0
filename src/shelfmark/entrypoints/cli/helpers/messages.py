"""Terminal message helpers for the SHELFMARK CLI.

Each helper writes one styled line to stderr so stdout stays
machine-readable (counts and ids go to stdout). Glyphs fall back to ASCII
when stderr cannot encode them or names an encoding Python does not know.
"""

import click

_GLYPHS = {
    "warn": ("⚠️", "[!]"),
    "success": ("✅", "[OK]"),
    "error": ("❌", "[X]"),
}


def glyph(kind: str) -> str:
    """Return the emoji for *kind*, or its ASCII fallback if stderr can't encode it."""
    emoji, fallback = _GLYPHS[kind]
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return fallback
    return emoji


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{glyph('warn')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    click.secho(f"{glyph('success')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    click.secho(f"{glyph('error')}  {msg}", fg="red", bold=True, err=True)
