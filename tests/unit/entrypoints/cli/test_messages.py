"""Unit tests for :mod:`shelfmark.entrypoints.cli.helpers.messages`.

Glyphs follow the encoding reported by ``click.get_text_stream("stderr")``,
and every helper writes to stderr so stdout stays free for counts and ids.
"""

import io

import click
import pytest

from shelfmark.entrypoints.cli.helpers.messages import error, glyph, success, warn


class FakeStream(io.StringIO):
    """A text stream with a controllable ``encoding``."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Declared character encoding."""
        return self._encoding


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [
        ("ascii", {"warn": "[!]", "success": "[OK]", "error": "[X]"}),
        ("utf-8", {"warn": "⚠️", "success": "✅", "error": "❌"}),
    ],
)
def test_glyphs_respect_stream_encoding(monkeypatch, encoding, expected):
    """Emoji are used only when stderr can encode them."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeStream(encoding))
    assert {kind: glyph(kind) for kind in expected} == expected


@pytest.mark.parametrize(
    ("emit", "fallback"),
    [(warn, "[!]"), (success, "[OK]"), (error, "[X]")],
)
def test_messages_go_to_stderr(monkeypatch, capsys, emit, fallback):
    """Each helper prints one line to stderr and nothing to stdout."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeStream("ascii"))
    emit("database is behind")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == f"{fallback}  database is behind"


def test_unknown_encoding_falls_back_to_ascii(monkeypatch):
    """A stream naming an unknown codec gets the ASCII glyphs."""
    monkeypatch.setattr(
        click, "get_text_stream", lambda name: FakeStream("no-such-codec")
    )
    assert glyph("warn") == "[!]"
    assert glyph("success") == "[OK]"
