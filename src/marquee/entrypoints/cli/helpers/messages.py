"""Terminal message helpers for the MARQUEE CLI.

Status lines go to stderr so stdout stays machine-readable (``--json``).
Each line starts with an emoji glyph, or an ASCII fallback when stderr
cannot encode it.
"""

import click


def _glyph(emoji: str, fallback: str) -> str:
    """Return `emoji` if stderr can encode it, else `fallback`."""
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def caution_glyph() -> str:
    """Warning glyph: "⚠️" or "[!]"."""
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success_glyph() -> str:
    """Success glyph: "✅" or "[OK]"."""
    return _glyph("✅", "[OK]")  # pragma: no mutate


def error_glyph() -> str:
    """Error glyph: "❌" or "[X]"."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  This will modify your database.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Upgrade complete!``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Expected 2 week(s), got 3.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
