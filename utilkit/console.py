"""ANSI console coloring helpers.

Segments are tuples of ``(text, color?, style_or_styles?)``; each one is
wrapped in its escape codes plus a trailing reset, and segments are
joined by a single space.

Example:
    color(
        ("Regular text",),
        ("Red text", "red"),
        ("Blue bold", "blue", "bold"),
        ("Multi-style", "yellow", ["bold", "underline", "inverse"]),
    )
"""

import traceback
from typing import IO, Any, Iterable, Sequence, Tuple, Union

import click

from utilkit.core.settings import get_settings

STYLES = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "italic": "\x1b[3m",
    "underline": "\x1b[4m",
    "blink": "\x1b[5m",
    "inverse": "\x1b[7m",
    "hidden": "\x1b[8m",
    "strikethrough": "\x1b[9m",
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "bright_black": "\x1b[90m",
    "bright_red": "\x1b[91m",
    "bright_green": "\x1b[92m",
    "bright_yellow": "\x1b[93m",
    "bright_blue": "\x1b[94m",
    "bright_magenta": "\x1b[95m",
    "bright_cyan": "\x1b[96m",
    "bright_white": "\x1b[97m",
    "bg_black": "\x1b[40m",
    "bg_red": "\x1b[41m",
    "bg_green": "\x1b[42m",
    "bg_yellow": "\x1b[43m",
    "bg_blue": "\x1b[44m",
    "bg_magenta": "\x1b[45m",
    "bg_cyan": "\x1b[46m",
    "bg_white": "\x1b[47m",
    "bg_bright_black": "\x1b[100m",
    "bg_bright_red": "\x1b[101m",
    "bg_bright_green": "\x1b[102m",
    "bg_bright_yellow": "\x1b[103m",
    "bg_bright_blue": "\x1b[104m",
    "bg_bright_magenta": "\x1b[105m",
    "bg_bright_cyan": "\x1b[106m",
    "bg_bright_white": "\x1b[107m",
}

RESET = STYLES["reset"]

ERROR_BANNER = "══════════ ERROR ══════════"

StyleSpec = Union[str, Sequence[str], None]
Segment = Tuple[Any, ...]


def _style_keys(style: StyleSpec) -> Iterable[str]:
    if not style:
        return ()
    if isinstance(style, str):
        return (style,)
    return style


def format_segment(text: Any, color: str | None = None, style: StyleSpec = None) -> str:
    """Wrap one piece of text in its color and style codes.

    Unknown color or style keys are skipped.
    """
    output = ""
    if color and color in STYLES:
        output += STYLES[color]
    for key in _style_keys(style):
        if key in STYLES:
            output += STYLES[key]
    return f"{output}{text}{RESET}"


def format_segments(*segments: Segment, enabled: bool = True) -> str:
    """Render segments into a single space-joined string.

    Args:
        *segments: ``(text,)``, ``(text, color)`` or ``(text, color, styles)``;
            a bare string is treated as ``(text,)``
        enabled: When False, return the plain texts without escape codes

    Returns:
        The formatted line
    """
    rendered = []
    for segment in segments:
        if isinstance(segment, str):
            segment = (segment,)
        text, color, style = (tuple(segment) + (None, None))[:3]
        if enabled:
            rendered.append(format_segment(text, color, style))
        else:
            rendered.append(str(text))
    return " ".join(rendered)


def color(*segments: Segment, file: IO[str] | None = None, enabled: bool | None = None) -> None:
    """Print colored segments as one line.

    Args:
        *segments: Segments as accepted by ``format_segments``
        file: Stream to write to (defaults to stdout)
        enabled: Override ``UtilkitSettings.color_enabled``
    """
    if enabled is None:
        enabled = get_settings().color_enabled
    click.echo(format_segments(*segments, enabled=enabled), file=file, color=enabled)


def print_color_console(text: str, color_name: str = "white", file: IO[str] | None = None) -> None:
    """Print a single line of text in one color."""
    color((text, color_name), file=file)


def format_stack(err: Any) -> str:
    """Return the traceback lines of an exception, or '' for other values."""
    if not isinstance(err, BaseException) or err.__traceback__ is None:
        return ""
    return "\n" + "".join(traceback.format_tb(err.__traceback__)).rstrip("\n")


def catch_err(err: Any, path: str, file: IO[str] | None = None) -> None:
    """Print an error report: banner, message, path and stack trace.

    Args:
        err: Exception or any other value describing the error
        path: Location (file path, route, job name) where it happened
        file: Stream to write to (defaults to stdout)
    """
    color(
        (ERROR_BANNER, "red", ["underline", "bold"]),
        ("\n\n" + str(err), "yellow"),
        ("\npath: " + path, "blue", ["inverse"]),
        ("\n\nStack trace:", "dim"),
        (format_stack(err), "white"),
        file=file,
    )
