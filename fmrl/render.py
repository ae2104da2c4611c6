"""Terminal rendering of classified log lines.

Styling follows the line category:
- success: one color per column
- warning: black on yellow for the first three columns
- error: bright white on red for the first three columns
- header: the success colors, underlined
- other: printed as is

Ignored errors are dimmed so they stay visible without drawing the eye.
"""

from __future__ import annotations

from typing import Optional

import click
from rich.console import Console
from rich.text import Text

from fmrl.core.config import ColorsConfig
from fmrl.models.error_rule import ErrorRuleAction
from fmrl.models.line import ClassifiedLine, LineCategory, LogLine

DEFAULT_COLUMN_STYLES = ("green", "magenta", "yellow", "blue")
ERROR_STYLE = "bright_white on red"
WARNING_STYLE = "black on yellow"
WARNING_MESSAGE_STYLE = "yellow"
IGNORED_STYLE = "dim"


def _column_styles(colors: Optional[ColorsConfig]) -> tuple[str, str, str, str]:
    """Merge configured column colors over the defaults."""
    if colors is None:
        return DEFAULT_COLUMN_STYLES
    configured = (
        colors.timestamp.style,
        colors.filename.style,
        colors.error.style,
        colors.message.style,
    )
    return tuple(
        custom or default for custom, default in zip(configured, DEFAULT_COLUMN_STYLES)
    )


def format_plain(classified: ClassifiedLine) -> str:
    """Format a line without any styling."""
    if classified.line is None or classified.category is LineCategory.HEADER:
        return classified.raw
    return classified.line.to_tsv()


class Renderer:
    """Prints classified lines to the terminal.

    Example usage:
        renderer = Renderer(Console(), colors=config.colors)
        renderer.render(classify(raw_line))
    """

    def __init__(
        self,
        console: Console,
        colors: Optional[ColorsConfig] = None,
        color: bool = True,
    ):
        """Initialize the renderer.

        Args:
            console: Rich console for colored output.
            colors: Configured column colors for success lines.
            color: If False, lines are written as plain tab-separated text.
        """
        self.console = console
        self.color = color
        self._column_styles = _column_styles(colors)

    def announce(self, message: str) -> None:
        """Print a status message, e.g. which log file is being watched."""
        if self.color:
            self.console.print(
                message,
                style="bold underline green",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
        else:
            click.echo(message)

    def separator(self) -> None:
        """Print a separator before the start of a new import."""
        if self.color:
            self.console.rule(style="dim")
        else:
            click.echo("-" * 40)

    def render(
        self,
        classified: ClassifiedLine,
        action: Optional[ErrorRuleAction] = None,
    ) -> None:
        """Print one classified line.

        Args:
            classified: The line to print.
            action: The error rule verdict for error lines, if any.
        """
        if not self.color:
            click.echo(format_plain(classified))
            return
        self.console.print(self.styled(classified, action), highlight=False, soft_wrap=True)

    def styled(
        self,
        classified: ClassifiedLine,
        action: Optional[ErrorRuleAction] = None,
    ) -> Text:
        """Build the styled text for a line."""
        line = classified.line
        if line is None:
            return Text(classified.raw)

        category = classified.category
        if category is LineCategory.ERROR:
            if action is ErrorRuleAction.IGNORE:
                return self._columns(line, (IGNORED_STYLE,) * 4)
            return self._columns(line, (ERROR_STYLE, ERROR_STYLE, ERROR_STYLE, ""))
        if category is LineCategory.WARNING:
            return self._columns(
                line, (WARNING_STYLE, WARNING_STYLE, WARNING_STYLE, WARNING_MESSAGE_STYLE)
            )
        if category is LineCategory.HEADER:
            return self._header(classified.raw)
        return self._columns(line, self._column_styles)

    def _columns(self, line: LogLine, styles: tuple[str, ...]) -> Text:
        values = (line.timestamp, line.filename, line.code, line.message)
        text = Text()
        for i, (value, style) in enumerate(zip(values, styles)):
            if i:
                text.append("\t")
            text.append(value, style=style or None)
        return text

    def _header(self, raw: str) -> Text:
        # style the localized column names, keeping any prefix text as is
        columns = raw.split("\t")
        text = Text()
        for i, value in enumerate(columns):
            if i:
                text.append("\t")
            style_index = min(max(i - (len(columns) - 4), 0), 3)
            text.append(value, style=f"{self._column_styles[style_index]} underline")
        return text
