"""Tests for terminal rendering."""

import io

from rich.console import Console

from fmrl.core.classifier import classify
from fmrl.core.config import ColorConfig, ColorsConfig
from fmrl.models.error_rule import ErrorRuleAction
from fmrl.render import (
    DEFAULT_COLUMN_STYLES,
    ERROR_STYLE,
    IGNORED_STYLE,
    WARNING_STYLE,
    Renderer,
    format_plain,
)


def styles_of(text):
    """Map each styled span's text to its style."""
    return {text.plain[span.start:span.end]: str(span.style) for span in text.spans}


def make_renderer(**kwargs):
    return Renderer(Console(file=io.StringIO(), width=200), **kwargs)


class TestStyled:
    """Tests for Renderer.styled()."""

    def test_success_columns(self, sample_lines):
        text = make_renderer().styled(classify(sample_lines["success"]))

        styles = styles_of(text)
        assert styles["2022-11-08 11:44:50.100 -0600"] == DEFAULT_COLUMN_STYLES[0]
        assert styles["Import.fmp12"] == DEFAULT_COLUMN_STYLES[1]
        assert styles["0"] == DEFAULT_COLUMN_STYLES[2]
        assert text.plain == sample_lines["success"]

    def test_configured_colors(self, sample_lines):
        colors = ColorsConfig(filename=ColorConfig(foreground="cyan", background="#000000"))
        text = make_renderer(colors=colors).styled(classify(sample_lines["success"]))

        assert styles_of(text)["Import.fmp12"] == "cyan on #000000"

    def test_error_columns(self, sample_lines):
        text = make_renderer().styled(classify(sample_lines["error"]))

        styles = styles_of(text)
        assert styles["102"] == ERROR_STYLE
        assert "Field \"Missing\" not found." not in styles

    def test_ignored_error_dimmed(self, sample_lines):
        text = make_renderer().styled(
            classify(sample_lines["error"]), ErrorRuleAction.IGNORE
        )

        assert set(styles_of(text).values()) == {IGNORED_STYLE}

    def test_quieted_error_keeps_error_style(self, sample_lines):
        text = make_renderer().styled(
            classify(sample_lines["error"]), ErrorRuleAction.QUIET
        )

        assert styles_of(text)["102"] == ERROR_STYLE

    def test_warning_columns(self, sample_lines):
        text = make_renderer().styled(classify(sample_lines["warning"]))

        assert styles_of(text)["Import.fmp12"] == WARNING_STYLE

    def test_header_underlined(self, sample_lines):
        text = make_renderer().styled(classify(sample_lines["header"]))

        assert all("underline" in style for style in styles_of(text).values())

    def test_other_unstyled(self):
        text = make_renderer().styled(classify("free text"))

        assert text.plain == "free text"
        assert text.spans == []


class TestPlainOutput:
    """Tests for output with color disabled."""

    def test_format_plain(self, sample_lines):
        assert format_plain(classify(sample_lines["warning"])) == sample_lines["warning"]
        assert format_plain(classify("free text")) == "free text"

    def test_format_plain_error_has_rewritten_message(self):
        classified = classify("2022-11-08 11:44:49\tf\t1\ta\rb")
        assert format_plain(classified) == "2022-11-08 11:44:49\tf\t1\ta\r\nb"

    def test_render_without_color(self, capsys, sample_lines):
        renderer = make_renderer(color=False)
        renderer.render(classify(sample_lines["error"]))
        renderer.separator()
        renderer.announce("using current directory: /tmp/Import.log")

        out = capsys.readouterr().out
        assert out == (
            sample_lines["error"] + "\n"
            + "-" * 40 + "\n"
            + "using current directory: /tmp/Import.log\n"
        )
