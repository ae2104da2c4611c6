"""Entry point for fmrl CLI."""

from pathlib import Path
from typing import NoReturn

import rich_click as click
from rich.console import Console
from rich.markup import escape

from fmrl.core.beeper import beep
from fmrl.core.config import Config, ConfigError, ConfigLoader
from fmrl.core.error_rules import ErrorRuleLoader, ErrorRuleMatcher, ErrorRuleValidationError
from fmrl.core.notifications import NotificationBatcher, send_desktop_notification
from fmrl.core.processor import LineProcessor, LineStats
from fmrl.core.tail import LogTailer
from fmrl.logging import configure_logging, get_logger
from fmrl.models.error_rule import ErrorRule, normalize_error_code
from fmrl.models.line import LineCategory
from fmrl.render import Renderer
from fmrl.utils.paths import find_import_log

click.rich_click.TEXT_MARKUP = "rich"
click.rich_click.SHOW_ARGUMENTS = True

logger = get_logger(__name__)


def _fail(ctx: click.Context, message: str) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    stderr_console = Console(stderr=True)
    stderr_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
    ctx.exit(1)


def _load_config(ctx: click.Context, config_path: str | None) -> Config:
    """Load the explicit config file, or the user config if there is one."""
    loader = ConfigLoader()
    try:
        if config_path:
            return loader.load(Path(config_path))
        return loader.load_default()
    except (ConfigError, ErrorRuleValidationError, FileNotFoundError) as e:
        _fail(ctx, f"couldn't load config: {e}")


def _load_rule_files(ctx: click.Context, paths: tuple[str, ...]) -> list[ErrorRule]:
    """Load every --rules-file, in the order given."""
    loader = ErrorRuleLoader()
    rules: list[ErrorRule] = []
    try:
        for rules_path in paths:
            rules.extend(loader.load(Path(rules_path)))
    except (ErrorRuleValidationError, FileNotFoundError) as e:
        _fail(ctx, f"couldn't load rules: {e}")
    return rules


def _log_summary(stats: LineStats) -> None:
    logger.info(
        "lines processed",
        total=stats.total,
        errors=stats.by_category[LineCategory.ERROR],
        warnings=stats.by_category[LineCategory.WARNING],
        quieted=stats.quieted,
        ignored=stats.ignored,
    )


def _build_matcher(
    config: Config,
    file_rules: list[ErrorRule],
    rules_json: tuple[str, ...],
    quiet_errors: tuple[str, ...],
) -> ErrorRuleMatcher:
    """Combine config rules and quiet codes with those given on the CLI.

    Config rules come first, then rule files, then --rule options.
    """
    rules = list(config.errors.rules) + file_rules
    loader = ErrorRuleLoader()
    for i, rule_json in enumerate(rules_json):
        try:
            rules.append(loader.load_json(rule_json, index=i))
        except ErrorRuleValidationError as e:
            raise click.BadParameter(str(e), param_hint="'--rule'") from e

    quiet_codes = list(config.errors.quiet)
    for value in quiet_errors:
        try:
            code = normalize_error_code(value)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="'--quiet-error'") from e
        if code is not None:
            quiet_codes.append(code)

    return ErrorRuleMatcher(
        rules,
        quiet_codes=quiet_codes,
        allow_catch_all=config.errors.allow_catch_all_rules,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("path_unnamed", metavar="PATH", required=False, type=str)
@click.option(
    "--path",
    "-p",
    "path",
    type=str,
    help="The file to watch, should probably be path/to/Import.log."
)
@click.option(
    "--docs",
    "-d",
    "use_docs_dir",
    is_flag=True,
    help="Open Import.log from the Documents directory (for hosted files)."
)
@click.option("--no-watch", is_flag=True, help="Don't watch for changes, just print once.")
@click.option("--no-color", is_flag=True, help="Don't print color.")
@click.option("--errors-only", "-e", is_flag=True, help="Only print errors (and headers).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Path to a TOML or JSON config file. Defaults to ~/.config/fmrl/config.toml if present."
)
@click.option(
    "--rule",
    "rules_json",
    type=str,
    multiple=True,
    help=(
        "Error rule as a JSON object, e.g. "
        "'{\"error_code\": 102, \"action\": \"ignore\"}'. Can be repeated."
    )
)
@click.option(
    "--rules-file",
    "rules_files",
    type=click.Path(dir_okay=False),
    multiple=True,
    help="TOML or JSON file of error rules. Can be repeated."
)
@click.option(
    "--quiet-error",
    "quiet_errors",
    type=str,
    multiple=True,
    help="Error code that should not trigger notifications or beeps. Can be repeated."
)
@click.option(
    "--notify/--no-notify",
    default=None,
    help="Show desktop notifications for new errors and warnings."
)
@click.option(
    "--beep/--no-beep",
    "beep_enabled",
    default=None,
    help="Play a sound for new errors."
)
@click.option("--beep-path", type=str, help="Sound file to play for new errors.")
@click.option("--beep-volume", type=float, help="Sound volume between 0 and 1.")
@click.option(
    "--poll-interval",
    type=float,
    default=0.1,
    show_default=True,
    help="Seconds between checks for new log lines."
)
@click.option("--verbose", "-v", is_flag=True, help="Log diagnostics to stderr.")
@click.option("--version", is_flag=True, help="Show version and exit.")
@click.pass_context
def cli(
    ctx: click.Context,
    path_unnamed: str | None,
    path: str | None,
    use_docs_dir: bool,
    no_watch: bool,
    no_color: bool,
    errors_only: bool,
    config_path: str | None,
    rules_json: tuple[str, ...],
    rules_files: tuple[str, ...],
    quiet_errors: tuple[str, ...],
    notify: bool | None,
    beep_enabled: bool | None,
    beep_path: str | None,
    beep_volume: float | None,
    poll_interval: float,
    verbose: bool,
    version: bool,
) -> None:
    """fmrl - colorize, filter and alert on FileMaker Import.log files.

    Prints the log with errors and warnings highlighted, then keeps watching
    it for new lines. PATH defaults to Import.log in the current directory.
    """
    if version:
        from fmrl import __version__
        click.echo(f"fmrl {__version__}")
        return

    configure_logging("DEBUG" if verbose else "WARNING")

    if path_unnamed and path:
        raise click.UsageError("PATH and --path can't be used together.")

    config = _load_config(ctx, config_path)
    matcher = _build_matcher(
        config, _load_rule_files(ctx, rules_files), rules_json, quiet_errors
    )

    try:
        log_path = find_import_log(path_unnamed or path, use_docs_dir=use_docs_dir)
    except FileNotFoundError as e:
        _fail(ctx, str(e))

    console = Console()
    renderer = Renderer(console, colors=config.colors, color=not no_color)
    if log_path.message:
        renderer.announce(log_path.message)

    notifications_enabled = config.notifications.enabled if notify is None else notify
    beep_on = config.beep.enabled if beep_enabled is None else beep_enabled
    sound_path = config.beep.path if beep_path is None else beep_path
    volume = config.beep.volume if beep_volume is None else beep_volume

    batcher: NotificationBatcher | None = None
    if notifications_enabled and not no_watch:
        batcher = NotificationBatcher(
            send_desktop_notification,
            debounce_interval=config.notifications.debounce_ms / 1000,
        )

    processor = LineProcessor(
        renderer,
        matcher=matcher,
        errors_only=errors_only,
        notify=batcher.push if batcher else None,
        beep=(lambda: beep(sound_path, volume, console)) if beep_on else None,
        alerts_enabled=False,
    )

    tailer = LogTailer(log_path.path, poll_interval=poll_interval)
    try:
        try:
            for raw_line in tailer.read_lines(flush=no_watch):
                processor.process(raw_line)
        except OSError as e:
            _fail(ctx, f"couldn't open '{log_path.path}', {e}")

        if no_watch:
            return

        logger.debug("watching for changes", path=str(log_path.path))
        if batcher:
            batcher.start()
        processor.alerts_enabled = True
        try:
            for raw_line in tailer.follow():
                processor.process(raw_line)
        except OSError as e:
            _fail(ctx, f"couldn't read '{log_path.path}', {e}")
    except KeyboardInterrupt:
        pass
    finally:
        if batcher:
            batcher.stop(timeout=1.0)
        _log_summary(processor.stats)


if __name__ == "__main__":
    cli()
