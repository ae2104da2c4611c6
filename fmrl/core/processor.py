"""Per-line processing: classify, apply error rules, render, alert.

LineProcessor is the glue between the pure classification core and the
terminal, notification and sound side effects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from fmrl.core.classifier import classify
from fmrl.core.error_rules import ErrorRuleMatcher
from fmrl.core.notifications import NotificationKind
from fmrl.locales import is_operation_start
from fmrl.models.error_rule import ErrorRuleAction
from fmrl.models.line import ClassifiedLine, LineCategory
from fmrl.render import Renderer


@dataclass
class LineStats:
    """Counts of processed lines by category.

    Attributes:
        by_category: Lines seen per category.
        quieted: Error lines with a QUIET verdict.
        ignored: Error lines with an IGNORE verdict.
    """

    by_category: dict[LineCategory, int] = field(
        default_factory=lambda: {category: 0 for category in LineCategory}
    )
    quieted: int = 0
    ignored: int = 0

    @property
    def total(self) -> int:
        return sum(self.by_category.values())


@dataclass(frozen=True)
class LineResult:
    """What happened to one processed line."""

    classified: ClassifiedLine
    action: Optional[ErrorRuleAction]
    printed: bool
    notification: Optional[NotificationKind]
    beeped: bool


class LineProcessor:
    """Runs each raw line through classification, rules and output.

    Alerts (notification events and beeps) are only raised while
    ``alerts_enabled`` is True, so the existing contents of a log can be
    printed without notifying about old lines.

    Example usage:
        processor = LineProcessor(renderer, matcher, notify=batcher.push)
        for raw_line in tailer.read_lines(flush=True):
            processor.process(raw_line)
    """

    def __init__(
        self,
        renderer: Renderer,
        matcher: Optional[ErrorRuleMatcher] = None,
        errors_only: bool = False,
        notify: Optional[Callable[[NotificationKind], None]] = None,
        beep: Optional[Callable[[], None]] = None,
        alerts_enabled: bool = True,
    ):
        """Initialize the processor.

        Args:
            renderer: Renderer used to print lines.
            matcher: Error rules and quiet codes. None applies no rules.
            errors_only: Only print error and header lines.
            notify: Called with a NotificationKind for each alerting line.
            beep: Called for each alerting error line.
            alerts_enabled: Whether notify and beep are called at all.
        """
        self.renderer = renderer
        self.matcher = matcher or ErrorRuleMatcher()
        self.errors_only = errors_only
        self.notify = notify
        self.beep = beep
        self.alerts_enabled = alerts_enabled
        self.stats = LineStats()

    def process(self, raw_line: str) -> LineResult:
        """Classify and handle a single raw line."""
        classified = classify(raw_line)
        self.stats.by_category[classified.category] += 1

        action: Optional[ErrorRuleAction] = None
        if classified.is_error and classified.line is not None:
            action = self.matcher.resolve(classified.line)
            if action is ErrorRuleAction.IGNORE:
                self.stats.ignored += 1
            elif action is ErrorRuleAction.QUIET:
                self.stats.quieted += 1

        printed = self._should_print(classified)
        if printed:
            if (
                classified.line is not None
                and classified.category in (LineCategory.SUCCESS, LineCategory.WARNING)
                and is_operation_start(classified.line)
            ):
                self.renderer.separator()
            self.renderer.render(classified, action)

        notification = self._notification_kind(classified, action)
        if notification is not None and self.notify is not None:
            self.notify(notification)

        beeped = False
        if (
            notification is NotificationKind.ERROR
            and self.beep is not None
        ):
            self.beep()
            beeped = True

        return LineResult(
            classified=classified,
            action=action,
            printed=printed,
            notification=notification,
            beeped=beeped,
        )

    def _should_print(self, classified: ClassifiedLine) -> bool:
        if not self.errors_only:
            return True
        return classified.is_error or classified.is_header

    def _notification_kind(
        self,
        classified: ClassifiedLine,
        action: Optional[ErrorRuleAction],
    ) -> Optional[NotificationKind]:
        if not self.alerts_enabled:
            return None
        if classified.is_error:
            # both verdicts silence the alert; the line is still printed
            if action is not None:
                return None
            return NotificationKind.ERROR
        if classified.is_warning:
            return NotificationKind.WARNING
        return None
