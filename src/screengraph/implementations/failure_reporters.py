"""Failure reporters.

``RaisingFailureReporter`` is the default: the error propagates from the
navigation call, so pytest reports it as an ordinary failure. The
recording reporter implements soft failures for tests that want to keep
going and assert on the collected failures at the end.
"""

from dataclasses import dataclass

from ..exceptions import NavigationError
from ..interfaces import IFailureReporter, SourceLocation
from ..logging import get_logger

logger = get_logger(__name__)


class RaisingFailureReporter(IFailureReporter):
    """Re-raise every reported failure."""

    def record_failure(
        self, error: NavigationError, location: SourceLocation, expected: bool = False
    ) -> None:
        error.context.setdefault("location", str(location))
        raise error


@dataclass
class RecordedFailure:
    """A failure captured by RecordingFailureReporter."""

    error: NavigationError
    location: SourceLocation
    expected: bool

    def __str__(self) -> str:
        return f"{self.location}: {self.error}"


class RecordingFailureReporter(IFailureReporter):
    """Collect failures without raising.

    Example:
        >>> reporter = RecordingFailureReporter()
        >>> navigator = graph.create_navigator(reporter=reporter)
        >>> navigator.goto("Nowhere")
        False
        >>> reporter.failures[0].error.error_code
        'UNKNOWN_SCENE'
    """

    def __init__(self) -> None:
        self.failures: list[RecordedFailure] = []

    def record_failure(
        self, error: NavigationError, location: SourceLocation, expected: bool = False
    ) -> None:
        self.failures.append(RecordedFailure(error, location, expected))

    @property
    def errors(self) -> list[NavigationError]:
        return [failure.error for failure in self.failures]

    def clear(self) -> None:
        self.failures.clear()

    def assert_no_failures(self) -> None:
        """Raise AssertionError listing every recorded failure, if any."""
        if self.failures:
            lines = "\n".join(f"  {failure}" for failure in self.failures)
            raise AssertionError(f"{len(self.failures)} navigation failure(s):\n{lines}")


class LoggingFailureReporter(RecordingFailureReporter):
    """Record failures and emit them as structured log events."""

    def record_failure(
        self, error: NavigationError, location: SourceLocation, expected: bool = False
    ) -> None:
        super().record_failure(error, location, expected)
        logger.error(
            "navigation_failure_recorded",
            error=error.message,
            error_code=error.error_code,
            location=str(location),
            expected=expected,
        )
