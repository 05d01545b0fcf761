"""Tests for the failure reporters."""

import pytest

from screengraph import (
    LoggingFailureReporter,
    NoRouteError,
    RaisingFailureReporter,
    RecordingFailureReporter,
    SourceLocation,
    UnknownSceneError,
)

LOCATION = SourceLocation("test_app.py", 42)


class TestRaisingFailureReporter:
    """Test the default reporter."""

    def test_raises_with_location(self):
        error = NoRouteError("A", "B")

        with pytest.raises(NoRouteError) as exc_info:
            RaisingFailureReporter().record_failure(error, LOCATION)

        assert exc_info.value is error
        assert error.context["location"] == "test_app.py:42"


class TestRecordingFailureReporter:
    """Test soft-failure recording."""

    def test_records_in_order(self):
        reporter = RecordingFailureReporter()
        first = UnknownSceneError("Nowhere")
        second = NoRouteError("A", "B")

        reporter.record_failure(first, LOCATION)
        reporter.record_failure(second, SourceLocation("other.py", 7), expected=True)

        assert reporter.errors == [first, second]
        assert reporter.failures[1].expected is True
        assert str(reporter.failures[0]) == "test_app.py:42: [UNKNOWN_SCENE] Cannot route to Nowhere, because it doesn't exist"

    def test_assert_no_failures(self):
        reporter = RecordingFailureReporter()
        reporter.assert_no_failures()

        reporter.record_failure(NoRouteError("A", "B"), LOCATION)

        with pytest.raises(AssertionError, match="1 navigation failure"):
            reporter.assert_no_failures()

    def test_clear(self):
        reporter = RecordingFailureReporter()
        reporter.record_failure(NoRouteError("A", "B"), LOCATION)

        reporter.clear()

        assert reporter.failures == []

    def test_navigator_reports_instead_of_raising(self, login_graph):
        reporter = RecordingFailureReporter()
        navigator = login_graph.create_navigator(reporter=reporter)

        assert navigator.goto("Nowhere") is False
        assert reporter.failures[0].error.error_code == "UNKNOWN_SCENE"


def test_logging_reporter_records():
    reporter = LoggingFailureReporter()
    error = NoRouteError("A", "B")

    reporter.record_failure(error, LOCATION)

    assert reporter.errors == [error]
