"""Default implementations of the collaborator interfaces."""

from .failure_reporters import LoggingFailureReporter, RaisingFailureReporter, RecordingFailureReporter
from .polling_element_waiter import PollingElementWaiter

__all__ = [
    "PollingElementWaiter",
    "RaisingFailureReporter",
    "RecordingFailureReporter",
    "LoggingFailureReporter",
]
