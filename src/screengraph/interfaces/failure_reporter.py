"""Failure reporter interface definition."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..exceptions import NavigationError


@dataclass(frozen=True)
class SourceLocation:
    """File and line a failure should be attributed to."""

    filename: str
    lineno: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno}"


class IFailureReporter(ABC):
    """Interface for recording navigation failures in the host test framework."""

    @abstractmethod
    def record_failure(
        self, error: NavigationError, location: SourceLocation, expected: bool = False
    ) -> None:
        """Record a navigation failure.

        Implementations may raise (to fail the running test immediately) or
        record and return, in which case the navigation call that reported
        the failure returns False.

        Args:
            error: The routing failure
            location: Where in the test the failing call was made
            expected: Whether the failure was an anticipated assertion failure
                rather than an unexpected error
        """
        pass
