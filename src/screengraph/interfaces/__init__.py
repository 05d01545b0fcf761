"""Interface definitions.

These interfaces define the contracts between the navigation core and the
collaborators it drives: UI elements, the element waiter and the failure
reporter.
"""

from .element import IUIElement
from .element_waiter import IElementWaiter
from .failure_reporter import IFailureReporter, SourceLocation

__all__ = [
    "IUIElement",
    "IElementWaiter",
    "IFailureReporter",
    "SourceLocation",
]
