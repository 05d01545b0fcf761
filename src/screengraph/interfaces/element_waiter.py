"""Element waiter interface definition."""

from abc import ABC, abstractmethod

from .element import IUIElement


class IElementWaiter(ABC):
    """Interface for blocking until an element exists."""

    @abstractmethod
    def wait_for(self, element: IUIElement, timeout: float) -> None:
        """Block until the element exists.

        Args:
            element: Element to wait for
            timeout: Maximum seconds to wait

        Raises:
            ElementWaitTimeoutError: If the element does not exist in time
        """
        pass
