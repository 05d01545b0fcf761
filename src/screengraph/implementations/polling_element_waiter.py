"""Element waiter that polls ``element.exists`` until a deadline."""

import time
from collections.abc import Callable

from ..config import get_settings
from ..exceptions import ElementWaitTimeoutError
from ..interfaces import IElementWaiter, IUIElement
from ..logging import get_logger

logger = get_logger(__name__)


class PollingElementWaiter(IElementWaiter):
    """Wait for elements by polling their ``exists`` property.

    Example:
        >>> waiter = PollingElementWaiter(poll_interval=0.05)
        >>> waiter.wait_for(login_button, timeout=2.0)
    """

    def __init__(
        self,
        poll_interval: float | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the waiter.

        Args:
            poll_interval: Seconds between checks, defaults to settings.poll_interval
            clock: Monotonic clock used for the deadline
            sleep: Function used to pause between checks
        """
        self.poll_interval = poll_interval if poll_interval is not None else get_settings().poll_interval
        self._clock = clock
        self._sleep = sleep

    def wait_for(self, element: IUIElement, timeout: float) -> None:
        deadline = self._clock() + timeout

        while True:
            if element.exists:
                return
            remaining = deadline - self._clock()
            if remaining <= 0:
                break
            self._sleep(min(self.poll_interval, remaining))

        logger.debug("element_wait_timeout", element=repr(element), timeout=timeout)
        raise ElementWaitTimeoutError(element, timeout)
