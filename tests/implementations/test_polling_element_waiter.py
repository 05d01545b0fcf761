"""Tests for PollingElementWaiter."""

import pytest

from screengraph import ElementWaitTimeoutError, PollingElementWaiter


class FakeClock:
    """Clock advanced only by the waiter's sleep calls."""

    def __init__(self) -> None:
        self.now = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def waiter(clock):
    return PollingElementWaiter(poll_interval=0.5, clock=clock, sleep=clock.sleep)


class TestPollingElementWaiter:
    """Test polling until an element exists."""

    def test_present_element_returns_immediately(self, waiter, clock, element):
        waiter.wait_for(element("Ready"), timeout=2.0)

        assert clock.sleeps == []

    def test_element_appearing_later(self, clock, element):
        button = element("Late", present=False)

        def sleep(seconds):
            clock.sleep(seconds)
            if len(clock.sleeps) == 2:
                button.present = True

        waiter = PollingElementWaiter(poll_interval=0.5, clock=clock, sleep=sleep)
        waiter.wait_for(button, timeout=2.0)

        assert clock.sleeps == [0.5, 0.5]

    def test_timeout(self, waiter, clock, element):
        missing = element("Missing", present=False)

        with pytest.raises(ElementWaitTimeoutError) as exc_info:
            waiter.wait_for(missing, timeout=1.25)

        assert clock.sleeps == [0.5, 0.5, 0.25]
        assert exc_info.value.element is missing
        assert exc_info.value.timeout == 1.25
        assert exc_info.value.hop is None
        assert "Missing" in str(exc_info.value)

    def test_poll_interval_from_settings(self):
        assert PollingElementWaiter().poll_interval == pytest.approx(0.01)


def test_timeout_error_at_hop(element):
    error = ElementWaitTimeoutError(element("Spinner"), 2.0)

    annotated = error.at_hop("Home", "Login")

    assert annotated.hop == ("Home", "Login")
    assert annotated.error_code == "ELEMENT_WAIT_TIMEOUT"
    assert str(annotated) == (
        "[ELEMENT_WAIT_TIMEOUT] Element Spinner did not exist after 2s while moving from Home to Login"
    )
