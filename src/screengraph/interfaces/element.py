"""UI element interface definition."""

from abc import ABC, abstractmethod


class IUIElement(ABC):
    """Interface for a locatable element of the application under test.

    The navigation core only ever asks whether the element exists and invokes
    the gestures used by the builder helpers. How an element is located and
    how gestures are performed is up to the implementation.
    """

    description: str | None = None

    @property
    @abstractmethod
    def exists(self) -> bool:
        """Whether the element is currently present on screen."""
        pass

    @abstractmethod
    def tap(self) -> None:
        """Tap the element."""
        pass

    @abstractmethod
    def double_tap(self) -> None:
        """Double tap the element."""
        pass

    @abstractmethod
    def type_text(self, text: str) -> None:
        """Type text into the element.

        Args:
            text: Text to type
        """
        pass

    @abstractmethod
    def swipe_left(self) -> None:
        pass

    @abstractmethod
    def swipe_right(self) -> None:
        pass

    @abstractmethod
    def swipe_up(self) -> None:
        pass

    @abstractmethod
    def swipe_down(self) -> None:
        pass
