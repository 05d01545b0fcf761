"""Transition (edge) between two scenes."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..interfaces import IUIElement

Action = Callable[[], Any]


@dataclass
class Transition:
    """A directed, unweighted edge to a named scene.

    Attributes:
        destination_name: Name of the scene this transition leads to
        action: Side-effecting procedure that performs the transition
        wait_for: Element that must exist before the action runs
        is_back: True for a transient back-transition created while navigating
    """

    destination_name: str
    action: Action
    wait_for: IUIElement | None = None
    is_back: bool = False

    def __repr__(self) -> str:
        kind = "back" if self.is_back else "edge"
        return f"Transition({kind} -> {self.destination_name!r})"
