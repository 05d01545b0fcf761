"""Navigation package.

Handles shortest-path routing between scenes and executing the transitions
along the route.
"""

from .navigator import Navigator
from .path_finder import PathFinder
from .source_location import caller_location

__all__ = [
    "Navigator",
    "PathFinder",
    "caller_location",
]
