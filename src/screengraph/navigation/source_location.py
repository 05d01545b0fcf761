"""Attribute failures to the test code that triggered them."""

import inspect
import os

from ..interfaces import SourceLocation

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.realpath(__file__))) + os.sep


def caller_location() -> SourceLocation:
    """Return the file and line of the innermost frame outside this package."""
    frame = inspect.currentframe()
    try:
        while frame is not None:
            filename = os.path.realpath(frame.f_code.co_filename)
            if not filename.startswith(_PACKAGE_DIR):
                return SourceLocation(frame.f_code.co_filename, frame.f_lineno)
            frame = frame.f_back
        return SourceLocation("<unknown>", 0)
    finally:
        del frame
