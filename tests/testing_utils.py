"""Helpers for tests."""

import functools
import sys

from linesetter import Align, Box, Gen2, layouter
from linesetter.logger import capture_logs

START = Gen2(Align.START, Align.START)
START_CENTER = Gen2(Align.START, Align.CENTER)
START_END = Gen2(Align.START, Align.END)


def assert_no_logs(function):
    """Decorator that asserts that nothing is logged in a function."""
    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        with capture_logs() as logs:
            try:
                function(*args, **kwargs)
            except Exception:  # pragma: no cover
                if logs:
                    print(f'{len(logs)} errors logged:', file=sys.stderr)
                    for message in logs:
                        print(message, file=sys.stderr)
                raise
            else:
                if logs:  # pragma: no cover
                    for message in logs:
                        print(message, file=sys.stderr)
                    raise AssertionError(f'{len(logs)} errors logged')
    return wrapper


def word(label, width, height=10):
    """Return a leaf box, as given by text shaping."""
    return Box((width, height), label=label)


def lay_out(items, spaces=((100, 100),), **options):
    """Lay out ``items`` and return the list of space boxes.

    ``items`` is a list of ``(box, aligns)`` tuples.

    """
    line_layouter = layouter(list(spaces), **options)
    for box, aligns in items:
        line_layouter.add(box, aligns)
    return line_layouter.finish()


def serialize(box):
    """Transform a box tree into a structure easier to compare for testing.

    Each box is given as ``(position, label or size, children)``.

    """
    return [
        (tuple(position),
         child.label if child.label is not None else tuple(child.size),
         serialize(child))
        for position, child in box.children]
