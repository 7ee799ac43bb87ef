"""Configuration for linesetter tests."""

import pytest

from linesetter import layouter


@pytest.fixture
def line_layouter():
    """Return a function creating a line layouter for some spaces."""
    def make(spaces=((100, 100),), **options):
        return layouter(list(spaces), **options)
    return make
