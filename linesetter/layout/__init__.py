"""Lay out sized boxes into lines, and lines into spaces.

:class:`LineLayouter` is the entry point: boxes and spacing are given one
after the other, finished lines are given to a :class:`StackLayouter` that
places them into spaces such as pages or columns.

"""

from .line import (  # noqa: F401
    CLOSE_LINE, CLOSE_SPACE, CONTINUE_RUN, LineContext, LineLayouter,
    LineRun, SpawnSiblingRun, reconcile_alignment)
from .spacing import HARD, LINE, PARAGRAPH, WORD, SpacingKind  # noqa: F401
from .stack import StackContext, StackLayouter  # noqa: F401
