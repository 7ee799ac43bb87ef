"""Arranging boxes into lines.

Boxes are laid out along the cross axis as long as they fit into a line.
When necessary, a line break is inserted and the new line is offset along
the main axis by the height of the previous line plus extra line spacing.

The line layouter uses a stack layouter to stack the finished lines.

A line is made of one or more *runs*, sequences of boxes sharing the same
alignment. Runs of a line are sorted by increasing cross alignment: when the
cross alignment increases, a new run starts on the same row; when it
decreases, a new line starts. Each run is finished as its own line box, the
following run is moved back onto the same row by a negative main spacing
equal to the height of the row.

"""

from collections import namedtuple

from ..boxes import Box
from ..geometry import DEFAULT_ALIGNS, Align, Point, Size
from ..logger import LOGGER
from .spacing import HARD, HARD_SPACING, LINE, NO_SPACING, collapse
from .stack import StackContext, StackLayouter

#: Context of the line layouter. ``dirs`` is the :class:`Gen2` pair of
#: directions, ``spaces`` the list of :class:`LayoutSpace` to lay out into,
#: ``repeat`` whether the last space is used again when the spaces are used up,
#: and ``line_spacing`` the spacing inserted between each pair of lines.
LineContext = namedtuple(
    'LineContext', ['dirs', 'spaces', 'repeat', 'line_spacing'])

# Results of reconcile_alignment.
CONTINUE_RUN = 'continue-run'
CLOSE_LINE = 'close-line'
CLOSE_SPACE = 'close-space'
SpawnSiblingRun = namedtuple('SpawnSiblingRun', ['usable'])


def reconcile_alignment(prev, aligns, fitting, repeat, usable, run_width):
    """Decide what happens to the current run when a box is added.

    ``prev`` is the alignment of the current run, or ``None`` if the run has
    no box yet. ``aligns`` is the alignment of the new box. ``fitting`` is
    whether the stack accepts ``aligns`` in its active space, ``repeat``
    whether spaces are repeated. ``usable`` is the cross extent available in
    the active space and ``run_width`` the cross extent of the current run.

    Return :data:`CONTINUE_RUN`, :data:`CLOSE_LINE`, :data:`CLOSE_SPACE` or a
    :class:`SpawnSiblingRun` holding the cross extent left for the new run.

    """
    if prev is None or aligns == prev:
        return CONTINUE_RUN
    if aligns.main != prev.main:
        # A different main alignment can't share the line.
        if not fitting and repeat:
            return CLOSE_SPACE
        return CLOSE_LINE
    if aligns.cross < prev.cross:
        return CLOSE_LINE
    # The cross alignment increases, the new run shares the row.
    assert aligns.cross != Align.START, 'cross alignment increased to start'
    if aligns.cross == Align.CENTER:
        # Centered content keeps the same margin on both sides.
        return SpawnSiblingRun(usable - 2 * run_width)
    return SpawnSiblingRun(usable - run_width)


class LineRun:
    """Sequence of boxes with the same alignment.

    A line can be made of multiple runs with different alignments.

    """
    def __init__(self):
        # List of (cross offset, box) tuples.
        self.layouts = []
        # Summed cross extent and maximal main extent of the run.
        self.width = 0
        self.height = 0
        # Alignment of the boxes, set by the first box added to the run.
        self.aligns = None
        # Cross extent left by the previous runs on the same row, or None if
        # this run is the first of its row.
        self.usable = None
        # Leading soft spacing is dropped.
        self.last_spacing = HARD_SPACING

    def __repr__(self):
        return (
            f'<{type(self).__name__} {len(self.layouts)} boxes '
            f'{self.width}×{self.height}>')

    @property
    def size(self):
        """Generalized size of the run."""
        return Size(self.width, self.height)


class LineLayouter:
    """Lay out boxes into lines, and lines into spaces."""

    def __init__(self, ctx):
        self.ctx = ctx
        #: List of :class:`LayoutWarning` collected during layout.
        self.warnings = []
        self.stack = StackLayouter(
            StackContext(ctx.spaces, ctx.dirs, ctx.repeat), self.warnings)
        self.run = LineRun()

    def add(self, box, aligns):
        """Add ``box`` with its :class:`Gen2` pair of alignments."""
        prev = self.run.aligns
        fitting = self.stack.is_fitting_alignment(aligns)
        action = reconcile_alignment(
            prev, aligns, fitting, self.ctx.repeat,
            self.stack.usable().get(self.ctx.dirs.cross.axis),
            self.run.width)
        if action == CLOSE_SPACE:
            LOGGER.debug('Space break before %r, alignment changed', box)
            self.finish_space(True)
        elif action == CLOSE_LINE:
            self.finish_line()
        elif isinstance(action, SpawnSiblingRun):
            sibling = LineRun()
            sibling.usable = action.usable
            sibling.height = self.run.height
            self.finish_line()
            self.stack.add_spacing(-sibling.height, HARD)
            self.run = sibling

        if self.run.last_spacing.state == 'soft':
            self.add_cross_spacing(self.run.last_spacing.amount, HARD)

        size = box.size.generalized(self.ctx.dirs)
        if not self.usable().fits(size):
            if not self.line_is_empty():
                LOGGER.debug('Line break before %r', box)
                self.finish_line()
            # Overflowing boxes are reported by the stack when the line is
            # added, if no space is large enough.
            if not self.usable().fits(size):
                self.stack.skip_to_fitting_space(box.size)

        self.run.aligns = aligns
        self.run.layouts.append((self.run.width, box))
        self.run.width += size.width
        self.run.height = max(self.run.height, size.height)
        self.run.last_spacing = NO_SPACING

    def usable(self):
        """Generalized size still available in the line.

        This is how much more would fit before a line break is needed.

        """
        usable = self.stack.usable().generalized(self.ctx.dirs)
        if self.run.usable is not None:
            usable = usable._replace(width=self.run.usable)
        return usable._replace(width=usable.width - self.run.width)

    def add_main_spacing(self, amount, kind):
        """Finish the line and add spacing to the stack."""
        self.finish_line()
        self.stack.add_spacing(amount, kind)

    def add_cross_spacing(self, amount, kind):
        """Add spacing to the line."""
        if kind.is_hard:
            self.run.width += min(amount, self.usable().width)
            self.run.last_spacing = HARD_SPACING
        else:
            # Soft spacing is kept until a box comes, it may be replaced by
            # hard spacing.
            self.run.last_spacing = collapse(
                self.run.last_spacing, amount, kind.level)

    def set_spaces(self, spaces, replace_empty):
        """Update the layouting spaces.

        If ``replace_empty`` is true, the active space is replaced if there
        are no boxes laid out into it yet, including in the current line.
        Otherwise, the following spaces are replaced.

        """
        self.stack.set_spaces(spaces, replace_empty and self.line_is_empty())

    def set_line_spacing(self, line_spacing):
        self.ctx = self.ctx._replace(line_spacing=line_spacing)

    def remaining(self):
        """List of the spaces that are still available.

        The first space is reduced by the height of the current line, so that
        something laid out into these spaces fits in the stack.

        """
        spaces = self.stack.remaining()
        main_axis = self.ctx.dirs.main.axis
        first = spaces[0]
        spaces[0] = first._replace(size=first.size.replace_axis(
            main_axis, first.size.get(main_axis) - self.run.height))
        return spaces

    def line_is_empty(self):
        return self.run.size == Size.ZERO and not self.run.layouts

    def finish(self):
        """Finish everything and return the list of space boxes."""
        self.finish_line()
        return self.stack.finish()

    def finish_space(self, hard):
        """Finish the active space and start a new one.

        At the top level, this is a page break.

        """
        self.finish_line()
        self.stack.finish_space(hard)

    def finish_line(self):
        """Finish the active line and start a new one.

        Nothing happens when the line is empty.

        """
        if self.line_is_empty():
            return
        dirs = self.ctx.dirs
        line = Box(self.run.size.specialized(dirs))
        aligns = self.run.aligns or DEFAULT_ALIGNS
        cross_axis = dirs.cross.axis

        for offset, child in self.run.layouts:
            if dirs.cross.is_positive:
                x = offset
            else:
                x = self.run.width - offset - child.size.get(cross_axis)
            line.push(Point(x, 0).specialized(dirs), child)

        self.stack.add(line, aligns)
        self.run = LineRun()
        self.stack.add_spacing(self.ctx.line_spacing, LINE)
