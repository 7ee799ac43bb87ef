"""Stacking of boxes along the main axis.

The stack layouter receives finished lines and places them one after the
other along the main axis into a list of spaces. When a space is full, or
when an alignment cannot be honored in the current space, the space is
finished into a single box and the next space is started.

In a space, lines are sorted by increasing main alignment: start-aligned
lines come first, then centered ones, then end-aligned ones. The highest
alignment used so far in the space is called the *ruler*.

"""

from collections import namedtuple

from ..boxes import Box, LayoutSpace
from ..geometry import DEFAULT_ALIGNS, Align, Rect, Size
from ..logger import LOGGER, warn
from .spacing import HARD, HARD_SPACING, NO_SPACING, collapse

StackContext = namedtuple('StackContext', ['spaces', 'dirs', 'repeat'])


class Space:
    """State of the space being filled."""

    def __init__(self, index, hard, usable):
        # Index of the space in the list of spaces of the context.
        self.index = index
        # Hard spaces are kept even when they are empty.
        self.hard = hard
        # List of (box, aligns) tuples, box is None for spacing.
        self.layouts = []
        # Physical size of the content and of what is still available.
        self.size = Size.ZERO
        self.usable = usable
        self.ruler = Align.START
        self.last_spacing = HARD_SPACING
        # Main extents of the layouts, spacing included.
        self.extents = []


class StackLayouter:
    """Lay out lines along the main axis, across spaces."""

    def __init__(self, ctx, warnings=None):
        self.ctx = StackContext(list(ctx.spaces), ctx.dirs, ctx.repeat)
        assert self.ctx.spaces, 'at least one space is needed'
        self.warnings = [] if warnings is None else warnings
        self.layouts = []
        self.space = Space(0, True, self.ctx.spaces[0].usable())

    def add(self, box, aligns):
        """Add a finished box with its alignment pair."""
        # An alignment lower than the ruler doesn't fit in this space.
        if not self._update_ruler(aligns.main):
            if self._next_space() is None:
                warn(
                    self.warnings, 'alignment',
                    'Main alignment %s does not fit in the last space '
                    'and spaces are not repeated', aligns.main.name)
            else:
                LOGGER.debug(
                    'Space break caused by alignment %s', aligns.main.name)
                self.finish_space(True)
                self._update_ruler(aligns.main)

        if self.space.last_spacing.state == 'soft':
            self.add_spacing(self.space.last_spacing.amount, HARD)

        if not self.space.usable.fits(box.size):
            if not self.skip_to_fitting_space(box.size):
                warn(
                    self.warnings, 'overflow',
                    'Box of size %s×%s overflows the available space %s×%s',
                    box.width, box.height,
                    self.space.usable.width, self.space.usable.height)

        dirs = self.ctx.dirs
        size = box.size.generalized(dirs)
        self._update_metrics(size)
        self.space.layouts.append((box, aligns))
        self.space.extents.append(size.height)
        self.space.last_spacing = NO_SPACING

    def add_spacing(self, amount, kind):
        """Add spacing of ``kind`` along the main axis."""
        if kind.is_hard:
            # Spacing is reduced so that it fits, negative spacing gives room
            # back to the space.
            main_axis = self.ctx.dirs.main.axis
            amount = min(amount, self.space.usable.get(main_axis))
            self._update_metrics(Size(0, amount))
            self.space.layouts.append((None, DEFAULT_ALIGNS))
            self.space.extents.append(amount)
            self.space.last_spacing = HARD_SPACING
        else:
            self.space.last_spacing = collapse(
                self.space.last_spacing, amount, kind.level)

    def usable(self):
        """Physical size still available in the active space."""
        return self.space.usable

    def remaining(self):
        """List of the usable active space followed by the next spaces."""
        spaces = [LayoutSpace(self.space.usable).inner()]
        index = self._next_space()
        if index is not None:
            for space in self.ctx.spaces[index:]:
                spaces.append(space.inner())
        return spaces

    def set_spaces(self, spaces, replace_empty):
        """Update the layouting spaces.

        If ``replace_empty`` is true, the active space is replaced if there
        are no boxes laid out into it yet. Otherwise, the following spaces are
        replaced.

        """
        spaces = list(spaces)
        if replace_empty and self.space_is_empty():
            self.ctx.spaces[:] = spaces
            self._start_space(0, self.space.hard)
        else:
            del self.ctx.spaces[self.space.index + 1:]
            self.ctx.spaces.extend(spaces)

    def is_fitting_alignment(self, aligns):
        """Whether ``aligns`` can be used in the active space."""
        return self.space.ruler <= aligns.main

    def space_is_empty(self):
        return self.space.size == Size.ZERO and not self.space.layouts

    def space_is_last(self):
        return self.space.index == len(self.ctx.spaces) - 1

    def skip_to_fitting_space(self, size):
        """Finish the active space and move to a space where ``size`` fits.

        Return whether such a space has been found. When no space is large
        enough, or when the last space is active and spaces are not repeated,
        nothing changes.

        """
        start = self._next_space()
        if start is None:
            return False
        for index, space in enumerate(self.ctx.spaces[start:], start=start):
            if space.usable().fits(size):
                self._emit_space()
                self._start_space(index, True)
                return True
        return False

    def finish_space(self, hard):
        """Finish the active space and start the next one.

        When spaces are not repeated and the last space is finished, the last
        space is used again and an overflow is reported.

        """
        index = self._next_space()
        if index is None:
            warn(
                self.warnings, 'overflow',
                'No space left after space %d and spaces are not repeated',
                self.space.index)
            index = self.space.index
        self._emit_space()
        self._start_space(index, hard)

    def finish(self):
        """Finish everything and return the list of space boxes."""
        if self.space.hard or not self.space_is_empty():
            self._emit_space()
        return self.layouts

    def _emit_space(self):
        dirs = self.ctx.dirs
        space = self.ctx.spaces[self.space.index]
        insets = space.insets

        # Step 1: Size of the space, according to its expansion.
        usable = space.usable()
        size = Size(
            usable.width if space.expansion.horizontal
            else self.space.size.width,
            usable.height if space.expansion.vertical
            else self.space.size.height)

        # Step 2: Forward pass. Create a bounding rectangle for each layout in
        # which it is aligned, then shrink it for the following layouts.
        bound = Rect(0, 0, size.width, size.height)
        bounds = []
        for extent in self.space.extents:
            bounds.append(bound.copy())
            bound.cut(dirs.main, Align.START, extent)

        # Step 3: Backward pass. Reduce the bounding rectangles of the
        # previous layouts by what is taken by the following ones.
        following = 0
        for extent, bound in zip(
                reversed(self.space.extents), reversed(bounds)):
            bound.cut(dirs.main, Align.END, -following)
            following += extent

        # Step 4: Align each box in its bounding rectangle.
        finished = Box(Size(
            size.width + insets.width, size.height + insets.height))
        for (child, aligns), bound in zip(self.space.layouts, bounds):
            if child is None:
                continue
            area = bound.size.generalized(dirs)
            local = (
                area.anchor(aligns, dirs) -
                child.size.generalized(dirs).anchor(aligns, dirs))
            position = bound.origin + local.specialized(dirs)
            finished.push(
                (position.x + insets.left, position.y + insets.top), child)

        LOGGER.debug(
            'Space %d finished with %d boxes', len(self.layouts),
            len(finished.children))
        self.layouts.append(finished)

    def _start_space(self, index, hard):
        self.space = Space(index, hard, self.ctx.spaces[index].usable())

    def _next_space(self):
        # None when the list is exhausted and the last space is not repeated.
        if not self.space_is_last():
            return self.space.index + 1
        if self.ctx.repeat:
            return self.space.index
        return None

    def _update_ruler(self, align):
        allowed = self.space.ruler <= align
        if allowed:
            self.space.ruler = align
        return allowed

    def _update_metrics(self, added):
        dirs = self.ctx.dirs
        size = self.space.size.generalized(dirs)
        size = Size(max(size.width, added.width), size.height + added.height)
        self.space.size = size.specialized(dirs)
        main_axis = dirs.main.axis
        self.space.usable = self.space.usable.replace_axis(
            main_axis, self.space.usable.get(main_axis) - added.height)
