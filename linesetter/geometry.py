"""Geometry and alignment values.

Layout happens in a *generalized* frame where the ``main`` axis is the one
along which lines are stacked and the ``cross`` axis is the one along which
boxes are placed in a line. A pair of :class:`Dir` values, the direction of
each generalized axis, tells how this frame maps to the *physical* frame of
widths and heights.

In a generalized :class:`Size` or :class:`Point`, ``width`` and ``x`` are
the cross extent and position, ``height`` and ``y`` are the main extent and
position.

"""

from collections import namedtuple
from enum import Enum, IntEnum


class Axis(Enum):
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'


class Dir(Enum):
    """Direction in which an axis is traversed."""
    LTR = 'ltr'
    RTL = 'rtl'
    TTB = 'ttb'
    BTT = 'btt'

    @property
    def axis(self):
        if self in (Dir.LTR, Dir.RTL):
            return Axis.HORIZONTAL
        return Axis.VERTICAL

    @property
    def is_positive(self):
        return self in (Dir.LTR, Dir.TTB)

    @property
    def factor(self):
        """``1`` for positive directions, ``-1`` for negative ones."""
        return 1 if self.is_positive else -1

    @property
    def inverse(self):
        return {
            Dir.LTR: Dir.RTL, Dir.RTL: Dir.LTR,
            Dir.TTB: Dir.BTT, Dir.BTT: Dir.TTB,
        }[self]


class Align(IntEnum):
    """Alignment along one generalized axis.

    Alignments are ordered: in a line, runs are sorted by increasing cross
    alignment, and in a space, lines are sorted by increasing main alignment.

    """
    START = 0
    CENTER = 1
    END = 2

    def apply(self, direction, length):
        """Position of the anchor of ``length`` along ``direction``."""
        if self == Align.CENTER:
            return length / 2
        if (self == Align.START) == direction.is_positive:
            return 0
        return length


#: Generalized pair, used for directions and alignments.
Gen2 = namedtuple('Gen2', ['main', 'cross'])

#: Top-down lines made of left-to-right boxes.
DEFAULT_DIRS = Gen2(Dir.TTB, Dir.LTR)
DEFAULT_ALIGNS = Gen2(Align.START, Align.START)


class Size(namedtuple('Size', ['width', 'height'])):
    """Physical or generalized size."""

    def generalized(self, dirs):
        """Convert from the physical frame to the generalized frame."""
        if dirs.main.axis == Axis.HORIZONTAL:
            return Size(self.height, self.width)
        return self

    # Swapping the axes is an involution.
    specialized = generalized

    def get(self, axis):
        """Physical extent along ``axis``."""
        return self.width if axis == Axis.HORIZONTAL else self.height

    def replace_axis(self, axis, value):
        if axis == Axis.HORIZONTAL:
            return self._replace(width=value)
        return self._replace(height=value)

    def fits(self, other):
        """Whether ``other`` is not larger than this size on both axes."""
        return self.width >= other.width and self.height >= other.height

    def anchor(self, aligns, dirs):
        """Generalized anchor point of this generalized size."""
        return Point(
            aligns.cross.apply(dirs.cross, self.width),
            aligns.main.apply(dirs.main, self.height))


Size.ZERO = Size(0, 0)


class Point(namedtuple('Point', ['x', 'y'])):
    """Physical or generalized position."""

    def generalized(self, dirs):
        if dirs.main.axis == Axis.HORIZONTAL:
            return Point(self.y, self.x)
        return self

    specialized = generalized

    def __add__(self, other):
        return Point(self.x + other[0], self.y + other[1])

    def __sub__(self, other):
        return Point(self.x - other[0], self.y - other[1])


Point.ZERO = Point(0, 0)


class Margins(namedtuple('Margins', ['left', 'top', 'right', 'bottom'])):
    @property
    def width(self):
        return self.left + self.right

    @property
    def height(self):
        return self.top + self.bottom


Margins.ZERO = Margins(0, 0, 0, 0)


class Rect:
    """Mutable physical rectangle given by its four sides."""

    def __init__(self, left, top, right, bottom):
        self.left, self.top, self.right, self.bottom = left, top, right, bottom

    def copy(self):
        return Rect(self.left, self.top, self.right, self.bottom)

    @property
    def origin(self):
        return Point(self.left, self.top)

    @property
    def size(self):
        return Size(self.right - self.left, self.bottom - self.top)

    def side(self, direction, align):
        """Name of the side where ``direction`` starts or ends."""
        if align == Align.END:
            # Directions end where their inverse starts.
            direction = direction.inverse
        else:
            assert align == Align.START
        return {
            Dir.LTR: 'left', Dir.RTL: 'right',
            Dir.TTB: 'top', Dir.BTT: 'bottom',
        }[direction]

    def cut(self, direction, align, length):
        """Move the ``align`` side by ``length`` along ``direction``."""
        side = self.side(direction, align)
        setattr(self, side, getattr(self, side) + direction.factor * length)
