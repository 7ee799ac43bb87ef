"""Laid out boxes and the spaces they are laid out into.

A :class:`Box` is an already sized rectangle. Boxes given to the line
layouter are usually leaves (words, inline elements), the layouters then
nest them into line boxes and space boxes, each child being stored with its
position relative to its parent.

"""

from collections import namedtuple

from .geometry import Margins, Point, Size


class Box:
    """Sized rectangle with positioned children."""

    def __init__(self, size, children=None, label=None):
        self.size = Size(*size)
        self.children = [
            (Point(*position), child) for position, child in children or ()]
        # Opaque payload set by callers, never used by layouters.
        self.label = label

    def __repr__(self):
        label = '' if self.label is None else f' {self.label!r}'
        return (
            f'<{type(self).__name__}{label} '
            f'{self.size.width}×{self.size.height}>')

    @property
    def width(self):
        return self.size.width

    @property
    def height(self):
        return self.size.height

    def push(self, position, child):
        """Add ``child`` at ``position``, relative to this box."""
        self.children.append((Point(*position), child))

    def descendants(self, position=Point.ZERO):
        """A flat generator of ``(absolute position, box)`` for the tree."""
        yield position, self
        for child_position, child in self.children:
            yield from child.descendants(position + child_position)


#: Whether a finished space box takes the whole usable size on each physical
#: axis, or only the size of its content.
Expansion = namedtuple('Expansion', ['horizontal', 'vertical'])


class LayoutSpace(namedtuple('LayoutSpace', ['size', 'insets', 'expansion'])):
    """Bounded region where boxes are laid out, such as a page or a column."""

    def __new__(cls, size, insets=Margins.ZERO, expansion=Expansion(True, True)):
        return super().__new__(
            cls, Size(*size), Margins(*insets), Expansion(*expansion))

    def usable(self):
        """Size available for content, insets excluded."""
        return Size(
            self.size.width - self.insets.width,
            self.size.height - self.insets.height)

    def inner(self):
        """Space with the usable size, no insets and no expansion."""
        return LayoutSpace(self.usable(), Margins.ZERO, Expansion(False, False))
