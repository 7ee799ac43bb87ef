"""Hard and soft spacing.

Hard spacing is always inserted. Soft spacing is kept pending and only
inserted when another box follows it. Adjacent soft spacings collapse: the
one with the lowest level wins, like collapsing margins. A hard spacing
replaces a pending soft one.

"""

from collections import namedtuple


class SpacingKind(namedtuple('SpacingKind', ['level'])):
    """Kind of a spacing request, hard when ``level`` is ``None``."""

    @property
    def is_hard(self):
        return self.level is None

    @classmethod
    def soft(cls, level):
        assert level is not None
        return cls(level)


HARD = SpacingKind(None)
PARAGRAPH = SpacingKind.soft(1)
LINE = SpacingKind.soft(2)
WORD = SpacingKind.soft(1)


#: State of the last spacing of a line run or of a space. ``state`` is
#: ``'none'`` after a box, ``'hard'`` after a hard spacing, or ``'soft'``
#: while a soft spacing of ``amount`` and ``level`` is pending.
PendingSpacing = namedtuple('PendingSpacing', ['state', 'amount', 'level'])

NO_SPACING = PendingSpacing('none', 0, None)
HARD_SPACING = PendingSpacing('hard', 0, None)


def soft_spacing(amount, level):
    return PendingSpacing('soft', amount, level)


def collapse(pending, amount, level):
    """Return the pending spacing after a soft request.

    The request wins when nothing is pending, or when a soft spacing with a
    strictly higher level is pending. Otherwise it is dropped.

    """
    if pending.state == 'none' or (
            pending.state == 'soft' and level < pending.level):
        return soft_spacing(amount, level)
    return pending
