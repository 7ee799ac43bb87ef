"""Line breaking and inline arrangement of sized boxes.

The public API is what is accessible from this "root" packages without
importing sub-modules.

"""

VERSION = __version__ = '0.1'

#: Default values for :func:`layouter` options.
#:
#: :param str main_direction:
#:     Direction in which lines are stacked, ``ttb`` or ``btt`` for
#:     horizontal lines, ``ltr`` or ``rtl`` for vertical lines.
#: :param str cross_direction:
#:     Direction in which boxes are placed in a line, on the other axis.
#: :param bool repeat:
#:     Whether the last space is used again when the list of spaces is used
#:     up, and whether oversized content skips to a space where it fits.
#: :type line_spacing: :obj:`float` or :obj:`str`
#: :param line_spacing:
#:     Spacing between lines, in CSS pixels or as a CSS length.
DEFAULT_OPTIONS = {
    'main_direction': 'ttb',
    'cross_direction': 'ltr',
    'repeat': True,
    'line_spacing': 0,
}

__all__ = [
    'DEFAULT_OPTIONS', 'VERSION', 'Align', 'Box', 'Dir', 'Gen2',
    'LayoutSpace', 'LayoutWarning', 'LineContext', 'LineLayouter', 'Point',
    'Size', '__version__', 'layouter']


# Import after setting the version, as the version is used in other modules
from .logger import LOGGER, LayoutWarning  # noqa: I001, E402
from .geometry import Align, Dir, Gen2, Point, Size  # noqa: E402
from .boxes import Box, LayoutSpace  # noqa: E402
from .layout import LineContext, LineLayouter  # noqa: E402
from .options import line_context_from_options  # noqa: E402


def layouter(spaces, **options):
    """Return a :class:`LineLayouter` for ``spaces``.

    ``spaces`` is a list of :class:`LayoutSpace` or of ``(width, height)``
    sizes, ``options`` override :data:`DEFAULT_OPTIONS`.

    """
    return LineLayouter(line_context_from_options(spaces, **options))
