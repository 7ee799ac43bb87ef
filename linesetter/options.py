"""Parse layout options.

Lengths, directions and alignments can be given as Python values or as CSS
strings such as ``'12pt'``, ``'rtl'`` or ``'end center'``. Strings are
tokenized by tinycss2.

"""

import tinycss2

from .boxes import LayoutSpace
from .geometry import Align, Dir, Gen2
from .layout.line import LineContext

# How many CSS pixels is one <unit>?
# https://www.w3.org/TR/CSS21/syndata.html#length-units
LENGTHS_TO_PIXELS = {
    'px': 1,
    'pt': 1 / 0.75,
    'pc': 16,
    'in': 96,
    'cm': 96 / 2.54,
    'mm': 96 / 25.4,
    'q': 96 / 25.4 / 4,
}

DIRECTIONS = {direction.value: direction for direction in Dir}
ALIGNMENTS = {align.name.lower(): align for align in Align}


def _tokens(string):
    return [
        token for token in tinycss2.parse_component_value_list(string)
        if token.type not in ('whitespace', 'comment')]


def parse_length(value):
    """Return the number of CSS pixels of ``value``.

    ``value`` is a number, or a string with a CSS dimension using an absolute
    length unit.

    """
    if isinstance(value, (int, float)):
        return value
    token = tinycss2.parse_one_component_value(value)
    if token.type == 'dimension':
        unit = token.unit.lower()
        if unit in LENGTHS_TO_PIXELS:
            return token.value * LENGTHS_TO_PIXELS[unit]
    elif token.type == 'number' and token.value == 0:
        return 0
    raise ValueError(f'Invalid length: {value!r}')


def parse_direction(value):
    """Return the :class:`Dir` for a direction or a direction keyword."""
    if isinstance(value, Dir):
        return value
    tokens = _tokens(value)
    if len(tokens) == 1 and tokens[0].type == 'ident':
        keyword = tokens[0].lower_value
        if keyword in DIRECTIONS:
            return DIRECTIONS[keyword]
    raise ValueError(f'Invalid direction: {value!r}')


def parse_alignment(value):
    """Return the ``Gen2(main, cross)`` alignment pair of ``value``.

    ``value`` is an alignment pair, or a string with one or two keywords among
    ``start``, ``center`` and ``end``. A single keyword is used for both
    axes, two keywords are the main and the cross alignments.

    """
    if isinstance(value, Gen2):
        return value
    keywords = []
    for token in _tokens(value):
        if token.type != 'ident' or token.lower_value not in ALIGNMENTS:
            raise ValueError(f'Invalid alignment: {value!r}')
        keywords.append(ALIGNMENTS[token.lower_value])
    if len(keywords) == 1:
        return Gen2(keywords[0], keywords[0])
    elif len(keywords) == 2:
        return Gen2(*keywords)
    raise ValueError(f'Invalid alignment: {value!r}')


def line_context_from_options(spaces, **options):
    """Build a :class:`LineContext` for ``spaces``.

    ``spaces`` is a list of :class:`LayoutSpace` or of ``(width, height)``
    sizes. ``options`` override the values of :data:`DEFAULT_OPTIONS`.

    """
    from . import DEFAULT_OPTIONS

    unknown = set(options) - set(DEFAULT_OPTIONS)
    if unknown:
        raise ValueError(f'Unknown options: {", ".join(sorted(unknown))}')
    new_options = DEFAULT_OPTIONS.copy()
    new_options.update(options)
    options = new_options

    dirs = Gen2(
        parse_direction(options['main_direction']),
        parse_direction(options['cross_direction']))
    if dirs.main.axis == dirs.cross.axis:
        raise ValueError(
            f'Main direction {dirs.main.value} and cross direction '
            f'{dirs.cross.value} are on the same axis')

    spaces = [
        space if isinstance(space, LayoutSpace) else LayoutSpace(space)
        for space in spaces]
    if not spaces:
        raise ValueError('At least one space is needed')

    return LineContext(
        dirs, spaces, bool(options['repeat']),
        parse_length(options['line_spacing']))
