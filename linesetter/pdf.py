"""Debug PDF export of laid out spaces.

Each space box becomes a page, each box of the tree is drawn as a stroked
rectangle. Lines and their content get different colors, so that line breaks
and alignments can be checked at a glance. This is a debugging aid, the
layouters never write files.

"""

import io

import pydyf

from . import VERSION
from .logger import LOGGER

# Stroke colors by depth in the box tree: space, line, content.
COLORS = ((0.6, 0.6, 0.6), (0.2, 0.4, 0.9), (0.9, 0.2, 0.2))


def draw_space(stream, space):
    """Draw the boxes of ``space`` on ``stream``, top-left corner first."""
    def draw(box, x, y, depth):
        stream.set_color_rgb(*COLORS[min(depth, len(COLORS) - 1)], stroke=True)
        stream.rectangle(x, y, box.width, box.height)
        stream.stroke()
        for (child_x, child_y), child in box.children:
            draw(child, x + child_x, y + child_y, depth + 1)

    stream.push_state()
    stream.set_line_width(0.5)
    draw(space, 0, 0, 0)
    stream.pop_state()


def generate_pdf(spaces, zoom=1):
    """Return a :class:`pydyf.PDF` with one page per space box."""
    # 0.75 = 72 PDF point per inch / 96 CSS pixel per inch
    scale = zoom * 0.75

    pdf = pydyf.PDF()
    for space in spaces:
        stream = pydyf.Stream()
        # Draw from the top-left corner
        stream.set_matrix(scale, 0, 0, -scale, 0, space.height * scale)
        draw_space(stream, space)
        pdf.add_object(stream)
        pdf.add_page(pydyf.Dictionary({
            'Type': '/Page',
            'Parent': pdf.pages.reference,
            'MediaBox': pydyf.Array(
                [0, 0, space.width * scale, space.height * scale]),
            'Contents': stream.reference,
        }))
    pdf.info['Producer'] = pydyf.String(f'linesetter {VERSION}')
    LOGGER.debug('PDF generated with %d pages', len(spaces))
    return pdf


def write_pdf(spaces, target=None, zoom=1):
    """Draw the ``spaces`` returned by a layouter in a PDF file.

    :param target:
        A filename where the PDF file is generated, a file object, or
        :obj:`None`.
    :param float zoom:
        The zoom factor in PDF units per CSS units.
    :returns:
        The PDF as :obj:`bytes` if ``target`` is not provided or
        :obj:`None`, otherwise :obj:`None` (the PDF is written to
        ``target``).

    """
    pdf = generate_pdf(spaces, zoom)

    if target is None:
        output = io.BytesIO()
        pdf.write(output, pdf.version)
        return output.getvalue()

    if hasattr(target, 'write'):
        pdf.write(target, pdf.version)
    else:
        with open(target, 'wb') as fd:
            pdf.write(fd, pdf.version)
