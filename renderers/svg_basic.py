"""
Basic static SVG renderer for the sales treemap.

Generates a self-contained SVG document: one group per leaf with a filled
rectangle, a clip region, a word-per-line label and a <title> tooltip.
No JavaScript; hovering a cell shows its tooltip.
"""

import html

from .colormap import fill_opacity
from logger import logger

LINE_X = 3
FIRST_LINE_EM = 1.2
LINE_HEIGHT_EM = 1.1


def render(cells, width, height, output_path):
    """Write the SVG document for `cells` to `output_path`."""
    svg_content = generate_svg(cells, width, height)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(svg_content)

    logger.info(f'SVG saved to: {output_path}')
    return output_path


def generate_svg(cells, width, height):
    """Generate a static SVG document with rectangles and text labels."""
    body = render_cells(cells)

    return f'''<svg xmlns="http://www.w3.org/2000/svg"
     viewBox="0 0 {width} {height}" width="{width}" height="{height}"
     style="max-width: 100%; height: auto; font: 10px sans-serif;">
{body}
</svg>'''


def line_y(i):
    return f'{round(FIRST_LINE_EM + i * LINE_HEIGHT_EM, 4):g}em'


def render_cells(cells):
    """Render a list of cell dicts to SVG groups."""
    parts = []

    for cell in cells:
        w = cell['width']
        h = cell['height']
        clip_id = cell['clip_id']

        parts.append(f'  <g transform="translate({cell["x0"]},{cell["y0"]})">')
        parts.append(f'    <title>{html.escape(cell["tooltip"])}</title>')
        parts.append(
            f'    <rect fill="{cell["color"]}" fill-opacity="{fill_opacity}"'
            f' width="{w}" height="{h}"/>'
        )
        parts.append(
            f'    <clipPath id="{clip_id}"><rect width="{w}" height="{h}"/></clipPath>'
        )

        # Text: one tspan per word, left-anchored, clipped to the cell
        tspans = []
        for i, (word, opacity) in enumerate(cell['lines']):
            fade = f' fill-opacity="{opacity}"' if opacity is not None else ''
            tspans.append(
                f'<tspan x="{LINE_X}" y="{line_y(i)}"{fade}'
                f' style="text-anchor: start;" transform="rotate(0)">'
                f'{html.escape(word)}</tspan>'
            )
        parts.append(
            f'    <text clip-path="url(#{clip_id})">{"".join(tspans)}</text>'
        )
        parts.append('  </g>')

    return '\n'.join(parts)
