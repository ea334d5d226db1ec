"""
turn a laid-out hierarchy into drawable cells, one per leaf.

a cell is a plain dict, the same shape every renderer consumes:
    index, x0, y0, x1, y1, width, height  - rounded leaf rectangle
    name, value, group                    - leaf label, weight, depth-1 ancestor name
    color, clip_id                        - fill color, id of the clip region
    lines                                 - [(word, opacity or None), ...]
    tooltip                               - breadcrumb + formatted value
"""
from logger import logger
from renderers.colormap import OrdinalScale
from subdivide import compute_rectangles
from utils import format_sales, split_words

WIDTH = 1154
HEIGHT = 654
PADDING = 1

BREADCRUMB_SEPARATOR = ' → '
LAST_LINE_OPACITY = 0.7


def label_lines(name):
    words = split_words(name)
    return [(w, LAST_LINE_OPACITY if i == len(words) - 1 else None)
            for i, w in enumerate(words)]


def breadcrumb(h, node):
    return BREADCRUMB_SEPARATOR.join(n.name for n in reversed(h.ancestors(node)))


def tooltip(h, node):
    return '%s\n%s' % (breadcrumb(h, node), format_sales(node.value))


def compute_cells(tree, width=WIDTH, height=HEIGHT, padding=PADDING):
    h = compute_rectangles(tree, width, height, padding=padding)
    color = OrdinalScale(c.name for c in tree.children)

    cells = []
    for i, leaf in enumerate(h.leaves()):
        group = h.top_level_ancestor(leaf)
        cell = {
            'index': i,
            'x0': leaf.x0,
            'y0': leaf.y0,
            'x1': leaf.x1,
            'y1': leaf.y1,
            'width': leaf.x1 - leaf.x0,
            'height': leaf.y1 - leaf.y0,
            'name': leaf.name,
            'value': leaf.value,
            'group': group.name,
            'color': color(group.name),
            'clip_id': 'clip-%d' % i,
            'lines': label_lines(leaf.name),
            'tooltip': tooltip(h, leaf),
        }
        logger.trace('cell %d: %s %s', i, leaf.name, leaf.rect)
        cells.append(cell)

    logger.debug('%d cells in %d groups', len(cells), len(color.domain))
    return cells
