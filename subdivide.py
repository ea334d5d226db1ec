from hierarchy import build
from logger import logger
from utils import round_half_up

"""
the squarify module (https://github.com/laserson/squarify) has no notion of
nesting or padding, so the layout is done here: each parent is inset by the
padding, its children are tiled into what is left, and every child is
shrunk by half the padding so siblings end up one padding apart.
"""

PHI = (1 + 5 ** 0.5) / 2


def compute_rectangles(tree, width, height, padding=1, round_coords=True):
    """build the hierarchy for `tree` and lay it out on a width x height canvas"""
    h = build(tree)
    treemap(h, width, height, padding=padding, round_coords=round_coords)
    return h


def treemap(h, width, height, padding=1, round_coords=True):
    # this function has to handle 2 cases per node:
    #  - leaf: inset its box, done
    #  - parent: inset its box, inset again for the outer padding, tile children
    #
    # parents always come before their children in h.nodes
    root = h.root
    root.x0, root.y0, root.x1, root.y1 = 0, 0, width, height

    for node in h.nodes:
        position_node(h, node, padding)

    if round_coords:
        for node in h.nodes:
            node.x0 = round_half_up(node.x0)
            node.y0 = round_half_up(node.y0)
            node.x1 = round_half_up(node.x1)
            node.y1 = round_half_up(node.y1)

    logger.debug('laid out %d nodes on %sx%s', len(h), width, height)
    return h


def position_node(h, node, padding):
    p = 0 if node.depth == 0 else padding / 2
    x0, x1 = _inset(node.x0, node.x1, p)
    y0, y1 = _inset(node.y0, node.y1, p)
    node.x0, node.y0, node.x1, node.y1 = x0, y0, x1, y1

    if node.children:
        # outer padding, less the half-padding each child will take off itself
        q = padding - padding / 2
        x0, x1 = _inset(x0, x1, q)
        y0, y1 = _inset(y0, y1, q)
        squarify(h.children(node), node.value, x0, y0, x1, y1)


def _inset(lo, hi, p):
    lo, hi = lo + p, hi - p
    if hi < lo:
        lo = hi = (lo + hi) / 2
    return lo, hi


def squarify(nodes, value, x0, y0, x1, y1, ratio=PHI):
    """core geometric subdivision algorithm
    given:
    - a list of nodes, each with a `value`, already sorted largest first
    - their total value
    - bounding rectangle
    do this:
    - fill a row with nodes while the worst aspect ratio in it keeps improving
    - lay the row along the short side of the remaining rectangle
      - stacked left to right (dice) if the rectangle is tall
      - stacked top to bottom (slice) if it is wide
    - repeat on what is left of the rectangle
    returns the rows as (nodes, row_value, is_dice)
    """
    rows = []
    n = len(nodes)
    i0 = i1 = 0

    while i0 < n:
        dx = x1 - x0
        dy = y1 - y0

        # find the next non-empty node
        while True:
            sum_value = nodes[i1].value
            i1 += 1
            if sum_value or i1 >= n:
                break

        min_value = max_value = sum_value
        alpha = _alpha(dx, dy, value, ratio)
        beta = sum_value * sum_value * alpha
        min_ratio = _worst(beta, min_value, max_value)

        # keep adding nodes while the aspect ratio maintains or improves
        while i1 < n:
            node_value = nodes[i1].value
            sum_value += node_value
            min_value = min(min_value, node_value)
            max_value = max(max_value, node_value)
            beta = sum_value * sum_value * alpha
            new_ratio = _worst(beta, min_value, max_value)
            if new_ratio > min_ratio:
                sum_value -= node_value
                break
            min_ratio = new_ratio
            i1 += 1

        row = nodes[i0:i1]
        is_dice = dx < dy
        rows.append((row, sum_value, is_dice))
        if is_dice:
            y = y0 + dy * sum_value / value if value else y1
            dice_row(row, sum_value, x0, y0, x1, y)
            y0 = y
        else:
            x = x0 + dx * sum_value / value if value else x1
            slice_row(row, sum_value, x0, y0, x, y1)
            x0 = x
        value -= sum_value
        i0 = i1

    return rows


def _alpha(dx, dy, value, ratio):
    if dx <= 0 or dy <= 0 or value <= 0:
        return float('inf')
    return max(dy / dx, dx / dy) / (value * ratio)


def _worst(beta, min_value, max_value):
    # worst aspect ratio in a row; degenerate rows accept anything
    if not 0 < beta < float('inf') or min_value <= 0:
        return float('inf')
    return max(max_value / beta, beta / min_value)


def dice_row(nodes, value, x0, y0, x1, y1):
    """split [x0, x1] among nodes by value, full height each"""
    k = (x1 - x0) / value if value else 0
    for node in nodes:
        node.y0, node.y1 = y0, y1
        node.x0 = x0
        x0 += node.value * k
        node.x1 = x0


def slice_row(nodes, value, x0, y0, x1, y1):
    """split [y0, y1] among nodes by value, full width each"""
    k = (y1 - y0) / value if value else 0
    for node in nodes:
        node.x0, node.x1 = x0, x1
        node.y0 = y0
        y0 += node.value * k
        node.y1 = y0
