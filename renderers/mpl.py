import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .colormap import fill_opacity
from logger import logger

FONT_SIZE = 10  # px, same as the svg
LINE_X = 3


def render(cells, width, height, output_path, dpi=100):
    """draw the cells with matplotlib and save to output_path (format from extension)"""
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)  # svg coordinates, y grows downward
    ax.set_axis_off()

    # points per canvas unit, so labels keep the svg's proportions
    font_pt = FONT_SIZE * 72.0 / dpi

    for cell in cells:
        x = cell['x0']
        y = cell['y0']
        dx = cell['width']
        dy = cell['height']
        rect = Rectangle((x, y), dx, dy, facecolor=cell['color'], alpha=fill_opacity,
                         linewidth=0)
        ax.add_patch(rect)

        for i, (word, opacity) in enumerate(cell['lines']):
            text = ax.text(x + LINE_X, y + FONT_SIZE * (1.2 + i * 1.1), word,
                           fontsize=font_pt, ha='left', va='baseline',
                           alpha=1.0 if opacity is None else opacity)
            text.set_clip_path(rect)

    fig.savefig(output_path, dpi=dpi)
    plt.close(fig)

    logger.info(f'image saved to: {output_path}')
    return output_path
