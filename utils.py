import math
import re

_whitespace = re.compile(r'\s+')


def format_value(value):
    """Return a grouped-thousands, two decimal string (i.e., 1,234.50)"""
    return '{:,.2f}'.format(value)


def format_sales(value, unit='M Sales'):
    return format_value(value) + unit


def split_words(name):
    """Split a label into one word per line.

    Splits on runs of whitespace as-is, so a leading space produces an
    empty first word and the line positions below it stay put.
    """
    return _whitespace.split(name)


def coerce_weight(value):
    """Numeric weight of a leaf; anything unusable counts as zero."""
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        w = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(w) or math.isinf(w) or w < 0:
        return 0.0
    return w


def round_half_up(x):
    return math.floor(x + 0.5)
