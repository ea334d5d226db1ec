# tableau10, one color per top-level group
colormap = [
    "#4e79a7",  # blue
    "#f28e2c",  # orange
    "#e15759",  # red
    "#76b7b2",  # teal
    "#59a14f",  # green
    "#edc949",  # yellow
    "#af7aa1",  # purple
    "#ff9da7",  # pink
    "#9c755f",  # brown
    "#bab0ab",  # gray
]

fill_opacity = 0.6


class OrdinalScale(object):
    """map names to palette entries in first-seen order, cycling the palette"""

    def __init__(self, domain=(), palette=None):
        self.palette = list(palette or colormap)
        self.index = {}
        for name in domain:
            self._add(name)

    def _add(self, name):
        if name not in self.index:
            self.index[name] = len(self.index)
        return self.index[name]

    @property
    def domain(self):
        return list(self.index)

    def __call__(self, name):
        return self.palette[self._add(name) % len(self.palette)]
