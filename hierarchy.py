"""
flat, index-based view of a TreeNode tree for layout.

every node gets a record in `Hierarchy.nodes` (pre-order, root at index 0).
records refer to each other by index only, so the parent link is a number,
not an object reference.
"""
from utils import coerce_weight


class HNode(object):
    __slots__ = ('index', 'name', 'value', 'depth', 'parent', 'children', 'data',
                 'x0', 'y0', 'x1', 'y1')

    def __init__(self, index, data, depth, parent):
        self.index = index
        self.name = data.name
        self.data = data
        self.depth = depth
        self.parent = parent
        self.children = []
        self.value = 0.0
        self.x0 = self.y0 = self.x1 = self.y1 = 0

    @property
    def rect(self):
        return (self.x0, self.y0, self.x1, self.y1)

    def __repr__(self):
        return '<HNode %d %s: %g>' % (self.index, self.name, self.value)


class Hierarchy(object):
    def __init__(self, nodes):
        self.nodes = nodes

    @property
    def root(self):
        return self.nodes[0]

    def __len__(self):
        return len(self.nodes)

    def __getitem__(self, index):
        return self.nodes[index]

    def children(self, node):
        return [self.nodes[i] for i in node.children]

    def parent(self, node):
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def leaves(self):
        """leaf records in pre-order (after sorting)"""
        out = []
        stack = [0]
        while stack:
            node = self.nodes[stack.pop()]
            if node.children:
                stack.extend(reversed(node.children))
            else:
                out.append(node)
        return out

    def ancestors(self, node):
        """node, its parent, ..., root"""
        out = [node]
        while node.parent is not None:
            node = self.nodes[node.parent]
            out.append(node)
        return out

    def top_level_ancestor(self, node):
        """the ancestor at depth 1 (a direct child of the root).

        the root itself is returned for the root.
        """
        while node.depth > 1:
            node = self.nodes[node.parent]
        return node


def build(tree):
    """index `tree`, sum leaf weights upward, sort children by weight.

    internal nodes take only the sum of their children, whatever their own
    `value` says. ties keep their input order.
    """
    nodes = []

    def visit(data, depth, parent):
        node = HNode(len(nodes), data, depth, parent)
        nodes.append(node)
        for child in data.children:
            node.children.append(visit(child, depth + 1, node.index))
        return node.index

    visit(tree, 0, None)

    # post-order is the reverse of pre-order
    for node in reversed(nodes):
        if node.children:
            node.value = sum(nodes[i].value for i in node.children)
        else:
            node.value = coerce_weight(node.data.value)

    for node in nodes:
        node.children.sort(key=lambda i: -nodes[i].value)

    return Hierarchy(nodes)
