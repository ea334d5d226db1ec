"""
load the sales tree: one async fetch over http (or one read from disk),
parsed into TreeNode objects.

no retries, no cache, no timeout policy of our own. either the whole
document comes back or an exception does.
"""
import json

import httpx

from logger import logger
from utils import coerce_weight, format_value

DATA_URL = 'https://cdn.freecodecamp.org/testable-projects-fcc/data/tree_map/video-game-sales-data.json'


class DataSourceError(Exception):
    pass


class NetworkError(DataSourceError):
    """fetch failed: transport error or http error status"""


class ParseError(DataSourceError):
    """response body is not a JSON object"""


class TreeNode(object):
    def __init__(self, name, value=None, children=None):
        self.name = name
        self.value = value
        self.children = children or []

    @property
    def is_leaf(self):
        return not self.children

    def __str__(self):
        info_list = []
        if self.children:
            info_list.append('%d children' % len(self.children))
        else:
            info_list.append(format_value(coerce_weight(self.value)))
        return '<TreeNode %s: %s>' % (self.name, ', '.join(info_list))

    def __repr__(self):
        return self.__str__()


def tree_to_dict(t):
    d = {'name': t.name}
    if not t.is_leaf:
        d['children'] = [tree_to_dict(c) for c in t.children]
    else:
        d['value'] = t.value
    return d


def dict_to_tree(d):
    if not isinstance(d, dict):
        raise ParseError('expected a JSON object for a tree node, got %s' % type(d).__name__)
    children = d.get('children')
    if not isinstance(children, list):
        children = []
    name = d.get('name', '')
    return TreeNode(
        '' if name is None else str(name),
        d.get('value'),
        [dict_to_tree(c) for c in children],
    )


def parse_document(text):
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ParseError('invalid JSON: %s' % exc) from exc
    if not isinstance(data, dict):
        raise ParseError('expected a JSON object at the top level')
    return dict_to_tree(data)


async def load(url, client=None):
    """fetch url once and return the root TreeNode"""
    logger.info('fetching %s', url)
    try:
        if client is None:
            async with httpx.AsyncClient() as own_client:
                response = await own_client.get(url)
        else:
            response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise NetworkError('failed to fetch %s: %s' % (url, exc)) from exc

    tree = parse_document(response.text)
    logger.info('loaded %s', tree)
    return tree


def load_file(path):
    """load a previously saved document from disk"""
    try:
        # json.loads decodes the bytes itself, a bad encoding is a ParseError
        with open(path, 'rb') as f:
            raw = f.read()
    except OSError as exc:
        raise DataSourceError('failed to read %s: %s' % (path, exc)) from exc
    tree = parse_document(raw)
    logger.info('loaded %s from %s', tree, path)
    return tree


def save_file(tree, path):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(tree_to_dict(tree), f)
    logger.info('saved data to %s', path)


class DataLoader(object):
    """Loading -> Ready(tree) | Failed(error), one transition only.

    `source` is an awaitable factory (e.g. `lambda: load(url)`); `on_ready`
    is called with the tree when, and only when, the load succeeds.
    """

    LOADING = 'loading'
    READY = 'ready'
    FAILED = 'failed'

    def __init__(self, source, on_ready=None):
        self.source = source
        self.on_ready = on_ready
        self.state = self.LOADING
        self.tree = None
        self.error = None

    async def run(self):
        if self.state != self.LOADING:
            raise RuntimeError('loader already finished (%s)' % self.state)
        try:
            tree = await self.source()
        except DataSourceError as exc:
            self.state = self.FAILED
            self.error = exc
            logger.error('%s', exc)
            return self.state

        self.tree = tree
        self.state = self.READY
        if self.on_ready is not None:
            self.on_ready(tree)
        return self.state
