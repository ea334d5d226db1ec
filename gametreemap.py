#!/usr/bin/env python3
"""
gametreemap [options]
options:  optional
- --file=pth        # load a saved document instead of fetching
- --save=pth        # save the fetched document
- --output=pth      # html page to write (default from config)
- --svg=pth         # also write the bare svg chart
- --png=pth         # also draw the chart with matplotlib
- --width/--height  # canvas size
- --serve           # serve the page locally and open it in a browser
- --port=N          # port for --serve
- --config=pth      # config file, default ~/.config/gametreemap.json
- -v, -vv           # debug / trace logging
- --log-file=pth    # copy of the log, without colors
"""
import argparse
import asyncio
import copy
import json
import os
import sys

from cells import compute_cells
from datasource import DATA_URL, DataLoader, load, load_file, save_file
from logger import logger, set_verbosity
from renderers import mpl, page, svg_basic

DEFAULT_CONFIG = {
    'svg-renderer': {
        'width': 1154,
        'height': 654,
        'padding': 1,
        'filename': 'treemap.html',
        'svg-filename': None,
    },
    'mpl-renderer': {
        'filename': None,
        'dpi': 100,
    },
    'server': {
        'port': 8000,
    },
}

config_file_path = os.path.expanduser('~/.config/gametreemap.json')


def main(args=None):
    flags = parse_args(args)
    set_verbosity(flags.verbose, flags.log_file)

    config = parse_config(flags.config or config_file_path)
    apply_flags(config, flags)
    logger.debug('config: %s', config)

    svg_params = config['svg-renderer']
    width = svg_params['width']
    height = svg_params['height']
    output_path = svg_params['filename']

    rendered = {}

    def on_ready(tree):
        cells = compute_cells(tree, width, height, padding=svg_params['padding'])
        rendered['svg'] = svg_basic.generate_svg(cells, width, height)
        if svg_params['svg-filename']:
            svg_basic.render(cells, width, height, svg_params['svg-filename'])
        mpl_path = config['mpl-renderer']['filename']
        if mpl_path:
            mpl.render(cells, width, height, mpl_path, dpi=config['mpl-renderer']['dpi'])

    if flags.file:
        async def source():
            return load_file(flags.file)
    else:
        def source():
            return load(DATA_URL)

    loader = DataLoader(source, on_ready)
    asyncio.run(loader.run())

    # failed loads still get a page, showing only the placeholder
    page.render(rendered.get('svg'), output_path)

    if flags.save and loader.tree is not None:
        try:
            save_file(loader.tree, flags.save)
        except OSError as exc:
            logger.error('could not save data to %s: %s', flags.save, exc)

    if flags.serve:
        httpd = page.serve(output_path, config['server']['port'])
        try:
            httpd.join()
        except KeyboardInterrupt:
            httpd.terminate()

    return 0 if loader.state == DataLoader.READY else 1


def parse_config(path):
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not os.path.exists(path):
        return config

    logger.info('using config file: %s', path)
    with open(path) as f:
        user_config = json.load(f)

    # update section by section rather than replacing
    for section, values in user_config.items():
        if isinstance(values, dict) and section in config:
            config[section].update(values)
        else:
            config[section] = values
    return config


def apply_flags(config, flags):
    if flags.output:
        config['svg-renderer']['filename'] = flags.output
    if flags.width:
        config['svg-renderer']['width'] = flags.width
    if flags.height:
        config['svg-renderer']['height'] = flags.height
    if flags.svg:
        config['svg-renderer']['svg-filename'] = flags.svg
    if flags.png:
        config['mpl-renderer']['filename'] = flags.png
    if flags.port:
        config['server']['port'] = flags.port
    return config


def parse_args(args=None):
    parser = argparse.ArgumentParser(
        prog='gametreemap',
        description='Render video game sales as a treemap.')
    parser.add_argument('-f', '--file', help='load a saved JSON document instead of fetching')
    parser.add_argument('--save', help='save the loaded JSON document to this path')
    parser.add_argument('-o', '--output', help='html page to write')
    parser.add_argument('--svg', help='also write the chart alone as an .svg file')
    parser.add_argument('--png', help='also render with matplotlib to this path')
    parser.add_argument('--width', type=int)
    parser.add_argument('--height', type=int)
    parser.add_argument('--serve', action='store_true', help='serve the page and open a browser')
    parser.add_argument('--port', type=int)
    parser.add_argument('--config', help='config file (default ~/.config/gametreemap.json)')
    parser.add_argument('-v', '--verbose', action='count', default=0)
    parser.add_argument('--log-file', help='also write the log, uncolored, to this file')
    return parser.parse_args(args)


if __name__ == '__main__':
    sys.exit(main())
