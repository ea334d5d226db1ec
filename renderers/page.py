"""
HTML page around the SVG chart, and a throwaway local server to look at it.

The page shows the loading placeholder until there is a chart to show; a
failed load leaves the placeholder in place.
"""
import functools
import http.server
import multiprocessing
import os
import socketserver
import webbrowser

from logger import logger

TITLE = 'Video Game Sales'
SUBTITLE = 'Top 100 Most Sold Video Games Grouped by Platform'
PLACEHOLDER = '<p>Loading data...</p>'

PORT = 8000


def generate_page(svg=None):
    content = svg if svg is not None else PLACEHOLDER
    return f'''<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{TITLE}</title>
  <style>
    body {{ display: flex; flex-direction: column; align-items: center; font-family: sans-serif; }}
    h1 {{ font-size: 1.875rem; margin-bottom: 0; }}
    h2 {{ margin-bottom: 1.25rem; }}
  </style>
</head>
<body>
  <h1>{TITLE}</h1>
  <h2>{SUBTITLE}</h2>
{content}
</body>
</html>
'''


def render(svg, output_path):
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(generate_page(svg))
    logger.info(f'page saved to: {output_path}')
    return output_path


class SimpleServer(multiprocessing.Process):
    def __init__(self, directory, port=PORT):
        super().__init__(daemon=True)
        self.directory = directory
        self.port = port

    def run(self):
        handler = functools.partial(http.server.SimpleHTTPRequestHandler,
                                    directory=self.directory)
        with socketserver.TCPServer(('', self.port), handler) as httpd:
            try:
                httpd.serve_forever()
            except KeyboardInterrupt:
                logger.info('server stopped')


def serve(path, port=PORT):
    """serve the directory holding `path` and open the page in a browser"""
    path = os.path.realpath(path)
    httpd = SimpleServer(os.path.dirname(path), port)
    httpd.start()
    url = 'http://localhost:%s/%s' % (port, os.path.basename(path))
    logger.info('serving %s', url)
    webbrowser.open(url)
    return httpd
