import argparse
import logging
import sys

import skia
from parser.html_parser import *
from layout.font import *
from layout.line_layout import *
from display.paint_command import *
from setting.config import *
from utils.util import *

logger = logging.getLogger(__name__)

class Browser:
    def __init__(self, config=None):
        self.config = config or LayoutConfig()
        self.fonts = FontCache(self.config.font_family)
        self.nodes = None
        self.display_list = []
        self.height = 0

    def load(self, body):
        self.nodes = HTMLParser(body).parse()
        try:
            document = LineLayout(self.nodes, self.config, self.fonts)
        except FontError as e:
            logger.warning("Font %r unavailable (%s), using the default font",
                self.config.font_family, e)
            self.fonts = FontCache(None)
            document = LineLayout(self.nodes, self.config, self.fonts)
        self.display_list = document.display_list
        self.height = document.height
        return self.display_list

    def draw(self, canvas, scroll=0):
        for cmd in paint(self.display_list, scroll):
            cmd.execute(canvas)

    def raster(self):
        return raster(self.display_list, self.config.width,
            max(self.height, HEIGHT))

    def save_png(self, path):
        image = self.raster().makeImageSnapshot()
        image.save(path, skia.kPNG)

def build_parser():
    parser = argparse.ArgumentParser(
        prog="browser", description="Lay out an HTML document as text runs.")
    parser.add_argument("file", nargs="?", help="HTML file, stdin if omitted")
    parser.add_argument("--tree", action="store_true",
        help="Print the parsed tree instead of the display list")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--png", help="Also write a rendering to this path")
    parser.add_argument("--verbose", action="store_true")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")

    if args.file:
        try:
            with open(args.file, encoding="utf-8", errors="replace") as f:
                body = f.read()
        except OSError as e:
            print("browser: cannot read {}: {}".format(args.file, e),
                file=sys.stderr)
            return 1
    else:
        body = sys.stdin.read()

    browser = Browser(LayoutConfig(width=args.width))
    browser.load(body)

    if args.tree:
        print_tree(browser.nodes)
    else:
        for run in browser.display_list:
            print("{:.1f} {:.1f} {}-{}-{} {}".format(run.x, run.y,
                run.font.size, run.font.weight, run.font.style, run.text))

    if args.png:
        browser.save_png(args.png)
    return 0

if __name__ == "__main__":
    sys.exit(main())
