import logging
import re

from parser.html_parser import *
from layout.font import *
from layout.text_layout import *
from setting.config import *

logger = logging.getLogger(__name__)

WORD_SEPARATOR = re.compile("[ \t\n\r\f\v]+")

STYLE_TAGS = ["i", "b", "small", "big"]

class LineLayout:
    def __init__(self, root, config=None, fonts=None):
        self.config = config or LayoutConfig()
        self.fonts = fonts or FontCache(self.config.font_family)

        self.display_list = []
        self.line = []

        self.weight = "normal"
        self.style = "roman"
        self.size = self.config.base_size
        self.style_stack = []

        self.cursor_x = self.config.hstep
        self.cursor_y = self.config.vstep

        self.recurse(root)
        self.flush()
        self.height = self.cursor_y
        logger.debug("Laid out %d runs, height %s",
            len(self.display_list), self.height)

    def font(self):
        # the cursor keeps the unclamped size so closers restore it exactly
        return self.fonts.get_font(max(self.size, 1), self.weight, self.style)

    def recurse(self, node):
        if isinstance(node, Text):
            for word in WORD_SEPARATOR.split(node.text):
                if word: self.word(word)
        elif isinstance(node, Element):
            self.open_tag(node.tag)
            for child in node.children:
                self.recurse(child)
            self.close_tag(node.tag)

    def open_tag(self, tag):
        if tag in STYLE_TAGS and self.config.scoped_styles:
            self.style_stack.append((self.weight, self.style, self.size))

        if tag == "i":
            self.style = "italic"
        elif tag == "b":
            self.weight = "bold"
        elif tag == "small":
            self.size -= 2
        elif tag == "big":
            self.size += 2
        elif tag == "br":
            self.flush()

    def close_tag(self, tag):
        if tag in STYLE_TAGS and self.config.scoped_styles:
            self.weight, self.style, self.size = self.style_stack.pop()
        elif tag == "i":
            self.style = "roman"
        elif tag == "b":
            self.weight = "normal"
        elif tag == "small":
            self.size += 2
        elif tag == "big":
            self.size -= 2
        elif tag == "p":
            self.flush()
            self.cursor_y += self.config.vstep

    def word(self, word):
        font = self.font()
        w = font.measure(word)
        if self.cursor_x + w > self.config.width - self.config.hstep:
            self.flush()
        self.line.append((self.cursor_x, word, font))
        self.cursor_x += w + font.measure(" ")

    def flush(self):
        if not self.line: return
        metrics = [font.metrics() for x, word, font in self.line]
        max_ascent = max([m.ascent for m in metrics])
        max_descent = max([m.descent for m in metrics])

        baseline = self.cursor_y + LEADING * max_ascent
        for (x, word, font), m in zip(self.line, metrics):
            y = baseline - m.ascent
            self.display_list.append(LayoutRun(x, y, word, font))

        self.cursor_y = baseline + LEADING * max_descent
        self.cursor_x = self.config.hstep
        self.line = []
