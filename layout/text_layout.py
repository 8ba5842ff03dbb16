from collections import namedtuple

import skia

class LayoutRun(namedtuple("LayoutRun", ["x", "y", "text", "font"])):
    __slots__ = ()

    @property
    def width(self):
        return self.font.measure(self.text)

    @property
    def height(self):
        return self.font.linespace()

    def self_rect(self):
        return skia.Rect.MakeLTRB(
            self.x, self.y, self.x + self.width, self.y + self.height)

    def __repr__(self):
        return "LayoutRun(x={}, y={}, text={!r}, font={})".format(
            self.x, self.y, self.text, self.font)
