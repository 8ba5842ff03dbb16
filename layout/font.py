import logging
import threading
from collections import namedtuple

import skia

from setting.constant import *

logger = logging.getLogger(__name__)

FontMetrics = namedtuple("FontMetrics", ["ascent", "descent", "leading"])

class FontError(Exception):
    pass

class FontHandle:
    def __init__(self, skia_font, size, weight, style):
        self.skia_font = skia_font
        self.size = size
        self.weight = weight
        self.style = style
        self._metrics = None

    def measure(self, text):
        return self.skia_font.measureText(text)

    def metrics(self):
        # skia reports the ascent as a negative offset above the baseline
        if self._metrics is None:
            m = self.skia_font.getMetrics()
            self._metrics = FontMetrics(-m.fAscent, m.fDescent, m.fLeading)
        return self._metrics

    def linespace(self):
        m = self.metrics()
        return m.ascent + m.descent

    def __repr__(self):
        return "FontHandle(size={}, weight={}, style={})".format(
            self.size, self.weight, self.style)

class FontCache:
    def __init__(self, family=FONT_FAMILY):
        self.family = family
        self.lock = threading.Lock()
        self.typefaces = {}
        self.fonts = {}

    def typeface(self, weight, style):
        key = (weight, style)
        if key not in self.typefaces:
            if weight == "bold":
                skia_weight = skia.FontStyle.kBold_Weight
            else:
                skia_weight = skia.FontStyle.kNormal_Weight
            if style == "italic":
                skia_style = skia.FontStyle.kItalic_Slant
            else:
                skia_style = skia.FontStyle.kUpright_Slant
            skia_width = skia.FontStyle.kNormal_Width
            style_info = \
                skia.FontStyle(skia_weight, skia_width, skia_style)
            typeface = None
            if self.family:
                typeface = skia.Typeface(self.family, style_info)
            if typeface is None:
                logger.debug("No typeface for %r, using the default",
                    self.family)
                typeface = skia.Typeface.MakeDefault()
            if typeface is None:
                raise FontError("cannot resolve a typeface for {} {} {}".format(
                    self.family, weight, style))
            self.typefaces[key] = typeface
        return self.typefaces[key]

    def get_font(self, size, weight, style):
        if size <= 0:
            raise FontError("font size must be positive, got {}".format(size))
        key = (size, weight, style)
        with self.lock:
            if key not in self.fonts:
                logger.debug("Resolving font %s", key)
                font = skia.Font(self.typeface(weight, style), size)
                self.fonts[key] = FontHandle(font, size, weight, style)
            return self.fonts[key]
