import math

import skia
from utils.util import *

class PaintCommand:
    def __init__(self, rect):
        self.rect = rect

class DrawText(PaintCommand):
    def __init__(self, run, color="black", scroll=0):
        super().__init__(run.self_rect().makeOffset(0, -scroll))
        self.left = self.rect.left()
        self.top = self.rect.top()
        self.right = self.rect.right()
        self.bottom = self.rect.bottom()
        self.font = run.font
        self.text = run.text
        self.color = color

    def execute(self, canvas):
        paint = skia.Paint(
            AntiAlias=True,
            Color=parse_color(self.color),
        )
        baseline = self.top + self.font.metrics().ascent
        canvas.drawString(self.text, float(self.left), baseline,
            self.font.skia_font, paint)

    def __repr__(self):
        return "DrawText(text={})".format(self.text)

def paint(display_list, scroll=0, color="black"):
    return [DrawText(run, color, scroll) for run in display_list]

def raster(display_list, width, height, scroll=0):
    surface = skia.Surface(max(int(width), 1), max(int(math.ceil(height)), 1))
    canvas = surface.getCanvas()
    canvas.clear(skia.ColorWHITE)
    for cmd in paint(display_list, scroll):
        if cmd.rect.bottom() < 0 or cmd.rect.top() > height: continue
        cmd.execute(canvas)
    return surface
