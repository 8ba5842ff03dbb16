WIDTH, HEIGHT = 800, 600

HSTEP, VSTEP = 13, 18

BASE_FONT_SIZE = 12

FONT_FAMILY = "Arial"

# line pitch: 25% leading above the ascent and below the descent
LEADING = 1.25
