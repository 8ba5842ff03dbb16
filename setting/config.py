from setting.constant import *

class LayoutConfig:
    def __init__(self, width=WIDTH, hstep=HSTEP, vstep=VSTEP,
                 base_size=BASE_FONT_SIZE, font_family=FONT_FAMILY,
                 scoped_styles=True):
        self.width = width
        self.hstep = hstep
        self.vstep = vstep
        self.base_size = base_size
        self.font_family = font_family
        # False reproduces the old unscoped toggles where an inner </b>
        # also ends an outer <b>
        self.scoped_styles = scoped_styles

    def __repr__(self):
        return ("LayoutConfig(width={}, hstep={}, vstep={}, " +
            "base_size={}, font_family={!r}, scoped_styles={})").format(
            self.width, self.hstep, self.vstep, self.base_size,
            self.font_family, self.scoped_styles)
