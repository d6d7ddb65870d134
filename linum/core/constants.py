# linum/core/constants.py
# Constants & enums for number alignment

from enum import Enum


# * Side(s) of the number column that receive padding spaces
class PadMode(Enum):
    # spaces before the number, digits flush right (default)
    PAD_LEFT = "pad_left"
    # spaces after the number, digits flush left (--left-align)
    PAD_RIGHT = "pad_right"
    # spaces split around the number
    PAD_CENTER = "pad_center"


# * Alignment setting names mapped to the padding mode that produces them
ALIGN_TO_PAD_MODE = {
    "right": PadMode.PAD_LEFT,
    "left": PadMode.PAD_RIGHT,
    "center": PadMode.PAD_CENTER,
}

DEFAULT_ALIGN = "right"
