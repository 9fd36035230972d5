"""
    File: colorwheel.py
    Author: renyunfan
    Email: renyf@connect.hku.hk
    Description: [ The 55-entry hue table used to encode flow direction as color.]
    All Rights Reserved 2023
"""

import numpy as np

# relative lengths of color transitions, chosen by perceptual similarity
# (more shades can be told apart between red and yellow than yellow and green)
RY = 15
YG = 6
GC = 4
CB = 11
BM = 13
MR = 6
NCOLS = RY + YG + GC + CB + BM + MR


def make_colorwheel():
    """Build the (NCOLS, 3) RGB table, red -> yellow -> green -> cyan -> blue -> magenta."""
    wheel = np.zeros((NCOLS, 3), dtype=np.int32)

    col = 0
    i = np.arange(RY)
    wheel[col:col + RY, 0] = 255
    wheel[col:col + RY, 1] = 255 * i // RY
    col += RY

    i = np.arange(YG)
    wheel[col:col + YG, 0] = 255 - 255 * i // YG
    wheel[col:col + YG, 1] = 255
    col += YG

    i = np.arange(GC)
    wheel[col:col + GC, 1] = 255
    wheel[col:col + GC, 2] = 255 * i // GC
    col += GC

    i = np.arange(CB)
    wheel[col:col + CB, 1] = 255 - 255 * i // CB
    wheel[col:col + CB, 2] = 255
    col += CB

    i = np.arange(BM)
    wheel[col:col + BM, 0] = 255 * i // BM
    wheel[col:col + BM, 2] = 255
    col += BM

    i = np.arange(MR)
    wheel[col:col + MR, 0] = 255
    wheel[col:col + MR, 2] = 255 - 255 * i // MR

    return wheel


class ColorWheel:
    """Read-only color table. Build one at startup and hand it to the mapper."""

    def __init__(self):
        self.table = make_colorwheel()
        self.table.setflags(write=False)

    def __len__(self):
        return self.table.shape[0]

    def color_at(self, index):
        if not 0 <= index < len(self):
            raise IndexError(f"color wheel index {index} out of range [0, {len(self)})")
        r, g, b = self.table[index]
        return int(r), int(g), int(b)

    def normalized(self):
        return self.table.astype(np.float32) / 255.0
