"""
    File: color.py
    Author: renyunfan
    Email: renyf@connect.hku.hk
    Description: [ Map normalized motion vectors to RGB / RGBA pixels via the color wheel.]
    All Rights Reserved 2023
"""

import numpy as np
from enum import Enum


class PixelFormat(Enum):
    RGB = 3
    RGBA = 4

    @property
    def channels(self):
        return self.value


class FlowColorMapper:
    """Turns pre-normalized (fx, fy) into 8-bit pixels, channel order RGB(A).

    Direction picks the hue on the wheel, magnitude the saturation: a zero
    vector is white and a unit vector is the pure hue. Vectors longer than one
    keep their hue but are darkened by ``darken`` to flag them as out of range.
    In RGBA format pure black pixels are fully transparent.
    """

    def __init__(self, wheel, pixel_format=PixelFormat.RGBA, darken=0.75):
        if not 0.0 < darken <= 1.0:
            raise ValueError(f"darken must be in (0, 1], got {darken}")
        self.wheel = wheel
        self.pixel_format = pixel_format
        self.darken = float(darken)
        self._colors = wheel.normalized()

    @property
    def channels(self):
        return self.pixel_format.channels

    def map_to_color(self, fx, fy):
        pix = self.map_array(np.array([fx], dtype=np.float32), np.array([fy], dtype=np.float32))
        return tuple(int(c) for c in pix[0])

    def map_array(self, fx, fy):
        fx = np.asarray(fx, dtype=np.float32)
        fy = np.asarray(fy, dtype=np.float32)
        if fx.shape != fy.shape:
            raise ValueError(f"fx and fy shapes differ: {fx.shape} vs {fy.shape}")
        ncols = len(self.wheel)

        rad = np.sqrt(fx * fx + fy * fy)
        a = np.arctan2(-fy, -fx) / np.float32(np.pi)  # [-1, 1]

        fk = (a + 1.0) / 2.0 * (ncols - 1)
        k0 = fk.astype(np.int32)
        k1 = (k0 + 1) % ncols
        f = (fk - k0.astype(np.float32))[..., np.newaxis]

        col = (1 - f) * self._colors[k0] + f * self._colors[k1]

        rad = rad[..., np.newaxis]
        # 半径越大饱和度越高, 超出范围则变暗
        col = np.where(rad <= 1, 1 - rad * (1 - col), col * self.darken)
        rgb = (255.0 * np.clip(col, 0.0, 1.0)).astype(np.uint8)

        if self.pixel_format == PixelFormat.RGB:
            return rgb

        alpha = np.where(np.any(rgb != 0, axis=-1), 255, 0).astype(np.uint8)
        return np.concatenate([rgb, alpha[..., np.newaxis]], axis=-1)
