"""
    File: render.py
    Author: renyunfan
    Email: renyf@connect.hku.hk
    Description: [ Render a dense two-channel flow field into a color image.]
    All Rights Reserved 2023
"""

import numpy as np

UNKNOWN_FLOW_THRESH = 1e9


def is_flow_correct(fx, fy):
    """True where neither component is NaN and both are below the unknown-flow bound."""
    fx = np.asarray(fx)
    fy = np.asarray(fy)
    with np.errstate(invalid='ignore'):
        return (~np.isnan(fx) & ~np.isnan(fy)
                & (np.abs(fx) < UNKNOWN_FLOW_THRESH) & (np.abs(fy) < UNKNOWN_FLOW_THRESH))


def compute_maxrad(flowx, flowy):
    """Largest magnitude over the valid vectors, never below 1."""
    valid = is_flow_correct(flowx, flowy)
    if not np.any(valid):
        return 1.0
    u = flowx[valid].astype(np.float32)
    v = flowy[valid].astype(np.float32)
    return max(1.0, float(np.sqrt(u * u + v * v).max()))


class FlowRenderer:

    def __init__(self, mapper):
        self.mapper = mapper

    def render(self, flow, max_motion=-1):
        flow = np.asarray(flow)
        if flow.ndim != 3 or flow.shape[2] != 2:
            raise ValueError(f"flow field must have shape (H, W, 2), got {flow.shape}")
        return self.render_planes(flow[:, :, 0], flow[:, :, 1], max_motion)

    def render_planes(self, flowx, flowy, max_motion=-1):
        """Paint every valid vector; invalid ones stay at the zero background.

        ``max_motion`` > 0 is used as the normalization scale as is, otherwise
        the scale is taken from the field itself.
        """
        flowx = np.asarray(flowx, dtype=np.float32)
        flowy = np.asarray(flowy, dtype=np.float32)
        if flowx.shape != flowy.shape or flowx.ndim != 2:
            raise ValueError(f"flow planes must be equal 2-D arrays, got {flowx.shape} and {flowy.shape}")

        height, width = flowx.shape
        dst = np.zeros((height, width, self.mapper.channels), dtype=np.uint8)

        maxrad = max_motion if max_motion > 0 else compute_maxrad(flowx, flowy)

        valid = is_flow_correct(flowx, flowy)
        if np.any(valid):
            dst[valid] = self.mapper.map_array(flowx[valid] / maxrad, flowy[valid] / maxrad)
        return dst
