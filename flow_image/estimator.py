"""
    File: estimator.py
    Author: renyunfan
    Email: renyf@connect.hku.hk
    Description: [ Dense motion estimators: GPU Brox and CPU Farneback.]
    All Rights Reserved 2023
"""

import cv2
import numpy as np

from .errors import EstimatorUnavailableError


def cuda_device_count():
    if not hasattr(cv2, 'cuda'):
        return 0
    try:
        return cv2.cuda.getCudaEnabledDeviceCount()
    except cv2.error:
        return 0


class BroxEstimator:
    """Brox variational flow on the GPU. Inputs are float32 intensity images in [0, 1]."""

    name = 'Brox'

    def __init__(self, alpha=0.197, gamma=50.0, scale_factor=0.8,
                 inner_iterations=10, outer_iterations=77, solver_iterations=10):
        if cuda_device_count() < 1 or not hasattr(cv2.cuda, 'BroxOpticalFlow_create'):
            raise EstimatorUnavailableError("Brox optical flow needs OpenCV built with CUDA and a CUDA device")
        self.brox = cv2.cuda.BroxOpticalFlow_create(alpha, gamma, scale_factor,
                                                    inner_iterations, outer_iterations, solver_iterations)

    def estimate(self, frame_a, frame_b):
        d_frame0 = cv2.cuda_GpuMat()
        d_frame1 = cv2.cuda_GpuMat()
        d_frame0.upload(np.ascontiguousarray(frame_a, dtype=np.float32))
        d_frame1.upload(np.ascontiguousarray(frame_b, dtype=np.float32))
        d_flow = self.brox.calc(d_frame0, d_frame1, None)
        return d_flow.download()


class FarnebackEstimator:
    """Farneback polynomial-expansion flow on the CPU."""

    name = 'Farneback'

    def __init__(self, pyr_scale=0.5, levels=3, winsize=15, iterations=3, poly_n=5, poly_sigma=1.2):
        self.params = (pyr_scale, levels, winsize, iterations, poly_n, poly_sigma, 0)

    def estimate(self, frame_a, frame_b):
        # Farneback 只接受 8 位灰度图
        prev_gray = np.clip(np.asarray(frame_a) * 255.0, 0, 255).astype(np.uint8)
        gray = np.clip(np.asarray(frame_b) * 255.0, 0, 255).astype(np.uint8)
        flow = cv2.calcOpticalFlowFarneback(prev_gray, gray, None, *self.params)
        return flow.astype(np.float32)


def create_estimator(method='auto'):
    if method == 'brox':
        return BroxEstimator()
    if method == 'farneback':
        return FarnebackEstimator()
    if method == 'auto':
        if cuda_device_count() > 0 and hasattr(cv2.cuda, 'BroxOpticalFlow_create'):
            return BroxEstimator()
        return FarnebackEstimator()
    raise ValueError(f"unknown estimator {method!r}, expected 'auto', 'brox' or 'farneback'")
