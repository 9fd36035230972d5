"""
    File: video.py
    Author: renyunfan
    Email: renyf@connect.hku.hk
    Description: [ Frame reading from video files and flow image writing.]
    All Rights Reserved 2023
"""

import os

import cv2
import numpy as np

from .errors import ImageWriteError


def to_gray(frame):
    if frame.ndim == 2:
        return frame
    return cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)


def to_intensity(gray):
    return gray.astype(np.float32) * (1.0 / 255.0)


class VideoSource:

    def __init__(self):
        self.video = None

    def open(self, path):
        self.video = cv2.VideoCapture(path)
        return self.video.isOpened()

    def frame_count(self):
        return int(self.video.get(cv2.CAP_PROP_FRAME_COUNT))

    def read_frame(self):
        """Next BGR frame, or None once the stream has nothing more to give."""
        ret, frame = self.video.read()
        if not ret or frame is None or frame.size == 0:
            return None
        return frame

    def release(self):
        if self.video is not None:
            self.video.release()
            self.video = None


class ImageWriter:
    """Writes RGB / RGBA images as ``<directory>/<index:05d><ext>``."""

    def __init__(self, directory='.', ext='.jpg'):
        self.directory = directory
        self.ext = ext if ext.startswith('.') else '.' + ext
        if not cv2.haveImageWriter(self.path_for(1)):
            raise ImageWriteError(self.path_for(1), f"no image writer for extension {self.ext}")

    def path_for(self, index):
        return os.path.join(self.directory, f"{index:05d}{self.ext}")

    def write(self, index, image):
        path = self.path_for(index)
        # OpenCV 按 BGR(A) 顺序写文件
        if image.ndim == 3 and image.shape[2] == 4:
            image = cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)
        elif image.ndim == 3 and image.shape[2] == 3:
            image = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
        try:
            os.makedirs(self.directory, exist_ok=True)
            ok = cv2.imwrite(path, image)
        except (OSError, cv2.error) as e:
            raise ImageWriteError(path, e) from e
        if not ok:
            raise ImageWriteError(path)
        return path
