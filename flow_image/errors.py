"""
    File: errors.py
    Author: renyunfan
    Email: renyf@connect.hku.hk
    Description: [ Fatal errors raised while turning a video into flow images.]
    All Rights Reserved 2023
"""


class FlowImageError(Exception):
    pass


class SourceOpenError(FlowImageError):
    def __init__(self, path):
        super().__init__(f"Could not initialize capturing {path}")
        self.path = path


class EmptyFirstFrameError(FlowImageError):
    def __init__(self, path):
        super().__init__(f"Fail to read the first frame of {path}")
        self.path = path


class PrematureEndOfStreamError(FlowImageError):
    def __init__(self, index, frame_count):
        super().__init__(f"Can't read frame {index} of {frame_count}")
        self.index = index
        self.frame_count = frame_count


class ImageWriteError(FlowImageError):
    def __init__(self, path, reason=None):
        message = f"Fail to write image {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path


class EstimatorUnavailableError(FlowImageError):
    pass
