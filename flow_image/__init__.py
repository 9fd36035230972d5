from .color import FlowColorMapper, PixelFormat
from .colorwheel import ColorWheel, make_colorwheel
from .errors import (EmptyFirstFrameError, EstimatorUnavailableError, FlowImageError,
                     ImageWriteError, PrematureEndOfStreamError, SourceOpenError)
from .estimator import BroxEstimator, FarnebackEstimator, create_estimator
from .flow_image import FlowSequencer, main
from .render import FlowRenderer, compute_maxrad, is_flow_correct
from .video import ImageWriter, VideoSource
