"""
    File: flow_image.py
    Author: renyunfan
    Email: renyf@connect.hku.hk
    Description: [ A python script to turn the motion of a video into a sequence of flow color images.]
    All Rights Reserved 2023
"""

import argparse
import sys
import time

from .color import FlowColorMapper, PixelFormat
from .colorwheel import ColorWheel
from .errors import (EmptyFirstFrameError, FlowImageError, PrematureEndOfStreamError,
                     SourceOpenError)
from .estimator import create_estimator
from .render import FlowRenderer
from .video import ImageWriter, VideoSource, to_gray, to_intensity


class FlowSequencer:

    def __init__(self, source, estimator, renderer, writer, max_motion=10.0, pad_last=True):
        self.source = source
        self.estimator = estimator
        self.renderer = renderer
        self.writer = writer
        self.max_motion = max_motion  # 固定尺度, 保证同一视频各帧颜色可比
        self.pad_last = pad_last  # 是否用最后一帧的光流补齐输出数量

    def run(self, video_path):
        """Estimate, render and write one image per frame transition.

        Returns the written paths. With ``pad_last`` the final transition is
        written a second time under the last frame's index, so the number of
        images equals the number of frames.
        """
        if not self.source.open(video_path):
            raise SourceOpenError(video_path)

        try:
            fcount = self.source.frame_count()
            f_prev = self.source.read_frame()
            if f_prev is None:
                raise EmptyFirstFrameError(video_path)
            prev = to_gray(f_prev)

            written = []
            image = None
            name = getattr(self.estimator, 'name', type(self.estimator).__name__)
            for i in range(fcount - 1):
                f_curr = self.source.read_frame()
                if f_curr is None:
                    raise PrematureEndOfStreamError(i + 1, fcount)
                curr = to_gray(f_curr)

                start = time.time()
                flow = self.estimator.estimate(to_intensity(prev), to_intensity(curr))
                print(f"{name} in frame {i} using {time.time() - start:.3f} sec")

                image = self.renderer.render(flow, self.max_motion)
                written.append(self.writer.write(i + 1, image))
                prev = curr

            if self.pad_last and image is not None:
                written.append(self.writer.write(fcount, image))
            return written
        finally:
            self.source.release()


def build_parser():
    parser = argparse.ArgumentParser(
        prog='FlowImage',
        description='Convert the motion of a video into flow color images.',
        epilog='-')
    parser.add_argument('video_path', type=str,
                        help='path of input video file.')
    parser.add_argument('output_dir', type=str, nargs='?', default='.',
                        help='directory the flow images are written to.')
    parser.add_argument('-m', '--max_motion', default=10.0, type=float,
                        help='motion magnitude mapped to full saturation, <= 0 to take it from each frame.')
    parser.add_argument('-f', '--pixel_format', default='RGBA', choices=['RGBA', 'RGB'],
                        help='RGBA makes pure black pixels transparent, needs an extension that keeps alpha '
                             '(e.g. .png), .jpg drops it.')
    parser.add_argument('-d', '--darken', default=0.75, type=float,
                        help='factor applied to out of range motion colors.')
    parser.add_argument('-e', '--estimator', default='auto', choices=['auto', 'brox', 'farneback'],
                        help='motion estimator.')
    parser.add_argument('-x', '--ext', default='.jpg', type=str,
                        help='extension of the output images.')
    parser.add_argument('--no_pad', action='store_true', default=False,
                        help='do not repeat the last flow image to match the frame count.')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    print(" -- Load Param: video path", args.video_path)
    print(" -- Load Param: output dir", args.output_dir)
    print(" -- Load Param: max_motion", args.max_motion)
    print(" -- Load Param: pixel_format", args.pixel_format)
    print(" -- Load Param: darken", args.darken)
    print(" -- Load Param: estimator", args.estimator)
    print(" -- Load Param: ext", args.ext)
    print(" -- Load Param: pad_last", not args.no_pad)

    try:
        estimator = create_estimator(args.estimator)
        mapper = FlowColorMapper(ColorWheel(), PixelFormat[args.pixel_format], args.darken)
        writer = ImageWriter(args.output_dir, args.ext)
    except (FlowImageError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(-1)

    sequencer = FlowSequencer(VideoSource(), estimator, FlowRenderer(mapper), writer,
                              max_motion=args.max_motion, pad_last=not args.no_pad)
    try:
        written = sequencer.run(args.video_path)
    except SourceOpenError as e:
        print(f"Error: {e}")
        sys.exit(-1)
    except FlowImageError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(-1)

    print(f"{len(written)} flow images saved to {args.output_dir}")


if __name__ == '__main__':
    main()
