"""
Terminal Image Viewer - Command Line Interface
==============================================
"""

import argparse
import logging
import signal
import sys
import threading
from typing import List, Optional

from .animation import AnimationDriver
from .config import RenderConfig, default_size, detect_truecolor, parse_rgb_triplet
from .constants import DITHER_NAMES, RENDERER_NAMES, Charset
from .logging_setup import configure_logging
from .renderer import render_image
from .source import ImageSource, ImageSourceError
from .terminal import TerminalWriter

logger = logging.getLogger(__name__)

QUIT_SIGNALS = ('SIGINT', 'SIGQUIT', 'SIGTERM', 'SIGWINCH')


def _rgb_argument(value: str):
    rgb = parse_rgb_triplet(value)
    if rgb is None:
        raise argparse.ArgumentTypeError("background color not in R,G,B format")
    return rgb


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value}")
    return number


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='tiv',
        description='Show images in your terminal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s image.png                     # Block renderer, sized to terminal
  %(prog)s -r dots image.gif             # Braille dots, animated
  %(prog)s -r ascii -w 80 image.jpg      # ASCII glyphs, 80 columns
  %(prog)s --halfs --bg 255,255,255 -    # Read stdin, white background
        """
    )

    parser.add_argument('file', help='Input image file, - for stdin')

    parser.add_argument('-r', '--renderer', choices=sorted(RENDERER_NAMES),
                        default='block', help='Renderer to use')

    # Colour options
    color = parser.add_mutually_exclusive_group()
    color.add_argument('-a', '--ansi', '--256', dest='ansi', action='store_true',
                       help='Use only ansi 256 colors')
    color.add_argument('-t', '--truecolor', action='store_true',
                       help='Force truecolor even in unsupported terminals')
    parser.add_argument('--bg', type=_rgb_argument, default=(0, 0, 0),
                        help='Comma separated rgb value to use when rendering transparency')

    # Block options
    parser.add_argument('-b', '--noblend', action='store_true',
                        help='Disable blending characters')
    charset = parser.add_mutually_exclusive_group()
    charset.add_argument('--all', dest='charset', action='store_const', const=Charset.ALL,
                         help='Use all unicode drawing characters')
    charset.add_argument('--no-slopes', dest='charset', action='store_const',
                         const=Charset.NO_SLOPES,
                         help='Disable sloped unicode characters (if they are wide in your font)')
    charset.add_argument('--blocks', dest='charset', action='store_const',
                         const=Charset.BLOCKS,
                         help='Only use unicode fractional block characters')
    charset.add_argument('--halfs', dest='charset', action='store_const',
                         const=Charset.HALFS, help='Only use unicode half blocks')

    # Braille options
    parser.add_argument('--dither', choices=sorted(DITHER_NAMES), default='floyd_steinberg',
                        help='Dithering method for the dots renderer')

    # Size options
    parser.add_argument('-w', '--width', type=_positive_int,
                        help='Override max display width in cells (maintains aspect ratio)')
    parser.add_argument('-H', '--height', type=_positive_int,
                        help='Override max display height in cells (maintains aspect ratio)')

    parser.add_argument('-s', '--still', action='store_true', help="Don't animate images")
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose logging')
    parser.add_argument('--log-json', action='store_true', help='Log as JSON lines')

    return parser


def build_config(args: argparse.Namespace, is_tty: bool, environ=None) -> RenderConfig:
    """Translate parsed arguments into a validated RenderConfig."""
    cols, rows = default_size(is_tty)
    if args.width is not None or args.height is not None:
        # One explicit side leaves the other unconstrained
        unbounded = 2 ** 16 - 1
        cols = args.width if args.width is not None else unbounded
        rows = args.height if args.height is not None else unbounded

    if args.ansi:
        truecolor = False
    elif args.truecolor:
        truecolor = True
    else:
        truecolor = detect_truecolor(environ)

    return RenderConfig(
        renderer=RENDERER_NAMES[args.renderer],
        charset=args.charset or Charset.ALL,
        blend=not args.noblend,
        dither_method=DITHER_NAMES[args.dither],
        size=(cols, rows),
        background_color=args.bg,
        truecolor=truecolor,
        animate=not args.still,
    ).validate()


def install_quit_hook(cancel: threading.Event) -> None:
    """Set cancel when the process is asked to stop or the terminal resizes."""
    def _handler(signum, frame):
        cancel.set()

    for name in QUIT_SIGNALS:
        signum = getattr(signal, name, None)
        if signum is not None:
            signal.signal(signum, _handler)


def run(config: RenderConfig, source: ImageSource, writer: TerminalWriter,
        cancel: threading.Event) -> None:
    """Render a source as a still image or an animation."""
    if config.animate and source.is_animated():
        driver = AnimationDriver(writer, cancel)
        sequence = driver.build(source.frames(), config)
        driver.play(sequence)
    else:
        writer.write_grid(render_image(source.image(), config))
        writer.flush()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, json_format=args.log_json)

    config = build_config(args, sys.stdout.isatty())
    logger.debug("config: %s", config)

    cancel = threading.Event()
    install_quit_hook(cancel)

    try:
        run(config, ImageSource(args.file), TerminalWriter(sys.stdout, config.truecolor), cancel)
    except ImageSourceError as e:
        logger.error("%s", e, extra={"event": "image_source_error"})
        return 1
    return 0
