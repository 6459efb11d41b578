"""
Command-line front ends: ansi-mandelbrot, window-julia, window-mandelbrot.

Each program starts from its preset FractalConfig and applies the
command-line overrides on top. Bad options are reported by argparse,
which prints usage to stderr and exits with status 2.
"""

import argparse
import logging
import sys
from dataclasses import replace

from . import __version__
from .colormaps import list_colormap_names
from .compute import JULIA
from .config import (
    JULIA_TERMINAL,
    JULIA_WINDOW,
    MANDELBROT_TERMINAL,
    MANDELBROT_WINDOW,
)
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser(prog, description, window=False, seed=False, julia_switch=False):
    """Parser with the options shared by all programs plus the requested extras."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description=description,
        add_help=False,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-?", "-h", "--help",
        action="help",
        help="display this help and exit",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{prog}: Version {__version__}",
        help="output version information and exit",
    )
    parser.add_argument(
        "-i", "--iterations",
        type=int,
        default=None,
        help="maximum iterations per point (default: program preset)",
    )
    parser.add_argument(
        "--size",
        type=int,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        default=None,
        help="grid size in cells or pixels (default: program preset)",
    )
    parser.add_argument(
        "--colormap",
        choices=list_colormap_names(),
        default="hsv",
        help="color scheme",
    )
    parser.add_argument(
        "--invert",
        action="store_true",
        help="invert the hue sweep",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="print debug messages to stderr",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        default=None,
        help="also write log messages to this file",
    )
    if window:
        parser.add_argument(
            "-f", "--fullscreen",
            action="store_true",
            help="display in fullscreen window",
        )
    if julia_switch:
        parser.add_argument(
            "--julia",
            action="store_true",
            help="draw the Julia set instead of the Mandelbrot set",
        )
    if seed or julia_switch:
        parser.add_argument(
            "--seed",
            type=float,
            nargs=2,
            metavar=("RE", "IM"),
            default=None,
            help="Julia seed, e.g. -0.75 0.11 or -0.74543 0.11301",
        )
    return parser


def config_from_args(parser, args, config):
    """
    Apply command-line overrides to a preset config.

    Invalid values are reported through parser.error().
    """
    changes = {"colormap": args.colormap, "invert": args.invert}
    if args.iterations is not None:
        changes["max_iter"] = args.iterations
    if args.size is not None:
        changes["size"] = tuple(args.size)
    if getattr(args, "seed", None) is not None:
        changes["seed"] = tuple(args.seed)
    try:
        return replace(config, **changes)
    except (ValueError, KeyError) as err:
        parser.error(str(err))


def _setup(parser, argv):
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING, args.log_file)
    return args


def ansi_mandelbrot(argv=None):
    """Entry point: draw the Mandelbrot (or Julia) set in the terminal."""
    from .terminal import draw

    parser = build_parser(
        "ansi-mandelbrot",
        "Display Mandelbrot or Julia set using ANSI truecolor escapes.",
        julia_switch=True,
    )
    args = _setup(parser, argv)
    preset = JULIA_TERMINAL if args.julia else MANDELBROT_TERMINAL
    config = config_from_args(parser, args, preset)
    logger.debug("Config: %s", config)
    try:
        draw(config)
    except KeyboardInterrupt:
        sys.stdout.write("\033[0m\n")
        return 130
    return 0


def _window_main(prog, description, preset, argv):
    from .window import DisplayError, run

    parser = build_parser(prog, description, window=True, seed=preset.mode == JULIA)
    args = _setup(parser, argv)
    config = config_from_args(parser, args, preset)
    logger.debug("Config: %s", config)
    try:
        run(config, fullscreen=args.fullscreen)
    except DisplayError as err:
        logger.error("%s", err)
        print(f"{prog}: {err}", file=sys.stderr)
        return 1
    return 0


def window_julia(argv=None):
    """Entry point: show the Julia set in a window."""
    return _window_main(
        "window-julia",
        "Display a Julia set in a window. Press Escape to exit, F to toggle fullscreen.",
        JULIA_WINDOW,
        argv,
    )


def window_mandelbrot(argv=None):
    """Entry point: show the Mandelbrot set in a window."""
    return _window_main(
        "window-mandelbrot",
        "Display the Mandelbrot set in a window. Press Escape to exit, F to toggle fullscreen.",
        MANDELBROT_WINDOW,
        argv,
    )


PROGRAMS = {
    "terminal": ansi_mandelbrot,
    "julia": window_julia,
    "mandelbrot": window_mandelbrot,
}


def main(argv=None):
    """Dispatch `python -m escapefractal [terminal|julia|mandelbrot] ...`."""
    if argv is None:
        argv = sys.argv[1:]
    if argv and argv[0] in PROGRAMS:
        return PROGRAMS[argv[0]](argv[1:])
    return ansi_mandelbrot(argv)
