"""
main.py
-------
Entry point for Viral Dash.
"""

import argparse

from viral_dash.core.debug.debug_logger import DebugLogger, LoggerConfig
from viral_dash.core.runtime.game_settings import Display
from viral_dash.core.runtime.main_loop import MainLoop


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="viral-dash", description="Viral Dash arcade game")
    parser.add_argument("--width", type=int, default=Display.WIDTH)
    parser.add_argument("--height", type=int, default=Display.HEIGHT)
    parser.add_argument("--mute", action="store_true", help="disable sound")
    parser.add_argument("--volume", type=int, default=100, metavar="0-100", help="master volume")
    parser.add_argument("--quiet", action="store_true", help="disable console logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.quiet:
        LoggerConfig.ENABLE_LOGGING = False

    DebugLogger.section("Viral Dash")
    MainLoop(args.width, args.height, sound=not args.mute, volume=args.volume).run()


if __name__ == "__main__":
    main()
