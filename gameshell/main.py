"""
main.py
-------
Entry point: parse command-line flags and run the main loop.

Usage:
    gameshell                 # Run with default logging
    gameshell --verbose       # Include navigation traces
    gameshell --quiet         # Disable console logging
"""

import argparse
import sys

from gameshell.core.debug.debug_logger import LoggerConfig
from gameshell.core.runtime.main_loop import MainLoop


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Minimal pygame game shell")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true",
                           help="Log menu navigation and input traces")
    verbosity.add_argument("--quiet", action="store_true",
                           help="Disable console logging")
    return parser.parse_args(argv)


def configure_logging(args):
    """Apply verbosity flags to the logger configuration."""
    if args.quiet:
        LoggerConfig.ENABLE_LOGGING = False
    elif args.verbose:
        LoggerConfig.LOG_LEVEL = "VERBOSE"
        LoggerConfig.CATEGORIES["input"] = True


def main(argv=None):
    """Main entry point."""
    configure_logging(parse_args(argv))

    MainLoop().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
