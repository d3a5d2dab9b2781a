"""
debug_logger.py
---------------
Category-filtered console logger for the game shell.

Every line carries a tag (INIT, SYSTEM, STATE, ACTION, TRACE, WARN, FAIL),
a category that can be switched off in LoggerConfig.CATEGORIES, and the
name of the class or module that logged it.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Runtime switches for console output (flipped by --verbose / --quiet)."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        "system": True,
        "loading": True,
        "display": True,
        "scene": True,
        "input": False,
        "menu": True,
        "navigation": True,
        "game_state": True,
        "render": True,
        "drawing": False,
    }

    SHOW_TIMESTAMP = True
    SHOW_SOURCE = True


class Colors:
    """ANSI escape codes."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


LEVELS = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

# tag -> (color, minimum LOG_LEVEL needed to print it)
TAGS = {
    "INIT": (Colors.WHITE, "INFO"),
    "SYSTEM": (Colors.MAGENTA, "INFO"),
    "STATE": (Colors.CYAN, "INFO"),
    "ACTION": (Colors.GREEN, "INFO"),
    "TRACE": (Colors.BLUE, "VERBOSE"),
    "WARN": (Colors.YELLOW, "WARN"),
    "FAIL": (Colors.RED, "ERROR"),
}

STATUS_COLORS = {"OK": Colors.GREEN, "LOADING": Colors.CYAN, "FAIL": Colors.RED}


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; call sites never hold an instance."""

    LINE_LENGTH = 59
    STATUS_COLUMN = 30

    @staticmethod
    def enabled(category: str, tag: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        needed = LEVELS[TAGS[tag][1]]
        return needed <= LEVELS.get(LoggerConfig.LOG_LEVEL, LEVELS["INFO"])

    @staticmethod
    def _source(depth: int = 3) -> str:
        """Class name of the caller, or its module name in CamelCase."""
        try:
            frame = sys._getframe(depth)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        owner = frame.f_locals.get("cls")
        if isinstance(owner, type):
            return owner.__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
        return "".join(part.capitalize() for part in module[:-3].split("_"))

    @staticmethod
    def _log(tag: str, msg: str, category: str):
        # Frame depth 3: _source <- _log <- public method <- caller
        if not DebugLogger.enabled(category, tag):
            return

        prefix = ""
        if LoggerConfig.SHOW_TIMESTAMP:
            prefix += datetime.now().strftime("[%H:%M:%S] ")
        if LoggerConfig.SHOW_SOURCE:
            prefix += f"[{DebugLogger._source()}]"
        color = TAGS[tag][0]
        print(f"{color}{prefix}[{tag}] {msg}{Colors.RESET}")

    # ===========================================================
    # Tagged Messages
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Startup detail; an empty message prints a spacer line."""
        if not msg.strip():
            print()
            return
        DebugLogger._log("INIT", msg, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        DebugLogger._log("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "navigation"):
        """Per-step detail, only printed at VERBOSE."""
        DebugLogger._log("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._log("FAIL", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Ruled header, e.g. at each scene activation."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """'> Module ........ [OK]' line for the startup report."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        label = f"> {module}".ljust(DebugLogger.STATUS_COLUMN)
        badge = f"[{status}]"
        dots = "." * max(DebugLogger.LINE_LENGTH - len(label) - len(badge) - 1, 1)
        color = STATUS_COLORS.get(status.upper(), Colors.WHITE)
        print(f"{Colors.WHITE}{label}{dots} {color}{badge}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{' ' * (level * 4)}• {Colors.WHITE}{detail}{Colors.RESET}")
