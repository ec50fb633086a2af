"""
debug_logger.py
---------------
Category-filtered console logger for Viral Dash.

Log lines carry the wall-clock time, the simulation clock when one is
bound (so hazard and cooldown traces line up with the game's own
timeline), the calling class and a tag:

    [14:02:11 t=12.35] [Rival][STATE] Hazard IDLE -> WARNING
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which categories are printed, and down to which level."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Bootstrap
        "loading": False,
        "system": True,
        "display": True,
        "input": False,

        # Session
        "scene": True,
        "game_state": True,
        "level": True,
        "placement": True,
        "feedback": True,
        "event_manager": False,

        # Entities
        "entity": False,
        "ability": True,
        "hazard": False,
        "collision": True,
        "particle": False,

        # Output
        "drawing": False,
        "ui": True,
        "audio": False,
    }

    SHOW_WALL_TIME = True
    SHOW_SIM_TIME = True


class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# tag -> (color, severity)
_TAGS = {
    "INIT": (Colors.WHITE, "INFO"),
    "SYSTEM": (Colors.MAGENTA, "INFO"),
    "STATE": (Colors.CYAN, "INFO"),
    "ACTION": (Colors.GREEN, "INFO"),
    "TRACE": (Colors.BLUE, "VERBOSE"),
    "WARN": (Colors.YELLOW, "WARN"),
    "FAIL": (Colors.RED, "ERROR"),
}

_SEVERITY = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

_ENTRY_COLORS = {
    "OK": Colors.GREEN,
    "LOADING": Colors.CYAN,
    "FALLBACK": Colors.YELLOW,
    "FAIL": Colors.RED,
}


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger. Warnings and failures print regardless of category."""

    LINE_LENGTH = 59
    _sim_clock = None

    @staticmethod
    def bind_clock(clock_fn):
        """Stamp lines with clock_fn() (simulation seconds). Pass None to unbind."""
        DebugLogger._sim_clock = clock_fn

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Initialization log. Empty message prints a blank line."""
        if not msg.strip():
            if LoggerConfig.ENABLE_LOGGING:
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
    def trace(msg: str, category: str = "collision"):
        DebugLogger._log("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._log("FAIL", msg, category)

    # ===========================================================
    # Internals
    # ===========================================================

    @staticmethod
    def _enabled(tag: str, category: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        severity = _TAGS[tag][1]
        if _SEVERITY[severity] > _SEVERITY.get(LoggerConfig.LOG_LEVEL, 3):
            return False
        if severity in ("WARN", "ERROR"):
            return True
        return LoggerConfig.CATEGORIES.get(category, False)

    @staticmethod
    def _log(tag: str, message: str, category: str):
        if not DebugLogger._enabled(tag, category):
            return
        color = _TAGS[tag][0]
        print(f"{color}{DebugLogger._stamp()}[{DebugLogger._caller()}][{tag}] {message}{Colors.RESET}")

    @staticmethod
    def _stamp() -> str:
        parts = []
        if LoggerConfig.SHOW_WALL_TIME:
            parts.append(datetime.now().strftime("%H:%M:%S"))
        if LoggerConfig.SHOW_SIM_TIME and DebugLogger._sim_clock is not None:
            parts.append(f"t={DebugLogger._sim_clock():.2f}")
        return f"[{' '.join(parts)}] " if parts else ""

    @staticmethod
    def _caller() -> str:
        """Class of the calling method, or the module name in PascalCase."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "?"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        owner = frame.f_locals.get("cls")
        if isinstance(owner, type):
            return owner.__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1][:-3]
        return "".join(p.capitalize() for p in module.split("_"))

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str, only_title: bool = False):
        """Print a section header (or a right-aligned closing title)."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        if only_title:
            print(f"\n{Colors.WHITE}{title.rjust(DebugLogger.LINE_LENGTH)}{Colors.RESET}")
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """`> Module ........ [OK]` line."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        label = f"> {module}"
        status_str = f"[{status}]"
        pad = max(30 - len(label), 1)
        dots = max(DebugLogger.LINE_LENGTH - len(label) - pad - len(status_str) - 1, 1)
        color = _ENTRY_COLORS.get(status.upper(), Colors.WHITE)
        print(f"{Colors.WHITE}{label}{' ' * pad}{'.' * dots} {color}{status_str}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{' ' * (level * 4)}• {Colors.WHITE}{detail}{Colors.RESET}")
