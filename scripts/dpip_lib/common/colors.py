"""
ANSI color codes and logging utilities for dpip CLI tools.
"""

import sys


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    MAGENTA = "\033[0;35m"
    BOLD = "\033[1m"
    NC = "\033[0m"  # No Color / Reset


_verbose = False


def set_verbose(enabled: bool) -> None:
    """Enable or disable debug output for this process."""
    global _verbose
    _verbose = enabled


def log(msg: str) -> None:
    """Log a success message in green."""
    print(f"{Colors.GREEN}[+]{Colors.NC} {msg}")


def warn(msg: str) -> None:
    """Log a warning message in yellow."""
    print(f"{Colors.YELLOW}[!]{Colors.NC} {msg}", file=sys.stderr)


def error(msg: str) -> None:
    """Log an error message in red."""
    print(f"{Colors.RED}[ERROR]{Colors.NC} {msg}", file=sys.stderr)


def info(msg: str) -> None:
    """Log an informational message in cyan."""
    print(f"{Colors.CYAN}[i]{Colors.NC} {msg}")


def debug(msg: str) -> None:
    """Log a diagnostic message in magenta, only when verbose."""
    if _verbose:
        print(f"{Colors.MAGENTA}[debug]{Colors.NC} {msg}", file=sys.stderr)
