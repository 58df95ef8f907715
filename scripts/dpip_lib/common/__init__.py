"""
dpip_lib.common - Shared utilities for dpip tools

This module provides:
- colors: ANSI color codes and logging functions
- sockopt: Dataplane sockopt IPC client
- prompts: Interactive prompt utilities
"""

from .colors import Colors, log, warn, error, info, debug, set_verbose
from .sockopt import SockoptClient, SockoptError, ResponseBuffer

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info', 'debug', 'set_verbose',
    'SockoptClient', 'SockoptError', 'ResponseBuffer',
]
