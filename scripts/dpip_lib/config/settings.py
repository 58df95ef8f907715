"""
Settings resolution for dpip.

This module handles loading the dpip config file and resolving the IPC
socket path and timeout.
"""

import json
import os
from pathlib import Path
from typing import Optional

from .constants import DEFAULT_TIMEOUT, DPIP_CONFIG_FILE, IPC_FILE


def load_dpip_config(path: Path = DPIP_CONFIG_FILE) -> dict:
    """Load dpip settings from config file."""
    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
            if isinstance(data, dict):
                return data
        except (json.JSONDecodeError, IOError):
            pass
    return {}


def get_ipc_file(arg_path: Optional[str] = None, config_path: Path = DPIP_CONFIG_FILE) -> Path:
    """Get IPC socket path from args, env, config, or default."""
    if arg_path:
        return Path(arg_path)
    if os.environ.get("DPVS_IPC_FILE"):
        return Path(os.environ["DPVS_IPC_FILE"])
    config = load_dpip_config(config_path)
    if config.get("ipc_file"):
        return Path(config["ipc_file"])
    return IPC_FILE


def get_timeout(arg_timeout: Optional[float] = None, config_path: Path = DPIP_CONFIG_FILE) -> float:
    """Get socket timeout (seconds) from args, env, config, or default."""
    if arg_timeout is not None:
        return arg_timeout
    if os.environ.get("DPIP_TIMEOUT"):
        try:
            return float(os.environ["DPIP_TIMEOUT"])
        except ValueError:
            pass
    config = load_dpip_config(config_path)
    if isinstance(config.get("timeout"), (int, float)):
        return float(config["timeout"])
    return DEFAULT_TIMEOUT
