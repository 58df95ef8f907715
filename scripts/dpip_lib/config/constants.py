"""
Configuration constants for dpip.

Paths, sockopt identifiers and result codes used across the tool.
"""

from pathlib import Path


# IPC socket and configuration paths
IPC_FILE = Path("/var/run/dpvs.ipc")
DPIP_CONFIG_FILE = Path("/etc/dpip/dpip.json")
DEFAULT_TIMEOUT = 30.0

# Sockopt message framing
SOCKOPT_VERSION = 0x10000
SOCKOPT_GET = 0
SOCKOPT_SET = 1
SOCKOPT_ERRSTR_LEN = 64

# Route sockopt ids (set and get share a number space per direction)
SOCKOPT_SET_ROUTE_ADD = 300
SOCKOPT_SET_ROUTE_DEL = 301
SOCKOPT_SET_ROUTE_SET = 302
SOCKOPT_SET_ROUTE_FLUSH = 303
SOCKOPT_GET_ROUTE_SHOW = 300

# Dataplane result codes
EDPVS_OK = 0
EDPVS_INVAL = -1
EDPVS_NOMEM = -2
EDPVS_EXIST = -3
EDPVS_NOTEXIST = -4
EDPVS_NOTSUPP = -14
EDPVS_IO = -22
