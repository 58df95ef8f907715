"""
dpip_lib.config - Constants and settings for dpip.

This package contains:
- constants: Paths, sockopt ids and dataplane result codes
- settings: IPC socket path and timeout resolution
"""

from .constants import (
    IPC_FILE,
    DPIP_CONFIG_FILE,
    DEFAULT_TIMEOUT,
    SOCKOPT_SET_ROUTE_ADD,
    SOCKOPT_SET_ROUTE_DEL,
    SOCKOPT_SET_ROUTE_SET,
    SOCKOPT_SET_ROUTE_FLUSH,
    SOCKOPT_GET_ROUTE_SHOW,
    EDPVS_OK,
    EDPVS_INVAL,
    EDPVS_NOMEM,
    EDPVS_EXIST,
    EDPVS_NOTEXIST,
    EDPVS_NOTSUPP,
    EDPVS_IO,
)

from .settings import (
    load_dpip_config,
    get_ipc_file,
    get_timeout,
)

__all__ = [
    # Constants
    'IPC_FILE',
    'DPIP_CONFIG_FILE',
    'DEFAULT_TIMEOUT',
    'SOCKOPT_SET_ROUTE_ADD',
    'SOCKOPT_SET_ROUTE_DEL',
    'SOCKOPT_SET_ROUTE_SET',
    'SOCKOPT_SET_ROUTE_FLUSH',
    'SOCKOPT_GET_ROUTE_SHOW',
    'EDPVS_OK',
    'EDPVS_INVAL',
    'EDPVS_NOMEM',
    'EDPVS_EXIST',
    'EDPVS_NOTEXIST',
    'EDPVS_NOTSUPP',
    'EDPVS_IO',
    # Settings
    'load_dpip_config',
    'get_ipc_file',
    'get_timeout',
]
