"""
dpip_lib - Route configuration library for the dpip tool

This package contains the components behind `dpip route`: parsing route
descriptions, exchanging route records with the DPVS dataplane over its
sockopt IPC socket, and rendering the returned routes.
"""

__version__ = "1.0.0"
