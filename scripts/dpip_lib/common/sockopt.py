"""
Sockopt transport for the DPVS dataplane.

Provides a client for exchanging request/response messages with the
dataplane over its UNIX-domain IPC socket.
"""

import socket
import struct
from pathlib import Path
from typing import Optional, Union

from dpip_lib.config.constants import (
    DEFAULT_TIMEOUT,
    EDPVS_IO,
    SOCKOPT_ERRSTR_LEN,
    SOCKOPT_GET,
    SOCKOPT_SET,
    SOCKOPT_VERSION,
)
from .colors import debug


# version, id, type, len
MSG_HEADER = struct.Struct("=IIIQ")
# version, id, type, errcode, errstr, len
REPLY_HEADER = struct.Struct(f"=IIIi{SOCKOPT_ERRSTR_LEN}sQ")


class SockoptError(Exception):
    """Raised when the dataplane (or the socket to it) reports a failure."""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.message} (code {self.code})"


class ResponseBuffer:
    """
    Response data returned by a get exchange.

    The buffer must be released exactly once by its owner. It can be used
    as a context manager, which releases it on exit.
    """

    def __init__(self, data: bytes):
        self._data = data
        self.released = False

    @property
    def data(self) -> bytes:
        if self.released:
            raise RuntimeError("response buffer used after release")
        return self._data

    def __len__(self) -> int:
        return len(self.data)

    def release(self) -> None:
        if self.released:
            raise RuntimeError("response buffer released twice")
        self.released = True
        self._data = b""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    """Read exactly size bytes from sock."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = sock.recv(remaining)
        if not chunk:
            raise SockoptError(EDPVS_IO, f"short read from dataplane ({size - remaining}/{size} bytes)")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


class SockoptClient:
    """Client for the dataplane sockopt IPC socket."""

    def __init__(self, path: Union[str, Path], timeout: Optional[float] = DEFAULT_TIMEOUT):
        self.path = Path(path)
        self.timeout = timeout

    def set(self, opt: int, payload: bytes = b"") -> None:
        """Send a set request. Returns on an empty acknowledgement."""
        self._exchange(opt, SOCKOPT_SET, payload)

    def get(self, opt: int, payload: bytes = b"") -> ResponseBuffer:
        """Send a get request and return the response buffer."""
        return ResponseBuffer(self._exchange(opt, SOCKOPT_GET, payload))

    def _connect(self) -> socket.socket:
        if not self.path.exists():
            raise SockoptError(EDPVS_IO, f"dpvs socket not found: {self.path}")

        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        sock.settimeout(self.timeout)
        try:
            sock.connect(str(self.path))
        except OSError as e:
            sock.close()
            raise SockoptError(EDPVS_IO, f"cannot connect to {self.path}: {e}")
        return sock

    def _exchange(self, opt: int, msg_type: int, payload: bytes) -> bytes:
        header = MSG_HEADER.pack(SOCKOPT_VERSION, opt, msg_type, len(payload))
        debug(f"sockopt {'get' if msg_type == SOCKOPT_GET else 'set'} {opt}: {len(payload)} bytes")

        sock = self._connect()
        try:
            sock.sendall(header + payload)
            reply = _recv_exact(sock, REPLY_HEADER.size)
            version, reply_id, reply_type, errcode, errstr, length = REPLY_HEADER.unpack(reply)

            if version != SOCKOPT_VERSION:
                raise SockoptError(EDPVS_IO, f"sockopt version mismatch: {version:#x}")
            if errcode != 0:
                message = errstr.split(b"\0", 1)[0].decode("utf-8", "replace")
                raise SockoptError(errcode, message or "request failed")

            data = _recv_exact(sock, length) if length else b""
        except OSError as e:
            raise SockoptError(EDPVS_IO, f"sockopt exchange failed: {e}")
        finally:
            sock.close()

        debug(f"sockopt reply {reply_id}: {len(data)} bytes")
        return data
