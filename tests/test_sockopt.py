import os
import shutil
import socket
import struct
import tempfile
import threading

import pytest

from dpip_lib.common import ResponseBuffer, SockoptClient, SockoptError
from dpip_lib.common.sockopt import MSG_HEADER, REPLY_HEADER
from dpip_lib.config import EDPVS_EXIST, EDPVS_IO
from dpip_lib.config.constants import SOCKOPT_GET, SOCKOPT_SET, SOCKOPT_VERSION


def recv_exact(conn, size):
    data = b''
    while len(data) < size:
        chunk = conn.recv(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


class OneShotServer:
    """Answers a single sockopt request on a UNIX socket."""

    def __init__(self, path, errcode=0, errstr=b'', data=b'', version=SOCKOPT_VERSION, truncate=False):
        self.path = path
        self.errcode = errcode
        self.errstr = errstr
        self.data = data
        self.version = version
        self.truncate = truncate
        self.request = None

        self.listener = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        self.listener.bind(path)
        self.listener.listen(1)
        self.thread = threading.Thread(target=self.serve, daemon=True)
        self.thread.start()

    def serve(self):
        conn, _ = self.listener.accept()
        with conn:
            header = recv_exact(conn, MSG_HEADER.size)
            version, opt, msg_type, length = MSG_HEADER.unpack(header)
            payload = recv_exact(conn, length)
            self.request = (version, opt, msg_type, payload)

            reply = REPLY_HEADER.pack(self.version, opt, msg_type, self.errcode,
                                      self.errstr, len(self.data))
            body = self.data
            if self.truncate:
                body = body[:len(body) // 2]
            conn.sendall(reply + body)

    def close(self):
        self.thread.join(timeout=5)
        self.listener.close()


@pytest.fixture
def socket_dir():
    # UNIX socket paths are length limited; keep this one short.
    path = tempfile.mkdtemp(prefix='dpip')
    yield path
    shutil.rmtree(path, ignore_errors=True)


def test_set_request(socket_dir):

    path = os.path.join(socket_dir, 'ipc')
    server = OneShotServer(path)

    client = SockoptClient(path, timeout=5)
    client.set(301, b'payload')
    server.close()

    assert server.request == (SOCKOPT_VERSION, 301, SOCKOPT_SET, b'payload')


def test_get_request(socket_dir):

    path = os.path.join(socket_dir, 'ipc')
    response = struct.pack('=i', 0)
    server = OneShotServer(path, data=response)

    client = SockoptClient(path, timeout=5)
    buffer = client.get(300, b'filter')
    server.close()

    assert server.request == (SOCKOPT_VERSION, 300, SOCKOPT_GET, b'filter')
    assert isinstance(buffer, ResponseBuffer)

    with buffer:
        assert buffer.data == response
        assert len(buffer) == 4

    assert buffer.released


def test_error_reply(socket_dir):

    path = os.path.join(socket_dir, 'ipc')
    server = OneShotServer(path, errcode=EDPVS_EXIST, errstr=b'already exist')

    client = SockoptClient(path, timeout=5)
    with pytest.raises(SockoptError) as caught:
        client.set(300, b'x')
    server.close()

    assert caught.value.code == EDPVS_EXIST
    assert caught.value.message == 'already exist'


def test_version_mismatch(socket_dir):

    path = os.path.join(socket_dir, 'ipc')
    server = OneShotServer(path, version=0x20000)

    client = SockoptClient(path, timeout=5)
    with pytest.raises(SockoptError) as caught:
        client.set(300)
    server.close()

    assert caught.value.code == EDPVS_IO


def test_short_reply(socket_dir):

    path = os.path.join(socket_dir, 'ipc')
    server = OneShotServer(path, data=bytes(100), truncate=True)

    client = SockoptClient(path, timeout=5)
    with pytest.raises(SockoptError) as caught:
        client.get(300)
    server.close()

    assert caught.value.code == EDPVS_IO
    assert 'short read' in caught.value.message


def test_missing_socket(socket_dir):

    client = SockoptClient(os.path.join(socket_dir, 'absent'))

    with pytest.raises(SockoptError) as caught:
        client.set(300)

    assert caught.value.code == EDPVS_IO
    assert 'not found' in str(caught.value)


def test_buffer_release_is_single_use():

    buffer = ResponseBuffer(b'abc')
    buffer.release()

    with pytest.raises(RuntimeError):
        buffer.release()

    with pytest.raises(RuntimeError):
        buffer.data
