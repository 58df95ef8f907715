import pytest

from dpip_lib.common import ResponseBuffer, set_verbose


class CountingBuffer(ResponseBuffer):
    """Response buffer that records how often it was released."""

    def __init__(self, data):
        super().__init__(data)
        self.release_count = 0

    def release(self):
        self.release_count += 1
        super().release()


class FakeTransport:
    """Stands in for the sockopt client; records every exchange."""

    def __init__(self, response=b'', error=None):
        self.response = response
        self.error = error
        self.calls = list()
        self.buffers = list()

    def set(self, opt, payload=b''):
        self.calls.append(('set', opt, payload))
        if self.error is not None:
            raise self.error

    def get(self, opt, payload=b''):
        self.calls.append(('get', opt, payload))
        if self.error is not None:
            raise self.error
        buffer = CountingBuffer(self.response)
        self.buffers.append(buffer)
        return buffer


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture(autouse=True)
def quiet():
    set_verbose(False)
    yield
    set_verbose(False)
