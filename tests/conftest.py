"""Shared fixtures for Ecoji tests."""

import pytest

from ecoji.core.alphabet import VERSIONS


@pytest.fixture(params=VERSIONS, ids=lambda v: f"v{v.number}")
def version(request):
    """Run a test once per alphabet version."""
    return request.param


class FailingWriter:
    """Binary destination that raises OSError after a number of writes."""

    def __init__(self, fail_after=0):
        self.fail_after = fail_after
        self.chunks = []

    def write(self, data):
        if len(self.chunks) >= self.fail_after:
            raise OSError("disk full")
        self.chunks.append(bytes(data))
        return len(data)


class TrickleReader:
    """Binary source that returns at most one byte per read."""

    def __init__(self, data):
        self.data = data
        self.pos = 0

    def read(self, n=-1):
        chunk = self.data[self.pos:self.pos + 1]
        self.pos += len(chunk)
        return chunk


@pytest.fixture
def failing_writer():
    return FailingWriter


@pytest.fixture
def trickle_reader():
    return TrickleReader
