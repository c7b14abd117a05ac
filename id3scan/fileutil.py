# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""File and buffer utilities."""

from contextlib import contextmanager
from threading import Lock

@contextmanager
def opened(filename, mode):
    "Open filename, or do nothing if filename is already an open file object"
    if isinstance(filename, str):
        file = open(filename, mode)
        try: 
            yield file
        finally: 
            if not file.closed:
                file.close()
    else:
        yield filename

class BufferPool:
    """A pool of reusable scratch buffers shared between concurrent scans.

    Buffers are checked out with the buffer() context manager; each one
    belongs exclusively to its borrower until the context exits, at which
    point it is emptied and handed back, whether or not the borrower
    raised.  At most max_size idle buffers are retained.
    """

    def __init__(self, max_size=4):
        self.max_size = max_size
        self._pool = []
        self._lock = Lock()

    def __repr__(self):
        return "<BufferPool: {0}/{1} idle>".format(len(self._pool), self.max_size)

    def __len__(self):
        with self._lock:
            return len(self._pool)

    @contextmanager
    def buffer(self):
        "Check out an empty bytearray for the duration of the context."
        with self._lock:
            try:
                buf = self._pool.pop()
            except IndexError:
                buf = bytearray()
        try:
            yield buf
        finally:
            del buf[:]
            with self._lock:
                if len(self._pool) < self.max_size:
                    self._pool.append(buf)

default_pool = BufferPool()
