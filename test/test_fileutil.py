# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import io
import os
import tempfile
import threading

from id3scan.fileutil import *

class OpenedTestCase(unittest.TestCase):
    def testFileObject(self):
        file = io.BytesIO(b"data")
        with opened(file, "rb") as f:
            self.assertIs(f, file)
        self.assertFalse(file.closed)

    def testFilename(self):
        file = tempfile.NamedTemporaryFile(prefix="id3scantest-", suffix=".tmp", delete=False)
        try:
            file.write(b"data")
            file.close()
            with opened(file.name, "rb") as f:
                self.assertEqual(f.read(), b"data")
            self.assertTrue(f.closed)
        finally:
            os.unlink(file.name)

class BufferPoolTestCase(unittest.TestCase):
    def testReuse(self):
        pool = BufferPool(max_size=2)
        with pool.buffer() as buf:
            self.assertEqual(len(buf), 0)
            buf.extend(b"scratch")
            first = buf
        self.assertEqual(len(pool), 1)
        with pool.buffer() as buf:
            self.assertIs(buf, first)
            self.assertEqual(len(buf), 0)

    def testReturnedOnError(self):
        pool = BufferPool()
        try:
            with pool.buffer() as buf:
                buf.extend(b"partial")
                raise ValueError("boom")
        except ValueError:
            pass
        self.assertEqual(len(pool), 1)
        with pool.buffer() as buf:
            self.assertEqual(len(buf), 0)

    def testMaxSize(self):
        pool = BufferPool(max_size=1)
        with pool.buffer() as a:
            with pool.buffer() as b:
                self.assertIsNot(a, b)
        self.assertEqual(len(pool), 1)

    def testConcurrentBorrowers(self):
        pool = BufferPool(max_size=8)
        count = 6
        barrier = threading.Barrier(count)
        ids = []
        lock = threading.Lock()

        def borrow():
            with pool.buffer() as buf:
                buf.extend(b"x" * 10)
                barrier.wait(timeout=10)
                with lock:
                    ids.append(id(buf))
                self.assertEqual(len(buf), 10)

        threads = [threading.Thread(target=borrow) for i in range(count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(set(ids)), count)
        self.assertEqual(len(pool), count)

suite = unittest.TestSuite([
    unittest.TestLoader().loadTestsFromTestCase(OpenedTestCase),
    unittest.TestLoader().loadTestsFromTestCase(BufferPoolTestCase),
    ])

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
