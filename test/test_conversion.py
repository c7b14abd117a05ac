# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import random
import warnings

import id3scan
from id3scan.conversion import *

class SyncsafeTestCase(unittest.TestCase):
    def testDecode(self):
        self.assertEqual(Syncsafe.decode(b"\x00\x00\x00\x00"), 0)
        self.assertEqual(Syncsafe.decode(b"\x00\x00\x02\x01"), 257)
        self.assertEqual(Syncsafe.decode(b"\x7F\x7F\x7F\x7F"), (1 << 28) - 1)

    def testRecompose(self):
        for i in range(200):
            data = bytes(random.randint(0, 127) for j in range(4))
            value = Syncsafe.decode(data)
            self.assertTrue(0 <= value < 1 << 28)
            self.assertEqual(Syncsafe.encode(value, width=4), data)

    def testInvalid(self):
        for pos in range(4):
            for b in (0x80, 0xC3, 0xFF):
                data = bytearray(4)
                data[pos] = b
                self.assertIsNone(Syncsafe.decode(data))

    def testEncodeTooLarge(self):
        self.assertRaises(ValueError, Syncsafe.encode, 1 << 28, width=4)
        self.assertRaises(ValueError, Syncsafe.encode, -1, width=4)

class Int8TestCase(unittest.TestCase):
    def testDecode(self):
        self.assertEqual(Int8.decode(b"\x00\x00\x00\xC8"), 200)
        self.assertEqual(Int8.decode(b"\xFF\xFF\xFF\xFF"), 0xFFFFFFFF)
        self.assertEqual(Int8.decode(b"\x40\x02"), 0x4002)

    def testEncode(self):
        self.assertEqual(Int8.encode(200, width=4), b"\x00\x00\x00\xC8")
        self.assertEqual(Int8.encode(0, width=2), b"\x00\x00")
        self.assertRaises(ValueError, Int8.encode, 0x10000, width=2)
        self.assertRaises(TypeError, Int8.encode, None, width=2)

class UnsyncTestCase(unittest.TestCase):
    def testDecode(self):
        self.assertEqual(Unsync.decode(b"\xFF\x00\xE0"), b"\xFF\xE0")
        self.assertEqual(Unsync.decode(b"\xFF\x00\x00"), b"\xFF\x00")
        self.assertEqual(Unsync.decode(b"\xFF\x00\xFF\x00"), b"\xFF\xFF")
        self.assertEqual(Unsync.decode(b"\x00\xFF"), b"\x00\xFF")
        self.assertEqual(Unsync.decode(b""), b"")

    def testDecodeWithoutStuffing(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", id3scan.Warning)
            for i in range(100):
                data = bytes(random.randint(0, 255) for j in range(random.randint(0, 64)))
                data = data.replace(b"\xFF\x00", b"\xFF\x01")
                self.assertEqual(Unsync.decode(data), data)

    def testStuffThenDestuff(self):
        samples = [b"", b"\xFF", b"\xFF\xFF", b"\xFF\x00", b"\xFF\xE0\x00",
                   b"\x00\xFF\x00\x00\xFF"]
        samples.extend(bytes(random.choice((0x00, 0xFF, 0xE0, 0x41))
                             for j in range(random.randint(0, 32)))
                       for i in range(100))
        with warnings.catch_warnings():
            warnings.simplefilter("error", id3scan.Warning)
            for data in samples:
                stuffed = Unsync.encode(data)
                self.assertNotIn(b"\xFF\xE0", stuffed)
                self.assertEqual(Unsync.decode(stuffed), data)

    def testFalseSyncWarns(self):
        with self.assertWarns(id3scan.FrameWarning):
            self.assertEqual(Unsync.decode(b"\xFF\xE0"), b"\xFF\xE0")

suite = unittest.TestSuite([
    unittest.TestLoader().loadTestsFromTestCase(SyncsafeTestCase),
    unittest.TestLoader().loadTestsFromTestCase(Int8TestCase),
    unittest.TestLoader().loadTestsFromTestCase(UnsyncTestCase),
    ])

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
