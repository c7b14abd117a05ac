# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Decoded ID3v2 frames and their text payloads."""

import collections.abc
import re

from id3scan.errors import *
import id3scan.id3 as id3

FRAME23_STATUS_DISCARD_ON_TAG_ALTER = 0x8000
FRAME23_STATUS_DISCARD_ON_FILE_ALTER = 0x4000
FRAME23_STATUS_READ_ONLY = 0x2000
FRAME23_FORMAT_COMPRESSED = 0x0080
FRAME23_FORMAT_ENCRYPTED = 0x0040
FRAME23_FORMAT_GROUP = 0x0020

FRAME24_STATUS_DISCARD_ON_TAG_ALTER = 0x4000
FRAME24_STATUS_DISCARD_ON_FILE_ALTER = 0x2000
FRAME24_STATUS_READ_ONLY = 0x1000
FRAME24_FORMAT_GROUP = 0x0040
FRAME24_FORMAT_COMPRESSED = 0x0008
FRAME24_FORMAT_ENCRYPTED = 0x0004
FRAME24_FORMAT_UNSYNCHRONISED = 0x0002
FRAME24_FORMAT_DATA_LENGTH_INDICATOR = 0x0001

# Frame format flags occupy the low byte in both v2.3 and v2.4.
ENCODING_FLAGS = 0x00FF

_ISO8859_1 = 0x00
_UTF16 = 0x01
_UTF16BE = 0x02
_UTF8 = 0x03

# Some programs upgrading v2.2 tags write three character ids
# padded with a zero byte.
_FRAME_ID = re.compile(b"[A-Z0-9]{3}[A-Z0-9\x00]")

class _Sentinel:
    def __init__(self, name):
        self.name = name
    def __repr__(self):
        return self.name

PADDING = _Sentinel("PADDING")
INVALID = _Sentinel("INVALID")

def frame_id(data):
    """Decode the four byte frame id at the start of data.

    Returns the id as a str, PADDING if the bytes are all zero,
    or INVALID otherwise.
    """
    data = bytes(data[0:4])
    if len(data) != 4:
        raise ValueError("Frame id needs four bytes")
    if _FRAME_ID.fullmatch(data):
        return data.decode("ASCII")
    if not any(data):
        return PADDING
    return INVALID

class Frame:
    """A single ID3v2 frame.

    frameid is the four character id, version is 3 or 4, flags is the
    16-bit flag word and data is the frame payload after the removal of
    any unsynchronisation.  Frames are immutable.
    """
    __slots__ = ("frameid", "version", "flags", "data")

    def __init__(self, frameid, version, flags, data):
        object.__setattr__(self, "frameid", frameid)
        object.__setattr__(self, "version", version)
        object.__setattr__(self, "flags", flags)
        object.__setattr__(self, "data", bytes(data))

    def __setattr__(self, name, value):
        raise AttributeError("Frame objects are read-only")

    def __delattr__(self, name):
        raise AttributeError("Frame objects are read-only")

    def __eq__(self, other):
        return (isinstance(other, Frame)
                and self.frameid == other.frameid
                and self.version == other.version
                and self.flags == other.flags
                and self.data == other.data)

    def __hash__(self):
        return hash((self.frameid, self.version, self.flags, self.data))

    def __repr__(self):
        return "Frame({0!r}, {1!r}, 0x{2:04x}, <{3} bytes>)".format(
            self.frameid, self.version, self.flags, len(self.data))

    def __str__(self):
        data, terminus = self.data, ""
        if len(data) > 128:
            data, terminus = data[:128], "..."
        version = {3: "v2.3", 4: "v2.4"}.get(self.version, "?")
        return "{0} [{1}, flags=0x{2:04x}] {3}:{4!r}{5}".format(
            id3.describe(self.frameid), version, self.flags,
            len(self.data), data, terminus)

    def text(self):
        """Interpret the frame data as a text string.

        The first byte of the payload selects the encoding.  Missing
        string terminators are tolerated.  Raises TextDecodeError if the
        data cannot be interpreted as text.
        """
        if len(self.data) == 0:
            raise EmptyFrameError("Frame {0} has no data".format(self.frameid))
        if self.flags & ENCODING_FLAGS:
            raise EncodingFlagsError(
                "Frame {0} has unsupported format flags 0x{1:02X}"
                .format(self.frameid, self.flags & ENCODING_FLAGS))

        encoding = self.data[0]
        data = self.data[1:]

        if encoding == _ISO8859_1:
            if any(b & 0x80 for b in data):
                text = data.decode("iso-8859-1")
                if text.endswith("\x00"):
                    text = text[:-1]
                return text
            # Pure ASCII reads the same as UTF-8.
            encoding = _UTF8

        if encoding == _UTF8:
            if data.endswith(b"\x00"):
                data = data[:-1]
            return data.decode("utf-8", "replace")

        if encoding == _UTF16:
            if len(data) < 2:
                raise BOMError("Frame {0} is missing its UTF-16 BOM".format(self.frameid))
            if data[0:2] == b"\xFF\xFE":
                codec = "utf-16-le"
            elif data[0:2] == b"\xFE\xFF":
                codec = "utf-16-be"
            else:
                raise BOMError("Frame {0} has an invalid UTF-16 BOM".format(self.frameid))
            return self._utf16(data[2:], codec)

        if encoding == _UTF16BE:
            return self._utf16(data, "utf-16-be")

        raise UnsupportedEncodingError(
            "Frame {0} uses unsupported encoding 0x{1:02X}".format(self.frameid, encoding))

    def _utf16(self, data, codec):
        if len(data) % 2:
            raise OddLengthError(
                "Frame {0} has an odd number of UTF-16 bytes".format(self.frameid))
        if data.endswith(b"\x00\x00"):
            data = data[:-2]
        return data.decode(codec, "replace")

class Frames(collections.abc.Sequence):
    """The frames of all tags found in a file, in file order.

    Duplicate frames are kept; lookup() returns the last one.
    """
    def __init__(self, frames=()):
        self._frames = tuple(frames)

    def __getitem__(self, index):
        return self._frames[index]

    def __len__(self):
        return len(self._frames)

    def __contains__(self, item):
        if isinstance(item, (str, bytes)):
            return self.lookup(item) is not None
        return super().__contains__(item)

    def __eq__(self, other):
        if isinstance(other, Frames):
            return self._frames == other._frames
        return NotImplemented

    def __hash__(self):
        return hash(self._frames)

    def __repr__(self):
        return "<Frames: {0}>".format(", ".join(f.frameid for f in self._frames))

    def lookup(self, frameid):
        "Return the last frame with the given id, or None."
        if isinstance(frameid, bytes):
            frameid = frameid.decode("ASCII", "replace")
        for frame in reversed(self._frames):
            if frame.frameid == frameid:
                return frame
        return None
