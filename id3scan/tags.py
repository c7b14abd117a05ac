# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import abc
import io

from abc import abstractmethod
from warnings import warn

from id3scan.errors import *
from id3scan.conversion import *
from id3scan.locator import *
from id3scan.frames import *

import id3scan.fileutil as fileutil

FRAME_HEADER_SIZE = 10

CHUNK_SIZE = 4 << 10

def scan(file, *, chunk_size=None, pool=None, max_buffer_size=None):
    """Read all ID3v2.3 and ID3v2.4 tags from the open binary file and
    return their frames in file order.

    Raises StructuralError if a tag is malformed, TruncatedInputError if
    the file ends inside a tag, and ResourceLimitError if a tag
    would not fit in the search buffer.
    """
    if chunk_size is None:
        chunk_size = CHUNK_SIZE
    if pool is None:
        pool = fileutil.default_pool
    frames = []
    with pool.buffer() as buffer:
        locator = TagLocator(buffer, max_buffer_size)
        at_eof = False
        while True:
            data = locator.next_tag(at_eof)
            if data is not None:
                frames.extend(decode_tag(data).frames)
            elif at_eof:
                break
            else:
                # Never read past the space left in the buffer.
                space = locator.space
                if space <= 0:
                    raise ResourceLimitError(
                        "ID3v2 search buffer exceeds {0} bytes"
                        .format(locator.max_buffer_size))
                chunk = file.read(min(chunk_size, space))
                if chunk:
                    locator.feed(chunk)
                else:
                    at_eof = True
    return Frames(frames)

def read_frames(filename, **kwargs):
    with fileutil.opened(filename, "rb") as file:
        return scan(file, **kwargs)

def decode(data, **kwargs):
    return scan(io.BytesIO(data), **kwargs)

def decode_tag(data):
    """Decode a single tag block, as returned by TagLocator.

    The version byte selects Tag23 or Tag24.
    """
    assert data[0:3] == b"ID3", "TagLocator returned a non-tag"
    assert data[3] in _tag_versions, "TagLocator returned an unsupported tag"
    return _tag_versions[data[3]].decode(data)


class Tag(metaclass=abc.ABCMeta):
    """One ID3v2 tag block.

    Subclasses supply the version-dependent parts: how the extended
    header and frame sizes are encoded, and which frames need their
    unsynchronisation removed.
    """
    version = None

    # Frame flag bit that marks a frame as unsynchronised on its own
    _frame_unsync_flag = 0

    def __init__(self):
        self.flags = set()
        self.size = 0
        self.frames = []

    def __repr__(self):
        return "<{0}: ID3v2.{1} tag{2} of {4} bytes with {3} frames>".format(
            type(self).__name__,
            self.version,
            ("({0})".format(", ".join(sorted(self.flags)))
             if len(self.flags) > 0 else ""),
            len(self.frames),
            self.size)

    @classmethod
    def decode(cls, data):
        tag = cls()
        body = tag._read_header(data)
        body = tag._read_footer(body)
        if "extended_header" in tag.flags:
            body = tag._read_extended_header(body)
        tag.frames = list(tag._read_frames(body))
        return tag

    def _read_header(self, data):
        header = data[0:HEADER_SIZE]
        self._header = header
        flags = header[5]
        if flags & TAG_UNSYNCHRONISED:
            self.flags.add("unsynchronisation")
        if flags & TAG_EXTENDED_HEADER:
            self.flags.add("extended_header")
        if flags & TAG_EXPERIMENTAL:
            self.flags.add("experimental")
        if flags & TAG_FOOTER:
            self.flags.add("footer")
        self.size = len(data)
        return data[HEADER_SIZE:]

    def _read_footer(self, body):
        if "footer" not in self.flags:
            return body
        footer = body[-FOOTER_SIZE:]
        if footer[0:3] != b"3DI" or footer[3:] != self._header[3:]:
            raise FooterError("Invalid ID3v2.{0} footer".format(self.version))
        return body[:-FOOTER_SIZE]

    def _read_extended_header(self, body):
        if len(body) < 4:
            raise ExtendedHeaderError("ID3v2.{0} extended header is truncated"
                                      .format(self.version))
        size = self._extended_header_size(body[0:4])
        if size is None:
            raise ExtendedHeaderError("Invalid ID3v2.{0} extended header size"
                                      .format(self.version))
        if size > len(body):
            raise ExtendedHeaderError(
                "ID3v2.{0} extended header size {1} exceeds tag"
                .format(self.version, size))
        return body[size:]

    def _read_frames(self, body):
        pos = 0
        while len(body) - pos >= FRAME_HEADER_SIZE:
            header = body[pos:pos + FRAME_HEADER_SIZE]
            frameid = frame_id(header[0:4])
            if frameid is PADDING:
                break
            if frameid is INVALID:
                raise FrameIDError("Invalid frame id {0!r}".format(bytes(header[0:4])))
            size = self._frame_size(header[4:8])
            if size is None:
                raise FrameSizeError("Invalid size for frame {0}".format(frameid))
            flags = Int8.decode(header[8:10])
            start = pos + FRAME_HEADER_SIZE
            if size > len(body) - start:
                raise FrameOverflowError(
                    "Frame {0} size {1} exceeds length of tag data"
                    .format(frameid, size))
            data = body[start:start + size]
            if "unsynchronisation" in self.flags or flags & self._frame_unsync_flag:
                data = Unsync.decode(data)
                flags &= ~self._frame_unsync_flag
            yield Frame(frameid, self.version, flags, data)
            pos = start + size

        padding = body[pos:]
        if "footer" in self.flags and len(padding) > 0:
            raise PaddingWithFooterError(
                "ID3v2.{0} tag has both padding and a footer".format(self.version))
        if any(padding):
            raise PaddingError("Invalid ID3v2.{0} padding".format(self.version))

    @abstractmethod
    def _extended_header_size(self, data):
        "Return the total extended header size encoded in data, or None."

    @abstractmethod
    def _frame_size(self, data):
        "Return the frame size encoded in data, or None."


class Tag23(Tag):
    version = 3

    def _extended_header_size(self, data):
        # The v2.3 size field does not count itself.
        size = Int8.decode(data)
        if size != 6 and size != 10:
            warn("Unexpected size of ID3v2.3 extended header: {0}".format(size),
                 TagWarning)
        return size + 4

    def _frame_size(self, data):
        return Int8.decode(data)


class Tag24(Tag):
    version = 4
    _frame_unsync_flag = FRAME24_FORMAT_UNSYNCHRONISED

    def _extended_header_size(self, data):
        size = Syncsafe.decode(data)
        if size is not None and size < 6:
            warn("Unexpected size of ID3v2.4 extended header: {0}".format(size),
                 TagWarning)
        return size

    def _frame_size(self, data):
        return Syncsafe.decode(data)


_tag_versions = {
    3: Tag23,
    4: Tag24,
    }
