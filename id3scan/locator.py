# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Incremental search for ID3v2 tag blocks in a byte stream.

A TagLocator is fed chunks of input with feed() and asked for complete
tag blocks with next_tag().  Each call to next_tag() ends in exactly one
of three ways:

 * it returns a bytes object holding one complete tag block (header,
   extended header, frames, padding and footer);
 * it returns None, meaning more input is needed (or, once the caller
   has signalled the end of input, that there are no more tags);
 * it raises TruncatedInputError, because a tag block has started but
   the input ended before it was complete, or ResourceLimitError,
   because the tag block is larger than max_buffer_size.

Data that does not look like a tag header is skipped silently.
"""

from warnings import warn

from id3scan.errors import *
from id3scan.conversion import Syncsafe

TAG_UNSYNCHRONISED = 0x80
TAG_EXTENDED_HEADER = 0x40
TAG_EXPERIMENTAL = 0x20
TAG_FOOTER = 0x10
TAG_KNOWN_FLAGS = (TAG_UNSYNCHRONISED | TAG_EXTENDED_HEADER
                   | TAG_EXPERIMENTAL | TAG_FOOTER)

VERSION_MIN = 3
VERSION_MAX = 4

HEADER_SIZE = 10
FOOTER_SIZE = 10

_SIGNATURE = b"ID3"

class TagLocator:
    # Largest possible tag block: 28-bit size plus header and footer.
    max_buffer_size = (1 << 28) + 20

    def __init__(self, buffer=None, max_buffer_size=None):
        self._buffer = buffer if buffer is not None else bytearray()
        del self._buffer[:]
        self._offset = 0
        if max_buffer_size is not None:
            self.max_buffer_size = max_buffer_size

    def __repr__(self):
        return "<TagLocator: {0} bytes pending>".format(self.pending)

    @property
    def pending(self):
        "Number of buffered bytes not yet consumed."
        return len(self._buffer) - self._offset

    @property
    def space(self):
        "Number of bytes that can still be fed without exceeding max_buffer_size."
        return self.max_buffer_size - self.pending

    def feed(self, data):
        """Append data to the search buffer.

        Raises ResourceLimitError if the buffered data would exceed
        max_buffer_size.
        """
        if self._offset:
            del self._buffer[:self._offset]
            self._offset = 0
        if len(self._buffer) + len(data) > self.max_buffer_size:
            raise ResourceLimitError(
                "ID3v2 search buffer exceeds {0} bytes".format(self.max_buffer_size))
        self._buffer.extend(data)

    def next_tag(self, at_eof=False):
        """Return the next complete tag block, or None if none is available.

        at_eof tells the locator that no more data will be fed.
        """
        buf = self._buffer
        while True:
            i = buf.find(_SIGNATURE, self._offset)
            if i < 0:
                # Keep a possible partial signature at the end.
                self._offset = max(self._offset, len(buf) - (len(_SIGNATURE) - 1))
                return None
            self._offset = i

            if len(buf) - i < HEADER_SIZE:
                if at_eof:
                    raise TruncatedInputError("Truncated ID3v2 tag header")
                return None

            header = bytes(buf[i:i + HEADER_SIZE])
            size = _tag_size(header)
            if size is None:
                self._offset = i + len(_SIGNATURE)
                continue

            length = HEADER_SIZE + size
            if header[5] & TAG_FOOTER:
                length += FOOTER_SIZE
            if length > self.max_buffer_size:
                raise ResourceLimitError(
                    "ID3v2 tag needs {0} bytes, buffer limit is {1}"
                    .format(length, self.max_buffer_size))

            if len(buf) - i < length:
                if at_eof:
                    raise TruncatedInputError(
                        "ID3v2 tag needs {0} bytes, {1} available"
                        .format(length, len(buf) - i))
                return None

            self._offset = i + length
            return bytes(buf[i:i + length])

def _tag_size(header):
    """Return the size field of a tag header, or None if the header is to be skipped.

    An ID3v2 tag can be detected with the pattern
    $49 44 33 yy yy xx zz zz zz zz, where yy is less than $FF, xx is the
    flags byte and zz is less than $80.  Anything failing that is taken
    to be a stray "ID3" in the audio data.
    """
    size = Syncsafe.decode(header[6:10])
    if header[3] == 0xFF or header[4] == 0xFF or size is None:
        return None
    if not VERSION_MIN <= header[3] <= VERSION_MAX:
        warn("Skipping unsupported ID3v2.{0}.{1} tag".format(header[3], header[4]),
             TagWarning)
        return None
    if header[5] & ~TAG_KNOWN_FLAGS:
        warn("Skipping ID3v2.{0} tag with unknown flags 0x{1:02X}"
             .format(header[3], header[5]), TagWarning)
        return None
    return size
