# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import id3scan.frames
import id3scan.tags
import id3scan.id3

from id3scan.errors import *
from id3scan.frames import Frame, Frames, frame_id, PADDING, INVALID
from id3scan.tags import scan, read_frames, decode, Tag23, Tag24
from id3scan.locator import TagLocator
from id3scan.fileutil import BufferPool

version = (0, 1, 0)
versionstr = ".".join((str(v) for v in version))
