# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""List the ID3v2 frames of audio files."""

import argparse
import sys
import warnings

from contextlib import contextmanager

import id3scan

@contextmanager
def print_warnings(filename, options):
    with warnings.catch_warnings(record=True) as ws:
        warnings.simplefilter("always", id3scan.Warning)
        try:
            yield None
        finally:
            if not options.quiet and len(ws) > 0:
                for w in ws:
                    print(filename + ":warning: " + str(w.message),
                          file=sys.stderr)
            sys.stderr.flush()

def list_frames(filename, options, out=sys.stdout):
    frames = id3scan.read_frames(filename)
    print("{0}: {1} frames".format(filename, len(frames)), file=out)
    for frame in frames:
        print("    " + str(frame), file=out)
        if options.text and frame.frameid.startswith("T"):
            try:
                print("        = " + repr(frame.text()), file=out)
            except id3scan.TextDecodeError as e:
                print("        ! " + str(e), file=out)

def main(argv=None, out=sys.stdout):
    parser = argparse.ArgumentParser(
        prog="id3scan",
        description="List the ID3v2.3/ID3v2.4 frames found in each FILE.")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="don't print warnings")
    parser.add_argument("-t", "--text", action="store_true",
                        help="also decode the contents of text frames")
    parser.add_argument("files", nargs="+", metavar="FILE")
    options = parser.parse_args(argv)

    status = 0
    for filename in options.files:
        with print_warnings(filename, options):
            try:
                list_frames(filename, options, out)
            except (id3scan.Error, EnvironmentError) as e:
                print("<{0}>: {1}".format(filename, e), file=sys.stderr)
                status = 1
    return status

if __name__ == "__main__":
    sys.exit(main())
