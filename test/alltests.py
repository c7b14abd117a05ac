#!/usr/bin/env python3
# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import warnings

import id3scan

import test_conversion
import test_fileutil
import test_locator
import test_frames
import test_tags
import test_commandline

suite = unittest.TestSuite()
suite.addTest(test_conversion.suite)
suite.addTest(test_fileutil.suite)
suite.addTest(test_locator.suite)
suite.addTest(test_frames.suite)
suite.addTest(test_tags.suite)
suite.addTest(test_commandline.suite)

if __name__ == "__main__":
    warnings.simplefilter("always", id3scan.Warning)
    unittest.main(defaultTest="suite")
