#!/usr/bin/env python3

from setuptools import setup

setup(
    name="id3scan",
    version="0.1.0",
    author="Karoly Lorentey",
    author_email="karoly@lorentey.hu",
    packages=["id3scan"],
    entry_points = {
        'console_scripts': ['id3scan = id3scan.commandline:main']
    },
    python_requires=">=3.6",
    license="BSD",
    description="Read-only ID3v2.3/ID3v2.4 frame scanner in pure Python 3",
    long_description="""
id3scan finds every ID3v2.3 and ID3v2.4 tag in a byte stream, validates
its framing and returns the frames in file order.  It works
incrementally, so a file never needs to be loaded in full, and it
decodes text frames in all four ID3v2 encodings, including the
spec-deviant variants that real encoders produce.
""",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Multimedia :: Sound/Audio"
        ],
    )
