# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""List of frames defined in the various ID3 versions.

Each frame id is available as a module-level constant, so that
frames.lookup(TIT2) reads naturally.  The descriptions are for display
only; frames decode the same way whether or not they appear here.
"""

frame_names = {}

def _frame(frameid, description):
    assert len(frameid) == 4 and frameid not in frame_names
    frame_names[frameid] = description
    return frameid

def describe(frameid):
    "Return a human-readable description of frameid."
    if frameid in frame_names:
        return "{0}: {1}".format(frameid, frame_names[frameid])
    return "FrameID({0!r})".format(frameid)


# ID3v2.4

# 4.1. Unique file identifier
UFID = _frame("UFID", "Unique file identifier")

# 4.2.1. Identification frames
TIT1 = _frame("TIT1", "Content group description")
TIT2 = _frame("TIT2", "Title/songname/content description")
TIT3 = _frame("TIT3", "Subtitle/Description refinement")
TALB = _frame("TALB", "Album/Movie/Show title")
TOAL = _frame("TOAL", "Original album/movie/show title")
TRCK = _frame("TRCK", "Track number/Position in set")
TPOS = _frame("TPOS", "Part of a set")
TSST = _frame("TSST", "Set subtitle")
TSRC = _frame("TSRC", "ISRC (international standard recording code)")

# 4.2.2. Involved persons frames
TPE1 = _frame("TPE1", "Lead performer(s)/Soloist(s)")
TPE2 = _frame("TPE2", "Band/orchestra/accompaniment")
TPE3 = _frame("TPE3", "Conductor/performer refinement")
TPE4 = _frame("TPE4", "Interpreted, remixed, or otherwise modified by")
TOPE = _frame("TOPE", "Original artist(s)/performer(s)")
TEXT = _frame("TEXT", "Lyricist/Text writer")
TOLY = _frame("TOLY", "Original lyricist(s)/text writer(s)")
TCOM = _frame("TCOM", "Composer")
TMCL = _frame("TMCL", "Musician credits list")
TIPL = _frame("TIPL", "Involved people list")
TENC = _frame("TENC", "Encoded by")

# 4.2.3. Derived and subjective properties frames
TBPM = _frame("TBPM", "BPM (beats per minute)")
TLEN = _frame("TLEN", "Length")
TKEY = _frame("TKEY", "Initial key")
TLAN = _frame("TLAN", "Language(s)")
TCON = _frame("TCON", "Content type")
TFLT = _frame("TFLT", "File type")
TMED = _frame("TMED", "Media type")
TMOO = _frame("TMOO", "Mood")

# 4.2.4. Rights and license frames
TCOP = _frame("TCOP", "Copyright message")
TPRO = _frame("TPRO", "Produced notice")
TPUB = _frame("TPUB", "Publisher")
TOWN = _frame("TOWN", "File owner/licensee")
TRSN = _frame("TRSN", "Internet radio station name")
TRSO = _frame("TRSO", "Internet radio station owner")

# 4.2.5. Other text frames
TOFN = _frame("TOFN", "Original filename")
TDLY = _frame("TDLY", "Playlist delay")
TDEN = _frame("TDEN", "Encoding time")
TDOR = _frame("TDOR", "Original release time")
TDRC = _frame("TDRC", "Recording time")
TDRL = _frame("TDRL", "Release time")
TDTG = _frame("TDTG", "Tagging time")
TSSE = _frame("TSSE", "Software/Hardware and settings used for encoding")
TSOA = _frame("TSOA", "Album sort order")
TSOP = _frame("TSOP", "Performer sort order")
TSOT = _frame("TSOT", "Title sort order")

# 4.2.6. User defined information frame
TXXX = _frame("TXXX", "User defined text information frame")

# 4.3. URL link frames
WCOM = _frame("WCOM", "Commercial information")
WCOP = _frame("WCOP", "Copyright/Legal information")
WOAF = _frame("WOAF", "Official audio file webpage")
WOAR = _frame("WOAR", "Official artist/performer webpage")
WOAS = _frame("WOAS", "Official audio source webpage")
WORS = _frame("WORS", "Official Internet radio station homepage")
WPAY = _frame("WPAY", "Payment")
WPUB = _frame("WPUB", "Publishers official webpage")
WXXX = _frame("WXXX", "User defined URL link frame")

# 4.4.-4.30. Other frames
MCDI = _frame("MCDI", "Music CD identifier")
ETCO = _frame("ETCO", "Event timing codes")
MLLT = _frame("MLLT", "MPEG location lookup table")
SYTC = _frame("SYTC", "Synchronised tempo codes")
USLT = _frame("USLT", "Unsynchronised lyric/text transcription")
SYLT = _frame("SYLT", "Synchronised lyric/text")
COMM = _frame("COMM", "Comments")
RVA2 = _frame("RVA2", "Relative volume adjustment (2)")
EQU2 = _frame("EQU2", "Equalisation (2)")
RVRB = _frame("RVRB", "Reverb")
APIC = _frame("APIC", "Attached picture")
GEOB = _frame("GEOB", "General encapsulated object")
PCNT = _frame("PCNT", "Play counter")
POPM = _frame("POPM", "Popularimeter")
RBUF = _frame("RBUF", "Recommended buffer size")
AENC = _frame("AENC", "Audio encryption")
LINK = _frame("LINK", "Linked information")
POSS = _frame("POSS", "Position synchronisation frame")
USER = _frame("USER", "Terms of use")
OWNE = _frame("OWNE", "Ownership frame")
COMR = _frame("COMR", "Commercial frame")
ENCR = _frame("ENCR", "Encryption method registration")
GRID = _frame("GRID", "Group identification registration")
PRIV = _frame("PRIV", "Private frame")
SIGN = _frame("SIGN", "Signature frame")
SEEK = _frame("SEEK", "Seek frame")
ASPI = _frame("ASPI", "Audio seek point index")


# ID3v2.3 frames dropped from ID3v2.4
EQUA = _frame("EQUA", "Equalization")
IPLS = _frame("IPLS", "Involved people list")
RVAD = _frame("RVAD", "Relative volume adjustment")
TDAT = _frame("TDAT", "Date")
TIME = _frame("TIME", "Time")
TORY = _frame("TORY", "Original release year")
TRDA = _frame("TRDA", "Recording dates")
TSIZ = _frame("TSIZ", "Size")
TYER = _frame("TYER", "Year")
