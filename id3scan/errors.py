# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

class Error(Exception): pass

class Warning(Error, UserWarning): pass

class TagWarning(Warning): pass
class FrameWarning(Warning): pass

# Fatal for the whole scan
class StructuralError(Error, ValueError): pass
class FooterError(StructuralError): pass
class ExtendedHeaderError(StructuralError): pass
class FrameIDError(StructuralError): pass
class FrameSizeError(StructuralError): pass
class FrameOverflowError(StructuralError): pass
class PaddingWithFooterError(StructuralError): pass
class PaddingError(StructuralError): pass

class TruncatedInputError(Error, EOFError): pass
class ResourceLimitError(Error): pass

# Scoped to a single Frame.text() call
class TextDecodeError(Error, ValueError): pass
class EmptyFrameError(TextDecodeError): pass
class EncodingFlagsError(TextDecodeError): pass
class UnsupportedEncodingError(TextDecodeError): pass
class BOMError(TextDecodeError): pass
class OddLengthError(TextDecodeError): pass
