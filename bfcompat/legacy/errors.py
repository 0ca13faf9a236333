"""Errors raised by legacy readers"""


class FormatReaderError(Exception):
    """A legacy reader could not make sense of its source"""
    pass


class UnknownFormatError(FormatReaderError):
    """No candidate reader claims the source"""
    pass
