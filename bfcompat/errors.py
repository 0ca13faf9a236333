"""Errors raised by the compatibility format

Failures coming out of the wrapped legacy readers are re-raised as one of
these, chained to the original exception.
"""


class FormatError(Exception):
    """Base error of the compatibility format"""
    pass


class OpenFailure(FormatError):
    """The legacy reader rejected the source while setting up metadata"""
    pass


class ReadFailure(FormatError):
    """The legacy reader failed to read a plane region"""
    pass
