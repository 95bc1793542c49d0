# parser/exceptions.py
# This file is part of Fiberprops - Component prop extraction
#
# Custom exceptions for prop string decoding

"""Domain-specific exceptions for prop string processing.

This module defines exceptions raised while decoding rendered prop strings
back into leaf entries. Extraction itself never raises; only reading an
externally supplied string can fail.
"""


class ParseError(RuntimeError):
    """Exception raised when a prop string does not follow the output grammar.

    Indicates a missing bracket, ``=`` or terminating ``;``, or a segment
    with an empty path.
    """

    pass
