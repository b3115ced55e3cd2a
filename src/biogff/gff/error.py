# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all possible errors and warnings raised when
parsing GFF lines.
"""

__name__ = "biogff.gff"
__author__ = "The biogff contributors"
__all__ = [
    "GFFParseError",
    "EmptyLineError",
    "FieldCountError",
    "InvalidIntegerError",
    "InvalidFloatError",
    "InvalidStrandError",
    "TagWithoutValueError",
    "InvalidLineWarning",
]

from ..file import InvalidFileError


class GFFParseError(InvalidFileError):
    """
    Base class of all errors that indicate a line that cannot be parsed.

    Attributes
    ----------
    line_index : int or None
        The 0-based index of the offending line, if the error was
        raised while parsing multiple lines.
    """

    def __init__(self, message):
        super().__init__(message)
        self.line_index = None


class EmptyLineError(GFFParseError):
    """
    Indicates that an empty line was given.
    """

    def __init__(self):
        super().__init__("Empty line")


class FieldCountError(GFFParseError):
    """
    Indicates that a record line does not consist of exactly 9 tab
    separated fields.

    Attributes
    ----------
    count : int
        The actual number of fields.
    """

    def __init__(self, count):
        super().__init__(f"Expected 9 fields, but got {count}")
        self.count = count


class _InvalidFieldError(GFFParseError):
    """
    Common base for errors caused by the text of a single field.
    """

    _type_name = None

    def __init__(self, text):
        super().__init__(f"'{text}' is not a valid {self._type_name}")
        self.text = text


class InvalidIntegerError(_InvalidFieldError):
    """
    Indicates that the *start*, *stop* or *phase* field is not a base-10
    integer.
    """

    _type_name = "integer"


class InvalidFloatError(_InvalidFieldError):
    """
    Indicates that the *score* field is not a floating point number.
    """

    _type_name = "floating point number"


class InvalidStrandError(_InvalidFieldError):
    """
    Indicates that the *strand* field is none of ``+``, ``-``, ``.`` or
    ``?``.
    """

    _type_name = "strand"


class TagWithoutValueError(GFFParseError):
    """
    Indicates that an attribute tag is not followed by ``=``.
    """

    def __init__(self, tag):
        super().__init__(f"Tag without a value: '{tag}'")
        self.tag = tag


class InvalidLineWarning(UserWarning):
    """
    Issued when an invalid line is skipped instead of raising an error.
    """

    pass
