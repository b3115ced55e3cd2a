# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biogff.gff"
__author__ = "The biogff contributors"
__all__ = ["parse_line", "parse_lines", "parse_fields", "parse_attributes"]

import re
from urllib.parse import unquote
from .record import Strand, Comment, Record
from .error import (
    GFFParseError,
    EmptyLineError,
    FieldCountError,
    InvalidIntegerError,
    InvalidFloatError,
    InvalidStrandError,
    TagWithoutValueError,
)


_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|nan)"
)

_STRANDS = {
    ".": Strand.NOT_STRANDED,
    "?": Strand.UNKNOWN,
    "+": Strand.PLUS,
    "-": Strand.MINUS,
}


def parse_line(line):
    """
    Parse a single line of a GFF file.

    Parameters
    ----------
    line : str
        The line to be parsed, without line terminator.

    Returns
    -------
    item : Comment or Record
        A :class:`Comment`, if the line starts with ``#``, otherwise the
        :class:`Record` described by the line.

    Raises
    ------
    EmptyLineError
        If the line is empty.
    FieldCountError
        If the line does not consist of 9 tab separated fields.
    GFFParseError
        If any field is invalid (see :func:`parse_fields()`).

    Examples
    --------

    >>> print(parse_line("##gff-version 3"))
    Comment('#gff-version 3')
    >>> record = parse_line("chr1\\t.\\tgene\\t1\\t10\\t.\\t+\\t.\\tID=g1")
    >>> print(record.feature, record.start_pos, record.strand)
    gene 1 Strand.PLUS
    """
    if line == "":
        raise EmptyLineError()
    if line[0] == "#":
        return Comment(line[1:])
    return parse_fields(line.split("\t"))


def parse_lines(lines):
    """
    Parse multiple lines of a GFF file.

    Parameters
    ----------
    lines : iterable of str
        The lines to be parsed, without line terminators.

    Returns
    -------
    items : list of (Comment or Record)
        The parsed items in the order of the input lines.

    Raises
    ------
    GFFParseError
        For the first invalid line.
        The index of this line is stored in the
        :attr:`GFFParseError.line_index` attribute.
    """
    items = []
    for i, line in enumerate(lines):
        try:
            items.append(parse_line(line))
        except GFFParseError as e:
            e.line_index = i
            raise
    return items


def parse_fields(fields):
    """
    Create a :class:`Record` from the 9 raw fields of a feature line.

    The fields are validated in the order *start*, *stop*, *phase*,
    *score*, *strand*, *attributes*, the first invalid field raises an
    exception.
    A single ``.`` in the *source*, *feature*, *score* and *phase*
    field denotes an absent value, a single ``.`` in the *attributes*
    field denotes a record without attributes.
    *source* and *feature* are taken as they are, no percent-decoding
    is performed.

    Parameters
    ----------
    fields : sequence of str
        The fields *seqname*, *source*, *feature*, *start*, *stop*,
        *score*, *strand*, *phase* and *attributes*.

    Returns
    -------
    record : Record
        The parsed record.
    """
    if len(fields) != 9:
        raise FieldCountError(len(fields))
    seqname, source, feature, start_pos, stop_pos, \
        score, strand, phase, attributes = fields

    start_pos = _parse_int(start_pos)
    stop_pos = _parse_int(stop_pos)
    phase = None if phase == "." else _parse_int(phase)
    score = None if score == "." else _parse_float(score)
    strand = _parse_strand(strand)
    # A single '.' denotes an empty attribute column
    attributes = () if attributes == "." else parse_attributes(attributes)

    return Record(
        seqname, start_pos, stop_pos,
        source=None if source == "." else source,
        feature=None if feature == "." else feature,
        score=score,
        strand=strand,
        phase=phase,
        attributes=attributes,
    )


def parse_attributes(text):
    """
    Parse the attribute column of a GFF3 line.

    The column consists of ``tag=value`` pairs separated by ``;``.
    Multiple values for the same tag are separated by ``,``.
    Tags and values are percent-decoded.

    Parameters
    ----------
    text : str
        The content of the attribute column.
        May be empty.

    Returns
    -------
    attributes : tuple of tuple(str, tuple of str)
        The tags with their values, in the order of appearance.

    Raises
    ------
    TagWithoutValueError
        If a tag is not followed by ``=``.

    Examples
    --------

    >>> print(parse_attributes("ID=gene1;Name=foo,bar"))
    (('ID', ('gene1',)), ('Name', ('foo', 'bar')))
    >>> print(parse_attributes("Note=a%3Bb"))
    (('Note', ('a;b',)),)
    """
    attributes = []
    pos = 0
    length = len(text)
    while pos < length:
        sep = text.find("=", pos)
        if sep == -1:
            raise TagWithoutValueError(text[pos:])
        tag = unquote(text[pos:sep])
        pos, values = _parse_value_list(text, sep + 1)
        attributes.append((tag, values))
    return tuple(attributes)


def _parse_value_list(text, pos):
    """
    Scan the values of a single tag, starting at `pos`.

    Return the position after the terminating ``;`` (or the end of
    the text) and the decoded values.
    """
    values = []
    start = pos
    for i in range(pos, len(text)):
        char = text[i]
        if char == ",":
            values.append(unquote(text[start:i]))
            start = i + 1
        elif char == ";":
            values.append(unquote(text[start:i]))
            return i + 1, tuple(values)
    # Last tag -> the value runs to the end of the text
    values.append(unquote(text[start:]))
    return len(text), tuple(values)


def _parse_int(text):
    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise InvalidIntegerError(text)
    try:
        return int(text)
    except ValueError as e:
        # Exceeds the digit limit for integer conversion
        raise InvalidIntegerError(text) from e


def _parse_float(text):
    if _FLOAT_PATTERN.fullmatch(text) is None:
        raise InvalidFloatError(text)
    return float(text)


def _parse_strand(text):
    strand = _STRANDS.get(text)
    if strand is None:
        raise InvalidStrandError(text)
    return strand
