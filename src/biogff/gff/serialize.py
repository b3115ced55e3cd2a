# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biogff.gff"
__author__ = "The biogff contributors"
__all__ = [
    "serialize_item", "serialize_items", "escape_gff2", "escape_gff3",
    "GFF3_SAFE_CHARACTERS", "GFF2_ESCAPES",
]

import string
from urllib.parse import quote
from .record import Strand, GFFVersion, Comment, Record


# All punctuation characters except
# percent, semicolon, equals, ampersand, comma
# Alphanumeric characters and '_.-~' are never quoted by 'quote()'
GFF3_SAFE_CHARACTERS = "".join(
    [char for char in string.punctuation if char not in "%;=&,"]
) + " "

# Escape sequences for GFF2 quoted strings,
# bytes not listed here are written verbatim if they are printable
# ASCII characters and as '\ddd' (decimal) otherwise
GFF2_ESCAPES = {
    ord('"'): '\\"',
    ord("\\"): "\\\\",
    ord("\n"): "\\n",
    ord("\t"): "\\t",
    ord("\r"): "\\r",
    ord("\b"): "\\b",
}

_STRAND_SYMBOLS = {
    Strand.PLUS: "+",
    Strand.MINUS: "-",
    Strand.NOT_STRANDED: ".",
    Strand.UNKNOWN: "?",
}


def escape_gff3(text):
    """
    Percent-encode text for a GFF3 column.

    Characters with a special meaning in GFF3 (``%;=&,``), control
    characters such as tab and newline and all non-ASCII characters
    are encoded.

    Parameters
    ----------
    text : str
        The text to be encoded.

    Returns
    -------
    escaped : str
        The encoded text.
        :func:`urllib.parse.unquote()` restores the original text.

    Examples
    --------

    >>> print(escape_gff3("a;b=c,d e"))
    a%3Bb%3Dc%2Cd e
    """
    return quote(text, safe=GFF3_SAFE_CHARACTERS)


def escape_gff2(text):
    """
    Convert text into a quoted GFF2 string.

    The text is enclosed in double quotes.
    Within the quotes, the UTF-8 encoded text is escaped according to
    :data:`GFF2_ESCAPES`, other non-printable or non-ASCII bytes are
    given as a backslash followed by three decimal digits.

    Parameters
    ----------
    text : str
        The text to be quoted.

    Returns
    -------
    escaped : str
        The quoted text.

    Examples
    --------

    >>> print(escape_gff2('say "hi"\\tnow'))
    "say \\"hi\\"\\tnow"
    >>> print(escape_gff2("Å"))
    "\\195\\133"
    """
    escaped = []
    for byte in text.encode("utf-8"):
        if byte in GFF2_ESCAPES:
            escaped.append(GFF2_ESCAPES[byte])
        elif 0x20 <= byte <= 0x7E:
            escaped.append(chr(byte))
        else:
            escaped.append(f"\\{byte:03d}")
    return '"' + "".join(escaped) + '"'


def serialize_item(item, version):
    """
    Convert a :class:`Comment` or :class:`Record` into a line of a GFF
    file.

    *source* and the attributes are escaped according to the given
    version, the *seqname* and *feature* columns are written as they
    are, as is the text of a comment.
    Absent values are written as ``.``.

    Parameters
    ----------
    item : Comment or Record
        The item to be converted.
    version : GFFVersion
        The format version that determines the escaping.

    Returns
    -------
    line : str
        The line, without line terminator.

    Examples
    --------

    >>> record = Record(
    ...     "chr1", 1, 10, source="my source", feature="gene",
    ...     strand=Strand.PLUS, attributes=[("Name", ["a", "b,c"])]
    ... )
    >>> print(serialize_item(record, GFFVersion.THREE).replace("\\t", " | "))
    chr1 | my source | gene | 1 | 10 | . | + | . | Name=a,b%2Cc
    >>> print(serialize_item(record, GFFVersion.TWO).replace("\\t", " | "))
    chr1 | "my source" | gene | 1 | 10 | . | + | . | Name "a","b,c"
    """
    if isinstance(item, Comment):
        return "#" + item.text
    if not isinstance(item, Record):
        raise TypeError(
            f"Expected 'Comment' or 'Record', "
            f"but got '{type(item).__name__}'"
        )

    if version == GFFVersion.THREE:
        escape = escape_gff3
    elif version == GFFVersion.TWO:
        escape = escape_gff2
    else:
        raise ValueError(f"'{version}' is not a valid GFF version")

    return "\t".join([
        item.seqname,
        "." if item.source is None else escape(item.source),
        "." if item.feature is None else item.feature,
        str(item.start_pos),
        str(item.stop_pos),
        "." if item.score is None else repr(float(item.score)),
        _STRAND_SYMBOLS[item.strand],
        "." if item.phase is None else str(item.phase),
        _serialize_attributes(item.attributes, version, escape),
    ])


def serialize_items(items, version):
    """
    Convert multiple items into lines of a GFF file.

    Parameters
    ----------
    items : iterable of (Comment or Record)
        The items to be converted.
    version : GFFVersion
        The format version that determines the escaping.

    Returns
    -------
    lines : list of str
        The lines, in the order of the given items.
    """
    return [serialize_item(item, version) for item in items]


def _serialize_attributes(attributes, version, escape):
    if version == GFFVersion.THREE:
        return ";".join([
            escape(tag) + "=" + ",".join([escape(val) for val in values])
            for tag, values in attributes
        ])
    else:
        # GFF2 tags are written unescaped
        return ";".join([
            tag + " " + ",".join([escape(val) for val in values])
            for tag, values in attributes
        ])
