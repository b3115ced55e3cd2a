# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biogff.gff"
__author__ = "The biogff contributors"
__all__ = ["Strand", "GFFVersion", "Comment", "Record"]

from enum import Enum, auto


class Strand(Enum):
    """
    This enum type describes the orientation of a feature relative to
    the reference sequence.

    - **PLUS** - Forward strand (``+``)
    - **MINUS** - Reverse strand (``-``)
    - **NOT_STRANDED** - The feature has no orientation (``.``)
    - **UNKNOWN** - The feature is stranded, but the strand is
      unknown (``?``)
    """

    PLUS = auto()
    MINUS = auto()
    NOT_STRANDED = auto()
    UNKNOWN = auto()


class GFFVersion(Enum):
    """
    The format version used for escaping text when a line is written.
    """

    TWO = auto()
    THREE = auto()


class Comment:
    """
    A comment line of a GFF file.

    Directives (lines starting with ``##``) are comments, too:
    their text starts with ``#``.

    Parameters
    ----------
    text : str
        The comment text, without the leading ``#``.

    Attributes
    ----------
    text : str
        The comment text, without the leading ``#``.
    """

    def __init__(self, text):
        self._text = text

    @property
    def text(self):
        return self._text

    def __repr__(self):
        return f"Comment({self._text!r})"

    def __eq__(self, item):
        if not isinstance(item, Comment):
            return False
        return self._text == item._text

    def __hash__(self):
        return hash(("Comment", self._text))


class Record:
    """
    A single feature line of a GFF file.

    A :class:`Record` is an immutable value: all fields are read-only
    properties and two records are equal if all of their fields are
    equal.
    As *NaN* is not equal to *NaN*, a record with a *NaN* score is not
    equal to the record parsed from its written line.
    Use :meth:`replace()` to obtain a modified record.

    Parameters
    ----------
    seqname : str
        The ID of the reference sequence.
    start_pos, stop_pos : int
        The start and stop coordinate of the feature.
        Neither the range nor the order of both values is checked.
    source : str, optional
        Source of the data (e.g. ``Genbank``).
    feature : str, optional
        Type of the feature (e.g. ``CDS``).
    score : float, optional
        Optional score (e.g. an E-value).
    strand : Strand, optional
        The strand of the feature.
        By default the strand is :attr:`Strand.UNKNOWN`.
    phase : int, optional
        Reading frame shift, ``None`` for non-coding features.
    attributes : iterable of tuple(str, iterable of str), optional
        The tags of the feature, each associated with an ordered
        sequence of values.
        The order is preserved and a tag may appear multiple times.

    Examples
    --------

    >>> record = Record(
    ...     "chr1", 100, 200, feature="gene",
    ...     attributes=[("ID", ["gene1"]), ("Alias", ["a", "b"])]
    ... )
    >>> print(record.attributes)
    (('ID', ('gene1',)), ('Alias', ('a', 'b')))
    >>> print(record.get_attribute("Alias"))
    ('a', 'b')
    >>> print(record.replace(strand=Strand.PLUS).strand)
    Strand.PLUS
    """

    _FIELDS = (
        "seqname", "source", "feature", "start_pos", "stop_pos",
        "score", "strand", "phase", "attributes",
    )

    def __init__(self, seqname, start_pos, stop_pos, source=None,
                 feature=None, score=None, strand=Strand.UNKNOWN,
                 phase=None, attributes=()):
        if not isinstance(strand, Strand):
            raise TypeError(
                f"Expected 'Strand', but got '{type(strand).__name__}'"
            )
        if isinstance(attributes, str):
            raise TypeError("Attributes must be given as (tag, values) pairs")
        self._seqname = seqname
        self._source = source
        self._feature = feature
        self._start_pos = start_pos
        self._stop_pos = stop_pos
        self._score = score
        self._strand = strand
        self._phase = phase
        self._attributes = Record._normalize_attributes(attributes)

    @property
    def seqname(self):
        return self._seqname

    @property
    def source(self):
        return self._source

    @property
    def feature(self):
        return self._feature

    @property
    def start_pos(self):
        return self._start_pos

    @property
    def stop_pos(self):
        return self._stop_pos

    @property
    def score(self):
        return self._score

    @property
    def strand(self):
        return self._strand

    @property
    def phase(self):
        return self._phase

    @property
    def attributes(self):
        return self._attributes

    def get_attribute(self, tag):
        """
        Get the values of an attribute.

        Parameters
        ----------
        tag : str
            The attribute tag.

        Returns
        -------
        values : tuple of str or None
            The values of the first attribute with the given tag.
            ``None`` if the record has no such attribute.
        """
        for attr_tag, values in self._attributes:
            if attr_tag == tag:
                return values
        return None

    def replace(self, **fields):
        """
        Create a copy of this record with some fields replaced.

        Parameters
        ----------
        **fields
            The fields to be replaced, given by their name.

        Returns
        -------
        record : Record
            The modified record.
        """
        unknown = set(fields) - set(Record._FIELDS)
        if unknown:
            raise TypeError(
                f"Unknown field(s): {', '.join(sorted(unknown))}"
            )
        values = {name: getattr(self, name) for name in Record._FIELDS}
        values.update(fields)
        return Record(**values)

    def _astuple(self):
        return tuple(getattr(self, name) for name in Record._FIELDS)

    def __repr__(self):
        """Represent Record as a string for debugging."""
        return (
            f"Record({self._seqname!r}, {self._start_pos!r}, "
            f"{self._stop_pos!r}, source={self._source!r}, "
            f"feature={self._feature!r}, score={self._score!r}, "
            f"strand=Strand.{self._strand.name}, phase={self._phase!r}, "
            f"attributes={self._attributes!r})"
        )

    def __eq__(self, item):
        if not isinstance(item, Record):
            return False
        return self._astuple() == item._astuple()

    def __hash__(self):
        return hash(self._astuple())

    @staticmethod
    def _normalize_attributes(attributes):
        normalized = []
        for tag, values in attributes:
            if isinstance(values, str):
                # A single value instead of a sequence of values
                values = (values,)
            normalized.append((tag, tuple(values)))
        return tuple(normalized)
