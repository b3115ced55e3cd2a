# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biogff.gff"
__author__ = "The biogff contributors"
__all__ = ["GFFFile"]

import warnings
from ..file import TextFile
from .record import GFFVersion, Comment
from .parse import parse_line
from .serialize import serialize_item
from .error import GFFParseError, InvalidLineWarning


class GFFFile(TextFile):
    """
    This class represents a file in *General Feature Format*
    (`GFF3 <https://github.com/The-Sequence-Ontology/Specifications/blob/master/gff3.md>`_
    or GFF2).

    The file is stored as list of lines.
    Each line is either a :class:`Comment` (including directives) or a
    :class:`Record`.
    The lines are parsed on demand via :meth:`items()`, new items are
    serialized with the :class:`GFFVersion` given to the constructor.

    Parameters
    ----------
    version : GFFVersion, optional
        The version used for escaping appended items.

    Attributes
    ----------
    version : GFFVersion
        The version used for escaping appended items.

    Examples
    --------
    Writing a new GFF3 file:

    >>> gff_file = GFFFile()
    >>> gff_file.append(Comment("#gff-version 3"))
    >>> gff_file.append(Record(
    ...     "SomeSeqID", 1, 99, source="biogff", feature="CDS",
    ...     strand=Strand.PLUS, phase=0,
    ...     attributes=[("ID", ["FeatureID"]), ("product", ["A protein"])]
    ... ))
    >>> print(gff_file)   #doctest: +NORMALIZE_WHITESPACE
    ##gff-version 3
    SomeSeqID   biogff  CDS     1       99      .       +       0       ID=FeatureID;product=A protein

    Reading the items back:

    >>> for item in gff_file.items():
    ...     print(type(item).__name__)
    Comment
    Record
    """

    def __init__(self, version=GFFVersion.THREE):
        super().__init__()
        if not isinstance(version, GFFVersion):
            raise TypeError(
                f"Expected 'GFFVersion', but got '{type(version).__name__}'"
            )
        self._version = version

    @property
    def version(self):
        return self._version

    @classmethod
    def read(cls, file, version=GFFVersion.THREE):
        """
        Read a GFF file.

        Parameters
        ----------
        file : file-like object or str
            The file to be read.
            Alternatively a file path can be supplied.
        version : GFFVersion, optional
            The version used for escaping items appended afterwards.

        Returns
        -------
        file_object : GFFFile
            The file.
        """
        return super().read(file, version)

    def items(self, skip_invalid=False):
        """
        Parse the lines of the file.

        Empty lines are ignored.

        Parameters
        ----------
        skip_invalid : bool, optional
            If true, invalid lines are skipped and an
            :class:`InvalidLineWarning` is issued for each of them.
            Otherwise the first invalid line raises an exception.

        Returns
        -------
        items : list of (Comment or Record)
            The parsed items, in the order of the lines.

        Raises
        ------
        GFFParseError
            If a line cannot be parsed and `skip_invalid` is false.
            The :attr:`GFFParseError.line_index` attribute gives the
            offending line.
        """
        items = []
        for i, line in enumerate(self.lines):
            if len(line) == 0:
                continue
            try:
                items.append(parse_line(line))
            except GFFParseError as e:
                e.line_index = i
                if not skip_invalid:
                    raise
                warnings.warn(
                    f"Skipped line {i}: {e}", InvalidLineWarning
                )
        return items

    def records(self, skip_invalid=False):
        """
        Same as :meth:`items()`, but without the comments.

        Parameters
        ----------
        skip_invalid : bool, optional
            If true, invalid lines are skipped with a warning.

        Returns
        -------
        records : list of Record
            The parsed records, in the order of the lines.
        """
        return [
            item for item in self.items(skip_invalid)
            if not isinstance(item, Comment)
        ]

    def comments(self):
        """
        Get the comments of the file.

        Record lines are not parsed, hence invalid records do not raise
        an exception.

        Returns
        -------
        comments : list of Comment
            The comments, in the order of the lines.
        """
        return [
            parse_line(line) for line in self.lines if line.startswith("#")
        ]

    def directives(self):
        """
        Get the directives in the file.

        Returns
        -------
        directives : list of tuple(str, int)
            The first element of each tuple is the directive
            (without ``##``), the second element is the index of the
            corresponding line.
        """
        return [
            (line[2:], i) for i, line in enumerate(self.lines)
            if line.startswith("##")
        ]

    def append(self, item):
        """
        Append an item to the end of the file.

        Parameters
        ----------
        item : Comment or Record
            The item to be appended.
        """
        self.lines.append(serialize_item(item, self._version))

    def extend(self, items):
        """
        Append multiple items to the end of the file.

        Parameters
        ----------
        items : iterable of (Comment or Record)
            The items to be appended.
        """
        for item in items:
            self.append(item)

    def __copy_create__(self):
        return GFFFile(self._version)
