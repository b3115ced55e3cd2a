# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This subpackage is used for reading and writing single feature lines
in the *General Feature Format* (GFF), version 2 and 3.

Each line of a GFF file is either a comment or a record.
:func:`parse_line()` turns a line into a :class:`Comment` or
:class:`Record` and :func:`serialize_item()` converts such an item
back into a line, escaping text according to the chosen
:class:`GFFVersion`.
The functions work on single lines and do not keep any state, so that
lines can be processed independently from each other.

:class:`GFFFile` is a thin container around these functions for
reading and writing complete files.

.. note: Parsing always follows the GFF3 conventions:
   the attribute column is expected to consist of ``tag=value``
   pairs.
   Writing GFF2 is supported, reading GFF2 attributes is not.
"""

__name__ = "biogff.gff"
__author__ = "The biogff contributors"

from .record import *
from .error import *
from .parse import *
from .serialize import *
from .file import *
from .convert import *
