# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *biogff*.
It provides the base classes for line based annotation files;
the actual GFF functionality lives in the :mod:`biogff.gff`
subpackage.
"""

__version__ = "0.1.0"
__name__ = "biogff"
__author__ = "The biogff contributors"

from .file import *
from .copyable import *
