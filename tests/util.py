# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

from os.path import join, dirname, realpath


def data_dir(subdir):
    return join(dirname(realpath(__file__)), subdir, "data")
