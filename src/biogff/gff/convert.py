# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biogff.gff"
__author__ = "The biogff contributors"
__all__ = ["get_columns"]

import numpy as np
from .record import Record


def get_columns(items):
    """
    Get the numeric columns of the records as NumPy arrays.

    :class:`Comment` items are ignored.

    Parameters
    ----------
    items : iterable of (Comment or Record)
        The items, e.g. obtained from :meth:`GFFFile.items()`.

    Returns
    -------
    columns : dict of (str -> ndarray)
        The arrays for the keys

        - ``'start_pos'``, ``'stop_pos'`` - ``int64``
        - ``'score'`` - ``float64``, *NaN* for absent scores
        - ``'phase'`` - ``int64``, ``-1`` for absent phases
        - ``'strand'`` - ``object``, containing :class:`Strand` values

        Each array has the length of the number of records.

    Raises
    ------
    ValueError
        If a coordinate or phase is outside the range of a 64-bit
        integer, as :class:`Record` itself does not limit the integer
        size.

    Examples
    --------

    >>> items = [
    ...     Comment("some comment"),
    ...     Record("chr1", 1, 10, score=0.5, phase=0),
    ...     Record("chr1", 20, 30, strand=Strand.MINUS),
    ... ]
    >>> columns = get_columns(items)
    >>> print(columns["start_pos"])
    [ 1 20]
    >>> print(columns["score"])
    [0.5 nan]
    >>> print(columns["phase"])
    [ 0 -1]
    """
    records = [item for item in items if isinstance(item, Record)]

    start_pos = _to_int64(
        [record.start_pos for record in records], "start_pos"
    )
    stop_pos = _to_int64(
        [record.stop_pos for record in records], "stop_pos"
    )
    score = np.array(
        [np.nan if record.score is None else record.score
         for record in records],
        dtype=np.float64
    )
    phase = _to_int64(
        [-1 if record.phase is None else record.phase for record in records],
        "phase"
    )
    # Enum values cannot be stored in a numeric array
    strand = np.empty(len(records), dtype=object)
    strand[:] = [record.strand for record in records]

    return {
        "start_pos": start_pos,
        "stop_pos": stop_pos,
        "score": score,
        "phase": phase,
        "strand": strand,
    }


def _to_int64(values, name):
    try:
        return np.array(values, dtype=np.int64)
    except OverflowError as e:
        raise ValueError(
            f"A '{name}' value does not fit into a 64-bit integer"
        ) from e
