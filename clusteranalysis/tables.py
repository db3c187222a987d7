"""
Turn table-like input into the float matrix the engine works on.

Accepted shapes of input:
    - a 2-D numpy array (or anything np.asarray understands as one)
    - nested sequences, one inner sequence per observation
    - a frame object exposing `to_numpy()` (pandas DataFrame and friends)
    - a mapping of column name -> sequence of values (column order kept)
"""

from collections.abc import Mapping

import numpy as np

from clusteranalysis.errors import InvalidArgument


def _columns_to_matrix(table):
    columns = [np.asarray(col) for col in table.values()]
    if not columns:
        raise InvalidArgument("Table has no columns")
    lengths = {col.shape for col in columns}
    if len(lengths) != 1 or columns[0].ndim != 1:
        raise InvalidArgument("All table columns must be 1-D and of equal length")
    return np.column_stack(columns)


def as_matrix(table):
    """
    Convert `table` into a C-contiguous float64 array (n_samples, n_features).

    Raises:
    -------
    InvalidArgument
        For ragged, non-numeric, empty or non-2-D input.
    """
    if isinstance(table, Mapping):
        data = _columns_to_matrix(table)
    elif hasattr(table, 'to_numpy'):
        data = table.to_numpy()
    else:
        try:
            data = np.asarray(table)
        except ValueError as exc:
            # numpy refuses ragged nested lists
            raise InvalidArgument(f"Input is not a rectangular table: {exc}") from exc

    if data.dtype == object:
        raise InvalidArgument("Input is not a rectangular numeric table")
    if data.dtype.kind in "US":
        raise InvalidArgument("Input contains strings; convert them to numbers first")
    try:
        data = np.ascontiguousarray(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"Input contains non-numeric values: {exc}") from exc

    if data.ndim != 2:
        raise InvalidArgument(f"Expected a 2-D table, got shape {data.shape}")
    if data.shape[0] == 0 or data.shape[1] == 0:
        raise InvalidArgument(f"Table is empty (shape {data.shape})")
    return data
